"""Unit tests for dimension adapter."""

from unittest.mock import MagicMock

import pytest

from metrics_definitions.application.dto.definitions import DimensionDefinition
from metrics_definitions.domain.errors import InvalidDimensionError
from metrics_definitions.domain.ports import TranslationPort
from metrics_definitions.infrastructure.runtime.dimension_adapter import TranslatedDimension


def test_dimension_properties(country):
    """Test dimension exposes its definition."""
    assert country.id == "country"
    assert country.module == "UserCountry"
    assert country.category_id == "UserCountry_VisitLocation"
    assert country.column_expression == "log_visit.location_country"
    assert country.label() == "Country"
    assert country.plural_label() == "Countries"


def test_sql_segment_takes_precedence(translator):
    """Test explicit SQL segment is used as column expression."""
    definition = DimensionDefinition(
        id="latitude",
        module="UserCountry",
        category_id="UserCountry_VisitLocation",
        table="log_visit",
        column="location_latitude",
        sql_segment="round(log_visit.location_latitude, 2)",
        label_key="UserCountry_Latitude",
    )

    dimension = TranslatedDimension(definition, translator)

    assert dimension.column_expression == "round(log_visit.location_latitude, 2)"


def test_labels_fall_back(translator):
    """Test missing translations fall back to their keys."""
    definition = DimensionDefinition(
        id="latitude",
        module="UserCountry",
        category_id="UserCountry_VisitLocation",
        sql_segment="log_visit.location_latitude",
        label_key="UserCountry_Latitude",
        plural_label_key="UserCountry_Latitudes",
    )

    dimension = TranslatedDimension(definition, translator)

    assert dimension.label() == "UserCountry_Latitude"
    assert dimension.plural_label() == "UserCountry_Latitudes"


def test_plural_label_defaults_to_singular(translator):
    """Test dimensions without plural key reuse the singular label."""
    definition = DimensionDefinition(
        id="country",
        module="UserCountry",
        category_id="UserCountry_VisitLocation",
        sql_segment="log_visit.location_country",
        label_key="UserCountry_Country",
    )

    assert TranslatedDimension(definition, translator).plural_label() == "Country"


def test_labels_are_not_cached(country_definition):
    """Test labels are looked up on every call."""
    translator = MagicMock(spec=TranslationPort)
    translator.resolve.side_effect = ["Country", "Land"]

    dimension = TranslatedDimension(country_definition, translator)

    assert dimension.label() == "Country"
    assert dimension.label() == "Land"


def test_missing_column_expression(country_definition, translator):
    """Test a definition mutated to lose its column is rejected."""
    definition = country_definition.model_copy(update={"column": None})

    with pytest.raises(InvalidDimensionError):
        TranslatedDimension(definition, translator).column_expression

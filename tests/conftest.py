"""Shared fixtures."""

import pytest

from metrics_definitions.application.dto.catalog import TranslationCatalog
from metrics_definitions.application.dto.definitions import DimensionDefinition
from metrics_definitions.infrastructure.i18n.catalog_translator import CatalogTranslator
from metrics_definitions.infrastructure.runtime.dimension_adapter import TranslatedDimension


@pytest.fixture
def english_catalog():
    """English catalog with the labels used across tests."""
    return TranslationCatalog(
        locale="en",
        messages={
            "UserCountry_Country": "Country",
            "UserCountry_Countries": "Countries",
            "bounce_count": "Actions In Visit",
            "nb_visits": "Visits",
        },
        contexts={
            "singular": {"nb_visits": "Visit"},
            "rate": {"bounce_count": "Bounces Rate"},
        },
    )


@pytest.fixture
def translator(english_catalog):
    """Translator with the English catalog active."""
    return CatalogTranslator([english_catalog], locale="en")


@pytest.fixture
def country_definition():
    """Country dimension of the UserCountry module."""
    return DimensionDefinition(
        id="country",
        module="UserCountry",
        category_id="UserCountry_VisitLocation",
        table="log_visit",
        column="location_country",
        label_key="UserCountry_Country",
        plural_label_key="UserCountry_Countries",
    )


@pytest.fixture
def country(country_definition, translator):
    """Translated country dimension."""
    return TranslatedDimension(country_definition, translator)

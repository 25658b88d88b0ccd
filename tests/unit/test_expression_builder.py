"""Unit tests for expression builder."""

import pytest

from metrics_definitions.application.services.expression_builder import (
    apply_template,
    build_expression,
)
from metrics_definitions.domain.enums import AggregationKind
from metrics_definitions.domain.errors import InvalidAggregationError, InvalidTemplateError

COLUMN = "log_visit.location_country"


@pytest.mark.parametrize(
    "kind,expected",
    [
        (AggregationKind.COUNT, "count(log_visit.location_country)"),
        (AggregationKind.UNIQUE_COUNT, "count(distinct log_visit.location_country)"),
        (AggregationKind.SUM, "sum(log_visit.location_country)"),
        (AggregationKind.MIN, "min(log_visit.location_country)"),
        (AggregationKind.MAX, "max(log_visit.location_country)"),
        (AggregationKind.COUNT_WITH_NUMERIC_VALUE, "sum(if(log_visit.location_country > 0, 1, 0))"),
    ],
)
def test_build_expression(kind, expected):
    """Test expression template for every aggregation kind."""
    assert build_expression(kind, COLUMN) == expected


def test_build_expression_unknown_kind():
    """Test unknown aggregation is rejected."""
    with pytest.raises(InvalidAggregationError):
        build_expression("median", COLUMN)


def test_apply_template():
    """Test custom template substitution."""
    assert apply_template("sum(%s) * 10", COLUMN) == "sum(log_visit.location_country) * 10"


def test_apply_template_keeps_column_verbatim():
    """Test column expressions with special characters are inserted as is."""
    column = "CASE WHEN log_visit.visit_total_time > 0 THEN 1 END"
    assert apply_template("max(%s)", column) == f"max({column})"


def test_apply_template_without_placeholder():
    """Test template without placeholder is rejected."""
    with pytest.raises(InvalidTemplateError):
        apply_template("count(*)", COLUMN)


def test_apply_template_with_two_placeholders():
    """Test template with two placeholders is rejected."""
    with pytest.raises(InvalidTemplateError):
        apply_template("sum(%s) / count(%s)", COLUMN)

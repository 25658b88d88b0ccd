"""Aggregation expression builder."""

from typing import Callable

from metrics_definitions.domain.enums import AggregationKind
from metrics_definitions.domain.errors import InvalidAggregationError, InvalidTemplateError

TEMPLATE_PLACEHOLDER = "%s"

# Strategy table: one builder per aggregation kind
_EXPRESSION_BUILDERS: dict[AggregationKind, Callable[[str], str]] = {
    AggregationKind.COUNT: lambda col: f"count({col})",
    AggregationKind.UNIQUE_COUNT: lambda col: f"count(distinct {col})",
    AggregationKind.SUM: lambda col: f"sum({col})",
    AggregationKind.MIN: lambda col: f"min({col})",
    AggregationKind.MAX: lambda col: f"max({col})",
    AggregationKind.COUNT_WITH_NUMERIC_VALUE: lambda col: f"sum(if({col} > 0, 1, 0))",
}


def build_expression(kind: AggregationKind, column_expression: str) -> str:
    """Build the aggregation expression for a column."""
    builder = _EXPRESSION_BUILDERS.get(kind)
    if not builder:
        raise InvalidAggregationError(f"Unsupported aggregation: {kind}")
    return builder(column_expression)


def apply_template(template: str, column_expression: str) -> str:
    """Substitute the column into a custom aggregation template.

    The template must contain exactly one ``%s`` placeholder.
    """
    placeholders = template.count(TEMPLATE_PLACEHOLDER)
    if placeholders != 1:
        raise InvalidTemplateError(
            f"Aggregation template must contain exactly one {TEMPLATE_PLACEHOLDER!r} "
            f"placeholder, found {placeholders}: {template!r}"
        )
    return template.replace(TEMPLATE_PLACEHOLDER, column_expression, 1)

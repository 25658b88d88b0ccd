"""Naming policy for generated metrics."""

import re

from metrics_definitions.domain.enums import AggregationKind
from metrics_definitions.domain.errors import InvalidAggregationError, InvalidDimensionError
from metrics_definitions.domain.ports import DimensionPort

METRIC_NAME_PREFIXES: dict[AggregationKind, str] = {
    AggregationKind.COUNT: "nb_",
    AggregationKind.UNIQUE_COUNT: "nb_uniq_",
    AggregationKind.SUM: "sum_",
    AggregationKind.MIN: "min_",
    AggregationKind.MAX: "max_",
    AggregationKind.COUNT_WITH_NUMERIC_VALUE: "nb_with_",
}

# Longest first so nb_uniq_ / nb_with_ win over nb_
_PREFIXES_BY_LENGTH = sorted(METRIC_NAME_PREFIXES.values(), key=len, reverse=True)

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")


def prefix(kind: AggregationKind) -> str:
    """Get metric name prefix for an aggregation kind."""
    try:
        return METRIC_NAME_PREFIXES[kind]
    except KeyError:
        raise InvalidAggregationError(f"No name prefix for aggregation: {kind}") from None


def dimension_slug(module: str, dimension_id: str) -> str:
    """Render module and dimension id as lowercase_with_underscores."""
    raw = f"{module}_{dimension_id}".lower()
    slug = _NON_SLUG_CHARS.sub("_", raw).strip("_")
    if not dimension_id or not slug:
        raise InvalidDimensionError(f"Cannot build metric slug for dimension: {module!r}/{dimension_id!r}")
    return slug


def metric_name(kind: AggregationKind, dimension: DimensionPort) -> str:
    """Build the canonical metric name for a dimension and aggregation."""
    return prefix(kind) + dimension_slug(dimension.module, dimension.id)


def strip_known_prefix(name: str) -> str:
    """Remove a known aggregation prefix from a metric name.

    Names without a recognized prefix (e.g. custom metrics) are returned
    unchanged.
    """
    if name in METRIC_NAME_PREFIXES.values():
        return name
    for known in _PREFIXES_BY_LENGTH:
        if name.startswith(known):
            return name[len(known):]
    return name

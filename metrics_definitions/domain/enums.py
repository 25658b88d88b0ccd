"""Domain enums for aggregation and formula kinds."""

from enum import Enum


class AggregationKind(str, Enum):
    """Aggregation kind enum."""

    COUNT = "count"
    UNIQUE_COUNT = "unique_count"
    SUM = "sum"
    MIN = "min"
    MAX = "max"
    COUNT_WITH_NUMERIC_VALUE = "count_with_numeric_value"


class ComputedFormulaKind(str, Enum):
    """Computed metric formula enum."""

    AVERAGE = "average"  # metric1 / metric2
    RATE = "rate"  # metric1 / metric2 * 100

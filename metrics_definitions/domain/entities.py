"""Domain entities."""

from dataclasses import dataclass

from metrics_definitions.domain.enums import AggregationKind, ComputedFormulaKind
from metrics_definitions.domain.errors import InvalidComputedMetricError, InvalidMetricError
from metrics_definitions.domain.types import MetricName


@dataclass(frozen=True)
class MetricDescriptor:
    """Base or custom metric derived from a dimension."""

    name: MetricName
    translated_name: str
    documentation: str
    category_id: str
    expression: str
    aggregation_kind: AggregationKind | None = None

    def __post_init__(self) -> None:
        _require_identity(self.name, self.category_id)

    @property
    def is_custom(self) -> bool:
        """Custom metrics carry no aggregation kind."""
        return self.aggregation_kind is None


@dataclass(frozen=True)
class ComputedMetricDescriptor:
    """Metric computed from two other metrics, referenced by name."""

    name: MetricName
    translated_name: str
    documentation: str
    category_id: str
    formula_kind: ComputedFormulaKind
    dependency_names: tuple[MetricName, MetricName]

    def __post_init__(self) -> None:
        _require_identity(self.name, self.category_id)
        if len(self.dependency_names) != 2:
            raise InvalidComputedMetricError(
                f"Computed metric {self.name} needs exactly 2 dependencies, "
                f"got {len(self.dependency_names)}"
            )
        numerator, denominator = self.dependency_names
        if not numerator or not denominator:
            raise InvalidComputedMetricError(f"Computed metric {self.name} has an empty dependency name")
        if numerator == denominator:
            raise InvalidComputedMetricError(
                f"Computed metric {self.name} depends twice on {numerator}"
            )

    @property
    def numerator(self) -> MetricName:
        """Name of the numerator metric."""
        return self.dependency_names[0]

    @property
    def denominator(self) -> MetricName:
        """Name of the denominator metric."""
        return self.dependency_names[1]


AnyMetricDescriptor = MetricDescriptor | ComputedMetricDescriptor


def _require_identity(name: MetricName, category_id: str) -> None:
    if not name:
        raise InvalidMetricError("Metric name must not be empty")
    if not category_id:
        raise InvalidMetricError(f"Metric {name} has no category")

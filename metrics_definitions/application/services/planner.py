"""Planning service for computed metric evaluation."""

from metrics_definitions.domain.entities import (
    AnyMetricDescriptor,
    ComputedMetricDescriptor,
    MetricDescriptor,
)
from metrics_definitions.domain.errors import CyclicDependencyError, DuplicateMetricError
from metrics_definitions.domain.types import MetricName


class MetricRegistry:
    """Name-indexed store of metric descriptors."""

    def __init__(self) -> None:
        """Initialize metric registry."""
        self._metrics: list[AnyMetricDescriptor] = []
        self._index: dict[MetricName, int] = {}

    def register(self, descriptor: AnyMetricDescriptor) -> None:
        """Add a descriptor. Names must be unique."""
        if descriptor.name in self._index:
            raise DuplicateMetricError(f"Metric already registered: {descriptor.name}")
        self._index[descriptor.name] = len(self._metrics)
        self._metrics.append(descriptor)

    def get(self, name: MetricName) -> AnyMetricDescriptor | None:
        """Get descriptor by name."""
        position = self._index.get(name)
        if position is None:
            return None
        return self._metrics[position]

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __len__(self) -> int:
        return len(self._metrics)

    @property
    def names(self) -> list[MetricName]:
        """Registered names in registration order."""
        return [metric.name for metric in self._metrics]

    @property
    def base_metrics(self) -> list[MetricDescriptor]:
        """Base and custom metrics in registration order."""
        return [m for m in self._metrics if isinstance(m, MetricDescriptor)]

    @property
    def computed_metrics(self) -> list[ComputedMetricDescriptor]:
        """Computed metrics in registration order."""
        return [m for m in self._metrics if isinstance(m, ComputedMetricDescriptor)]


def plan_evaluation(registry: MetricRegistry) -> list[ComputedMetricDescriptor]:
    """Order computed metrics so every dependency is evaluated first.

    Dependencies that are not computed metrics of this registry are expected
    to be provided as values at evaluation time.
    """
    computed = {metric.name: metric for metric in registry.computed_metrics}
    ordered: list[ComputedMetricDescriptor] = []
    done: set[MetricName] = set()
    visiting: list[MetricName] = []

    def visit(name: MetricName) -> None:
        if name in done:
            return
        if name in visiting:
            cycle = visiting[visiting.index(name):] + [name]
            raise CyclicDependencyError(f"Cyclic computed metrics: {' -> '.join(cycle)}")

        visiting.append(name)
        for dependency in computed[name].dependency_names:
            if dependency in computed:
                visit(dependency)
        visiting.pop()

        done.add(name)
        ordered.append(computed[name])

    for name in computed:
        visit(name)

    return ordered

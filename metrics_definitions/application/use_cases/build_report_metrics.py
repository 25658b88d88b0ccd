"""Build report metrics - generate all descriptors of a report definition."""

import time
from dataclasses import dataclass

import structlog

from metrics_definitions.application.dto.definitions import (
    DimensionMetricsDefinition,
    ReportDefinition,
)
from metrics_definitions.application.services.metric_factory import MetricFactory
from metrics_definitions.application.services.planner import MetricRegistry
from metrics_definitions.domain.entities import AnyMetricDescriptor
from metrics_definitions.domain.errors import DomainError
from metrics_definitions.domain.ports import TranslationPort
from metrics_definitions.infrastructure.observability.metrics import (
    descriptors_built,
    report_build_duration_seconds,
    report_build_failures,
)
from metrics_definitions.infrastructure.runtime.dimension_adapter import TranslatedDimension

logger = structlog.get_logger()


@dataclass
class ReportMetrics:
    """Descriptors generated for a report."""

    report_id: str
    registry: MetricRegistry

    @property
    def descriptors(self) -> list[AnyMetricDescriptor]:
        """All descriptors in generation order."""
        return [self.registry.get(name) for name in self.registry.names]


def run(definition: ReportDefinition, translator: TranslationPort) -> ReportMetrics:
    """Generate base, custom and computed metrics for every dimension."""
    report_id = definition.report_id
    registry = MetricRegistry()
    started = time.perf_counter()

    try:
        logger.info("building_report_metrics", report_id=report_id, dimensions=len(definition.dimensions))

        for dimension_metrics in definition.dimensions:
            for descriptor in _build_dimension_metrics(dimension_metrics, translator):
                registry.register(descriptor)
                descriptors_built.labels(descriptor_type=type(descriptor).__name__).inc()

    except DomainError as e:
        report_build_failures.labels(error_type=type(e).__name__).inc()
        logger.error(
            "report_build_failed",
            report_id=report_id,
            error_type=type(e).__name__,
            error_message=str(e),
        )
        raise
    finally:
        report_build_duration_seconds.observe(time.perf_counter() - started)

    logger.info(
        "report_metrics_built",
        report_id=report_id,
        metric_count=len(registry.base_metrics),
        computed_metric_count=len(registry.computed_metrics),
    )
    return ReportMetrics(report_id=report_id, registry=registry)


def _build_dimension_metrics(
    dimension_metrics: DimensionMetricsDefinition,
    translator: TranslationPort,
) -> list[AnyMetricDescriptor]:
    """Generate the metrics requested for one dimension."""
    dimension = TranslatedDimension(dimension_metrics.dimension, translator)
    factory = MetricFactory(dimension, translator)
    descriptors: list[AnyMetricDescriptor] = []

    for kind in dimension_metrics.aggregations:
        descriptors.append(factory.create_metric(kind))

    for custom in dimension_metrics.custom_metrics:
        descriptors.append(
            factory.create_custom_metric(
                custom.name,
                custom.translated_name,
                custom.aggregation,
                custom.documentation,
            )
        )

    # Dependencies are kept by name and may point at metrics of other dimensions
    for computed in dimension_metrics.computed_metrics:
        descriptors.append(
            factory.create_computed_metric(computed.metric1, computed.metric2, computed.formula)
        )

    logger.info(
        "dimension_metrics_built",
        dimension_id=dimension.id,
        module=dimension.module,
        category_id=dimension.category_id,
        count=len(descriptors),
    )
    return descriptors

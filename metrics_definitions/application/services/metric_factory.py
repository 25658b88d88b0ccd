"""Metric factory: builds metric descriptors for one dimension."""

import structlog

from metrics_definitions.application.services.computed_metrics import resolve_computed_metric
from metrics_definitions.application.services.label_templates import render_template
from metrics_definitions.application.services.expression_builder import (
    apply_template,
    build_expression,
)
from metrics_definitions.application.services.naming import metric_name
from metrics_definitions.domain.entities import ComputedMetricDescriptor, MetricDescriptor
from metrics_definitions.domain.enums import AggregationKind, ComputedFormulaKind
from metrics_definitions.domain.errors import InvalidAggregationError, InvalidComputedMetricError
from metrics_definitions.domain.ports import DimensionPort, TranslationPort

logger = structlog.get_logger()

# kind -> ((name key, name default), (documentation key, documentation default))
# Templates receive {plural} and {label}.
_METRIC_TEMPLATES: dict[AggregationKind, tuple[tuple[str, str], tuple[str, str]]] = {
    AggregationKind.COUNT: (
        ("Metric_Count", "{plural}"),
        ("Metric_CountDocumentation", "The number of {plural}"),
    ),
    AggregationKind.UNIQUE_COUNT: (
        ("Metric_UniqueCount", "Unique {plural}"),
        ("Metric_UniqueCountDocumentation", "The unique number of {plural}"),
    ),
    AggregationKind.SUM: (
        ("Metric_Sum", "Total {plural}"),
        ("Metric_SumDocumentation", "The total number (sum) of {plural}"),
    ),
    AggregationKind.MIN: (
        ("Metric_Min", "Min {plural}"),
        ("Metric_MinDocumentation", "The minimum value for {plural}"),
    ),
    AggregationKind.MAX: (
        ("Metric_Max", "Max {plural}"),
        ("Metric_MaxDocumentation", "The maximum value for {plural}"),
    ),
    AggregationKind.COUNT_WITH_NUMERIC_VALUE: (
        ("Metric_CountWithValue", "Entries with {label}"),
        ("Metric_CountWithValueDocumentation", "The number of entries that have a value set for {label}"),
    ),
}


def to_aggregation_kind(kind: AggregationKind | str) -> AggregationKind:
    """Convert a string to AggregationKind if needed."""
    if isinstance(kind, AggregationKind):
        return kind
    try:
        return AggregationKind(kind)
    except ValueError:
        raise InvalidAggregationError(f"Unknown aggregation kind: {kind}") from None


def to_formula_kind(kind: ComputedFormulaKind | str) -> ComputedFormulaKind:
    """Convert a string to ComputedFormulaKind if needed."""
    if isinstance(kind, ComputedFormulaKind):
        return kind
    try:
        return ComputedFormulaKind(kind)
    except ValueError:
        raise InvalidComputedMetricError(f"Unknown computed formula: {kind}") from None


class MetricFactory:
    """Creates base, custom and computed metrics for a dimension.

    The factory holds no state besides the dimension and the translation
    port; every call returns a new immutable descriptor.
    """

    def __init__(self, dimension: DimensionPort, translator: TranslationPort) -> None:
        """Initialize metric factory."""
        self.dimension = dimension
        self.translator = translator

    def create_metric(self, kind: AggregationKind | str) -> MetricDescriptor:
        """Create a base metric for the given aggregation kind."""
        kind = to_aggregation_kind(kind)
        templates = _METRIC_TEMPLATES.get(kind)
        if not templates:
            raise InvalidAggregationError(f"No label templates for aggregation: {kind}")
        name_template, doc_template = templates

        # Labels are resolved per call since they follow the active locale
        labels = {
            "plural": self.dimension.plural_label(),
            "label": self.dimension.label(),
        }

        metric = MetricDescriptor(
            name=metric_name(kind, self.dimension),
            translated_name=render_template(name_template, self.translator, **labels),
            documentation=render_template(doc_template, self.translator, **labels),
            category_id=self.dimension.category_id,
            expression=build_expression(kind, self.dimension.column_expression),
            aggregation_kind=kind,
        )
        logger.debug("metric_created", name=metric.name, aggregation=kind.value)
        return metric

    def create_custom_metric(
        self,
        name: str,
        translated_name: str,
        aggregation_template: str,
        documentation: str = "",
    ) -> MetricDescriptor:
        """Create a metric whose name, label and docs are given by the caller."""
        metric = MetricDescriptor(
            name=name,
            translated_name=translated_name,
            documentation=documentation,
            category_id=self.dimension.category_id,
            expression=apply_template(aggregation_template, self.dimension.column_expression),
        )
        logger.debug("custom_metric_created", name=name)
        return metric

    def create_computed_metric(
        self,
        metric_name1: str,
        metric_name2: str,
        formula_kind: ComputedFormulaKind | str,
    ) -> ComputedMetricDescriptor:
        """Create a metric computed from two existing metric names."""
        return resolve_computed_metric(
            metric_name1,
            metric_name2,
            to_formula_kind(formula_kind),
            self.dimension.category_id,
            self.translator,
        )

"""Computed metric resolver.

A computed metric is a ratio of two other metrics. Only the names of the
dependencies are kept; they are resolved against a registry of values when
the report is evaluated, so a computed metric can be declared before its
dependencies exist.

Labels are looked up through the translation port in this order:

1. an override for the ``(formula kind, numerator metric)`` pair, i.e.
   ``resolve(metric_name1, context="rate")`` for the translated name and
   ``resolve(metric_name1, context="rate_documentation")`` for the docs;
2. the generic template of the formula kind, itself translatable, filled
   with the translated labels of both metrics.
"""

import structlog

from metrics_definitions.application.services.label_templates import render_template
from metrics_definitions.application.services.naming import strip_known_prefix
from metrics_definitions.domain.entities import ComputedMetricDescriptor
from metrics_definitions.domain.enums import ComputedFormulaKind
from metrics_definitions.domain.errors import InvalidComputedMetricError
from metrics_definitions.domain.ports import TranslationPort

logger = structlog.get_logger()

SINGULAR_CONTEXT = "singular"
DOCUMENTATION_CONTEXT_SUFFIX = "_documentation"

# (translation key, English default)
_LABEL_TEMPLATES: dict[ComputedFormulaKind, tuple[str, str]] = {
    ComputedFormulaKind.AVERAGE: ("ComputedMetric_Average", "Avg. {0} per {1}"),
    ComputedFormulaKind.RATE: ("ComputedMetric_Rate", "{0} Rate"),
}

_DOCUMENTATION_TEMPLATES: dict[ComputedFormulaKind, tuple[str, str]] = {
    ComputedFormulaKind.AVERAGE: (
        "ComputedMetric_AverageDocumentation",
        'Average value of "{0}" per "{1}".',
    ),
    ComputedFormulaKind.RATE: (
        "ComputedMetric_RateDocumentation",
        'The ratio of "{0}" out of all "{1}".',
    ),
}


def computed_metric_name(
    metric_name1: str,
    metric_name2: str,
    formula_kind: ComputedFormulaKind,
) -> str:
    """Compose the computed metric name from its two dependencies."""
    left = strip_known_prefix(metric_name1)
    right = strip_known_prefix(metric_name2)

    if formula_kind == ComputedFormulaKind.AVERAGE:
        return f"avg_{left}_per_{right}"
    if formula_kind == ComputedFormulaKind.RATE:
        return f"{left}_{right}_rate"

    raise InvalidComputedMetricError(f"Unknown computed formula: {formula_kind}")


def resolve_computed_metric(
    metric_name1: str,
    metric_name2: str,
    formula_kind: ComputedFormulaKind,
    category_id: str,
    translator: TranslationPort,
) -> ComputedMetricDescriptor:
    """Derive a computed metric descriptor from two metric names."""
    name = computed_metric_name(metric_name1, metric_name2, formula_kind)

    label1 = _metric_label(metric_name1, translator)
    label2 = _metric_label(metric_name2, translator)

    translated_name = translator.resolve(metric_name1, context=formula_kind.value)
    if translated_name is None:
        # Averages read "per Visit", so prefer the singular form of the denominator
        per_label = label2
        if formula_kind == ComputedFormulaKind.AVERAGE:
            per_label = translator.resolve(metric_name2, context=SINGULAR_CONTEXT) or label2
        translated_name = render_template(_LABEL_TEMPLATES[formula_kind], translator, label1, per_label)

    documentation = translator.resolve(
        metric_name1,
        context=formula_kind.value + DOCUMENTATION_CONTEXT_SUFFIX,
    )
    if documentation is None:
        documentation = render_template(_DOCUMENTATION_TEMPLATES[formula_kind], translator, label1, label2)

    descriptor = ComputedMetricDescriptor(
        name=name,
        translated_name=translated_name,
        documentation=documentation,
        category_id=category_id,
        formula_kind=formula_kind,
        dependency_names=(metric_name1, metric_name2),
    )

    logger.debug(
        "computed_metric_resolved",
        name=name,
        formula_kind=formula_kind.value,
        dependencies=list(descriptor.dependency_names),
    )
    return descriptor


def _metric_label(metric_name: str, translator: TranslationPort) -> str:
    """Translated label of a metric, falling back to its name."""
    return translator.resolve(metric_name) or metric_name

"""Unit tests for computed metric resolver."""

import pytest

from metrics_definitions.application.dto.catalog import TranslationCatalog
from metrics_definitions.application.services.computed_metrics import (
    computed_metric_name,
    resolve_computed_metric,
)
from metrics_definitions.domain.enums import ComputedFormulaKind
from metrics_definitions.domain.errors import InvalidComputedMetricError, InvalidTranslationTemplateError
from metrics_definitions.infrastructure.i18n.catalog_translator import CatalogTranslator


def test_average_name():
    """Test average name strips prefixes from both operands."""
    name = computed_metric_name("nb_uniq_visitors", "nb_visits", ComputedFormulaKind.AVERAGE)
    assert name == "avg_visitors_per_visits"


def test_rate_name():
    """Test rate name composition."""
    name = computed_metric_name("bounce_count", "nb_visits", ComputedFormulaKind.RATE)
    assert name == "bounce_count_visits_rate"


def test_name_keeps_unprefixed_operands():
    """Test operands without a known prefix are used unchanged."""
    name = computed_metric_name("bounce_count", "conversions", ComputedFormulaKind.AVERAGE)
    assert name == "avg_bounce_count_per_conversions"


@pytest.mark.parametrize("formula_kind", list(ComputedFormulaKind))
def test_dependency_order_is_preserved(translator, formula_kind):
    """Test dependencies keep numerator first for every formula."""
    metric = resolve_computed_metric("sum_revenue", "nb_visits", formula_kind, "Goals_Goals", translator)

    assert metric.dependency_names == ("sum_revenue", "nb_visits")
    assert metric.numerator == "sum_revenue"
    assert metric.denominator == "nb_visits"
    assert metric.formula_kind == formula_kind
    assert metric.category_id == "Goals_Goals"


def test_generic_templates_without_catalog():
    """Test generic English templates fall back to metric names."""
    translator = CatalogTranslator()

    average = resolve_computed_metric("sum_revenue", "nb_visits", ComputedFormulaKind.AVERAGE, "c", translator)
    rate = resolve_computed_metric("sum_revenue", "nb_visits", ComputedFormulaKind.RATE, "c", translator)

    assert average.translated_name == "Avg. sum_revenue per nb_visits"
    assert average.documentation == 'Average value of "sum_revenue" per "nb_visits".'
    assert rate.translated_name == "sum_revenue Rate"
    assert rate.documentation == 'The ratio of "sum_revenue" out of all "nb_visits".'


def test_documentation_override(translator):
    """Test a documentation override for the formula and metric pair."""
    translator.add_catalog(
        TranslationCatalog(
            locale="en",
            contexts={"rate_documentation": {"bounce_count": "Share of single page visits."}},
        )
    )

    metric = resolve_computed_metric("bounce_count", "nb_visits", ComputedFormulaKind.RATE, "c", translator)

    assert metric.translated_name == "Bounces Rate"
    assert metric.documentation == "Share of single page visits."


def test_override_is_specific_to_formula(translator):
    """Test a rate override does not leak into averages."""
    metric = resolve_computed_metric("bounce_count", "nb_visits", ComputedFormulaKind.AVERAGE, "c", translator)

    assert metric.translated_name == "Avg. Actions In Visit per Visit"


def test_translated_generic_template(translator):
    """Test generic templates come from the catalog when present."""
    translator.add_catalog(
        TranslationCatalog(
            locale="fr",
            messages={
                "nb_visits": "Visites",
                "sum_revenue": "Revenu",
                "ComputedMetric_Rate": "Taux de {0}",
            },
        )
    )
    translator.set_locale("fr")

    metric = resolve_computed_metric("sum_revenue", "nb_visits", ComputedFormulaKind.RATE, "c", translator)

    assert metric.translated_name == "Taux de Revenu"
    # No translated documentation template, built-in default applies
    assert metric.documentation == 'The ratio of "Revenu" out of all "Visites".'


def test_same_dependency_twice_is_rejected(translator):
    """Test a computed metric needs two distinct dependencies."""
    with pytest.raises(InvalidComputedMetricError):
        resolve_computed_metric("nb_visits", "nb_visits", ComputedFormulaKind.AVERAGE, "c", translator)


def test_translated_template_with_missing_argument(translator):
    """Test a catalog template using an argument it is not given names its key."""
    translator.add_catalog(
        TranslationCatalog(locale="en", messages={"ComputedMetric_AverageDocumentation": "{0} / {1} / {2}"})
    )

    with pytest.raises(InvalidTranslationTemplateError, match="ComputedMetric_AverageDocumentation"):
        resolve_computed_metric("sum_revenue", "nb_visits", ComputedFormulaKind.AVERAGE, "c", translator)

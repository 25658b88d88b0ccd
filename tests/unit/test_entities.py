"""Unit tests for domain entities."""

import dataclasses

import pytest

from metrics_definitions.domain.entities import ComputedMetricDescriptor, MetricDescriptor
from metrics_definitions.domain.enums import ComputedFormulaKind
from metrics_definitions.domain.errors import InvalidComputedMetricError, InvalidMetricError


def test_metric_descriptor_is_immutable():
    """Test descriptors cannot be mutated."""
    metric = MetricDescriptor(
        name="sum_times_10",
        translated_name="MyMetric",
        documentation="",
        category_id="UserCountry_VisitLocation",
        expression="sum(log_visit.location_country) * 10",
    )

    with pytest.raises(dataclasses.FrozenInstanceError):
        metric.name = "other"


@pytest.mark.parametrize(
    "dependencies",
    [
        ("nb_visits",),
        ("nb_visits", "nb_visits"),
        ("", "nb_visits"),
        ("a", "b", "c"),
    ],
)
def test_computed_metric_requires_two_distinct_dependencies(dependencies):
    """Test invalid dependency pairs are rejected at construction."""
    with pytest.raises(InvalidComputedMetricError):
        ComputedMetricDescriptor(
            name="x",
            translated_name="x",
            documentation="",
            category_id="c",
            formula_kind=ComputedFormulaKind.RATE,
            dependency_names=dependencies,
        )


@pytest.mark.parametrize("name,category_id", [("", "General_Visitors"), ("nb_visits", "")])
def test_metric_descriptor_requires_name_and_category(name, category_id):
    """Test empty names and categories are rejected at construction."""
    with pytest.raises(InvalidMetricError):
        MetricDescriptor(
            name=name,
            translated_name="Visits",
            documentation="",
            category_id=category_id,
            expression="count(log_visit.idvisit)",
        )


def test_computed_metric_requires_category():
    """Test computed metrics need a category too."""
    with pytest.raises(InvalidMetricError, match="avg_visitors_per_visits"):
        ComputedMetricDescriptor(
            name="avg_visitors_per_visits",
            translated_name="x",
            documentation="",
            category_id="",
            formula_kind=ComputedFormulaKind.AVERAGE,
            dependency_names=("nb_uniq_visitors", "nb_visits"),
        )

"""Computed metric evaluator."""

import operator

import numpy as np
import pandas as pd

from metrics_definitions.domain.entities import ComputedMetricDescriptor
from metrics_definitions.domain.enums import ComputedFormulaKind
from metrics_definitions.domain.errors import UnresolvedDependencyError
from metrics_definitions.domain.types import MetricValues, ReportFrame

# Scale applied to numerator / denominator per formula
_FORMULA_SCALES: dict[ComputedFormulaKind, float] = {
    ComputedFormulaKind.AVERAGE: 1.0,
    ComputedFormulaKind.RATE: 100.0,
}


def _safe_ratio(numerator: float, denominator: float) -> float:
    """Divide, defining x / 0 as 0."""
    if denominator == 0:
        return 0.0
    return operator.truediv(numerator, denominator)


def _safe_ratio_series(numerator: pd.Series, denominator: pd.Series) -> pd.Series:
    """Vectorised divide, defining x / 0 as 0."""
    zero = denominator == 0
    result = numerator / denominator.where(~zero, np.nan)
    return result.where(~zero, 0.0)


def evaluate_computed_metric(
    descriptor: ComputedMetricDescriptor,
    values: MetricValues,
) -> float:
    """Evaluate a computed metric against already produced metric values."""
    numerator, denominator = (_lookup(descriptor, name, values) for name in descriptor.dependency_names)
    scale = _FORMULA_SCALES[descriptor.formula_kind]
    return _safe_ratio(float(numerator), float(denominator)) * scale


def evaluate_computed_metrics(
    descriptors: list[ComputedMetricDescriptor],
    frame: ReportFrame,
) -> ReportFrame:
    """Evaluate computed metrics over every row of a report frame.

    Descriptors must be in dependency order (see ``plan_evaluation``); each
    result is appended as a column so later descriptors can use it.
    """
    result_df = frame.copy()

    for descriptor in descriptors:
        missing = [name for name in descriptor.dependency_names if name not in result_df.columns]
        if missing:
            raise UnresolvedDependencyError(
                f"Computed metric {descriptor.name} depends on missing metrics: {', '.join(missing)}"
            )

        numerator = result_df[descriptor.numerator].astype(float)
        denominator = result_df[descriptor.denominator].astype(float)
        ratio = _safe_ratio_series(numerator, denominator)
        result_df[descriptor.name] = ratio * _FORMULA_SCALES[descriptor.formula_kind]

    return result_df


def _lookup(
    descriptor: ComputedMetricDescriptor,
    name: str,
    values: MetricValues,
) -> float:
    if name not in values:
        raise UnresolvedDependencyError(
            f"Computed metric {descriptor.name} depends on missing metric: {name}"
        )
    return values[name]

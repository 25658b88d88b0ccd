"""Evaluate computed metrics of a report over produced base values."""

import structlog

from metrics_definitions.application.services.computed_eval import evaluate_computed_metrics
from metrics_definitions.application.services.planner import MetricRegistry, plan_evaluation
from metrics_definitions.domain.errors import DomainError
from metrics_definitions.domain.types import ReportFrame
from metrics_definitions.infrastructure.observability.metrics import (
    computed_evaluation_failures,
    computed_evaluations,
)

logger = structlog.get_logger()


def run(registry: MetricRegistry, frame: ReportFrame) -> ReportFrame:
    """Append one column per computed metric to a frame of metric values.

    The frame must hold a column for every non-computed dependency; missing
    columns raise ``UnresolvedDependencyError``.
    """
    try:
        plan = plan_evaluation(registry)
        result_df = evaluate_computed_metrics(plan, frame)
    except DomainError as e:
        computed_evaluation_failures.labels(error_type=type(e).__name__).inc()
        logger.error(
            "report_evaluation_failed",
            error_type=type(e).__name__,
            error_message=str(e),
        )
        raise

    for descriptor in plan:
        computed_evaluations.labels(formula_kind=descriptor.formula_kind.value).inc()

    logger.info("report_evaluated", rows=len(result_df), computed_metrics=[d.name for d in plan])
    return result_df

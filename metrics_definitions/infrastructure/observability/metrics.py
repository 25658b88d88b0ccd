"""Prometheus metrics."""

from prometheus_client import Counter, Histogram

descriptors_built = Counter(
    "metric_descriptors_built_total",
    "Total number of metric descriptors built",
    ["descriptor_type"],
)

report_build_failures = Counter(
    "report_build_failures_total",
    "Total number of report definitions that failed to build",
    ["error_type"],
)

computed_evaluations = Counter(
    "computed_metric_evaluations_total",
    "Total number of computed metric columns evaluated",
    ["formula_kind"],
)

computed_evaluation_failures = Counter(
    "computed_metric_evaluation_failures_total",
    "Total number of computed metric evaluations that failed",
    ["error_type"],
)

report_build_duration_seconds = Histogram(
    "report_build_duration_seconds",
    "Duration of report metric generation in seconds",
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1, 5],
)

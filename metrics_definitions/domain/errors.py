"""Domain errors."""


class DomainError(Exception):
    """Base domain error."""


class InvalidAggregationError(DomainError):
    """Unknown or unsupported aggregation kind."""


class InvalidTemplateError(DomainError):
    """Custom aggregation template is malformed."""


class InvalidDimensionError(DomainError):
    """Dimension definition cannot produce metrics."""


class InvalidComputedMetricError(DomainError):
    """Computed metric cannot be built from the given inputs."""


class DuplicateMetricError(DomainError):
    """Metric name already registered."""


class CyclicDependencyError(DomainError):
    """Computed metrics depend on each other in a cycle."""


class UnresolvedDependencyError(DomainError):
    """Computed metric dependency missing from the value registry."""


class InvalidMetricError(DomainError):
    """Metric descriptor is missing a required field."""


class InvalidTranslationTemplateError(DomainError):
    """Translated label template uses placeholders it is not given."""

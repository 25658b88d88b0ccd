"""Ports (interfaces) for collaborators of the metric engine."""

from abc import ABC, abstractmethod


class TranslationPort(ABC):
    """Port for read-only translation lookups."""

    @abstractmethod
    def resolve(self, key: str, context: str | None = None) -> str | None:
        """Return the translated text for key, or None when absent."""


class DimensionPort(ABC):
    """Port describing one reporting dimension."""

    @property
    @abstractmethod
    def id(self) -> str:
        """Dimension slug, unique within its module."""

    @property
    @abstractmethod
    def module(self) -> str:
        """Owning module, e.g. UserCountry."""

    @property
    @abstractmethod
    def category_id(self) -> str:
        """Report category the dimension is filed under."""

    @property
    @abstractmethod
    def column_expression(self) -> str:
        """Storage column expression aggregated by metrics."""

    @abstractmethod
    def label(self) -> str:
        """Singular translated label. Resolved on every call."""

    @abstractmethod
    def plural_label(self) -> str:
        """Plural translated label. Resolved on every call."""

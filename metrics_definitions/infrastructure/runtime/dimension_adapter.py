"""Dimension adapter."""

from metrics_definitions.application.dto.definitions import DimensionDefinition
from metrics_definitions.domain.errors import InvalidDimensionError
from metrics_definitions.domain.ports import DimensionPort, TranslationPort


class TranslatedDimension(DimensionPort):
    """Dimension built from a definition, with labels from a translation port."""

    def __init__(self, definition: DimensionDefinition, translator: TranslationPort) -> None:
        """Initialize dimension adapter."""
        self.definition = definition
        self.translator = translator

    @property
    def id(self) -> str:
        return self.definition.id

    @property
    def module(self) -> str:
        return self.definition.module

    @property
    def category_id(self) -> str:
        return self.definition.category_id

    @property
    def column_expression(self) -> str:
        if self.definition.sql_segment:
            return self.definition.sql_segment
        if self.definition.table and self.definition.column:
            return f"{self.definition.table}.{self.definition.column}"
        raise InvalidDimensionError(f"Dimension {self.definition.id} has no column expression")

    def label(self) -> str:
        """Singular label, falling back to the translation key."""
        key = self.definition.label_key
        return self.translator.resolve(key) or key

    def plural_label(self) -> str:
        """Plural label, or the singular label when no plural key is defined."""
        key = self.definition.plural_label_key
        if not key:
            return self.label()
        return self.translator.resolve(key) or key

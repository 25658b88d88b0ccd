"""Translation catalog DTOs."""

from pydantic import BaseModel, Field


class TranslationCatalog(BaseModel):
    """Translation catalog for one locale."""

    locale: str = Field(min_length=1)
    messages: dict[str, str] = {}
    # context -> key -> text
    contexts: dict[str, dict[str, str]] = {}

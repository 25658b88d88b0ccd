"""Catalog-backed translation adapter."""

import structlog
from pydantic import ValidationError

from metrics_definitions.application.dto.catalog import TranslationCatalog
from metrics_definitions.domain.ports import TranslationPort
from metrics_definitions.infrastructure.io.local_io import LocalIO

logger = structlog.get_logger()


class CatalogTranslator(TranslationPort):
    """Translation port backed by in-memory catalogs, one per locale.

    Lookups try the active locale first, then the fallback locale. Keys that
    are absent from both resolve to None so callers can apply their own
    default text.
    """

    def __init__(
        self,
        catalogs: list[TranslationCatalog] | None = None,
        locale: str = "en",
        fallback_locale: str = "en",
    ) -> None:
        """Initialize translator."""
        self.catalogs: dict[str, TranslationCatalog] = {}
        for catalog in catalogs or []:
            self.add_catalog(catalog)
        self.locale = locale
        self.fallback_locale = fallback_locale

    def add_catalog(self, catalog: TranslationCatalog) -> None:
        """Add or merge a catalog for its locale."""
        existing = self.catalogs.get(catalog.locale)
        if existing is None:
            self.catalogs[catalog.locale] = catalog
            return

        contexts = {name: dict(entries) for name, entries in existing.contexts.items()}
        for name, entries in catalog.contexts.items():
            contexts.setdefault(name, {}).update(entries)
        self.catalogs[catalog.locale] = TranslationCatalog(
            locale=catalog.locale,
            messages={**existing.messages, **catalog.messages},
            contexts=contexts,
        )

    def set_locale(self, locale: str) -> None:
        """Switch the active locale."""
        if locale not in self.catalogs:
            logger.warning("locale_without_catalog", locale=locale)
        self.locale = locale

    def resolve(self, key: str, context: str | None = None) -> str | None:
        """Return the translated text for key, or None when absent."""
        for locale in (self.locale, self.fallback_locale):
            catalog = self.catalogs.get(locale)
            if catalog is None:
                continue
            if context is None:
                text = catalog.messages.get(key)
            else:
                text = catalog.contexts.get(context, {}).get(key)
            if text is not None:
                return text
        return None


def load_catalogs(translations_dir: str, local_io: LocalIO | None = None) -> list[TranslationCatalog]:
    """Load every <locale>.json catalog found in a directory."""
    local_io = local_io or LocalIO()
    catalogs: list[TranslationCatalog] = []

    for path in local_io.list_json(translations_dir):
        data = local_io.get_json(path)
        data.setdefault("locale", path.stem)
        try:
            catalog = TranslationCatalog(**data)
        except ValidationError as e:
            raise RuntimeError(f"Invalid translation catalog {path}: {e}") from e
        catalogs.append(catalog)
        logger.info(
            "translation_catalog_loaded",
            path=str(path),
            locale=catalog.locale,
            messages=len(catalog.messages),
            contexts=len(catalog.contexts),
        )

    return catalogs

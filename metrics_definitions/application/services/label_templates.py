"""Translatable label templates."""

from metrics_definitions.domain.errors import InvalidTranslationTemplateError
from metrics_definitions.domain.ports import TranslationPort


def render_template(
    entry: tuple[str, str],
    translator: TranslationPort,
    *args: str,
    **kwargs: str,
) -> str:
    """Fill the translated template of a (key, default) entry.

    Catalog templates are free text, so a placeholder the caller does not
    supply is reported with the translation key instead of a bare KeyError.
    """
    key, default = entry
    template = translator.resolve(key) or default
    try:
        return template.format(*args, **kwargs)
    except (KeyError, IndexError, ValueError) as e:
        raise InvalidTranslationTemplateError(
            f"Translation template {key} is invalid: {template!r} ({e!r})"
        ) from e

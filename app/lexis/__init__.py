"""lexis - localized message lookup with locale fallback."""

from lexis.i18n import (
    FallbackLevel,
    Language,
    LanguageCollector,
    create_language,
)

__all__ = ["FallbackLevel", "Language", "LanguageCollector", "create_language"]

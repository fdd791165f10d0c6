"""i18n system - localized message lookup.

Resolves message lines from per-locale catalog files, with a fallback chain
(locale -> parent locale -> default locale) and ICU message formatting.

Main components:
- loader: CatalogLoader, YAMLCatalogLoader, JSONCatalogLoader, CompositeCatalogLoader
- cache: CatalogCache with lazy scanning and injected lines
- resolvers: FallbackResolver walking the fallback chain
- registry: LocaleRegistry for locales and directories
- renderer: MessageRenderer formatting resolved lines
- language: Language, the context object tying everything together
- diagnostics: LanguageCollector render observer and report
"""

from lexis.i18n.cache import CatalogCache
from lexis.i18n.diagnostics import LanguageCollector
from lexis.i18n.exceptions import (
    CatalogLoadError,
    ConfigurationError,
    InvalidDateStyleError,
    InvalidDirectoryError,
    InvalidFallbackLevelError,
    LanguageError,
    MessageFormatError,
)
from lexis.i18n.factory import create_language
from lexis.i18n.formatter import BabelMessageFormatter, MessageFormatter
from lexis.i18n.language import Language
from lexis.i18n.loader import (
    CatalogLoader,
    CompositeCatalogLoader,
    JSONCatalogLoader,
    YAMLCatalogLoader,
)
from lexis.i18n.models import FallbackLevel, MessageKey, RenderEvent, Resolution
from lexis.i18n.registry import LocaleRegistry
from lexis.i18n.renderer import MessageRenderer, RenderObserver
from lexis.i18n.resolvers import FallbackResolver

__all__ = [
    "BabelMessageFormatter",
    "CatalogCache",
    "CatalogLoadError",
    "CatalogLoader",
    "CompositeCatalogLoader",
    "ConfigurationError",
    "FallbackLevel",
    "FallbackResolver",
    "InvalidDateStyleError",
    "InvalidDirectoryError",
    "InvalidFallbackLevelError",
    "JSONCatalogLoader",
    "Language",
    "LanguageCollector",
    "LanguageError",
    "LocaleRegistry",
    "MessageFormatError",
    "MessageFormatter",
    "MessageKey",
    "MessageRenderer",
    "RenderEvent",
    "RenderObserver",
    "Resolution",
    "YAMLCatalogLoader",
    "create_language",
]

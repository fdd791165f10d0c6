"""Language context: the public entry point of the i18n system.

A Language owns its catalogs and locale configuration. Several instances can
live side by side with isolated state.

Usage:
    from lexis.i18n import Language

    language = Language("en", ["/srv/app/locales"])
    language.set_supported_locales(["pt", "pt-br"])

    language.render("home", "hello", ["Mary"])  # "Hello, Mary!"
    language.render_dotted("home.hello", ["Mary"], "pt-br")  # "Olá, Mary!"
    language.render("home", "unknown")  # "home.unknown"
"""

import threading
from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Union

from babel.numbers import format_currency

from lexis.i18n.cache import CatalogCache
from lexis.i18n.exceptions import InvalidDateStyleError
from lexis.i18n.formatter import (
    DATE_STYLES,
    Arguments,
    BabelMessageFormatter,
    MessageFormatter,
    to_babel_locale,
)
from lexis.i18n.loader import CatalogLoader, YAMLCatalogLoader
from lexis.i18n.models import FallbackLevel, Lines, MessageKey, get_locale_direction
from lexis.i18n.registry import LocaleRegistry
from lexis.i18n.renderer import MessageRenderer, RenderObserver
from lexis.i18n.resolvers import FallbackResolver
from lexis.logging import get_module_logger

logger = get_module_logger()


class Language:
    """Localized message lookup for one set of catalogs.

    Every public method runs under a single re-entrant lock, because lookups
    also mutate the cache (they trigger scans).

    Attributes:
        loader: CatalogLoader reading catalog files.
        formatter: MessageFormatter for templates.
    """

    def __init__(
        self,
        locale: str = "en",
        directories: Optional[Iterable[Union[str, Path]]] = None,
        *,
        loader: Optional[CatalogLoader] = None,
        formatter: Optional[MessageFormatter] = None,
        fallback_level: Union[FallbackLevel, int, str] = FallbackLevel.DEFAULT,
        observer: Optional[RenderObserver] = None,
    ):
        """Initialize a Language.

        Args:
            locale: Default and current locale.
            directories: Catalog root directories, later ones win on conflicts.
            loader: CatalogLoader (default: YAMLCatalogLoader).
            formatter: MessageFormatter (default: BabelMessageFormatter).
            fallback_level: FallbackLevel, int or level name.
            observer: Optional RenderObserver receiving render events.

        Raises:
            InvalidDirectoryError: If a directory does not exist.
            InvalidFallbackLevelError: If fallback_level is not a level.
        """
        self._lock = threading.RLock()
        self.loader = loader or YAMLCatalogLoader()
        self.formatter = formatter or BabelMessageFormatter()

        self._cache = CatalogCache(self.loader)
        self._registry = LocaleRegistry(self._cache, locale, fallback_level)
        self._resolver = FallbackResolver(
            self._cache,
            get_fallback_level=lambda: self._registry.fallback_level,
            get_default_locale=lambda: self._registry.default_locale,
        )
        self._renderer = MessageRenderer(
            self._resolver,
            self.formatter,
            get_current_locale=lambda: self._registry.current_locale,
            observer=observer,
        )
        if directories:
            self._registry.set_directories(directories)

        logger.debug(
            "language_initialized",
            locale=locale,
            directories=self._registry.directories,
            fallback_level=self._registry.fallback_level.label,
        )

    # Rendering

    def render(
        self,
        namespace: str,
        key: str,
        args: Arguments = None,
        locale: Optional[str] = None,
    ) -> str:
        """Render a message line.

        Args:
            namespace: Catalog namespace (file name without extension).
            key: Message key in the namespace.
            args: Positional (list) or named (dict) template arguments.
            locale: Custom locale, or None to use the current locale.

        Returns:
            Rendered text, or "namespace.key" if the line is not found.
        """
        with self._lock:
            return self._renderer.render(namespace, key, args, locale)

    def render_dotted(
        self,
        line: str,
        args: Arguments = None,
        locale: Optional[str] = None,
    ) -> str:
        """Render a line given in dot notation, "home.hello" being the line
        hello of the namespace home.

        Raises:
            ValueError: If line has no dot.
        """
        message_key = MessageKey.from_string(line)
        return self.render(message_key.namespace, message_key.key, args, locale)

    def has_line(self, namespace: str, key: str, locale: Optional[str] = None) -> bool:
        """Tell if a line resolves in a locale, fallbacks included."""
        with self._lock:
            return self._renderer.has_line(namespace, key, locale)

    # Lines

    def add_lines(self, locale: str, namespace: str, lines: Mapping[str, str]) -> "Language":
        """Add lines for a locale and namespace.

        Useful for lines coming from a database or any parsed source. Added
        lines always replace lines given by catalog files, before or after
        the files are read.
        """
        with self._lock:
            self._cache.merge_lines(locale, namespace, lines)
        return self

    def get_lines(self) -> Lines:
        """Get the loaded lines as {locale: {namespace: {key: text}}}."""
        with self._lock:
            return self._cache.get_lines()

    def reset_lines(self) -> "Language":
        """Forget loaded lines so catalogs are read again on next use.

        Lines given to add_lines() are kept.
        """
        with self._lock:
            self._cache.reset()
        return self

    # Configuration

    @property
    def default_locale(self) -> str:
        return self._registry.default_locale

    @property
    def current_locale(self) -> str:
        return self._registry.current_locale

    @property
    def supported_locales(self) -> List[str]:
        return self._registry.supported_locales

    @property
    def directories(self) -> List[str]:
        return self._registry.directories

    @property
    def fallback_level(self) -> FallbackLevel:
        return self._registry.fallback_level

    @property
    def scanned_locales(self) -> List[str]:
        with self._lock:
            return self._cache.scanned_locales

    def set_default_locale(self, locale: str) -> "Language":
        with self._lock:
            self._registry.set_default_locale(locale)
        return self

    def set_current_locale(self, locale: str) -> "Language":
        with self._lock:
            self._registry.set_current_locale(locale)
        return self

    def set_supported_locales(self, locales: Iterable[str]) -> "Language":
        """Set the supported locales. The default locale is always kept."""
        with self._lock:
            self._registry.set_supported_locales(locales)
        return self

    def set_directories(self, directories: Iterable[Union[str, Path]]) -> "Language":
        """Set the catalog directories.

        Lines of later directories replace lines of earlier ones.

        Raises:
            InvalidDirectoryError: If a path is not an existing directory.
        """
        with self._lock:
            self._registry.set_directories(directories)
        return self

    def add_directory(self, directory: Union[str, Path]) -> "Language":
        """Add a directory before the others, with the lowest precedence."""
        with self._lock:
            self._registry.add_directory(directory)
        return self

    def set_fallback_level(self, level: Union[FallbackLevel, int, str]) -> "Language":
        """Set the fallback level.

        Raises:
            InvalidFallbackLevelError: If level is not a FallbackLevel.
        """
        with self._lock:
            self._registry.set_fallback_level(level)
        return self

    def set_observer(self, observer: Optional[RenderObserver]) -> "Language":
        with self._lock:
            self._renderer.observer = observer
        return self

    def fallback_chain(self, locale: Optional[str] = None) -> List[str]:
        """List the locales tried, in order, when rendering in a locale."""
        with self._lock:
            return self._resolver.chain(locale or self.current_locale)

    # Locale formatting helpers

    def currency(self, value: float, currency: str, locale: Optional[str] = None) -> str:
        """Format a money value (e.g., 10.5, "USD" -> "$10.50" in en)."""
        return format_currency(
            value, currency, locale=to_babel_locale(locale or self.current_locale)
        )

    def date(self, time: float, style: Optional[str] = None, locale: Optional[str] = None) -> str:
        """Format a Unix timestamp as a date.

        Args:
            time: Unix timestamp, read in UTC.
            style: short, medium, long or full (default: short).
            locale: Custom locale, or None to use the current locale.

        Raises:
            InvalidDateStyleError: If style is not a known style.
        """
        if style and style not in DATE_STYLES:
            raise InvalidDateStyleError(style)
        style = style or "short"
        return self.formatter.format(
            locale or self.current_locale,
            "{time, date, " + style + "}",
            {"time": time},
        )

    def ordinal(self, number: int, locale: Optional[str] = None) -> str:
        """Format an ordinal number (e.g., 2 -> "2nd" in en)."""
        return self.formatter.format(
            locale or self.current_locale,
            "{number, ordinal}",
            {"number": number},
        )

    def get_current_locale_direction(self) -> str:
        """Get "ltr" or "rtl" for the current locale."""
        return get_locale_direction(self.current_locale)

    @staticmethod
    def get_locale_direction(locale: str) -> str:
        """Get "ltr" or "rtl" for a locale."""
        return get_locale_direction(locale)

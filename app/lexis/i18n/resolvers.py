"""Fallback resolution for missing message lines.

Walks the fallback chain for one request:

1. Requested locale
2. Parent locale (pt-br -> pt), if the level is at least PARENT
3. Default locale, if the level is DEFAULT and it was not tried yet

Only one parent level is ever tried.
"""

from typing import Callable, List

from lexis.i18n.cache import CatalogCache
from lexis.i18n.models import FallbackLevel, Resolution, parent_locale
from lexis.logging import get_module_logger

logger = get_module_logger()


class FallbackResolver:
    """Resolves a line through the locale fallback chain.

    The fallback level and default locale are read through callables so the
    resolver always follows the current LocaleRegistry state.

    Attributes:
        cache: CatalogCache used for scan-triggering lookups.
    """

    def __init__(
        self,
        cache: CatalogCache,
        get_fallback_level: Callable[[], FallbackLevel],
        get_default_locale: Callable[[], str],
    ):
        self.cache = cache
        self._get_fallback_level = get_fallback_level
        self._get_default_locale = get_default_locale

    def resolve(self, locale: str, namespace: str, key: str) -> Resolution:
        """Resolve a line, starting with the requested locale.

        Returns:
            Resolution with the locale the text came from, or with the last
            locale tried and no text.
        """
        text = self.cache.get(locale, namespace, key)
        if text is not None:
            return Resolution(locale=locale, text=text)
        return self.fallback(locale, namespace, key)

    def fallback(self, locale: str, namespace: str, key: str) -> Resolution:
        """Resolve a line that the requested locale does not have.

        Args:
            locale: Requested locale, already looked up.
            namespace: Catalog namespace.
            key: Message key.

        Returns:
            Resolution for the parent or default locale, or an unresolved
            Resolution holding the last locale tried.
        """
        level = self._get_fallback_level()
        requested = locale
        text = None

        parent = parent_locale(locale)
        if level >= FallbackLevel.PARENT and parent is not None:
            locale = parent
            text = self.cache.get(locale, namespace, key)

        default_locale = self._get_default_locale()
        if (
            text is None
            and level >= FallbackLevel.DEFAULT
            and default_locale not in (requested, locale)
        ):
            locale = default_locale
            text = self.cache.get(locale, namespace, key)

        if text is not None:
            logger.debug(
                "fallback_line_used",
                namespace=namespace,
                key=key,
                fallback_locale=locale,
                fallback_level=level.label,
            )
        return Resolution(locale=locale, text=text)

    def chain(self, locale: str) -> List[str]:
        """List the locales the fallback chain tries for a locale, in order."""
        level = self._get_fallback_level()
        locales = [locale]

        parent = parent_locale(locale)
        if level >= FallbackLevel.PARENT and parent is not None:
            locales.append(parent)

        default_locale = self._get_default_locale()
        if level >= FallbackLevel.DEFAULT and default_locale not in locales:
            locales.append(default_locale)
        return locales

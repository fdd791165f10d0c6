"""Locale and directory configuration for a Language context.

Owns the default, current and supported locales, the catalog directory list
and the fallback level. Every change to the directories or the supported
locales reindexes the CatalogCache.
"""

import os
from pathlib import Path
from typing import Iterable, List, Union

from lexis.i18n.cache import CatalogCache
from lexis.i18n.exceptions import InvalidDirectoryError
from lexis.i18n.models import FallbackLevel
from lexis.logging import get_module_logger

logger = get_module_logger()


class LocaleRegistry:
    """Locale state and catalog directories.

    Invariants: the default locale is always supported, supported locales are
    unique and sorted, directories are absolute, unique and end with a path
    separator.
    """

    def __init__(
        self,
        cache: CatalogCache,
        default_locale: str,
        fallback_level: Union[FallbackLevel, int, str] = FallbackLevel.DEFAULT,
    ):
        self._cache = cache
        self._default_locale = default_locale
        self._current_locale = default_locale
        self._supported_locales: List[str] = [default_locale]
        self._directories: List[str] = []
        self._fallback_level = FallbackLevel.from_value(fallback_level)
        self._reindex()

    @property
    def default_locale(self) -> str:
        return self._default_locale

    @property
    def current_locale(self) -> str:
        return self._current_locale

    @property
    def supported_locales(self) -> List[str]:
        return list(self._supported_locales)

    @property
    def directories(self) -> List[str]:
        return list(self._directories)

    @property
    def fallback_level(self) -> FallbackLevel:
        return self._fallback_level

    def is_supported(self, locale: str) -> bool:
        return locale in self._supported_locales

    def set_default_locale(self, locale: str) -> None:
        """Set the default locale and add it to the supported locales."""
        self._default_locale = locale
        self.set_supported_locales([*self._supported_locales, locale])

    def set_current_locale(self, locale: str) -> None:
        """Set the current locale and add it to the supported locales."""
        self._current_locale = locale
        self.set_supported_locales([*self._supported_locales, locale])

    def set_supported_locales(self, locales: Iterable[str]) -> None:
        """Replace the supported locales.

        The default locale is always added back. The current locale is not,
        so it can be dropped by calling this after set_current_locale().
        """
        self._supported_locales = sorted({*locales, self._default_locale})
        logger.debug("supported_locales_set", supported_locales=self._supported_locales)
        self._reindex()

    def set_directories(self, directories: Iterable[Union[str, Path]]) -> None:
        """Replace the catalog directories.

        Directories are consulted in order when a namespace is scanned, and
        lines from later directories replace lines from earlier ones.

        Raises:
            InvalidDirectoryError: If directories is a single path rather than
                a list of them, or if any path is empty or not an existing
                directory. The previous directories are kept.
        """
        if isinstance(directories, (str, Path)):
            logger.warning("directories_not_a_list", directories=str(directories))
            raise InvalidDirectoryError(str(directories))

        normalized: List[str] = []
        for directory in directories:
            # Path("") would resolve to the working directory
            if isinstance(directory, str) and not directory.strip():
                logger.warning("directory_empty")
                raise InvalidDirectoryError(str(directory))
            path = Path(directory).resolve()
            if not path.is_dir():
                logger.warning("directory_inaccessible", directory=str(directory))
                raise InvalidDirectoryError(str(directory))
            entry = str(path).rstrip(os.sep) + os.sep
            if entry not in normalized:
                normalized.append(entry)

        self._directories = normalized
        logger.info("directories_set", directories=self._directories)
        self._reindex()

    def add_directory(self, directory: Union[str, Path]) -> None:
        """Add a directory before the existing ones.

        A prepended directory is read first, so its lines have the lowest
        precedence on conflicting keys. To add an overriding directory, call
        set_directories() with it appended.
        """
        self.set_directories([directory, *self._directories])

    def set_fallback_level(self, level: Union[FallbackLevel, int, str]) -> None:
        """Set the fallback level.

        Raises:
            InvalidFallbackLevelError: If level does not name a FallbackLevel.
        """
        self._fallback_level = FallbackLevel.from_value(level)
        logger.debug("fallback_level_set", fallback_level=self._fallback_level.label)

    def _reindex(self) -> None:
        self._cache.reindex(self._directories, self._supported_locales)

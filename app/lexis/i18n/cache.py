"""In-memory catalog cache with lazy directory scanning.

Keeps the lines of every (locale, namespace) pair touched so far. File lines
are loaded once per pair and configuration; injected lines are stored apart
and always layered on top of file lines, so they win whatever the call order.
"""

import copy
from typing import Dict, Iterable, List, Mapping, Optional, Set, Tuple

from lexis.i18n.loader import CatalogLoader
from lexis.i18n.models import Lines
from lexis.logging import get_module_logger

logger = get_module_logger()


class CatalogCache:
    """Catalogs by locale and namespace, scanned on first use.

    Not thread-safe on its own; the owning Language serializes access.

    Attributes:
        loader: CatalogLoader reading catalogs from the backing store.
        directories: Catalog roots consulted in order, later ones win.
        supported_locales: Locales allowed to trigger a scan.
    """

    def __init__(self, loader: CatalogLoader):
        self.loader = loader
        self.directories: List[str] = []
        self.supported_locales: Set[str] = set()
        self._catalogs: Lines = {}
        self._injected: Lines = {}
        self._scanned: Set[Tuple[str, str]] = set()

    def lookup(self, locale: str, namespace: str, key: str) -> Optional[str]:
        """Look a line up in the loaded lines, without any I/O."""
        return self._catalogs.get(locale, {}).get(namespace, {}).get(key)

    def get(self, locale: str, namespace: str, key: str) -> Optional[str]:
        """Look a line up, scanning the namespace first on a miss."""
        text = self.lookup(locale, namespace, key)
        if text is None and self.ensure_scanned(locale, namespace):
            text = self.lookup(locale, namespace, key)
        return text

    def ensure_scanned(self, locale: str, namespace: str) -> bool:
        """Load a namespace for a locale from every directory, once.

        Directories are read in order and later directories overwrite keys of
        earlier ones. Injected lines are applied last. Unsupported locales are
        never scanned.

        Returns:
            True if a scan happened.

        Raises:
            CatalogLoadError: If a catalog file cannot be read. The pair stays
                unscanned so the next lookup retries.
        """
        if (locale, namespace) in self._scanned:
            return False
        if locale not in self.supported_locales:
            return False

        lines: Dict[str, str] = {}
        for directory in self.directories:
            lines.update(self.loader.load(locale, namespace, directory))
        lines.update(self._injected.get(locale, {}).get(namespace, {}))

        if lines:
            self._catalogs.setdefault(locale, {})[namespace] = lines
        self._scanned.add((locale, namespace))
        logger.debug(
            "catalog_scanned",
            locale=locale,
            namespace=namespace,
            directory_count=len(self.directories),
            line_count=len(lines),
        )
        return True

    def merge_lines(self, locale: str, namespace: str, lines: Mapping[str, str]) -> None:
        """Force-merge lines over the catalog of a namespace.

        The namespace is scanned first so the injected lines replace file
        lines instead of being replaced by them later.
        """
        self.ensure_scanned(locale, namespace)
        lines = {str(key): text for key, text in lines.items()}

        injected = self._injected.setdefault(locale, {})
        injected[namespace] = {**injected.get(namespace, {}), **lines}

        catalogs = self._catalogs.setdefault(locale, {})
        catalogs[namespace] = {**catalogs.get(namespace, {}), **lines}

    def reindex(
        self,
        directories: Iterable[str],
        supported_locales: Iterable[str],
    ) -> None:
        """Apply a new configuration and rescan every touched namespace.

        Namespaces never requested stay unloaded until their first lookup.
        """
        touched = [
            (locale, namespace)
            for locale, namespaces in self._catalogs.items()
            for namespace in namespaces
        ]

        self.directories = list(directories)
        self.supported_locales = set(supported_locales)
        self._reset_catalogs()

        for locale, namespace in touched:
            self.ensure_scanned(locale, namespace)

        logger.debug(
            "catalogs_reindexed",
            namespace_count=len(touched),
            directory_count=len(self.directories),
            supported_locales=sorted(self.supported_locales),
        )

    def reset(self) -> None:
        """Drop all loaded lines and scan marks, keeping injected lines."""
        self._reset_catalogs()
        logger.debug("catalogs_reset")

    def get_lines(self) -> Lines:
        """Get a copy of every loaded line by locale and namespace."""
        return copy.deepcopy(self._catalogs)

    def get_injected_lines(self) -> Lines:
        """Get a copy of every injected line by locale and namespace."""
        return copy.deepcopy(self._injected)

    def is_scanned(self, locale: str, namespace: Optional[str] = None) -> bool:
        """Tell if a locale (or one of its namespaces) has been scanned."""
        if namespace is not None:
            return (locale, namespace) in self._scanned
        return any(scanned == locale for scanned, _ in self._scanned)

    @property
    def scanned_locales(self) -> List[str]:
        return sorted({locale for locale, _ in self._scanned})

    def _reset_catalogs(self) -> None:
        self._scanned = set()
        self._catalogs = copy.deepcopy(self._injected)

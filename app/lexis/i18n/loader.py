"""Catalog loading interface and implementations.

Defines the contract for reading one catalog from a backing store and
provides YAML and JSON file loaders plus a composite loader.

Expected layout under each catalog root directory:

    <directory>/<locale>/<namespace>.yml
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Iterable, List, Tuple

import yaml

from lexis.i18n.exceptions import CatalogLoadError
from lexis.logging import get_module_logger

logger = get_module_logger()


class CatalogLoader(ABC):
    """Abstract base for catalog loaders.

    Implementations read a flat key -> text mapping for one locale and
    namespace under one directory. They never cache; CatalogCache does.
    Subclass this to plug in other sources (a database table keyed by
    locale and namespace, for instance).
    """

    @abstractmethod
    def load(self, locale: str, namespace: str, directory: str) -> Dict[str, str]:
        """Load the catalog of a namespace for a locale.

        Args:
            locale: Locale identifier (e.g., "pt-br").
            namespace: Catalog namespace (e.g., "tests").
            directory: Catalog root directory.

        Returns:
            Mapping of key to message template, empty if no catalog exists.

        Raises:
            CatalogLoadError: If a catalog exists but cannot be read or parsed.
        """
        pass

    def list_namespaces(self, directory: str) -> List[str]:
        """List the namespaces available under a directory, for any locale.

        Loaders that cannot enumerate their source return an empty list.
        """
        return []


class FileCatalogLoader(CatalogLoader):
    """Base for loaders reading one file per namespace.

    Subclasses define the accepted file extensions and how to parse a file.
    """

    extensions: Tuple[str, ...] = ()

    def load(self, locale: str, namespace: str, directory: str) -> Dict[str, str]:
        lines: Dict[str, str] = {}
        for path in self._find_files(locale, namespace, directory):
            try:
                with open(path, "r", encoding="utf-8") as f:
                    data = self.parse(f.read(), path)
            except OSError as e:
                logger.error("catalog_read_error", file=str(path), error=str(e))
                raise CatalogLoadError(str(path), str(e)) from e
            lines.update(self._coerce_lines(data, path))

        if lines:
            logger.debug(
                "catalog_loaded",
                locale=locale,
                namespace=namespace,
                directory=directory,
                line_count=len(lines),
            )
        return lines

    def list_namespaces(self, directory: str) -> List[str]:
        namespaces = set()
        for extension in self.extensions:
            for path in Path(directory).glob(f"*/*{extension}"):
                if path.is_file():
                    namespaces.add(path.name[: -len(extension)])
        return sorted(namespaces)

    @abstractmethod
    def parse(self, content: str, path: Path) -> Any:
        """Parse file content.

        Raises:
            CatalogLoadError: If the content is not valid for the format.
        """
        pass

    def _find_files(self, locale: str, namespace: str, directory: str) -> List[Path]:
        base = Path(directory) / locale
        return [
            base / f"{namespace}{extension}"
            for extension in self.extensions
            if (base / f"{namespace}{extension}").is_file()
        ]

    def _coerce_lines(self, data: Any, source_file: Path) -> Dict[str, str]:
        """Turn parsed content into a flat key -> text mapping.

        Expected format:
        key1: message1
        key2: message2
        """
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise CatalogLoadError(
                str(source_file), f"expected a mapping, got {type(data).__name__}"
            )

        lines = {}
        for key, message in data.items():
            if isinstance(message, (dict, list)):
                logger.warning(
                    "invalid_line_format",
                    file=str(source_file),
                    key=key,
                    expected="scalar",
                )
                continue
            lines[str(key)] = "" if message is None else str(message)
        return lines


class YAMLCatalogLoader(FileCatalogLoader):
    """Loader for YAML catalog files (<namespace>.yml or <namespace>.yaml)."""

    extensions = (".yml", ".yaml")

    def parse(self, content: str, path: Path) -> Any:
        try:
            return yaml.safe_load(content)
        except yaml.YAMLError as e:
            logger.error("yaml_parse_error", file=str(path), error=str(e))
            raise CatalogLoadError(str(path), str(e)) from e


class JSONCatalogLoader(FileCatalogLoader):
    """Loader for JSON catalog files (<namespace>.json)."""

    extensions = (".json",)

    def parse(self, content: str, path: Path) -> Any:
        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            logger.error("json_parse_error", file=str(path), error=str(e))
            raise CatalogLoadError(str(path), str(e)) from e


class CompositeCatalogLoader(CatalogLoader):
    """Chains several loaders for the same directory.

    Results are merged in order: later loaders override earlier ones on
    conflicting keys.

    Attributes:
        loaders: Loaders consulted in order.
    """

    def __init__(self, loaders: Iterable[CatalogLoader]):
        self.loaders = list(loaders)
        if not self.loaders:
            raise ValueError("CompositeCatalogLoader requires at least one loader")

    def load(self, locale: str, namespace: str, directory: str) -> Dict[str, str]:
        lines: Dict[str, str] = {}
        for loader in self.loaders:
            lines.update(loader.load(locale, namespace, directory))
        return lines

    def list_namespaces(self, directory: str) -> List[str]:
        namespaces = set()
        for loader in self.loaders:
            namespaces.update(loader.list_namespaces(directory))
        return sorted(namespaces)

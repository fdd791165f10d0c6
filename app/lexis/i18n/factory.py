"""Factory functions for creating Language contexts from settings."""

from pathlib import Path
from typing import Iterable, Optional, Union

from lexis.configuration import Settings, settings as default_settings
from lexis.i18n.formatter import MessageFormatter
from lexis.i18n.language import Language
from lexis.i18n.loader import CatalogLoader, JSONCatalogLoader, YAMLCatalogLoader
from lexis.i18n.renderer import RenderObserver
from lexis.logging import get_module_logger

logger = get_module_logger()


def create_loader(catalog_format: str = "yaml") -> CatalogLoader:
    """Create the CatalogLoader for a catalog file format.

    Raises:
        ValueError: If catalog_format is not 'yaml' or 'json'.
    """
    if catalog_format == "yaml":
        return YAMLCatalogLoader()
    if catalog_format == "json":
        return JSONCatalogLoader()
    raise ValueError(f"Unsupported catalog format: {catalog_format}")


def create_language(
    settings: Optional[Settings] = None,
    directories: Optional[Iterable[Union[str, Path]]] = None,
    loader: Optional[CatalogLoader] = None,
    formatter: Optional[MessageFormatter] = None,
    observer: Optional[RenderObserver] = None,
) -> Language:
    """Create and configure a Language instance.

    Args:
        settings: Settings to read the language section from (default: the
            module-level settings).
        directories: Catalog directories, overriding settings.
        loader: CatalogLoader, overriding the configured catalog format.
        formatter: Optional MessageFormatter.
        observer: Optional RenderObserver.

    Returns:
        Language: Configured language context

    Raises:
        InvalidDirectoryError: If a configured directory does not exist.
        InvalidFallbackLevelError: If the configured fallback level is invalid.

    Usage:
        # Configured from LANGUAGE_* environment variables
        language = create_language()

        # Custom catalog directories
        language = create_language(directories=[Path("/srv/app/locales")])
    """
    config = (settings or default_settings).language
    if directories is None:
        directories = config.directories

    language = Language(
        config.default_locale,
        directories,
        loader=loader or create_loader(config.catalog_format),
        formatter=formatter,
        fallback_level=config.fallback_level,
        observer=observer,
    )
    if config.supported_locales:
        language.set_supported_locales(config.supported_locales)

    logger.info(
        "language_created",
        default_locale=language.default_locale,
        supported_locales=language.supported_locales,
        directories=language.directories,
        fallback_level=language.fallback_level.label,
    )
    return language

"""Language (message catalog) settings."""

from typing import List

from pydantic import Field, field_validator

from lexis.configuration.base import LibrarySettings

CATALOG_FORMATS = ("yaml", "json")


class LanguageSettings(LibrarySettings):
    """Configuration for the default Language context.

    Environment Variables:
        LANGUAGE_DEFAULT_LOCALE: Default (and initial current) locale (default: en)
        LANGUAGE_SUPPORTED_LOCALES: JSON list of extra supported locales
        LANGUAGE_DIRECTORIES: JSON list of catalog root directories
        LANGUAGE_FALLBACK_LEVEL: 'none', 'parent' or 'default' (default: default)
        LANGUAGE_CATALOG_FORMAT: 'yaml' or 'json' (default: yaml)

    Example:
        ```python
        from lexis.configuration import settings

        if settings.language.directories:
            language = create_language()
        ```
    """

    default_locale: str = Field(
        default="en",
        alias="LANGUAGE_DEFAULT_LOCALE",
        description="Default locale, always supported",
    )
    supported_locales: List[str] = Field(
        default_factory=list,
        alias="LANGUAGE_SUPPORTED_LOCALES",
        description="Locales eligible for catalog lookup besides the default",
    )
    directories: List[str] = Field(
        default_factory=list,
        alias="LANGUAGE_DIRECTORIES",
        description="Catalog root directories, later entries win on conflicts",
    )
    fallback_level: str = Field(
        default="default",
        alias="LANGUAGE_FALLBACK_LEVEL",
        description="Fallback level: 'none', 'parent' or 'default'",
    )
    catalog_format: str = Field(
        default="yaml",
        alias="LANGUAGE_CATALOG_FORMAT",
        description="Catalog file format: 'yaml' or 'json'",
    )

    @field_validator("catalog_format")
    @classmethod
    def validate_catalog_format(cls, value: str) -> str:
        value = value.lower()
        if value not in CATALOG_FORMATS:
            raise ValueError(f"catalog_format must be one of {CATALOG_FORMATS}")
        return value

"""Configuration module - public API.

Centralized configuration for lexis using Pydantic BaseSettings.

Exports:
    settings: Singleton Settings instance
    Settings: Main settings class (for testing/overrides)
    LanguageSettings: Language section settings class
"""

from lexis.configuration.language import LanguageSettings
from lexis.configuration.settings import Settings, settings

__all__ = ["Settings", "LanguageSettings", "settings"]

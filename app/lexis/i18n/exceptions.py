"""Custom exceptions for the i18n system.

Configuration mistakes are raised at the call that introduced them, backing
store failures propagate to the caller of the scan, and formatting failures
are recovered inside the renderer.
"""


class LanguageError(Exception):
    """Base exception for all i18n errors.

    Example:
        try:
            language.set_directories(paths)
        except LanguageError as e:
            logger.error("language_error", error=str(e))
    """

    pass


class ConfigurationError(LanguageError, ValueError):
    """Raised when a configuration value is rejected.

    The previous configuration stays active: nothing is partially applied.
    """

    pass


class InvalidDirectoryError(ConfigurationError):
    """Raised when a catalog directory does not resolve to an existing directory.

    Example:
        >>> language.set_directories(["/nonexistent"])
        Traceback (most recent call last):
        ...
        InvalidDirectoryError: Directory path inaccessible: /nonexistent
    """

    def __init__(self, directory: str):
        self.directory = directory
        super().__init__(f"Directory path inaccessible: {directory}")


class InvalidFallbackLevelError(ConfigurationError):
    """Raised when a value cannot be converted to a FallbackLevel.

    Example:
        >>> FallbackLevel.from_value(999)
        Traceback (most recent call last):
        ...
        InvalidFallbackLevelError: Invalid fallback level: 999
    """

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid fallback level: {value!r}")


class InvalidDateStyleError(LanguageError, ValueError):
    """Raised when a date style is not one of short, medium, long or full."""

    def __init__(self, style: str):
        self.style = style
        super().__init__(f"Invalid date style format: {style}")


class MessageFormatError(LanguageError):
    """Raised when a message template cannot be formatted.

    Covers malformed templates, missing arguments and locales the formatting
    engine does not know.
    """

    pass


class CatalogLoadError(LanguageError):
    """Raised when a catalog exists but cannot be read or parsed.

    A missing catalog is not an error: loaders return an empty mapping.
    """

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load catalog {path}: {reason}")

"""Data models for the i18n system.

Defines the fallback level enumeration, message keys, render events and the
locale helpers shared by the cache, resolver and diagnostics.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, Optional, Union

from lexis.i18n.exceptions import InvalidFallbackLevelError

# locale -> namespace -> key -> text
Lines = Dict[str, Dict[str, Dict[str, str]]]

LOCALE_SEPARATOR = "-"

RTL_LOCALES = frozenset(
    [
        "ar",
        "arc",
        "ckb",
        "dv",
        "fa",
        "ha",
        "he",
        "khw",
        "ks",
        "ps",
        "ur",
        "uz-af",
        "yi",
    ]
)


class FallbackLevel(IntEnum):
    """How many extra locales are consulted when a line is missing.

    NONE uses lines only from the requested locale. PARENT also tries the
    parent locale (pt-br -> pt); the parent must be a supported locale for
    this to find anything. DEFAULT also tries the default locale.
    """

    NONE = 0
    PARENT = 1
    DEFAULT = 2

    @classmethod
    def from_value(cls, value: Union["FallbackLevel", int, str]) -> "FallbackLevel":
        """Convert an int, a level name or a FallbackLevel to a FallbackLevel.

        Args:
            value: 0, 1, 2, "none", "parent", "default" or a FallbackLevel.

        Returns:
            Matching FallbackLevel.

        Raises:
            InvalidFallbackLevelError: If value does not name a level.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise InvalidFallbackLevelError(value)
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError as e:
                raise InvalidFallbackLevelError(value) from e
        if isinstance(value, str):
            name = value.strip()
            if name.isdigit():
                return cls.from_value(int(name))
            try:
                return cls[name.upper()]
            except KeyError as e:
                raise InvalidFallbackLevelError(value) from e
        raise InvalidFallbackLevelError(value)

    @property
    def label(self) -> str:
        """Lowercase level name (e.g., "default")."""
        return self.name.lower()


@dataclass(frozen=True)
class MessageKey:
    """A namespace and a message key.

    The namespace matches one catalog file, so "tests.hello" is the line
    "hello" of the catalog file tests.yml.

    Attributes:
        namespace: Catalog namespace (e.g., "tests").
        key: Message key inside the namespace (e.g., "hello").
    """

    namespace: str
    key: str

    def __str__(self) -> str:
        return f"{self.namespace}.{self.key}"

    @classmethod
    def from_string(cls, dotted: str) -> "MessageKey":
        """Create a MessageKey from "namespace.key".

        Only the first dot separates, so "home.menu.title" is the key
        "menu.title" of the namespace "home".

        Raises:
            ValueError: If dotted does not contain a dot.
        """
        parts = dotted.split(".", 1)
        if len(parts) != 2:
            raise ValueError(f"Message key must be in format 'namespace.key': {dotted}")
        return cls(namespace=parts[0], key=parts[1])


@dataclass(frozen=True)
class Resolution:
    """Outcome of a fallback resolution.

    Attributes:
        locale: Locale the text came from, or the last locale tried.
        text: Resolved template, None when nothing matched.
    """

    locale: str
    text: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.text is not None


@dataclass(frozen=True)
class RenderEvent:
    """Record of one render call, handed to observers.

    Attributes:
        namespace: Requested namespace.
        key: Requested key.
        requested_locale: Locale the caller asked for (or the current locale).
        locale: Locale the text was resolved from.
        message: Final rendered text (the sentinel when unresolved).
        found: Whether a template was resolved.
        start: Wall-clock time when rendering started.
        end: Wall-clock time when rendering finished.
    """

    namespace: str
    key: str
    requested_locale: str
    locale: str
    message: str
    found: bool
    start: float
    end: float

    @property
    def duration(self) -> float:
        return self.end - self.start

    def to_dict(self) -> Dict[str, Any]:
        return {
            "namespace": self.namespace,
            "key": self.key,
            "requested_locale": self.requested_locale,
            "locale": self.locale,
            "message": self.message,
            "found": self.found,
            "start": self.start,
            "end": self.end,
        }


def parent_locale(locale: str) -> Optional[str]:
    """Get the parent of a locale (e.g., "pt" from "pt-br").

    A locale has a parent only when its first separator sits after at least
    two characters, so "pt-br" has one and "x-y" does not.

    Returns:
        Parent locale, or None.
    """
    position = locale.find(LOCALE_SEPARATOR)
    if position > 1:
        return locale[:position]
    return None


def get_locale_direction(locale: str) -> str:
    """Get text directionality for a locale.

    Args:
        locale: Locale identifier; case and "_" versus "-" are ignored.

    Returns:
        "rtl" for right-to-left locales, "ltr" otherwise.
    """
    normalized = locale.lower().replace("_", LOCALE_SEPARATOR)
    if normalized in RTL_LOCALES:
        return "rtl"
    return "ltr"

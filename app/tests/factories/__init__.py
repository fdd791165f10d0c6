"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    InMemoryCatalogLoader,
    RecordingObserver,
    make_language,
    make_message_key,
    make_render_event,
    write_catalog,
)

__all__ = [
    "InMemoryCatalogLoader",
    "RecordingObserver",
    "make_language",
    "make_message_key",
    "make_render_event",
    "write_catalog",
]

"""Feature-level fixtures for i18n system tests."""

import pytest

from lexis.i18n import CatalogCache, FallbackLevel, FallbackResolver
from tests.factories.i18n import InMemoryCatalogLoader

MEMORY = "memory://"
OVERRIDES = "memory://overrides"


@pytest.fixture
def memory_loader():
    """In-memory loader with two directories.

    memory://           en/tests: bye, hello; pt/tests: hello; pt-br/tests: welcome
    memory://overrides  en/tests: bye
    """
    return InMemoryCatalogLoader(
        {
            MEMORY: {
                "en": {"tests": {"bye": "Bye!", "hello": "Hello, {0}!"}},
                "pt": {"tests": {"hello": "Olá, {0}!"}},
                "pt-br": {"tests": {"welcome": "Bem-vindo!"}},
            },
            OVERRIDES: {
                "en": {"tests": {"bye": "Hasta la vista, baby."}},
            },
        }
    )


@pytest.fixture
def cache(memory_loader):
    """CatalogCache over memory_loader, first directory only, en and pt supported."""
    cache = CatalogCache(memory_loader)
    cache.reindex([MEMORY], ["en", "pt"])
    return cache


@pytest.fixture
def fallback_state():
    """Mutable fallback level and default locale read by the resolver."""
    return {"level": FallbackLevel.DEFAULT, "default": "en"}


@pytest.fixture
def resolver(cache, fallback_state):
    """FallbackResolver reading fallback_state."""
    return FallbackResolver(
        cache,
        get_fallback_level=lambda: fallback_state["level"],
        get_default_locale=lambda: fallback_state["default"],
    )

"""Tests for lexis.i18n.registry module."""

import os

import pytest

from lexis.i18n import (
    CatalogCache,
    FallbackLevel,
    InvalidDirectoryError,
    InvalidFallbackLevelError,
    LocaleRegistry,
    YAMLCatalogLoader,
)


@pytest.fixture
def registry():
    """LocaleRegistry with "en" as default locale."""
    return LocaleRegistry(CatalogCache(YAMLCatalogLoader()), "en")


def as_directory(path):
    return str(path.resolve()) + os.sep


class TestLocales:
    """Tests for default, current and supported locales."""

    def test_initial_state(self, registry):
        """A new registry supports only its default locale."""
        assert registry.default_locale == "en"
        assert registry.current_locale == "en"
        assert registry.supported_locales == ["en"]
        assert registry.directories == []
        assert registry.fallback_level is FallbackLevel.DEFAULT

    def test_supported_locales_sorted(self, registry):
        """Supported locales are sorted and always hold the default locale."""
        registry.set_supported_locales(["pt-br", "pt"])
        assert registry.supported_locales == ["en", "pt", "pt-br"]

        registry.set_default_locale("es")
        assert registry.supported_locales == ["en", "es", "pt", "pt-br"]

        registry.set_current_locale("fr")
        assert registry.supported_locales == ["en", "es", "fr", "pt", "pt-br"]

        registry.set_supported_locales(["pt"])
        assert registry.supported_locales == ["es", "pt"]

    def test_supported_locales_unique(self, registry):
        """Duplicates are removed."""
        registry.set_supported_locales(["pt", "pt", "en"])
        assert registry.supported_locales == ["en", "pt"]

    def test_current_locale_can_be_dropped(self, registry):
        """Replacing the supported locales may drop the current locale."""
        registry.set_current_locale("pt")
        registry.set_supported_locales(["es"])
        assert registry.current_locale == "pt"
        assert not registry.is_supported("pt")

    def test_is_supported(self, registry):
        """is_supported() checks the supported locales."""
        registry.set_supported_locales(["pt"])
        assert registry.is_supported("pt")
        assert not registry.is_supported("pt-br")

    def test_supported_locales_is_a_copy(self, registry):
        """Mutating supported_locales output does not affect the registry."""
        registry.supported_locales.append("de")
        assert registry.supported_locales == ["en"]

    def test_cache_follows_supported_locales(self, registry):
        """Changing the supported locales reindexes the cache."""
        registry.set_supported_locales(["pt"])
        assert registry._cache.supported_locales == {"en", "pt"}


class TestDirectories:
    """Tests for set_directories() and add_directory()."""

    def test_normalized(self, registry, locales_1):
        """Directories are absolute and end with a separator."""
        registry.set_directories([locales_1])
        assert registry.directories == [as_directory(locales_1)]

    def test_trailing_separator(self, registry, locales_1):
        """A trailing separator does not create a duplicate."""
        registry.set_directories([str(locales_1), str(locales_1) + os.sep])
        assert registry.directories == [as_directory(locales_1)]

    def test_relative_path(self, registry, locales_1, monkeypatch):
        """Relative paths resolve against the working directory."""
        monkeypatch.chdir(locales_1.parent)
        registry.set_directories([locales_1.name])
        assert registry.directories == [as_directory(locales_1)]

    def test_order_kept(self, registry, locales_1, locales_2):
        """Directories keep their order."""
        registry.set_directories([locales_2, locales_1])
        assert registry.directories == [as_directory(locales_2), as_directory(locales_1)]

    def test_invalid_directory(self, registry, locales_1, tmp_path):
        """An invalid path is rejected and the previous directories are kept."""
        registry.set_directories([locales_1])
        with pytest.raises(InvalidDirectoryError) as exc_info:
            registry.set_directories([locales_1, tmp_path / "unknown"])
        assert "Directory path inaccessible" in str(exc_info.value)
        assert registry.directories == [as_directory(locales_1)]

    def test_file_is_not_a_directory(self, registry, locales_1):
        """A file path is rejected."""
        with pytest.raises(InvalidDirectoryError):
            registry.set_directories([locales_1 / "en" / "tests.yml"])

    @pytest.mark.parametrize("single", ["str", "path"])
    def test_single_path_rejected(self, registry, locales_1, locales_2, single):
        """A bare path instead of a list is rejected, not split up."""
        registry.set_directories([locales_1])
        directory = str(locales_2) if single == "str" else locales_2
        with pytest.raises(InvalidDirectoryError):
            registry.set_directories(directory)
        assert registry.directories == [as_directory(locales_1)]

    @pytest.mark.parametrize("empty", ["", "   "])
    def test_empty_path_rejected(self, registry, locales_1, empty, monkeypatch):
        """An empty entry is rejected, even when the working directory exists."""
        monkeypatch.chdir(locales_1)
        registry.set_directories([locales_1])
        with pytest.raises(InvalidDirectoryError):
            registry.set_directories([locales_1, empty])
        with pytest.raises(InvalidDirectoryError):
            registry.add_directory(empty)
        assert registry.directories == [as_directory(locales_1)]

    def test_add_directory_prepends(self, registry, locales_1, locales_2):
        """add_directory() puts the new directory first."""
        registry.set_directories([locales_1])
        registry.add_directory(locales_2)
        assert registry.directories == [as_directory(locales_2), as_directory(locales_1)]

    def test_add_directory_deduplicates(self, registry, locales_1):
        """Adding a known directory does not duplicate it."""
        registry.set_directories([locales_1])
        registry.add_directory(str(locales_1) + os.sep)
        assert registry.directories == [as_directory(locales_1)]

    def test_add_invalid_directory(self, registry, tmp_path):
        """add_directory() rejects invalid paths."""
        with pytest.raises(InvalidDirectoryError):
            registry.add_directory(tmp_path / "unknown")
        assert registry.directories == []

    def test_cache_follows_directories(self, registry, locales_1):
        """Changing the directories reindexes the cache."""
        registry.set_directories([locales_1])
        assert registry._cache.directories == [as_directory(locales_1)]


class TestFallbackLevel:
    """Tests for set_fallback_level()."""

    @pytest.mark.parametrize("value", [FallbackLevel.PARENT, 1, "parent"])
    def test_set(self, registry, value):
        """The level accepts levels, ints and names."""
        registry.set_fallback_level(value)
        assert registry.fallback_level is FallbackLevel.PARENT

    def test_invalid(self, registry):
        """An invalid level is rejected and the previous level is kept."""
        with pytest.raises(InvalidFallbackLevelError):
            registry.set_fallback_level(999)
        assert registry.fallback_level is FallbackLevel.DEFAULT

    def test_constructor_rejects_invalid(self):
        """An invalid level is rejected at construction."""
        with pytest.raises(InvalidFallbackLevelError):
            LocaleRegistry(CatalogCache(YAMLCatalogLoader()), "en", fallback_level="grandparent")

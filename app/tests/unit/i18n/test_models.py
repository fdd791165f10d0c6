"""Tests for lexis.i18n.models module."""

import pytest

from lexis.i18n import FallbackLevel, InvalidFallbackLevelError, MessageKey, Resolution
from lexis.i18n.models import get_locale_direction, parent_locale
from tests.factories.i18n import make_message_key, make_render_event


class TestFallbackLevel:
    """Tests for FallbackLevel enum."""

    def test_levels_are_ordered(self):
        """Levels compare by how many locales they consult."""
        assert FallbackLevel.NONE < FallbackLevel.PARENT < FallbackLevel.DEFAULT

    def test_legacy_integer_values(self):
        """Levels keep their integer values."""
        assert int(FallbackLevel.NONE) == 0
        assert int(FallbackLevel.PARENT) == 1
        assert int(FallbackLevel.DEFAULT) == 2

    @pytest.mark.parametrize(
        "value,expected",
        [
            (0, FallbackLevel.NONE),
            (1, FallbackLevel.PARENT),
            (2, FallbackLevel.DEFAULT),
            ("none", FallbackLevel.NONE),
            ("Parent", FallbackLevel.PARENT),
            ("DEFAULT", FallbackLevel.DEFAULT),
            ("2", FallbackLevel.DEFAULT),
            (FallbackLevel.PARENT, FallbackLevel.PARENT),
        ],
    )
    def test_from_value(self, value, expected):
        """from_value() accepts ints, names and levels."""
        assert FallbackLevel.from_value(value) is expected

    @pytest.mark.parametrize("value", [999, -1, "grandparent", "", None, 1.5, True])
    def test_from_value_invalid(self, value):
        """from_value() raises InvalidFallbackLevelError for other values."""
        with pytest.raises(InvalidFallbackLevelError):
            FallbackLevel.from_value(value)

    def test_invalid_level_is_value_error(self):
        """InvalidFallbackLevelError can be caught as ValueError."""
        with pytest.raises(ValueError, match="Invalid fallback level"):
            FallbackLevel.from_value(999)

    def test_label(self):
        """label is the lowercase level name."""
        assert FallbackLevel.DEFAULT.label == "default"
        assert FallbackLevel.NONE.label == "none"


class TestMessageKey:
    """Tests for MessageKey dataclass."""

    def test_str(self):
        """str() joins namespace and key with a dot."""
        assert str(make_message_key("tests", "hello")) == "tests.hello"

    def test_from_string(self):
        """from_string() splits on the first dot."""
        key = MessageKey.from_string("home.menu.title")
        assert key.namespace == "home"
        assert key.key == "menu.title"

    def test_from_string_without_dot(self):
        """from_string() raises ValueError without a dot."""
        with pytest.raises(ValueError):
            MessageKey.from_string("hello")

    def test_hashable(self):
        """MessageKey is frozen and hashable."""
        assert len({make_message_key(), make_message_key()}) == 1


class TestResolution:
    """Tests for Resolution dataclass."""

    def test_found(self):
        """found reflects whether text is set."""
        assert Resolution(locale="en", text="Bye!").found
        assert Resolution(locale="en", text="").found
        assert not Resolution(locale="en").found


class TestRenderEvent:
    """Tests for RenderEvent dataclass."""

    def test_duration(self):
        """duration is end minus start."""
        event = make_render_event(start=10.0, end=10.25)
        assert event.duration == pytest.approx(0.25)

    def test_to_dict(self):
        """to_dict() exposes every field."""
        data = make_render_event(locale="pt").to_dict()
        assert data["namespace"] == "tests"
        assert data["key"] == "hello"
        assert data["locale"] == "pt"
        assert data["requested_locale"] == "en"
        assert set(data) == {
            "namespace",
            "key",
            "requested_locale",
            "locale",
            "message",
            "found",
            "start",
            "end",
        }


class TestParentLocale:
    """Tests for parent_locale()."""

    @pytest.mark.parametrize(
        "locale,expected",
        [
            ("pt-br", "pt"),
            ("zh-hant-tw", "zh"),
            ("fil-ph", "fil"),
            ("pt", None),
            ("x-y", None),
            ("-br", None),
            ("pt_BR", None),
        ],
    )
    def test_parent_locale(self, locale, expected):
        """Parent is the part before the first dash, at least two chars long."""
        assert parent_locale(locale) == expected


class TestLocaleDirection:
    """Tests for get_locale_direction()."""

    @pytest.mark.parametrize("locale", ["ar", "he", "fa", "ur", "uz-af", "uz_AF", "UZ-AF", "yi"])
    def test_rtl(self, locale):
        """Right-to-left locales are detected whatever the case or separator."""
        assert get_locale_direction(locale) == "rtl"

    @pytest.mark.parametrize("locale", ["en", "pt-br", "uz", "ar-eg", "fr"])
    def test_ltr(self, locale):
        """Any other locale is left-to-right."""
        assert get_locale_direction(locale) == "ltr"

"""Unit tests for infrastructure.i18n.models."""

import pytest

from infrastructure.i18n import (
    Locale,
    LocaleInfo,
    PluralCategory,
    TextDirection,
    TranslationCatalog,
    TranslationKey,
)


@pytest.mark.unit
class TestLocale:
    """Test suite for the Locale enum."""

    def test_from_string(self):
        assert Locale.from_string("fr") is Locale.FR

    def test_from_string_unsupported(self):
        """Unknown codes raise ValueError."""
        with pytest.raises(ValueError, match="Unsupported locale"):
            Locale.from_string("de")

    def test_display_names_are_native(self):
        assert Locale.EN.display_name == "English"
        assert Locale.FR.display_name == "Français"
        assert Locale.AR.display_name == "العربية"

    def test_direction(self):
        """Arabic is the only right-to-left locale."""
        assert Locale.AR.direction is TextDirection.RTL
        assert Locale.AR.is_rtl
        assert Locale.EN.direction is TextDirection.LTR
        assert not Locale.FR.is_rtl

    def test_every_locale_has_a_flag(self):
        assert all(locale.flag for locale in Locale)

    @pytest.mark.parametrize(
        "locale,count,expected",
        [
            (Locale.EN, 0, PluralCategory.OTHER),
            (Locale.EN, 1, PluralCategory.ONE),
            (Locale.EN, 2, PluralCategory.OTHER),
            (Locale.FR, 0, PluralCategory.ONE),
            (Locale.FR, 1, PluralCategory.ONE),
            (Locale.FR, 2, PluralCategory.OTHER),
            (Locale.AR, 0, PluralCategory.ZERO),
            (Locale.AR, 1, PluralCategory.ONE),
            (Locale.AR, 2, PluralCategory.TWO),
            (Locale.AR, 5, PluralCategory.FEW),
            (Locale.AR, 11, PluralCategory.MANY),
            (Locale.AR, 100, PluralCategory.OTHER),
            (Locale.AR, 103, PluralCategory.FEW),
        ],
    )
    def test_plural_category(self, locale, count, expected):
        assert locale.plural_category(count) is expected


@pytest.mark.unit
class TestLocaleInfo:
    def test_from_locale(self):
        info = LocaleInfo.from_locale(Locale.AR, is_default=True)
        assert info.code == "ar"
        assert info.direction is TextDirection.RTL
        assert info.is_default


@pytest.mark.unit
class TestTranslationKey:
    """Test suite for TranslationKey."""

    def test_from_string(self):
        key = TranslationKey.from_string("dashboard.stats.occupied")
        assert key.namespace == "dashboard"
        assert key.message_key == "stats.occupied"
        assert str(key) == "dashboard.stats.occupied"

    @pytest.mark.parametrize("value", ["dashboard", ".title", "dashboard.", ""])
    def test_from_string_invalid(self, value):
        """Keys need both a namespace and a message key."""
        with pytest.raises(ValueError):
            TranslationKey.from_string(value)

    def test_hashable(self):
        assert len({TranslationKey("a", "b"), TranslationKey("a", "b")}) == 1


@pytest.mark.unit
class TestTranslationCatalog:
    """Test suite for TranslationCatalog."""

    def test_set_and_get_nested_message(self):
        catalog = TranslationCatalog(locale=Locale.FR)
        key = TranslationKey.from_string("dashboard.stats.occupied")
        catalog.set_message(key, "Occupé")
        assert catalog.get_message(key) == "Occupé"
        assert catalog.messages == {"dashboard": {"stats": {"occupied": "Occupé"}}}

    def test_missing_message(self):
        catalog = TranslationCatalog(locale=Locale.EN, messages={"dashboard": {"title": "x"}})
        assert catalog.get_message(TranslationKey("dashboard", "missing")) is None
        assert catalog.get_message(TranslationKey("units", "title")) is None
        assert not catalog.has_message(TranslationKey("dashboard", "title.deeper"))

    def test_group_is_not_a_message(self):
        """A nested group is not returned as a message."""
        catalog = TranslationCatalog(locale=Locale.EN, messages={"d": {"stats": {"a": "A"}}})
        assert catalog.get_message(TranslationKey("d", "stats")) is None

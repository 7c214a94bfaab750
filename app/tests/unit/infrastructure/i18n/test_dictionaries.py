"""Unit tests for infrastructure.i18n.dictionaries."""

import pytest

from infrastructure.i18n.dictionaries import (
    compare_dictionaries,
    get_nested_value,
    get_translation_keys,
    merge_dictionaries,
    validate_dictionary,
)

BASE = {
    "dashboard": {"title": "Dashboard", "stats": {"occupied": "Occupied", "vacant": "Vacant"}},
    "common": {"save": "Save"},
}


@pytest.mark.unit
class TestDictionaryHelpers:
    """Test suite for dictionary helpers."""

    def test_get_nested_value(self):
        assert get_nested_value(BASE, "dashboard.stats.vacant") == "Vacant"
        assert get_nested_value(BASE, "dashboard.stats.missing") is None
        assert get_nested_value(BASE, "common.save.deeper") is None

    def test_get_translation_keys(self):
        assert get_translation_keys(BASE) == [
            "dashboard.title",
            "dashboard.stats.occupied",
            "dashboard.stats.vacant",
            "common.save",
        ]

    def test_validate_dictionary(self):
        missing = validate_dictionary(BASE, ["dashboard.title", "units.title"])
        assert missing == ["units.title"]

    def test_compare_dictionaries(self):
        target = {"dashboard": {"title": "Tableau de bord", "extra": "x"}, "common": {"save": "Enregistrer"}}
        result = compare_dictionaries(BASE, target)
        assert result["missing"] == ["dashboard.stats.occupied", "dashboard.stats.vacant"]
        assert result["extra"] == ["dashboard.extra"]

    def test_merge_dictionaries_is_deep_and_pure(self):
        override = {"dashboard": {"stats": {"occupied": "Occupé"}}}
        merged = merge_dictionaries(BASE, override)
        assert merged["dashboard"]["stats"] == {"occupied": "Occupé", "vacant": "Vacant"}
        assert merged["dashboard"]["title"] == "Dashboard"
        assert BASE["dashboard"]["stats"]["occupied"] == "Occupied"
        assert override == {"dashboard": {"stats": {"occupied": "Occupé"}}}

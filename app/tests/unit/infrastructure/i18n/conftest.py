"""Feature-level fixtures for i18n system tests."""

import pytest
import yaml

from infrastructure.i18n import Locale, Translator, YAMLTranslationLoader


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample YAML translation files.

    Returns a directory structure like:
    - dashboard.en.yml / dashboard.fr.yml / dashboard.ar.yml
    - units.en.yml / units.fr.yml (no Arabic units file)
    """
    files = {
        "dashboard.en.yml": {
            "dashboard": {
                "title": "Dashboard",
                "welcome": "Welcome, {{name}}!",
                "stats": {"occupied": "Occupied", "vacant": "Vacant"},
            }
        },
        "dashboard.fr.yml": {
            "dashboard": {
                "title": "Tableau de bord",
                "welcome": "Bienvenue, {{name}} !",
                "stats": {"occupied": "Occupé"},
            }
        },
        "dashboard.ar.yml": {
            "dashboard": {"title": "لوحة التحكم"},
        },
        "units.en.yml": {
            "units": {"count": "{count} unit | {count} units"},
        },
        "units.fr.yml": {
            "units": {"count": "{count} logement | {count} logements"},
        },
    }
    for name, data in files.items():
        with open(tmp_path / name, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, allow_unicode=True)
    return tmp_path


@pytest.fixture
def yaml_loader(temp_translations_dir):
    """Create YAMLTranslationLoader for temporary translations directory."""
    return YAMLTranslationLoader(temp_translations_dir, use_cache=False)


@pytest.fixture
def yaml_loader_with_cache(temp_translations_dir):
    """Create YAMLTranslationLoader with caching enabled."""
    return YAMLTranslationLoader(temp_translations_dir, use_cache=True)


@pytest.fixture
def translator(yaml_loader):
    """Translator with every sample locale loaded and English fallback."""
    translator = Translator(loader=yaml_loader, fallback_locale=Locale.EN)
    translator.load_all()
    return translator

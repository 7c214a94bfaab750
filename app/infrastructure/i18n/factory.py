"""Builders that turn I18nSettings into i18n components."""

from pathlib import Path
from typing import Optional, Sequence

from infrastructure.i18n.loader import YAMLTranslationLoader
from infrastructure.i18n.models import Locale
from infrastructure.i18n.registry import LocaleRegistry
from infrastructure.i18n.resolvers import LocaleResolver
from infrastructure.i18n.translator import Translator
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def default_translations_dir() -> Path:
    """The bundled `app/locales` directory (two levels above this package)."""
    return Path(__file__).resolve().parents[2] / "locales"


def create_registry(i18n_settings) -> LocaleRegistry:
    registry = LocaleRegistry.from_codes(
        i18n_settings.supported_locales, i18n_settings.DEFAULT_LOCALE
    )
    logger.info(
        "locale_registry_created",
        locales=list(registry.codes),
        default_locale=registry.default.value,
    )
    return registry


def create_resolver(registry: LocaleRegistry) -> LocaleResolver:
    return LocaleResolver(registry)


def create_translator(
    translations_dir: Optional[Path] = None,
    fallback_locale: Locale = Locale.EN,
    locales: Optional[Sequence[Locale]] = None,
    use_cache: bool = True,
    preload: bool = True,
) -> Translator:
    """Translator over a directory of YAML catalogs.

    Args:
        translations_dir: Catalog directory; the bundled one when omitted.
        fallback_locale: Locale consulted when a key is missing.
        locales: Locales to serve (default: all known locales).
        use_cache: Keep parsed catalogs in memory.
        preload: Load every served locale now rather than on first use.

    Raises:
        ValueError: If the directory does not exist, or preloading finds no
            catalog at all.

    Example:
        translator = create_translator(preload=False)
        translator.load_locale(Locale.FR)
    """
    directory = translations_dir or default_translations_dir()
    translator = Translator(
        loader=YAMLTranslationLoader(directory, use_cache=use_cache, locales=locales),
        fallback_locale=fallback_locale,
    )
    if preload:
        translator.load_all()

    logger.info(
        "translator_created",
        translations_dir=str(directory),
        preloaded=preload,
        locales=[locale.value for locale in translator.get_available_locales()],
    )
    return translator

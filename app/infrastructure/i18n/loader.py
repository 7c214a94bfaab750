"""Translation sources.

`TranslationLoader` is the contract the translator depends on;
`YAMLTranslationLoader` reads the bundled `<namespace>.<code>.yml` files.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

import yaml

from infrastructure.i18n.dictionaries import merge_dictionaries
from infrastructure.i18n.models import Locale, TranslationCatalog
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class TranslationLoader(ABC):
    """Source of translation catalogs."""

    @abstractmethod
    def load(self, locale: Locale) -> TranslationCatalog:
        """Return the catalog for one locale.

        Raises:
            FileNotFoundError: If the locale has no translations.
            ValueError: If the translations cannot be parsed.
        """

    @abstractmethod
    def load_all(self) -> Dict[Locale, TranslationCatalog]:
        """Return a catalog for every locale this loader can serve."""


class YAMLTranslationLoader(TranslationLoader):
    """Catalogs read from a directory of YAML files.

    Files are named `<namespace>.<code>.yml` (`dashboard.fr.yml`,
    `team.ar.yml`). Each holds one or more top-level namespaces, and all files
    of a locale are deep-merged into a single catalog.

    Attributes:
        translations_dir: Directory holding the YAML files.
        use_cache: Whether parsed catalogs are kept in memory.
        locales: Locales served; files for other codes are never read.
        cache: Parsed catalogs by locale.
    """

    def __init__(
        self,
        translations_dir: Path,
        use_cache: bool = True,
        locales: Optional[Iterable[Locale]] = None,
    ):
        """Create a loader for a translations directory.

        Args:
            translations_dir: Directory with `<namespace>.<code>.yml` files.
            use_cache: Keep parsed catalogs in memory.
            locales: Locales to serve (default: every known locale).

        Raises:
            ValueError: If `translations_dir` is not a directory.
        """
        self.translations_dir = Path(translations_dir)
        if not self.translations_dir.is_dir():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        self.use_cache = use_cache
        self.locales = tuple(Locale) if locales is None else tuple(locales)
        self.cache: Dict[Locale, TranslationCatalog] = {}

        logger.info(
            "translation_loader_ready",
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
            locales=[locale.value for locale in self.locales],
        )

    def files_for(self, locale: Locale) -> list[Path]:
        """YAML files of a locale, in a stable order."""
        return sorted(self.translations_dir.glob(f"*.{locale.value}.yml"))

    def load(self, locale: Locale) -> TranslationCatalog:
        """Parse and merge every file of `locale`.

        Args:
            locale: Locale to load.

        Returns:
            TranslationCatalog stamped with its load time.

        Raises:
            FileNotFoundError: If there is no `*.<code>.yml` file.
            ValueError: If a file is not valid YAML.
        """
        cached = self.cache.get(locale) if self.use_cache else None
        if cached is not None:
            return cached

        files = self.files_for(locale)
        if not files:
            raise FileNotFoundError(
                f"No translation files found for locale {locale.value} in {self.translations_dir}"
            )

        catalog = TranslationCatalog(locale=locale)
        for path in files:
            self._merge_namespaces(catalog, self._read(path), path)
        catalog.loaded_at = datetime.now(timezone.utc).isoformat()

        logger.info(
            "translations_loaded",
            locale=locale.value,
            file_count=len(files),
            namespaces=sorted(catalog.messages),
        )
        if self.use_cache:
            self.cache[locale] = catalog
        return catalog

    def load_all(self) -> Dict[Locale, TranslationCatalog]:
        """Load every served locale that has files.

        Locales without files are skipped with a warning; the translator
        falls back to its default locale for them.

        Raises:
            ValueError: If no served locale has any file.
        """
        catalogs: Dict[Locale, TranslationCatalog] = {}
        for locale in self.locales:
            try:
                catalogs[locale] = self.load(locale)
            except FileNotFoundError:
                logger.warning("locale_without_translations", locale=locale.value)

        if not catalogs:
            raise ValueError(f"No translation files found in {self.translations_dir}")
        return catalogs

    def clear_cache(self) -> None:
        self.cache.clear()
        logger.info("translation_cache_cleared")

    def _read(self, path: Path) -> Any:
        try:
            with open(path, "r", encoding="utf-8") as f:
                return yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error("translation_file_invalid", file=str(path), error=str(e))
            raise ValueError(f"Failed to parse {path}: {e}") from e

    def _merge_namespaces(
        self, catalog: TranslationCatalog, data: Any, path: Path
    ) -> None:
        # Top level maps namespace -> nested messages; anything else is skipped.
        if not data:
            return
        if not isinstance(data, dict):
            logger.warning("translation_file_not_a_mapping", file=str(path))
            return

        for namespace, messages in data.items():
            if not isinstance(messages, dict):
                logger.warning(
                    "translation_namespace_skipped",
                    namespace=namespace,
                    file=str(path),
                )
                continue
            catalog.messages[namespace] = merge_dictionaries(
                catalog.messages.get(namespace, {}), messages
            )

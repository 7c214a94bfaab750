"""Message lookup with locale fallback, plural variants and interpolation."""

import re
from typing import Any, Dict, Optional

from infrastructure.i18n.dictionaries import Dictionary, merge_dictionaries
from infrastructure.i18n.loader import TranslationLoader
from infrastructure.i18n.models import (
    Locale,
    PluralCategory,
    TranslationCatalog,
    TranslationKey,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()

# "{count} unit | {count} units": singular first, plural second.
PLURAL_SEPARATOR = " | "

# Both "{{name}}" and "{name}" are accepted in catalogs.
_PLACEHOLDER = re.compile(r"\{\{(\w+)\}\}|\{(\w+)\}")


class Translator:
    """Catalogs of every loaded locale plus a fallback locale.

    A key missing from the requested locale is looked up in
    `fallback_locale`; plural rules still follow the requested locale.

    Attributes:
        loader: Source of catalogs.
        fallback_locale: Locale consulted for missing keys.
        catalogs: Loaded catalogs by locale.
    """

    def __init__(self, loader: TranslationLoader, fallback_locale: Locale = Locale.EN):
        self.loader = loader
        self.fallback_locale = fallback_locale
        self.catalogs: Dict[Locale, TranslationCatalog] = {}

    def load_all(self) -> None:
        self.catalogs = self.loader.load_all()
        logger.info(
            "translations_ready",
            locales=[locale.value for locale in self.catalogs],
            fallback_locale=self.fallback_locale.value,
        )

    def load_locale(self, locale: Locale) -> None:
        """Load one locale on demand.

        Raises:
            FileNotFoundError: If the locale has no catalog files.
        """
        self.catalogs[locale] = self.loader.load(locale)

    def reload(self) -> None:
        self.catalogs.clear()
        self.load_all()

    def get_catalog(self, locale: Locale) -> Optional[TranslationCatalog]:
        return self.catalogs.get(locale)

    def get_available_locales(self) -> list[Locale]:
        return list(self.catalogs)

    def has_message(self, key: TranslationKey, locale: Locale) -> bool:
        """True only when `locale` itself (not the fallback) has the key."""
        catalog = self.catalogs.get(locale)
        return catalog is not None and catalog.has_message(key)

    def translate_message(
        self,
        key: TranslationKey,
        locale: Locale,
        variables: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Translated, pluralized and interpolated message.

        When `variables` holds an integer `count` and the message has
        " | " separated variants, the first variant serves the zero and one
        plural categories of `locale` and the second serves the rest.

        Raises:
            KeyError: If neither `locale` nor the fallback locale has the key.
            ValueError: If a placeholder has no matching variable.
        """
        variables = variables or {}
        message = self._lookup(key, locale)
        if message is None:
            logger.error("translation_not_found", key=str(key), locale=locale.value)
            raise KeyError(
                f"Translation not found for key {key} in {locale.value} "
                f"or fallback {self.fallback_locale.value}"
            )

        count = variables.get("count")
        if isinstance(count, int) and PLURAL_SEPARATOR in message:
            message = self._select_plural(message, locale, count)
        return self._interpolate(message, variables)

    def get_dictionary(self, locale: Locale) -> Dictionary:
        """Every message of `locale`, missing keys taken from the fallback.

        The result is a fresh nested dict; callers may mutate it.
        """
        fallback = self.catalogs.get(self.fallback_locale)
        table = merge_dictionaries({}, fallback.messages if fallback else {})
        requested = self.catalogs.get(locale)
        if requested is not None and locale != self.fallback_locale:
            table = merge_dictionaries(table, requested.messages)
        return table

    def _lookup(self, key: TranslationKey, locale: Locale) -> Optional[str]:
        catalog = self.catalogs.get(locale)
        message = catalog.get_message(key) if catalog else None
        if message or locale == self.fallback_locale:
            return message or None

        fallback = self.catalogs.get(self.fallback_locale)
        message = fallback.get_message(key) if fallback else None
        if message:
            logger.debug(
                "translation_fallback_used",
                key=str(key),
                locale=locale.value,
                fallback_locale=self.fallback_locale.value,
            )
        return message or None

    @staticmethod
    def _select_plural(message: str, locale: Locale, count: int) -> str:
        singular, _, rest = message.partition(PLURAL_SEPARATOR)
        if locale.plural_category(count) in (PluralCategory.ZERO, PluralCategory.ONE):
            return singular
        return rest.split(PLURAL_SEPARATOR)[0]

    @staticmethod
    def _interpolate(message: str, variables: Dict[str, Any]) -> str:
        def replace(match: re.Match) -> str:
            name = match.group(1) or match.group(2)
            if name not in variables:
                logger.error(
                    "missing_interpolation_variable",
                    variable=name,
                    available_variables=sorted(variables),
                )
                raise ValueError(f"Missing interpolation variable: {name}")
            return str(variables[name])

        return _PLACEHOLDER.sub(replace, message)

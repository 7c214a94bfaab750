"""Translation lookups for page handlers and the locales API."""

from typing import Any, Optional

from infrastructure.i18n.dictionaries import Dictionary
from infrastructure.i18n.factory import create_translator
from infrastructure.i18n.models import Locale, TranslationKey
from infrastructure.i18n.translator import Translator


class TranslationService:
    """Injectable front for a preloaded Translator.

    Handlers receive it through `TranslationServiceDep`; tests pass their own
    Translator built over a temporary directory.

    Example:
        @router.get("/{locale}/dashboard")
        def dashboard(locale: str, translations: TranslationServiceDep):
            title = translations.t("dashboard.title", Locale(locale))
    """

    def __init__(self, translator: Optional[Translator] = None):
        self._translator = translator if translator is not None else create_translator()

    @property
    def translator(self) -> Translator:
        return self._translator

    def translate(
        self,
        key: TranslationKey,
        locale: Locale,
        variables: Optional[dict[str, Any]] = None,
    ) -> str:
        """Strict lookup; raises KeyError when neither locale has the key."""
        return self._translator.translate_message(key, locale, variables)

    def t(self, key: str, locale: Locale, **variables: Any) -> str:
        """Lenient lookup by dotted key for rendering.

        A missing key renders as the key itself instead of failing the page.
        """
        try:
            return self.translate(TranslationKey.from_string(key), locale, variables)
        except KeyError:
            return key

    def has_message(self, key: TranslationKey, locale: Locale) -> bool:
        return self._translator.has_message(key, locale)

    def get_dictionary(self, locale: Locale) -> Dictionary:
        """Full message table of `locale`, gaps filled from the fallback locale."""
        return self._translator.get_dictionary(locale)

    def get_available_locales(self) -> list[Locale]:
        return self._translator.get_available_locales()

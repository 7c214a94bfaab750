"""Locale and translation data types."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, NamedTuple, Optional


class TextDirection(str, Enum):
    LTR = "ltr"
    RTL = "rtl"


class PluralCategory(str, Enum):
    """CLDR plural categories."""

    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"


class _Meta(NamedTuple):
    display_name: str
    flag: str
    direction: TextDirection


_META = {
    "en": _Meta("English", "🇺🇸", TextDirection.LTR),
    "fr": _Meta("Français", "🇫🇷", TextDirection.LTR),
    "ar": _Meta("العربية", "🇲🇦", TextDirection.RTL),
}


class Locale(str, Enum):
    """Locales the application can serve.

    The value is the ISO 639-1 code, which is also the first URL segment of
    a localized page (`/fr/dashboard`).
    """

    EN = "en"
    FR = "fr"
    AR = "ar"

    @classmethod
    def from_string(cls, locale_str: str) -> "Locale":
        """Locale for a code.

        Raises:
            ValueError: If the code is not a known locale.
        """
        try:
            return cls(locale_str)
        except ValueError as e:
            raise ValueError(f"Unsupported locale: {locale_str}") from e

    @property
    def display_name(self) -> str:
        """Native name ("Français", "العربية")."""
        return _META[self.value].display_name

    @property
    def flag(self) -> str:
        return _META[self.value].flag

    @property
    def direction(self) -> TextDirection:
        return _META[self.value].direction

    @property
    def is_rtl(self) -> bool:
        return self.direction is TextDirection.RTL

    def plural_category(self, count: int) -> PluralCategory:
        """CLDR plural category of an integer count in this locale."""
        n = abs(count)
        if self is Locale.AR:
            return _arabic_plural(n)
        if n == 1 or (n == 0 and self is Locale.FR):
            return PluralCategory.ONE
        return PluralCategory.OTHER


def _arabic_plural(n: int) -> PluralCategory:
    if n in (0, 1, 2):
        return (PluralCategory.ZERO, PluralCategory.ONE, PluralCategory.TWO)[n]
    if 3 <= n % 100 <= 10:
        return PluralCategory.FEW
    if 11 <= n % 100 <= 99:
        return PluralCategory.MANY
    return PluralCategory.OTHER


@dataclass(frozen=True)
class LocaleInfo:
    """Locale as listed to clients and language switchers."""

    code: str
    display_name: str
    flag: str
    direction: TextDirection
    is_default: bool = False

    @classmethod
    def from_locale(cls, locale: Locale, is_default: bool = False) -> "LocaleInfo":
        return cls(
            code=locale.value,
            display_name=locale.display_name,
            flag=locale.flag,
            direction=locale.direction,
            is_default=is_default,
        )


@dataclass(frozen=True)
class TranslationKey:
    """Dotted message key split at its first dot.

    "dashboard.stats.occupied" has namespace "dashboard" and message key
    "stats.occupied"; the remaining dots walk nested groups.
    """

    namespace: str
    message_key: str

    def __str__(self) -> str:
        return f"{self.namespace}.{self.message_key}"

    @classmethod
    def from_string(cls, key_string: str) -> "TranslationKey":
        """Parse "namespace.key".

        Raises:
            ValueError: If either part is missing or empty.
        """
        namespace, _, message_key = key_string.partition(".")
        if not namespace or not message_key:
            raise ValueError(
                f"Translation key must be in format 'namespace.key': {key_string}"
            )
        return cls(namespace=namespace, message_key=message_key)


@dataclass
class TranslationCatalog:
    """Messages of one locale, grouped by namespace.

    Attributes:
        locale: Locale of every message in the catalog.
        messages: {namespace: nested groups of message strings}.
        loaded_at: ISO 8601 time the catalog was read, if loaded from files.
    """

    locale: Locale
    messages: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    loaded_at: Optional[str] = None

    def get_message(self, key: TranslationKey) -> Optional[str]:
        """Message string for `key`; None when absent or when `key` names a group."""
        node: Any = self.messages.get(key.namespace)
        for part in key.message_key.split("."):
            if not isinstance(node, dict):
                return None
            node = node.get(part)
        return node if isinstance(node, str) else None

    def set_message(self, key: TranslationKey, message: str) -> None:
        node = self.messages.setdefault(key.namespace, {})
        *groups, leaf = key.message_key.split(".")
        for group in groups:
            node = node.setdefault(group, {})
        node[leaf] = message

    def has_message(self, key: TranslationKey) -> bool:
        return self.get_message(key) is not None

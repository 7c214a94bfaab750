"""Locale segment handling for URL paths.

Localized pages live under a leading locale segment (/fr/units/42). These
helpers add and remove that segment without touching the rest of the path.
"""

from typing import NamedTuple, Optional

from infrastructure.i18n.models import Locale
from infrastructure.i18n.registry import LocaleRegistry


class StrippedPath(NamedTuple):
    """Result of removing a locale segment from a path.

    Attributes:
        locale: Locale named by the first segment, or None if it named none.
        rest: Remaining path, always starting with "/".
    """

    locale: Optional[Locale]
    rest: str


def _first_segment(path: str) -> tuple[str, str]:
    # "/fr/units/1" -> ("fr", "/units/1"); "/fr" -> ("fr", "/")
    trimmed = path[1:] if path.startswith("/") else path
    segment, sep, remainder = trimmed.partition("/")
    return segment, "/" + remainder if sep else "/"


def strip_locale(path: str, registry: LocaleRegistry) -> StrippedPath:
    """Remove a leading locale segment from a path.

    Args:
        path: Request path (e.g., "/en/dashboard").
        registry: Registry of supported locales.

    Returns:
        StrippedPath with the matched locale and the remainder, or
        StrippedPath(None, path) with the original path when the first
        segment is not a supported code.
    """
    segment, remainder = _first_segment(path)
    locale = registry.get(segment)
    if locale is None:
        return StrippedPath(None, path)
    return StrippedPath(locale, remainder)


def add_locale(path: str, locale: Locale, registry: LocaleRegistry) -> str:
    """Prefix a path with a locale segment.

    A path already prefixed with `locale` is returned unchanged. A path
    prefixed with a different supported locale has that segment replaced, so
    the result never carries two locale segments.

    Args:
        path: Path to localize (e.g., "/dashboard").
        locale: Locale to prefix with.
        registry: Registry of supported locales.

    Returns:
        Locale-prefixed path (e.g., "/fr/dashboard"). The bare root "/"
        becomes "/fr".
    """
    if not path.startswith("/"):
        path = "/" + path
    current, rest = strip_locale(path, registry)
    if current is locale:
        return path
    if rest == "/":
        return f"/{locale.value}"
    return f"/{locale.value}{rest}"


def has_locale_prefix(path: str, registry: LocaleRegistry) -> bool:
    return strip_locale(path, registry).locale is not None


def switch_locale_path(path: str, locale: Locale, registry: LocaleRegistry) -> str:
    """Path of the same page in another locale, for language switchers."""
    _, rest = strip_locale(path, registry)
    return add_locale(rest, locale, registry)

"""Locale resolution logic for determining user's preferred language.

Resolves the effective locale for a request from, in order of precedence,
the URL path, the locale cookie, the Accept-Language header and the registry
default. Each source is a separate rule so precedence can be read and tested
rule by rule.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

import structlog
from infrastructure.i18n.models import Locale
from infrastructure.i18n.paths import strip_locale
from infrastructure.i18n.registry import LocaleRegistry

logger = structlog.get_logger().bind(component="i18n.resolver")


class ResolutionSource(str, Enum):
    """Where a resolved locale came from."""

    PATH = "path"
    COOKIE = "cookie"
    HEADER = "header"
    DEFAULT = "default"


@dataclass(frozen=True)
class LocaleResolution:
    """Tagged result of locale resolution.

    Attributes:
        locale: The effective locale.
        source: Which rule produced it.
    """

    locale: Locale
    source: ResolutionSource

    @property
    def code(self) -> str:
        return self.locale.value


@dataclass(frozen=True)
class ResolutionInput:
    """Request values consulted by the resolution rules."""

    path: Optional[str] = None
    cookie_value: Optional[str] = None
    accept_language: Optional[str] = None


def parse_accept_language(header: Optional[str]) -> list[tuple[str, float]]:
    """Parse an Accept-Language header into (tag, quality) pairs.

    Parses "de-DE,fr;q=0.8" into [("de-de", 1.0), ("fr", 0.8)], ordered by
    descending quality. Entries with the same quality keep header order.
    Wildcards, entries with q=0 and entries with a malformed quality are
    dropped.

    Args:
        header: Raw Accept-Language header value.

    Returns:
        List of lower-cased language tags with their quality.
    """
    if not header:
        return []

    preferences = []
    for part in header.split(","):
        lang_range, *params = [piece.strip() for piece in part.split(";")]
        if not lang_range or lang_range == "*":
            continue

        quality = 1.0
        malformed = False
        for param in params:
            name, _, value = param.partition("=")
            if name.strip().lower() != "q":
                continue
            try:
                quality = float(value.strip())
            except ValueError:
                malformed = True
                break
            if not 0.0 <= quality <= 1.0:
                malformed = True
                break

        if malformed or quality == 0.0:
            continue
        preferences.append((lang_range.lower(), quality))

    # sorted() is stable, so equal qualities keep header order
    return sorted(preferences, key=lambda pref: pref[1], reverse=True)


class LocaleResolver:
    """Resolves the request locale from path, cookie, header and default.

    Implements the fallback chain:
    1. Locale segment at the start of the request path
    2. Locale cookie, when it names a supported locale
    3. Accept-Language header, highest quality supported tag first
    4. Registry default locale

    Resolution is total: unsupported or malformed values fall through to the
    next rule and the default always matches.
    """

    def __init__(self, registry: LocaleRegistry):
        """Initialize locale resolver.

        Args:
            registry: Registry of supported locales and the default.
        """
        self.registry = registry
        self.log = logger.bind(default_locale=registry.default.value)
        self.rules: list[
            tuple[ResolutionSource, Callable[[ResolutionInput], Optional[Locale]]]
        ] = [
            (ResolutionSource.PATH, self._from_path),
            (ResolutionSource.COOKIE, self._from_cookie),
            (ResolutionSource.HEADER, self._from_header),
        ]

    def resolve(
        self,
        path: Optional[str] = None,
        cookie_value: Optional[str] = None,
        accept_language: Optional[str] = None,
    ) -> LocaleResolution:
        """Resolve the effective locale for a request.

        Args:
            path: Request path (e.g., "/fr/units").
            cookie_value: Value of the locale cookie, if any.
            accept_language: Accept-Language header value, if any.

        Returns:
            LocaleResolution with the locale and the rule that produced it.
        """
        request_input = ResolutionInput(
            path=path,
            cookie_value=cookie_value,
            accept_language=accept_language,
        )
        for source, rule in self.rules:
            locale = rule(request_input)
            if locale is not None:
                return LocaleResolution(locale=locale, source=source)
        return LocaleResolution(
            locale=self.registry.default, source=ResolutionSource.DEFAULT
        )

    def resolve_from_header(self, accept_language: Optional[str]) -> Locale:
        """Resolve locale from HTTP Accept-Language header alone.

        Args:
            accept_language: Accept-Language header value.

        Returns:
            First supported locale in preference order, or the default.
        """
        locale = self._from_header(ResolutionInput(accept_language=accept_language))
        if locale is None:
            self.log.debug("no_matching_locale_in_header")
            return self.registry.default
        return locale

    def _from_path(self, request_input: ResolutionInput) -> Optional[Locale]:
        if not request_input.path:
            return None
        return strip_locale(request_input.path, self.registry).locale

    def _from_cookie(self, request_input: ResolutionInput) -> Optional[Locale]:
        locale = self.registry.get(request_input.cookie_value)
        if request_input.cookie_value and locale is None:
            log = self.log.bind(stored_locale=request_input.cookie_value)
            log.debug("unsupported_stored_locale_ignored")
        return locale

    def _from_header(self, request_input: ResolutionInput) -> Optional[Locale]:
        for lang_range, _ in parse_accept_language(request_input.accept_language):
            # Try exact match, then language-only match ("fr-ca" -> "fr")
            locale = self.registry.get(lang_range) or self.registry.get(
                lang_range.split("-")[0]
            )
            if locale is not None:
                return locale
        return None

"""Request classification and locale routing decisions.

Pure functions: given the request path, query string, stored locale cookie and
Accept-Language header, decide whether a request passes through untouched, is
redirected to a locale-prefixed URL, or is served with its path locale. The
HTTP middleware applies the decision; nothing here touches a request object.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import PurePosixPath
from typing import Iterable, Optional, Union
from urllib.parse import quote

from infrastructure.i18n.models import Locale
from infrastructure.i18n.paths import add_locale, strip_locale
from infrastructure.i18n.registry import LocaleRegistry
from infrastructure.i18n.resolvers import LocaleResolution, LocaleResolver


class RouteClassification(str, Enum):
    """Kind of request, derived from its path."""

    API = "api"
    STATIC_ASSET = "static_asset"
    AUTH_PAGE = "auth_page"
    LOCALIZED_PAGE = "localized_page"

    @property
    def is_excluded(self) -> bool:
        """Whether locale handling is skipped for this kind of request."""
        return self is not RouteClassification.LOCALIZED_PAGE


@dataclass(frozen=True)
class RouteRules:
    """Path prefixes that exclude a request from locale handling.

    Attributes:
        api_prefixes: API and system endpoint prefixes.
        static_prefixes: Static asset prefixes.
        auth_prefixes: Sign-in and sign-up page prefixes.
    """

    api_prefixes: tuple[str, ...] = ("/api/", "/health", "/version", "/docs", "/redoc")
    static_prefixes: tuple[str, ...] = ("/static/", "/_assets/")
    auth_prefixes: tuple[str, ...] = ("/login", "/signup", "/auth/")

    @classmethod
    def from_settings(cls, i18n_settings) -> "RouteRules":
        return cls(
            api_prefixes=i18n_settings.api_prefixes,
            static_prefixes=i18n_settings.static_prefixes,
            auth_prefixes=i18n_settings.auth_prefixes,
        )


# RFC 3986 path characters left as-is when the decoded path is re-encoded;
# "%", "?" and "#" are escaped.
PATH_SAFE = "/:@!$&'()*+,;=-._~"


def _matches_prefix(path: str, prefixes: Iterable[str]) -> bool:
    # "/health" covers "/health" and "/health/live", not "/healthy-homes".
    for prefix in prefixes:
        if prefix.endswith("/"):
            if path.startswith(prefix):
                return True
        elif path == prefix or path.startswith(prefix + "/"):
            return True
    return False


def classify_route(path: str, rules: RouteRules = RouteRules()) -> RouteClassification:
    """Classify a request path.

    Args:
        path: Request path.
        rules: Exclusion prefixes.

    Returns:
        Exactly one RouteClassification. API wins over static assets, which
        win over auth pages; everything else is a localized page.
    """
    if _matches_prefix(path, rules.api_prefixes):
        return RouteClassification.API
    if (
        _matches_prefix(path, rules.static_prefixes)
        or path == "/favicon.ico"
        or PurePosixPath(path).suffix
    ):
        return RouteClassification.STATIC_ASSET
    if _matches_prefix(path, rules.auth_prefixes):
        return RouteClassification.AUTH_PAGE
    return RouteClassification.LOCALIZED_PAGE


@dataclass(frozen=True)
class Excluded:
    """Request bypasses locale handling."""

    classification: RouteClassification
    resolution: LocaleResolution


@dataclass(frozen=True)
class RedirectToLocale:
    """Unprefixed page: redirect to `location` and store `locale`."""

    location: str
    resolution: LocaleResolution

    @property
    def locale(self) -> Locale:
        return self.resolution.locale


@dataclass(frozen=True)
class PassThrough:
    """Prefixed page: serve it; write the cookie when `set_cookie` is true."""

    locale: Locale
    set_cookie: bool


RoutingDecision = Union[Excluded, RedirectToLocale, PassThrough]


def decide_route(
    path: str,
    query: str,
    cookie_value: Optional[str],
    accept_language: Optional[str],
    resolver: LocaleResolver,
    rules: RouteRules = RouteRules(),
) -> RoutingDecision:
    """Decide how the locale router handles a request.

    Args:
        path: Decoded request path; the redirect location re-encodes it.
        query: Raw query string, without the leading "?".
        cookie_value: Stored locale cookie value, if any.
        accept_language: Accept-Language header value, if any.
        resolver: Locale resolver bound to the registry.
        rules: Exclusion prefixes.

    Returns:
        Excluded, RedirectToLocale or PassThrough.
    """
    registry: LocaleRegistry = resolver.registry
    classification = classify_route(path, rules)
    if classification.is_excluded:
        # Excluded requests still get a locale for error pages and templates,
        # but the path never contributes to it.
        resolution = resolver.resolve(None, cookie_value, accept_language)
        return Excluded(classification=classification, resolution=resolution)

    path_locale = strip_locale(path, registry).locale
    if path_locale is None:
        resolution = resolver.resolve(path, cookie_value, accept_language)
        location = quote(add_locale(path, resolution.locale, registry), safe=PATH_SAFE)
        if query:
            location = f"{location}?{query}"
        return RedirectToLocale(location=location, resolution=resolution)

    return PassThrough(locale=path_locale, set_cookie=cookie_value != path_locale.value)

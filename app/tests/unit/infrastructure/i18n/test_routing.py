"""Unit tests for infrastructure.i18n.routing (pure routing decisions)."""

import pytest

from infrastructure.i18n import (
    Excluded,
    Locale,
    PassThrough,
    RedirectToLocale,
    ResolutionSource,
    RouteClassification,
    RouteRules,
    classify_route,
    decide_route,
    strip_locale,
)


@pytest.mark.unit
class TestClassifyRoute:
    """Test suite for classify_route."""

    @pytest.mark.parametrize(
        "path",
        ["/api/units/123", "/api/v1/locales", "/health", "/version", "/docs", "/redoc"],
    )
    def test_api(self, path):
        assert classify_route(path) is RouteClassification.API

    @pytest.mark.parametrize(
        "path",
        ["/static/app.css", "/_assets/logo", "/favicon.ico", "/robots.txt", "/fr/report.pdf"],
    )
    def test_static_assets(self, path):
        """Static prefixes and any path whose last segment has an extension."""
        assert classify_route(path) is RouteClassification.STATIC_ASSET

    @pytest.mark.parametrize("path", ["/login", "/login/callback", "/signup", "/auth/callback"])
    def test_auth_pages(self, path):
        assert classify_route(path) is RouteClassification.AUTH_PAGE

    @pytest.mark.parametrize("path", ["/", "/dashboard", "/fr", "/fr/units/42", "/apiary"])
    def test_localized_pages(self, path):
        assert classify_route(path) is RouteClassification.LOCALIZED_PAGE

    @pytest.mark.parametrize(
        "path", ["/healthy-homes", "/docs-archive", "/loginhelp", "/signups", "/versions/2"]
    )
    def test_prefixes_stop_at_segment_boundary(self, path):
        """A prefix without a trailing slash matches whole path segments only."""
        assert classify_route(path) is RouteClassification.LOCALIZED_PAGE

    @pytest.mark.parametrize("path", ["/health/live", "/docs/oauth2-redirect", "/signup/invite"])
    def test_prefix_subpaths_excluded(self, path):
        assert classify_route(path).is_excluded

    def test_api_wins_over_static(self):
        """An API path with an extension is still an API request."""
        assert classify_route("/api/export.csv") is RouteClassification.API

    def test_custom_rules(self):
        rules = RouteRules(api_prefixes=("/graphql",), static_prefixes=(), auth_prefixes=())
        assert classify_route("/graphql", rules) is RouteClassification.API
        assert classify_route("/api/units", rules) is RouteClassification.LOCALIZED_PAGE

    def test_excluded_flag(self):
        assert RouteClassification.API.is_excluded
        assert RouteClassification.STATIC_ASSET.is_excluded
        assert RouteClassification.AUTH_PAGE.is_excluded
        assert not RouteClassification.LOCALIZED_PAGE.is_excluded


@pytest.mark.unit
class TestDecideRoute:
    """Test suite for decide_route."""

    def test_unprefixed_page_redirects_with_resolved_locale(self, resolver):
        """Unprefixed pages redirect to the cookie locale."""
        decision = decide_route("/dashboard", "", "fr", "en", resolver)
        assert isinstance(decision, RedirectToLocale)
        assert decision.location == "/fr/dashboard"
        assert decision.locale is Locale.FR
        assert decision.resolution.source is ResolutionSource.COOKIE

    def test_redirect_preserves_query(self, resolver):
        decision = decide_route("/units", "status=vacant&page=2", None, "ar", resolver)
        assert decision.location == "/ar/units?status=vacant&page=2"

    def test_root_redirects_to_bare_locale(self, resolver):
        decision = decide_route("/", "", None, None, resolver)
        assert decision.location == "/en"

    def test_prefixed_page_passes_through(self, resolver):
        """Prefixed pages are served; the cookie is written when it differs."""
        decision = decide_route("/ar/units", "", "fr", "en", resolver)
        assert decision == PassThrough(locale=Locale.AR, set_cookie=True)

    def test_idempotent_when_cookie_matches(self, resolver):
        """/fr/units with cookie fr neither redirects nor rewrites the cookie."""
        decision = decide_route("/fr/units", "", "fr", "ar", resolver)
        assert decision == PassThrough(locale=Locale.FR, set_cookie=False)

    def test_missing_cookie_is_written(self, resolver):
        decision = decide_route("/en", "", None, None, resolver)
        assert decision == PassThrough(locale=Locale.EN, set_cookie=True)

    def test_api_never_redirects(self, resolver):
        """API requests pass through regardless of cookie and header."""
        decision = decide_route("/api/units/123", "", "ar", "fr", resolver)
        assert isinstance(decision, Excluded)
        assert decision.classification is RouteClassification.API

    def test_excluded_requests_still_resolve_a_locale(self, resolver):
        """Excluded requests get a locale from cookie or header, never the path."""
        decision = decide_route("/login", "", None, "ar", resolver)
        assert isinstance(decision, Excluded)
        assert decision.resolution.locale is Locale.AR
        decision = decide_route("/static/fr/app.js", "", None, None, resolver)
        assert decision.resolution.source is ResolutionSource.DEFAULT

    @pytest.mark.parametrize(
        "path,expected",
        [
            ("/notes?draft/units", "/en/notes%3Fdraft/units"),
            ("/reports/100%", "/en/reports/100%25"),
            ("/notes/#1", "/en/notes/%231"),
            ("/résidences/a b", "/en/r%C3%A9sidences/a%20b"),
            ("/units/1;v=2/o'neil", "/en/units/1;v=2/o'neil"),
        ],
    )
    def test_redirect_location_is_reencoded(self, resolver, path, expected):
        """Decoded paths are escaped again so the target names the same resource."""
        decision = decide_route(path, "page=2", None, None, resolver)
        assert decision.location == f"{expected}?page=2"

    @pytest.mark.parametrize(
        "path",
        ["/", "/units", "/fr", "/ar/units/1", "/english", "/en/fr/units"],
    )
    def test_never_double_prefixed(self, resolver, registry, path):
        """Redirect targets carry exactly one locale segment."""
        decision = decide_route(path, "", "fr", None, resolver)
        if isinstance(decision, RedirectToLocale):
            locale, rest = strip_locale(decision.location, registry)
            assert locale is not None
            assert strip_locale(rest, registry).locale is None
        else:
            assert isinstance(decision, PassThrough)
            assert strip_locale(path, registry).locale is decision.locale

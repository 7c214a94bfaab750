"""Tests for server.exception_handlers."""

from unittest.mock import MagicMock

import pytest

from infrastructure.auth import AuthenticationRequired, AuthorizationDenied
from infrastructure.i18n import Locale
from server import exception_handlers


def make_request(path: str, query: str = "", **state):
    request = MagicMock()
    request.url.path = path
    request.url.query = query
    request.state = MagicMock(spec=[])
    for key, value in state.items():
        setattr(request.state, key, value)
    return request


@pytest.mark.unit
class TestLoginRedirectUrl:
    """Test suite for login_redirect_url."""

    def test_path_only(self):
        assert exception_handlers.login_redirect_url(make_request("/fr/units")) == (
            "/login?next=/fr/units"
        )

    def test_query_is_encoded(self):
        request = make_request("/fr/units", query="page=2&sort=name")
        assert exception_handlers.login_redirect_url(request) == (
            "/login?next=/fr/units%3Fpage%3D2%26sort%3Dname"
        )


@pytest.mark.unit
class TestHandlers:
    """Test suite for the gate exception handlers."""

    @pytest.mark.asyncio
    async def test_authentication_api(self):
        request = make_request("/api/v1/session", route_classification="api")
        response = await exception_handlers.authentication_required_handler(
            request, AuthenticationRequired()
        )
        assert response.status_code == 401
        assert response.body == b'{"detail":"Not authenticated"}'

    @pytest.mark.asyncio
    async def test_authentication_page_classified_from_path(self):
        """Requests that bypassed the middleware are classified by path."""
        request = make_request("/en/dashboard")
        response = await exception_handlers.authentication_required_handler(
            request, AuthenticationRequired()
        )
        assert response.status_code == 303
        assert response.headers["location"] == "/login?next=/en/dashboard"

    @pytest.mark.asyncio
    async def test_authorization_api_includes_requirement(self):
        request = make_request("/api/v1/team/members")
        response = await exception_handlers.authorization_denied_handler(
            request, AuthorizationDenied("Role 'admin' required", required_role="admin")
        )
        assert response.status_code == 403
        assert b'"required_role":"admin"' in response.body
        assert b"permission" not in response.body

    @pytest.mark.asyncio
    async def test_authorization_page_is_localized(self):
        request = make_request(
            "/ar/settings/team", route_classification="localized_page", locale=Locale.AR
        )
        response = await exception_handlers.authorization_denied_handler(
            request, AuthorizationDenied()
        )
        assert response.status_code == 403
        body = response.body.decode()
        assert '<html lang="ar" dir="rtl">' in body
        assert "ليس لديك صلاحية الوصول إلى هذه الصفحة." in body

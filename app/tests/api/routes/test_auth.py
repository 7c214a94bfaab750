"""Tests for api.routes.auth."""

from unittest.mock import AsyncMock, patch

import pytest
from authlib.integrations.starlette_client import OAuthError
from fastapi.responses import RedirectResponse

from api.routes.auth import safe_next_url

GOOGLE_AUTHORIZE_URL = "https://accounts.google.com/o/oauth2/v2/auth"


@pytest.fixture
def google():
    """Stub the Google OAuth client; no network calls leave the test."""
    with patch("api.routes.auth.oauth.google") as client:
        client.authorize_redirect = AsyncMock(
            return_value=RedirectResponse(url=GOOGLE_AUTHORIZE_URL)
        )
        client.authorize_access_token = AsyncMock(
            return_value={
                "userinfo": {"email": "Manager@Example.com", "name": "Manon"}
            }
        )
        yield client


def session_cookie(response) -> str:
    (cookie,) = [
        header
        for header in response.headers.get_list("set-cookie")
        if header.startswith("access_token=")
    ]
    return cookie


@pytest.mark.unit
class TestSafeNextUrl:
    """Post-login targets must stay on this site."""

    @pytest.mark.parametrize("value", ["/fr/dashboard", "/en/settings/team?tab=1"])
    def test_accepts_local_paths(self, value):
        assert safe_next_url(value) == value

    @pytest.mark.parametrize(
        "value", [None, "", "https://evil.example/", "//evil.example/x", "fr/dashboard"]
    )
    def test_rejects_everything_else(self, value):
        assert safe_next_url(value) == "/"


@pytest.mark.unit
class TestLogin:
    """Test suite for /auth/login."""

    def test_redirects_to_google(self, client, google):
        response = client.get("/auth/login")
        assert response.status_code == 307
        assert response.headers["location"] == GOOGLE_AUTHORIZE_URL
        _, redirect_uri = google.authorize_redirect.await_args.args
        assert str(redirect_uri).endswith("/auth/callback")

    def test_not_locale_redirected(self, client, google):
        response = client.get("/auth/login", headers={"Accept-Language": "fr"})
        assert response.headers["location"] == GOOGLE_AUTHORIZE_URL


@pytest.mark.unit
class TestCallback:
    """Test suite for /auth/callback."""

    def test_member_signs_in(self, client, google, session_provider):
        response = client.get("/auth/callback")
        assert response.status_code == 307
        assert response.headers["location"] == "/"
        cookie = session_cookie(response)
        assert "HttpOnly" in cookie

        token = client.cookies.get("access_token")
        claims = session_provider.codec.decode(token)
        assert claims["sub"] == "manager@example.com"
        assert claims["org"] == "org-1"
        assert claims["role"] == "manager"
        assert claims["name"] == "Manon"

    def test_returns_to_requested_page(self, client, google):
        client.get("/auth/login", params={"next": "/fr/settings/team"})
        response = client.get("/auth/callback")
        assert response.headers["location"] == "/fr/settings/team"

    def test_external_next_ignored(self, client, google):
        client.get("/auth/login", params={"next": "https://evil.example/"})
        response = client.get("/auth/callback")
        assert response.headers["location"] == "/"

    def test_user_without_membership(self, client, google):
        google.authorize_access_token.return_value = {
            "userinfo": {"email": "stranger@example.com"}
        }
        response = client.get("/auth/callback")
        assert response.status_code == 307
        assert response.headers["location"] == "/login?error=no_membership"
        assert "access_token" not in client.cookies

    def test_missing_email(self, client, google):
        google.authorize_access_token.return_value = {"userinfo": {}}
        response = client.get("/auth/callback")
        assert response.headers["location"] == "/login"

    def test_oauth_error(self, client, google):
        google.authorize_access_token.side_effect = OAuthError(error="access_denied")
        response = client.get("/auth/callback")
        assert response.status_code == 400
        assert "access_denied" in response.text


@pytest.mark.unit
class TestLogoutAndMe:
    """Test suite for /auth/logout and /auth/me."""

    def test_logout_clears_session(self, sign_in):
        client = sign_in(role="owner")
        response = client.get("/auth/logout")
        assert response.status_code == 307
        assert response.headers["location"] == "/login"
        assert "Max-Age=0" in session_cookie(response)

    def test_me_signed_in(self, sign_in):
        response = sign_in(role="accountant").get("/auth/me")
        assert response.json() == {
            "name": "Test User",
            "email": "manager@example.com",
            "organization_id": "org-1",
            "role": "accountant",
        }

    def test_me_anonymous(self, client):
        assert client.get("/auth/me").json() == {"error": "Not logged in"}

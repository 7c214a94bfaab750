"""Tests for api.v1.routes.session."""

from datetime import datetime

import pytest


@pytest.mark.unit
class TestSessionApi:
    """Test suite for /api/v1/session."""

    def test_requires_session(self, client):
        response = client.get("/api/v1/session")
        assert response.status_code == 401
        assert response.json() == {"detail": "Not authenticated"}

    def test_returns_session(self, sign_in):
        client = sign_in(role="maintainer")
        client.cookies.set("locale", "fr")
        response = client.get("/api/v1/session")
        assert response.status_code == 200
        body = response.json()
        assert body["role"] == "maintainer"
        assert body["organization_id"] == "org-1"
        assert body["locale"] == "fr"
        assert datetime.fromisoformat(body["expires_at"]).tzinfo is not None

    def test_bearer_token(self, client, make_token):
        response = client.get(
            "/api/v1/session",
            headers={"Authorization": f"Bearer {make_token(role='owner')}"},
        )
        assert response.status_code == 200
        assert response.json()["role"] == "owner"

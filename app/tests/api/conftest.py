"""Fixtures for tests that exercise the assembled application."""

import pytest
from fastapi.testclient import TestClient

from infrastructure.services import get_membership_repository
from server.server import create_app


@pytest.fixture
def app(membership_repository):
    app = create_app()
    app.dependency_overrides[get_membership_repository] = lambda: membership_repository
    return app


@pytest.fixture
def client(app):
    return TestClient(app, follow_redirects=False)


@pytest.fixture
def sign_in(client, make_token):
    """Attach a session cookie for the given role to the test client."""

    def _sign_in(role="manager", **kwargs):
        client.cookies.set(
            "access_token", make_token(role=role, **kwargs), domain="testserver.local"
        )
        return client

    return _sign_in

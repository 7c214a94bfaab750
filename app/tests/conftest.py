import os

# Settings are read at import time; tests run as a non-production deployment.
os.environ.setdefault("PREFIX", "test-")
os.environ.setdefault("SESSION_SECRET_KEY", "test-session-secret")

from datetime import timedelta  # noqa: E402

import pytest  # noqa: E402
import structlog  # noqa: E402

from api.dependencies.rate_limits import get_limiter  # noqa: E402
from infrastructure.auth import JWTCookieSessionProvider, Session  # noqa: E402
from infrastructure.i18n import LocaleRegistry, LocaleResolver  # noqa: E402
from infrastructure.security import SessionTokenCodec  # noqa: E402
from modules.team import InMemoryMembershipRepository, Membership  # noqa: E402

TEST_SECRET = "test-session-secret"


@pytest.fixture(autouse=True)
def reset_rate_limiter():
    """Rate limit counters are process-wide; start every test from zero."""
    get_limiter().reset()
    yield


@pytest.fixture(autouse=True)
def clean_logging_context():
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def registry():
    """Registry with the shipped locales: en (default), fr, ar."""
    return LocaleRegistry()


@pytest.fixture
def resolver(registry):
    return LocaleResolver(registry)


@pytest.fixture
def session_codec():
    return SessionTokenCodec(TEST_SECRET, expire_minutes=30, max_age_minutes=1440)


@pytest.fixture
def session_provider(session_codec):
    return JWTCookieSessionProvider(
        codec=session_codec, cookie_name="access_token", refresh_threshold_minutes=10
    )


@pytest.fixture
def make_session():
    """Factory for sessions in organization org-1."""

    def _make(role="manager", email="manager@example.com", organization_id="org-1"):
        return Session(
            user_id=email,
            email=email,
            name="Test User",
            organization_id=organization_id,
            role=role,
        )

    return _make


@pytest.fixture
def make_token(session_codec, make_session):
    """Factory for signed session tokens."""

    def _make(role="manager", expires_in=timedelta(minutes=30), **kwargs):
        session = make_session(role=role, **kwargs)
        return session_codec.encode(session.to_claims(), expires_delta=expires_in)

    return _make


@pytest.fixture
def memberships():
    return [
        Membership("owner@example.com", "org-1", "owner", "Olivia Owner"),
        Membership("manager@example.com", "org-1", "manager", "Manon Manager"),
        Membership("viewer@example.com", "org-1", "viewer", "Victor Viewer"),
        Membership("admin@other.example", "org-2", "admin", "Amal Admin"),
    ]


@pytest.fixture
def membership_repository(memberships):
    return InMemoryMembershipRepository(memberships)

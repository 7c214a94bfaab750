"""Session providers.

A session provider turns request state (cookies, headers) into a verified
`Session` and keeps the session fresh on the way out. The router and the gate
only talk to the abstract interface, so either can be exercised with a fake.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Optional

import structlog
from starlette.requests import Request
from starlette.responses import Response

from infrastructure.auth.models import Session
from infrastructure.security.tokens import SessionTokenCodec

logger = structlog.get_logger().bind(component="auth.provider")

_REQUEST_STATE_KEY = "session"


class SessionProvider(ABC):
    """Source of request sessions."""

    @abstractmethod
    def get_session(self, request: Request) -> Optional[Session]:
        """Return the verified session for a request, or None."""

    @abstractmethod
    def refresh(self, request: Request, response: Response) -> None:
        """Apply session housekeeping (renewal, cleanup) to an outgoing response."""

    @abstractmethod
    def issue(self, response: Response, session: Session) -> str:
        """Attach a new session to the response; used by the sign-in callback."""

    @abstractmethod
    def clear(self, response: Response) -> None:
        """Remove the session from the client; used by sign-out."""


class JWTCookieSessionProvider(SessionProvider):
    """Sessions carried by a signed token in a cookie or bearer header.

    Attributes:
        codec: Signs and verifies session tokens.
        cookie_name: Name of the session cookie.
        refresh_threshold: Remaining lifetime under which a token is reissued.
        secure: Whether the session cookie is marked Secure.
    """

    def __init__(
        self,
        codec: SessionTokenCodec,
        cookie_name: str = "access_token",
        refresh_threshold_minutes: int = 10,
        secure: bool = False,
    ):
        self.codec = codec
        self.cookie_name = cookie_name
        self.refresh_threshold = timedelta(minutes=refresh_threshold_minutes)
        self.secure = secure

    def _extract_token(self, request: Request) -> Optional[str]:
        token = request.cookies.get(self.cookie_name)
        if token:
            return token
        authorization = request.headers.get("Authorization", "")
        scheme, _, credentials = authorization.partition(" ")
        if scheme.lower() == "bearer" and credentials:
            return credentials.strip()
        return None

    def _from_cookie(self, request: Request) -> bool:
        return bool(request.cookies.get(self.cookie_name))

    def _sets_cookie(self, response: Response) -> bool:
        # Sign-in and sign-out responses manage the cookie themselves.
        prefix = f"{self.cookie_name}="
        return any(
            header.startswith(prefix)
            for header in response.headers.getlist("set-cookie")
        )

    def get_session(self, request: Request) -> Optional[Session]:
        """Verify the request's session token.

        The result is memoized on `request.state` so the middleware and the
        gate verify a token at most once per request.

        Args:
            request: Incoming request.

        Returns:
            Session, or None when the token is missing, invalid or expired.
        """
        if hasattr(request.state, _REQUEST_STATE_KEY):
            return getattr(request.state, _REQUEST_STATE_KEY)

        session = None
        claims = self.codec.decode(self._extract_token(request))
        if claims is not None:
            session = Session.from_claims(claims)
            if session is None:
                logger.warning("session_claims_incomplete", subject=claims.get("sub"))
        setattr(request.state, _REQUEST_STATE_KEY, session)
        return session

    def refresh(self, request: Request, response: Response) -> None:
        """Renew near-expiry session cookies and clear unusable ones.

        Bearer tokens are never rewritten; only the cookie session slides.

        Args:
            request: Incoming request.
            response: Response about to be returned.
        """
        if not self._from_cookie(request) or self._sets_cookie(response):
            return

        session = self.get_session(request)
        if session is None:
            self.clear(response)
            logger.info("session_cleared", reason="invalid_or_expired")
            return

        if session.expires_at is None:
            return
        remaining = session.expires_at - datetime.now(timezone.utc)
        if remaining < self.refresh_threshold:
            self.issue(response, session)
            logger.info(
                "session_refreshed",
                user_id=session.user_id,
                organization_id=session.organization_id,
            )

    def issue(self, response: Response, session: Session) -> str:
        """Sign a fresh token for `session` and set it as the session cookie.

        Returns:
            The signed token.
        """
        token = self.codec.encode(session.to_claims())
        response.set_cookie(
            self.cookie_name,
            token,
            max_age=self.codec.expire_minutes * 60,
            path="/",
            httponly=True,
            secure=self.secure,
            samesite="lax",
        )
        return token

    def clear(self, response: Response) -> None:
        response.delete_cookie(
            self.cookie_name,
            path="/",
            httponly=True,
            secure=self.secure,
            samesite="lax",
        )

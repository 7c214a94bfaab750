"""Signed session tokens.

Session tokens are HS256 JWTs signed with the application secret. They carry
the session claims (subject, organization, role) and an expiry.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import structlog
from fastapi import HTTPException, status
from jwt import ExpiredSignatureError, PyJWTError, decode, encode

logger = structlog.get_logger()

ALGORITHM = "HS256"


class SessionTokenCodec:
    """Encode and verify session tokens.

    Attributes:
        secret_key: HMAC secret used to sign tokens.
        expire_minutes: Lifetime of a token when no explicit delta is given.
        max_age_minutes: Upper bound for any explicit lifetime.
    """

    def __init__(
        self,
        secret_key: str,
        expire_minutes: int = 30,
        max_age_minutes: int = 1440,
    ):
        if not secret_key:
            raise ValueError("A secret key is required to sign session tokens")
        self.secret_key = secret_key
        self.expire_minutes = expire_minutes
        self.max_age_minutes = max_age_minutes

    @classmethod
    def from_settings(cls, server_settings) -> "SessionTokenCodec":
        return cls(
            secret_key=server_settings.SECRET_KEY,
            expire_minutes=server_settings.ACCESS_TOKEN_EXPIRE_MINUTES,
            max_age_minutes=server_settings.ACCESS_TOKEN_MAX_AGE_MINUTES,
        )

    def encode(
        self, data: Dict[str, Any], expires_delta: Optional[timedelta] = None
    ) -> str:
        """Generate a signed session token.

        Args:
            data: The claims to include in the token payload.
            expires_delta: Token lifetime. Defaults to `expire_minutes`.

        Returns:
            str: The encoded token.

        Raises:
            ValueError: If the expires_delta is negative or exceeds the maximum allowed duration.
            HTTPException: If there is an error during JWT encoding.
        """
        if expires_delta and expires_delta.total_seconds() < 0:
            raise ValueError("expires_delta cannot be negative")

        if expires_delta and expires_delta.total_seconds() > self.max_age_minutes * 60:
            raise ValueError("expires_delta exceeds maximum allowed duration")

        to_encode = data.copy()
        expire = datetime.now(timezone.utc) + (
            expires_delta or timedelta(minutes=self.expire_minutes)
        )
        to_encode.update({"exp": expire})
        try:
            token = encode(to_encode, self.secret_key, algorithm=ALGORITHM)
        except (PyJWTError, TypeError) as e:
            logger.error("session_token_encoding_failed", error=str(e))
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Failed to encode session token",
            ) from e
        logger.debug("session_token_created")
        return token

    def decode(self, token: Optional[str]) -> Optional[Dict[str, Any]]:
        """Verify a session token and return its claims.

        Args:
            token: The encoded token, or None.

        Returns:
            The verified payload, or None if the token is missing, expired,
            tampered with or otherwise invalid.
        """
        if not token:
            return None
        try:
            return decode(
                token,
                self.secret_key,
                algorithms=[ALGORITHM],
                options={"verify_exp": True, "require": ["exp", "sub"]},
            )
        except ExpiredSignatureError:
            logger.debug("session_token_expired")
            return None
        except PyJWTError as e:
            log = logger.bind(error=str(e))
            log.warning("session_token_invalid")
            return None

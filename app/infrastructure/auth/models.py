"""Session models.

A session is the server-verified principal of a request: who the user is,
which organization they act for and with which role.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class Session(BaseModel):
    """Authenticated principal attached to a request.

    Read-only for everything except the session provider and the sign-in
    routes.
    """

    model_config = ConfigDict(frozen=True)

    user_id: str = Field(..., description="Canonical user identifier (email)")
    email: str = Field(..., description="User's email address")
    name: Optional[str] = Field(default=None, description="User's display name")
    organization_id: str = Field(..., description="Active organization (tenant)")
    role: str = Field(..., description="Role within the active organization")
    expires_at: Optional[datetime] = Field(
        default=None, description="Expiry of the underlying session token"
    )

    def to_claims(self) -> Dict[str, Any]:
        """Session token claims for this session (without expiry)."""
        return {
            "sub": self.user_id,
            "email": self.email,
            "name": self.name,
            "org": self.organization_id,
            "role": self.role,
        }

    @classmethod
    def from_claims(cls, claims: Dict[str, Any]) -> Optional["Session"]:
        """Build a session from verified token claims.

        Args:
            claims: Decoded session token payload.

        Returns:
            Session, or None when the organization or role claim is missing.
        """
        if not claims.get("org") or not claims.get("role"):
            return None
        exp = claims.get("exp")
        return cls(
            user_id=claims["sub"],
            email=claims.get("email") or claims["sub"],
            name=claims.get("name"),
            organization_id=claims["org"],
            role=claims["role"],
            expires_at=(
                datetime.fromtimestamp(exp, tz=timezone.utc)
                if isinstance(exp, (int, float))
                else None
            ),
        )

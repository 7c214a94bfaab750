"""Team membership feature settings."""

from typing import Any, Dict

from pydantic import Field, field_validator

from infrastructure.configuration.base import FeatureSettings


class TeamSettings(FeatureSettings):
    """Organization membership seed configuration.

    Memberships are keyed by email and map to the organization and role the
    user signs in with. Database-backed memberships replace this in larger
    deployments.

    Environment Variables:
        TEAM_MEMBERSHIPS: JSON dict of email -> {"organization_id", "role", "name"}

    Example:
        ```python
        from infrastructure.configuration import settings

        memberships = settings.team.TEAM_MEMBERSHIPS
        ```
    """

    TEAM_MEMBERSHIPS: Dict[str, Dict[str, Any]] = Field(
        default_factory=dict, alias="TEAM_MEMBERSHIPS"
    )

    @field_validator("TEAM_MEMBERSHIPS", mode="before")
    @classmethod
    def validate_team_memberships(cls, v: Any) -> Any:
        """Treat a missing or malformed value as no memberships."""
        if v is None or not isinstance(v, dict):
            return {}
        return v

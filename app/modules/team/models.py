"""Membership models for the team module."""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Membership:
    """A user's membership in an organization.

    Attributes:
        email: The member's email address (also the user id).
        organization_id: The organization the membership belongs to.
        role: The member's role within the organization.
        name: Display name, if known.
    """

    email: str
    organization_id: str
    role: str
    name: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def membership_from_dict(email: str, d: Dict[str, Any]) -> Optional[Membership]:
    """Build a Membership from a configuration entry.

    Entries without an organization or role are ignored (returns None).
    """
    if not isinstance(d, dict):
        return None
    organization_id = d.get("organization_id") or d.get("org")
    role = d.get("role")
    if not organization_id or not role:
        return None
    return Membership(
        email=email.lower(),
        organization_id=str(organization_id),
        role=str(role),
        name=d.get("name"),
    )

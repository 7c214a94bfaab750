"""Membership repositories.

The sign-in callback looks up a user's membership to decide which
organization and role the session carries; the team API lists the members of
the session's organization. Both go through `MembershipRepository`.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List, Optional

from infrastructure.logging import get_module_logger
from modules.team.models import Membership, membership_from_dict

logger = get_module_logger()


class MembershipRepository(ABC):
    """Read access to organization memberships."""

    @abstractmethod
    def get_membership(self, email: str) -> Optional[Membership]:
        """Return the membership for a user, or None if they have none."""

    @abstractmethod
    def list_members(self, organization_id: str) -> List[Membership]:
        """Return the members of an organization, sorted by email."""


class InMemoryMembershipRepository(MembershipRepository):
    """Membership repository backed by a dict, seeded from configuration."""

    def __init__(self, memberships: Optional[Iterable[Membership]] = None):
        self._memberships: Dict[str, Membership] = {}
        for membership in memberships or []:
            self._memberships[membership.email.lower()] = membership

    @classmethod
    def from_config(cls, entries: Dict[str, Dict[str, Any]]) -> "InMemoryMembershipRepository":
        """Build a repository from TEAM_MEMBERSHIPS entries.

        Args:
            entries: Mapping of email -> {"organization_id", "role", "name"}.

        Returns:
            InMemoryMembershipRepository with every valid entry.
        """
        memberships = []
        for email, entry in entries.items():
            membership = membership_from_dict(email, entry)
            if membership is None:
                logger.warning("invalid_membership_entry", email=email)
                continue
            memberships.append(membership)
        logger.info("membership_repository_seeded", membership_count=len(memberships))
        return cls(memberships)

    def get_membership(self, email: str) -> Optional[Membership]:
        return self._memberships.get(email.lower())

    def list_members(self, organization_id: str) -> List[Membership]:
        return sorted(
            (m for m in self._memberships.values() if m.organization_id == organization_id),
            key=lambda m: m.email,
        )

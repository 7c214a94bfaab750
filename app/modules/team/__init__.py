"""Team module - organization memberships."""

from modules.team.models import Membership
from modules.team.repository import InMemoryMembershipRepository, MembershipRepository

__all__ = ["Membership", "MembershipRepository", "InMemoryMembershipRepository"]

"""Unit tests for modules.team."""

import pytest

from modules.team import InMemoryMembershipRepository, Membership
from modules.team.models import membership_from_dict


@pytest.mark.unit
class TestMembership:
    """Test suite for Membership models."""

    def test_to_dict(self):
        membership = Membership("sam@example.com", "org-1", "owner", "Sam")
        assert membership.to_dict() == {
            "email": "sam@example.com",
            "organization_id": "org-1",
            "role": "owner",
            "name": "Sam",
        }

    def test_from_dict(self):
        membership = membership_from_dict("Sam@Example.com", {"org": "org-1", "role": "viewer"})
        assert membership == Membership("sam@example.com", "org-1", "viewer")

    @pytest.mark.parametrize(
        "entry", [{"role": "viewer"}, {"organization_id": "org-1"}, "owner", None]
    )
    def test_from_dict_incomplete(self, entry):
        assert membership_from_dict("sam@example.com", entry) is None


@pytest.mark.unit
class TestInMemoryMembershipRepository:
    """Test suite for InMemoryMembershipRepository."""

    def test_get_membership_case_insensitive(self, membership_repository):
        membership = membership_repository.get_membership("Owner@Example.com")
        assert membership.role == "owner"

    def test_get_membership_unknown(self, membership_repository):
        assert membership_repository.get_membership("stranger@example.com") is None

    def test_list_members_scoped_to_organization(self, membership_repository):
        members = membership_repository.list_members("org-1")
        assert [m.email for m in members] == [
            "manager@example.com",
            "owner@example.com",
            "viewer@example.com",
        ]
        assert [m.email for m in membership_repository.list_members("org-2")] == [
            "admin@other.example"
        ]

    def test_list_members_unknown_organization(self, membership_repository):
        assert membership_repository.list_members("org-404") == []

    def test_from_config_skips_invalid_entries(self):
        repository = InMemoryMembershipRepository.from_config(
            {
                "sam@example.com": {"organization_id": "org-1", "role": "owner", "name": "Sam"},
                "broken@example.com": {"role": "viewer"},
            }
        )
        assert repository.get_membership("sam@example.com").name == "Sam"
        assert repository.get_membership("broken@example.com") is None

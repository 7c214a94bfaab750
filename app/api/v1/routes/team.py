from typing import Annotated

from fastapi import APIRouter, Depends

from infrastructure.auth import Permission, Session, require_permission
from infrastructure.services import MembershipRepositoryDep

router = APIRouter(prefix="/team", tags=["Team"])

ManageUsersSession = Annotated[
    Session, Depends(require_permission(Permission.ADMIN_MANAGE_USERS))
]


@router.get("/members")
def list_members(session: ManageUsersSession, repository: MembershipRepositoryDep):
    """List the members of the session's organization."""
    members = repository.list_members(session.organization_id)
    return {
        "organization_id": session.organization_id,
        "members": [member.to_dict() for member in members],
    }

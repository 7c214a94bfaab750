"""Roles, permissions and the role-permission matrix.

Roles are ranked: a role satisfies a required role when it is the same role
or strictly outranks it. Accountant and maintainer share a rank and do not
satisfy each other.
"""

from enum import Enum
from typing import Iterable, Optional, Union

import structlog

from infrastructure.auth.errors import AuthorizationDenied
from infrastructure.auth.models import Session

logger = structlog.get_logger().bind(component="auth.roles")


class Role(str, Enum):
    """Organization membership roles."""

    OWNER = "owner"
    ADMIN = "admin"
    MANAGER = "manager"
    ACCOUNTANT = "accountant"
    MAINTAINER = "maintainer"
    MEMBER = "member"
    VIEWER = "viewer"

    @classmethod
    def parse(cls, value: Union["Role", str, None]) -> Optional["Role"]:
        """Role for a string, or None for unknown values."""
        if isinstance(value, Role):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


ROLE_RANKS: dict[Role, int] = {
    Role.OWNER: 100,
    Role.ADMIN: 90,
    Role.MANAGER: 70,
    Role.ACCOUNTANT: 50,
    Role.MAINTAINER: 50,
    Role.MEMBER: 30,
    Role.VIEWER: 10,
}


class Permission(str, Enum):
    """Fine-grained operations, named <area>:<action>."""

    PROPERTIES_READ = "properties:read"
    PROPERTIES_CREATE = "properties:create"
    PROPERTIES_UPDATE = "properties:update"
    PROPERTIES_DELETE = "properties:delete"
    UNITS_READ = "units:read"
    UNITS_CREATE = "units:create"
    UNITS_UPDATE = "units:update"
    UNITS_DELETE = "units:delete"
    UNITS_MOVE_STATUS = "units:move_status"
    CONTACTS_READ = "contacts:read"
    CONTACTS_CREATE = "contacts:create"
    CONTACTS_UPDATE = "contacts:update"
    CONTACTS_DELETE = "contacts:delete"
    BILLING_READ = "billing:read"
    BILLING_CREATE = "billing:create"
    BILLING_UPDATE = "billing:update"
    BILLING_DELETE = "billing:delete"
    BILLING_PROCESS_PAYMENTS = "billing:process_payments"
    DOCUMENTS_READ = "documents:read"
    DOCUMENTS_UPLOAD = "documents:upload"
    DOCUMENTS_DELETE = "documents:delete"
    MAINTENANCE_READ = "maintenance:read"
    MAINTENANCE_CREATE = "maintenance:create"
    MAINTENANCE_UPDATE = "maintenance:update"
    MAINTENANCE_DELETE = "maintenance:delete"
    MAINTENANCE_ASSIGN = "maintenance:assign"
    REPORTS_READ = "reports:read"
    REPORTS_EXPORT = "reports:export"
    ADMIN_MANAGE_USERS = "admin:manage_users"
    ADMIN_MANAGE_ORGANIZATION = "admin:manage_organization"
    ADMIN_VIEW_LOGS = "admin:view_logs"


P = Permission

_READ_ONLY = frozenset(
    {
        P.PROPERTIES_READ,
        P.UNITS_READ,
        P.CONTACTS_READ,
        P.BILLING_READ,
        P.DOCUMENTS_READ,
        P.MAINTENANCE_READ,
        P.REPORTS_READ,
    }
)

ROLE_PERMISSIONS: dict[Role, frozenset[Permission]] = {
    Role.OWNER: frozenset(Permission),
    Role.ADMIN: frozenset(Permission),
    # CRUD except destructive global settings
    Role.MANAGER: frozenset(
        {
            P.PROPERTIES_READ,
            P.PROPERTIES_CREATE,
            P.PROPERTIES_UPDATE,
            P.UNITS_READ,
            P.UNITS_CREATE,
            P.UNITS_UPDATE,
            P.UNITS_MOVE_STATUS,
            P.CONTACTS_READ,
            P.CONTACTS_CREATE,
            P.CONTACTS_UPDATE,
            P.CONTACTS_DELETE,
            P.BILLING_READ,
            P.BILLING_CREATE,
            P.BILLING_UPDATE,
            P.BILLING_PROCESS_PAYMENTS,
            P.DOCUMENTS_READ,
            P.DOCUMENTS_UPLOAD,
            P.MAINTENANCE_READ,
            P.MAINTENANCE_CREATE,
            P.MAINTENANCE_UPDATE,
            P.MAINTENANCE_ASSIGN,
            P.REPORTS_READ,
            P.REPORTS_EXPORT,
        }
    ),
    Role.ACCOUNTANT: frozenset(
        {
            P.PROPERTIES_READ,
            P.UNITS_READ,
            P.CONTACTS_READ,
            P.CONTACTS_CREATE,
            P.CONTACTS_UPDATE,
            P.BILLING_READ,
            P.BILLING_CREATE,
            P.BILLING_UPDATE,
            P.BILLING_PROCESS_PAYMENTS,
            P.DOCUMENTS_READ,
            P.DOCUMENTS_UPLOAD,
            P.REPORTS_READ,
            P.REPORTS_EXPORT,
        }
    ),
    Role.MAINTAINER: frozenset(
        {
            P.PROPERTIES_READ,
            P.UNITS_READ,
            P.CONTACTS_READ,
            P.DOCUMENTS_READ,
            P.DOCUMENTS_UPLOAD,
            P.MAINTENANCE_READ,
            P.MAINTENANCE_CREATE,
            P.MAINTENANCE_UPDATE,
        }
    ),
    Role.MEMBER: _READ_ONLY | {P.MAINTENANCE_CREATE},
    Role.VIEWER: _READ_ONLY,
}


def role_satisfies(
    role: Union[Role, str, None], required: Union[Role, str, None]
) -> bool:
    """Check that `role` matches or outranks `required`.

    Args:
        role: Role held by the session.
        required: Role the operation needs; None means any role.

    Returns:
        True when the role is sufficient. Unknown roles never satisfy a
        requirement.
    """
    if required is None:
        return True
    held = Role.parse(role)
    needed = Role.parse(required)
    if held is None or needed is None:
        return False
    if held is needed:
        return True
    return ROLE_RANKS[held] > ROLE_RANKS[needed]


def get_role_permissions(role: Union[Role, str]) -> frozenset[Permission]:
    parsed = Role.parse(role)
    if parsed is None:
        return frozenset()
    return ROLE_PERMISSIONS[parsed]


def role_has_permission(role: Union[Role, str], permission: Union[Permission, str]) -> bool:
    """Check whether a role grants a permission.

    Unknown roles and unknown permissions are denied.
    """
    parsed = Role.parse(role)
    if parsed is None:
        logger.warning("unknown_role", role=str(role))
        return False
    try:
        return Permission(permission) in ROLE_PERMISSIONS[parsed]
    except ValueError:
        return False


def can(session: Session, permission: Union[Permission, str]) -> bool:
    return role_has_permission(session.role, permission)


def can_any(session: Session, permissions: Iterable[Union[Permission, str]]) -> bool:
    return any(can(session, permission) for permission in permissions)


def can_all(session: Session, permissions: Iterable[Union[Permission, str]]) -> bool:
    return all(can(session, permission) for permission in permissions)


def guard(session: Session, permission: Union[Permission, str]) -> None:
    """Raise AuthorizationDenied unless the session grants `permission`.

    Raises:
        AuthorizationDenied: If the session's role lacks the permission.
    """
    if not can(session, permission):
        value = permission.value if isinstance(permission, Permission) else permission
        raise AuthorizationDenied(
            detail=f"Access denied: missing permission '{value}'",
            permission=value,
        )

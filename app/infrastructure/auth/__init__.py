"""Infrastructure auth module - sessions, roles and the session gate.

Exports:
    Session: Authenticated principal of a request
    SessionProvider: Abstract session source
    JWTCookieSessionProvider: Signed-token session provider
    SessionGate: Guards protected handlers
    Role, Permission: RBAC vocabulary
    AuthenticationRequired, AuthorizationDenied: Gate failures
"""

from infrastructure.auth.errors import AuthenticationRequired, AuthorizationDenied
from infrastructure.auth.gate import (
    OptionalSessionDep,
    SessionDep,
    SessionGate,
    get_gate,
    get_optional_session,
    require_permission,
    require_role,
    require_session,
)
from infrastructure.auth.models import Session
from infrastructure.auth.provider import JWTCookieSessionProvider, SessionProvider
from infrastructure.auth.roles import (
    ROLE_PERMISSIONS,
    ROLE_RANKS,
    Permission,
    Role,
    can,
    can_all,
    can_any,
    get_role_permissions,
    guard,
    role_has_permission,
    role_satisfies,
)

__all__ = [
    "AuthenticationRequired",
    "AuthorizationDenied",
    "JWTCookieSessionProvider",
    "OptionalSessionDep",
    "Permission",
    "ROLE_PERMISSIONS",
    "ROLE_RANKS",
    "Role",
    "Session",
    "SessionDep",
    "SessionGate",
    "SessionProvider",
    "can",
    "can_all",
    "can_any",
    "get_gate",
    "get_optional_session",
    "get_role_permissions",
    "guard",
    "require_permission",
    "require_role",
    "require_session",
    "role_has_permission",
    "role_satisfies",
]

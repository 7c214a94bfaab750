"""Session gate for protected handlers.

Handlers declare their requirements as FastAPI dependencies; the gate raises
before the handler body runs, so a denied principal never reaches any data
access.

Example:
    ```python
    @router.get("/team/members")
    def list_members(session: Annotated[Session, Depends(require_permission(Permission.ADMIN_MANAGE_USERS))]):
        ...
    ```
"""

from typing import Annotated, Callable, Optional, Union

import structlog
from fastapi import Depends, Request

from infrastructure.auth.errors import AuthenticationRequired, AuthorizationDenied
from infrastructure.auth.models import Session
from infrastructure.auth.provider import SessionProvider
from infrastructure.auth.roles import Permission, Role, guard, role_satisfies

logger = structlog.get_logger().bind(component="auth.gate")


class SessionGate:
    """Checks the request's session before a handler runs.

    Attributes:
        provider: Session provider used to read the request session.
    """

    def __init__(self, provider: SessionProvider):
        self.provider = provider

    def require_session(self, request: Request) -> Session:
        """Return the request's session.

        Raises:
            AuthenticationRequired: If there is no valid session.
        """
        session = self.provider.get_session(request)
        if session is None:
            logger.info("authentication_required", path=request.url.path)
            raise AuthenticationRequired()
        return session

    def require_session_with_role(
        self, request: Request, required_role: Union[Role, str, None] = None
    ) -> Session:
        """Return the request's session if its role satisfies `required_role`.

        Args:
            request: Incoming request.
            required_role: Minimum role; None accepts any signed-in user.

        Returns:
            The session.

        Raises:
            AuthenticationRequired: If there is no valid session.
            AuthorizationDenied: If the session's role is insufficient.
        """
        session = self.require_session(request)
        if not role_satisfies(session.role, required_role):
            required = required_role.value if isinstance(required_role, Role) else required_role
            logger.warning(
                "authorization_denied",
                user_id=session.user_id,
                role=session.role,
                required_role=required,
            )
            raise AuthorizationDenied(
                detail=f"Role '{required}' required",
                required_role=required,
            )
        return session

    def require_permission(
        self, request: Request, permission: Union[Permission, str]
    ) -> Session:
        """Return the request's session if its role grants `permission`.

        Raises:
            AuthenticationRequired: If there is no valid session.
            AuthorizationDenied: If the permission is not granted.
        """
        session = self.require_session(request)
        try:
            guard(session, permission)
        except AuthorizationDenied:
            logger.warning(
                "authorization_denied",
                user_id=session.user_id,
                role=session.role,
                permission=str(getattr(permission, "value", permission)),
            )
            raise
        return session


def get_gate() -> SessionGate:
    """Process-wide session gate (overridable in tests)."""
    from infrastructure.services.providers import get_session_gate

    return get_session_gate()


GateDep = Annotated[SessionGate, Depends(get_gate)]


def require_session(request: Request, gate: GateDep) -> Session:
    """FastAPI dependency returning the signed-in session."""
    return gate.require_session(request)


def require_role(required_role: Union[Role, str, None]) -> Callable[..., Session]:
    """Build a dependency that requires a minimum role.

    Args:
        required_role: Minimum role for the route.

    Returns:
        Dependency callable resolving to the session.
    """

    def dependency(request: Request, gate: GateDep) -> Session:
        return gate.require_session_with_role(request, required_role)

    return dependency


def require_permission(permission: Union[Permission, str]) -> Callable[..., Session]:
    """Build a dependency that requires a permission."""

    def dependency(request: Request, gate: GateDep) -> Session:
        return gate.require_permission(request, permission)

    return dependency


def get_optional_session(request: Request, gate: GateDep) -> Optional[Session]:
    return gate.provider.get_session(request)


SessionDep = Annotated[Session, Depends(require_session)]
OptionalSessionDep = Annotated[Optional[Session], Depends(get_optional_session)]

"""Authentication and authorization failures raised by the session gate.

Both are request-scoped: callers map them to a login redirect, a 401 or a
403 response. They never terminate the process.
"""

from typing import Optional


class AuthenticationRequired(Exception):
    """No valid session is attached to the request."""

    def __init__(self, detail: str = "Not authenticated"):
        super().__init__(detail)
        self.detail = detail


class AuthorizationDenied(Exception):
    """A session exists but its role does not allow the operation."""

    def __init__(
        self,
        detail: str = "Forbidden",
        required_role: Optional[str] = None,
        permission: Optional[str] = None,
    ):
        super().__init__(detail)
        self.detail = detail
        self.required_role = required_role
        self.permission = permission

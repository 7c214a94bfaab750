from fastapi import APIRouter, Request

from infrastructure.auth import SessionDep

router = APIRouter(prefix="/session", tags=["Session"])


@router.get("")
def get_session(request: Request, session: SessionDep):
    """Return the current session, with the locale the request resolved to."""
    locale = getattr(request.state, "locale", None)
    return {
        "user_id": session.user_id,
        "email": session.email,
        "name": session.name,
        "organization_id": session.organization_id,
        "role": session.role,
        "expires_at": session.expires_at.isoformat() if session.expires_at else None,
        "locale": locale.value if locale is not None else None,
    }

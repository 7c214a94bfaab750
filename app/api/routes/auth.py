"""Google sign-in.

A successful callback looks the Google account up in the membership
repository and issues the signed session cookie that the session gate
reads on every later request. These routes are excluded from locale
routing.
"""

from html import escape

from authlib.integrations.starlette_client import OAuth, OAuthError  # type: ignore
from fastapi import APIRouter, Query, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from starlette.config import Config

from api.dependencies.rate_limits import get_limiter
from infrastructure.auth import OptionalSessionDep, Session
from infrastructure.configuration import settings
from infrastructure.logging import get_module_logger
from infrastructure.services import MembershipRepositoryDep, SessionProviderDep

logger = get_module_logger()
router = APIRouter(prefix="/auth", tags=["Authentication"])
limiter = get_limiter()

LOGIN_URL = "/login"
GOOGLE_METADATA_URL = "https://accounts.google.com/.well-known/openid-configuration"


class ConfigurationError(Exception):
    """Raised at import when production runs without OAuth credentials."""


def _client_credentials() -> dict[str, str]:
    client_id = settings.server.GOOGLE_CLIENT_ID
    client_secret = settings.server.GOOGLE_CLIENT_SECRET
    if client_id and client_secret:
        return {"GOOGLE_CLIENT_ID": client_id, "GOOGLE_CLIENT_SECRET": client_secret}
    if settings.is_production:
        raise ConfigurationError("Missing OAuth credentials in production")

    logger.warning("oauth_credentials_missing", mode="development", using="dummy_values")
    return {
        "GOOGLE_CLIENT_ID": client_id or "dev-client-id",
        "GOOGLE_CLIENT_SECRET": client_secret or "dev-client-secret",
    }


oauth = OAuth(Config(environ=_client_credentials()))
oauth.register(
    name="google",
    server_metadata_url=GOOGLE_METADATA_URL,
    client_kwargs={"scope": "openid email profile"},
)


def safe_next_url(value) -> str:
    """Post-login target: a same-site absolute path, else FRONTEND_URL."""
    if isinstance(value, str) and value.startswith("/") and not value.startswith("//"):
        return value
    return settings.server.FRONTEND_URL


@router.get("/login")
@limiter.limit("5/minute")
async def login(
    request: Request, next_url: str | None = Query(default=None, alias="next")
):
    """Start the Google authorization flow, remembering where to return."""
    if next_url:
        request.session["next"] = safe_next_url(next_url)

    redirect_uri = str(request.url_for("auth"))
    if settings.is_production and redirect_uri.startswith("http:"):
        redirect_uri = "https:" + redirect_uri[len("http:"):]
    return await oauth.google.authorize_redirect(request, redirect_uri)


@router.get("/callback")
@limiter.limit("5/minute")
async def auth(
    request: Request,
    repository: MembershipRepositoryDep,
    provider: SessionProviderDep,
):
    """Finish the Google flow and open an organization session."""
    try:
        token = await oauth.google.authorize_access_token(request)
    except OAuthError as error:
        logger.warning("oauth_callback_failed", error=error.error)
        return HTMLResponse(
            f"<h1>OAuth Error</h1><pre>{escape(str(error.error))}</pre>",
            status_code=400,
        )

    profile = token.get("userinfo") or {}
    email = profile.get("email")
    if not email:
        return RedirectResponse(url=LOGIN_URL)

    membership = repository.get_membership(email)
    if membership is None:
        logger.warning("sign_in_without_membership", email=email)
        return RedirectResponse(url=f"{LOGIN_URL}?error=no_membership")

    session = Session(
        user_id=membership.email,
        email=membership.email,
        name=profile.get("name") or membership.name,
        organization_id=membership.organization_id,
        role=membership.role,
    )
    request.session["user"] = {"email": email, "name": session.name}
    response = RedirectResponse(url=safe_next_url(request.session.pop("next", None)))
    provider.issue(response, session)
    logger.info(
        "user_signed_in",
        user_id=session.user_id,
        organization_id=session.organization_id,
        role=session.role,
    )
    return response


@router.get("/logout")
@limiter.limit("5/minute")
async def logout(request: Request, provider: SessionProviderDep):
    request.session.pop("user", None)
    response = RedirectResponse(url=LOGIN_URL)
    provider.clear(response)
    return response


@router.get("/me")
@limiter.limit("10/minute")
async def user(request: Request, session: OptionalSessionDep):
    """Signed-in user and organization, or an error body when anonymous."""
    if session is None:
        return JSONResponse({"error": "Not logged in"})
    return JSONResponse(
        {
            "name": session.name,
            "email": session.email,
            "organization_id": session.organization_id,
            "role": session.role,
        }
    )

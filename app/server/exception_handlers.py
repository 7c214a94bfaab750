"""Exception handlers for session gate failures.

API requests get JSON 401/403 bodies. Page requests are sent to the sign-in
page (401) or shown a plain, localized 403 page.
"""

from html import escape
from urllib.parse import quote

from fastapi import FastAPI, Request, status
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse

from infrastructure.auth.errors import AuthenticationRequired, AuthorizationDenied
from infrastructure.i18n.routing import RouteClassification, classify_route
from infrastructure.logging import get_module_logger
from infrastructure.services.providers import (
    get_locale_registry,
    get_route_rules,
    get_translation_service,
)
from server.html import render_shell

logger = get_module_logger()

LOGIN_PATH = "/login"


def _is_api_request(request: Request) -> bool:
    classification = getattr(request.state, "route_classification", None)
    if classification is None:
        classification = classify_route(request.url.path, get_route_rules()).value
    return classification == RouteClassification.API.value


def login_redirect_url(request: Request) -> str:
    """Sign-in URL that returns the user to the current page."""
    target = request.url.path
    if request.url.query:
        target = f"{target}?{request.url.query}"
    return f"{LOGIN_PATH}?next={quote(target, safe='/')}"


async def authentication_required_handler(request: Request, exc: Exception):
    """Map AuthenticationRequired to a 401 or a sign-in redirect."""
    detail = getattr(exc, "detail", "Not authenticated")
    if _is_api_request(request):
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"detail": detail},
        )
    return RedirectResponse(
        url=login_redirect_url(request), status_code=status.HTTP_303_SEE_OTHER
    )


async def authorization_denied_handler(request: Request, exc: Exception):
    """Map AuthorizationDenied to a 403 JSON body or page."""
    detail = getattr(exc, "detail", "Forbidden")
    if _is_api_request(request):
        content = {"detail": detail}
        if isinstance(exc, AuthorizationDenied):
            if exc.required_role:
                content["required_role"] = exc.required_role
            if exc.permission:
                content["permission"] = exc.permission
        return JSONResponse(status_code=status.HTTP_403_FORBIDDEN, content=content)

    registry = get_locale_registry()
    locale = registry.get_valid_locale(
        getattr(getattr(request.state, "locale", None), "value", None)
    )
    message = get_translation_service().t("errors.forbidden", locale)
    info = registry.describe(locale.value)
    return HTMLResponse(
        render_shell(info, message, f"<h1>{escape(message)}</h1>"),
        status_code=status.HTTP_403_FORBIDDEN,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AuthenticationRequired, authentication_required_handler)
    app.add_exception_handler(AuthorizationDenied, authorization_denied_handler)

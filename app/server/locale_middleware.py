"""Locale routing middleware.

Applies the routing decision from `infrastructure.i18n.routing` to each
request: unprefixed pages are redirected to their locale-prefixed URL,
prefixed pages are served and remembered in the locale cookie, excluded
requests pass through untouched. The session provider gets a chance to
refresh the session on every response.
"""

from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import RedirectResponse, Response

from infrastructure.auth.provider import SessionProvider
from infrastructure.i18n.models import Locale
from infrastructure.i18n.resolvers import LocaleResolver
from infrastructure.i18n.routing import (
    PassThrough,
    RedirectToLocale,
    RouteClassification,
    RouteRules,
    decide_route,
)
from infrastructure.logging import (
    CORRELATION_ID_HEADER,
    bind_request_context,
    get_module_logger,
)

logger = get_module_logger()


class LocaleMiddleware(BaseHTTPMiddleware):
    """Locale-prefix routing for page requests.

    Args:
        app: The ASGI application.
        resolver: Locale resolver bound to the registry.
        rules: Exclusion prefixes for API, static and auth requests.
        session_provider: Provider refreshed on every response, if any.
        cookie_name: Name of the locale cookie.
        cookie_max_age: Lifetime of the locale cookie in seconds.
        secure_cookie: Whether the locale cookie is marked Secure.
    """

    def __init__(
        self,
        app,
        resolver: LocaleResolver,
        rules: Optional[RouteRules] = None,
        session_provider: Optional[SessionProvider] = None,
        cookie_name: str = "locale",
        cookie_max_age: int = 365 * 24 * 60 * 60,
        secure_cookie: bool = False,
    ):
        super().__init__(app)
        self.resolver = resolver
        self.rules = rules or RouteRules()
        self.session_provider = session_provider
        self.cookie_name = cookie_name
        self.cookie_max_age = cookie_max_age
        self.secure_cookie = secure_cookie

    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        with bind_request_context(
            correlation_id=request.headers.get(CORRELATION_ID_HEADER),
            request_path=path,
            request_method=request.method,
        ):
            stored_locale = request.cookies.get(self.cookie_name)
            decision = decide_route(
                path=path,
                query=request.url.query,
                cookie_value=stored_locale,
                accept_language=request.headers.get("accept-language"),
                resolver=self.resolver,
                rules=self.rules,
            )

            if isinstance(decision, RedirectToLocale):
                logger.info(
                    "locale_redirect",
                    location=decision.location,
                    locale=decision.locale.value,
                    source=decision.resolution.source.value,
                )
                response: Response = RedirectResponse(url=decision.location)
                self._set_locale_cookie(response, decision.locale)
            elif isinstance(decision, PassThrough):
                request.state.locale = decision.locale
                request.state.route_classification = RouteClassification.LOCALIZED_PAGE.value
                response = await call_next(request)
                if decision.set_cookie:
                    self._set_locale_cookie(response, decision.locale)
                    logger.debug(
                        "locale_cookie_updated",
                        locale=decision.locale.value,
                        previous_locale=stored_locale,
                    )
            else:
                # Excluded: API, static asset or auth page
                request.state.locale = decision.resolution.locale
                request.state.route_classification = decision.classification.value
                response = await call_next(request)

            if self.session_provider is not None:
                self.session_provider.refresh(request, response)
            return response

    def _set_locale_cookie(self, response: Response, locale: Locale) -> None:
        response.set_cookie(
            self.cookie_name,
            locale.value,
            max_age=self.cookie_max_age,
            path="/",
            httponly=False,
            secure=self.secure_cookie,
            samesite="lax",
        )

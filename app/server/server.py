from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from api.router import api_router
from api.dependencies.rate_limits import setup_rate_limiter
from infrastructure.configuration import settings
from infrastructure.logging import get_module_logger
from infrastructure.services.providers import (
    get_locale_resolver,
    get_route_rules,
    get_session_provider,
)
from server.exception_handlers import register_exception_handlers
from server.lifespan import lifespan
from server.locale_middleware import LocaleMiddleware

logger = get_module_logger()


def create_app() -> FastAPI:
    """Build the application: routes, gate error mapping and middleware stack.

    Middleware runs outermost first: CORS, the OAuth state session, then
    locale routing closest to the routes.
    """
    app = FastAPI(title="Property Manager", lifespan=lifespan)
    setup_rate_limiter(app)
    register_exception_handlers(app)

    app.add_middleware(
        LocaleMiddleware,
        resolver=get_locale_resolver(),
        rules=get_route_rules(),
        session_provider=get_session_provider(),
        cookie_name=settings.i18n.LOCALE_COOKIE_NAME,
        cookie_max_age=settings.i18n.LOCALE_COOKIE_MAX_AGE,
        secure_cookie=settings.is_production,
    )
    # authlib keeps the OAuth state in the signed Starlette session
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.server.SECRET_KEY,
        same_site="lax",
        https_only=settings.is_production,
    )

    allow_origins = (
        [settings.server.FRONTEND_URL]
        if settings.is_production and settings.server.FRONTEND_URL.startswith("http")
        else [
            "http://localhost:8000",
            "http://127.0.0.1:8000",
        ]
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)
    return app


handler = create_app()

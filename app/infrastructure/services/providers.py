"""Process-wide service instances.

Every provider is wrapped in `lru_cache`, so each service is built once, on
first use, from `get_settings()`. Route handlers take them through the
`*Dep` aliases in `infrastructure.services.dependencies`; tests replace them
with `app.dependency_overrides`.
"""

from functools import lru_cache
from pathlib import Path

from infrastructure.auth.gate import SessionGate
from infrastructure.auth.provider import JWTCookieSessionProvider, SessionProvider
from infrastructure.configuration import Settings
from infrastructure.i18n.factory import (
    create_registry,
    create_resolver,
    create_translator,
)
from infrastructure.i18n.registry import LocaleRegistry
from infrastructure.i18n.resolvers import LocaleResolver
from infrastructure.i18n.routing import RouteRules
from infrastructure.i18n.service import TranslationService
from infrastructure.security.tokens import SessionTokenCodec
from modules.team.repository import InMemoryMembershipRepository, MembershipRepository


@lru_cache
def get_settings() -> Settings:
    """The one Settings instance of the process.

    Infrastructure code calls this directly; handlers should prefer
    `SettingsDep` so tests can override it:

        @router.get("/version")
        def version(settings: SettingsDep):
            return {"version": settings.GIT_SHA}
    """
    return Settings()


@lru_cache
def get_locale_registry() -> LocaleRegistry:
    return create_registry(get_settings().i18n)


@lru_cache
def get_locale_resolver() -> LocaleResolver:
    return create_resolver(get_locale_registry())


@lru_cache
def get_route_rules() -> RouteRules:
    return RouteRules.from_settings(get_settings().i18n)


@lru_cache
def get_translation_service() -> TranslationService:
    """Translations of every supported locale, default locale as fallback.

    Reads TRANSLATIONS_DIR when set, the bundled catalogs otherwise.
    """
    settings = get_settings()
    registry = get_locale_registry()
    translations_dir = settings.i18n.TRANSLATIONS_DIR
    translator = create_translator(
        translations_dir=Path(translations_dir) if translations_dir else None,
        fallback_locale=registry.default,
        locales=registry.supported,
    )
    return TranslationService(translator=translator)


@lru_cache
def get_session_codec() -> SessionTokenCodec:
    return SessionTokenCodec.from_settings(get_settings().server)


@lru_cache
def get_session_provider() -> SessionProvider:
    """Signed-cookie sessions; the cookie is Secure only in production."""
    server = get_settings().server
    return JWTCookieSessionProvider(
        codec=get_session_codec(),
        cookie_name=server.SESSION_COOKIE_NAME,
        refresh_threshold_minutes=server.SESSION_REFRESH_THRESHOLD_MINUTES,
        secure=get_settings().is_production,
    )


@lru_cache
def get_session_gate() -> SessionGate:
    return SessionGate(provider=get_session_provider())


@lru_cache
def get_membership_repository() -> MembershipRepository:
    """Memberships seeded from TEAM_MEMBERSHIPS."""
    return InMemoryMembershipRepository.from_config(
        get_settings().team.TEAM_MEMBERSHIPS
    )

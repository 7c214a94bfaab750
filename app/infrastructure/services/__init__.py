"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    SettingsDep,
    LocaleRegistryDep,
    LocaleResolverDep,
    TranslationServiceDep,
    SessionTokenCodecDep,
    SessionProviderDep,
    MembershipRepositoryDep,
)
from infrastructure.services.providers import (
    get_settings,
    get_locale_registry,
    get_locale_resolver,
    get_route_rules,
    get_translation_service,
    get_session_codec,
    get_session_provider,
    get_session_gate,
    get_membership_repository,
)

__all__ = [
    "SettingsDep",
    "LocaleRegistryDep",
    "LocaleResolverDep",
    "TranslationServiceDep",
    "SessionTokenCodecDep",
    "SessionProviderDep",
    "MembershipRepositoryDep",
    "get_settings",
    "get_locale_registry",
    "get_locale_resolver",
    "get_route_rules",
    "get_translation_service",
    "get_session_codec",
    "get_session_provider",
    "get_session_gate",
    "get_membership_repository",
]

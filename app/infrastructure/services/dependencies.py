"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated
from fastapi import Depends
from infrastructure.auth.provider import SessionProvider
from infrastructure.configuration import Settings
from infrastructure.i18n.registry import LocaleRegistry
from infrastructure.i18n.resolvers import LocaleResolver
from infrastructure.i18n.service import TranslationService
from infrastructure.security.tokens import SessionTokenCodec
from infrastructure.services.providers import (
    get_settings,
    get_locale_registry,
    get_locale_resolver,
    get_translation_service,
    get_session_codec,
    get_session_provider,
    get_membership_repository,
)
from modules.team.repository import MembershipRepository

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Locale dependencies
LocaleRegistryDep = Annotated[LocaleRegistry, Depends(get_locale_registry)]
LocaleResolverDep = Annotated[LocaleResolver, Depends(get_locale_resolver)]
TranslationServiceDep = Annotated[TranslationService, Depends(get_translation_service)]

# Session dependencies
SessionTokenCodecDep = Annotated[SessionTokenCodec, Depends(get_session_codec)]
SessionProviderDep = Annotated[SessionProvider, Depends(get_session_provider)]

# Team memberships
MembershipRepositoryDep = Annotated[
    MembershipRepository, Depends(get_membership_repository)
]

__all__ = [
    "SettingsDep",
    "LocaleRegistryDep",
    "LocaleResolverDep",
    "TranslationServiceDep",
    "SessionTokenCodecDep",
    "SessionProviderDep",
    "MembershipRepositoryDep",
]

"""Property manager configuration settings - main aggregator."""

import secrets
from typing import ClassVar

from pydantic import model_validator
from pydantic_settings import BaseSettings

from infrastructure.configuration.base import SECTION_CONFIG
from infrastructure.configuration.features import TeamSettings
from infrastructure.configuration.infrastructure import (
    I18nSettings,
    ServerSettings,
)


class Settings(BaseSettings):
    """Application configuration, one attribute per settings section.

    Sections:
        team: Organization memberships used at sign-in.
        server: URLs, OAuth client and session token settings.
        i18n: Supported locales, locale cookie and routing exclusions.

    Environment Variables:
        PREFIX: Environment prefix; empty in production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        GIT_SHA: Deployed commit, reported by /version

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        if settings.is_production:
            cookie_secure = True
        default = settings.i18n.DEFAULT_LOCALE
        ```
    """

    SECTIONS: ClassVar[dict[str, type[BaseSettings]]] = {
        "team": TeamSettings,
        "server": ServerSettings,
        "i18n": I18nSettings,
    }

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    team: TeamSettings
    server: ServerSettings
    i18n: I18nSettings

    model_config = SECTION_CONFIG

    def __init__(self, **kwargs):
        """Build every section from the environment unless passed explicitly.

        Args:
            **kwargs: Field values or pre-built sections (used by tests).
        """
        for name, section in self.SECTIONS.items():
            kwargs.setdefault(name, section())
        super().__init__(**kwargs)

    @property
    def is_production(self) -> bool:
        """True when no environment PREFIX is set."""
        return not self.PREFIX

    @model_validator(mode="after")
    def check_session_secret(self) -> "Settings":
        """Production must sign sessions with a configured secret.

        Other environments get a random key per process, so sessions do not
        survive a restart there.
        """
        if self.server.SECRET_KEY:
            return self
        if self.is_production:
            raise ValueError("SESSION_SECRET_KEY must be set in production")
        self.server.SECRET_KEY = secrets.token_urlsafe(32)
        return self


settings = Settings()

"""Shared base classes and utilities for settings modules."""

from pydantic_settings import BaseSettings, SettingsConfigDict

# Every section reads the same .env file with exact-case variable names.
SECTION_CONFIG = SettingsConfigDict(
    env_file=".env",
    case_sensitive=True,
    extra="ignore",
)


class FeatureSettings(BaseSettings):
    """Base class for feature module settings (team memberships, ...)."""

    model_config = SECTION_CONFIG


class InfrastructureSettings(BaseSettings):
    """Base class for infrastructure-level settings.

    Infrastructure settings control the HTTP server, sessions and locale
    routing.
    """

    model_config = SECTION_CONFIG


def split_csv(value: str) -> list[str]:
    """Split a comma-separated settings value into stripped, non-empty items."""
    return [item.strip() for item in value.split(",") if item.strip()]

"""Infrastructure settings __init__ - exports all infrastructure settings."""

from infrastructure.configuration.infrastructure.server import ServerSettings
from infrastructure.configuration.infrastructure.i18n import I18nSettings

__all__ = [
    "ServerSettings",
    "I18nSettings",
]

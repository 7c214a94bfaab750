"""Shared infrastructure of the property manager.

Packages:
- configuration: pydantic-settings sections aggregated in `Settings`
- logging: structlog setup and request context
- i18n: locales, URL locale segments, routing decisions and translations
- security: signed session tokens
- auth: sessions, roles and the session gate
- services: cached providers and FastAPI dependency aliases
"""

from infrastructure.configuration import settings
from infrastructure.logging import get_module_logger, logger

__all__ = ["settings", "get_module_logger", "logger"]

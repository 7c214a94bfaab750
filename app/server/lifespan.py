from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from pydantic import BaseModel

from infrastructure.logging import get_module_logger
from infrastructure.services import (
    get_locale_registry,
    get_membership_repository,
    get_settings,
    get_translation_service,
)

logger = get_module_logger()


def _log_configuration(settings) -> None:
    # Section values may hold secrets; only their field names are logged.
    scalars = {}
    for name in type(settings).model_fields:
        value = getattr(settings, name)
        if isinstance(value, BaseModel):
            logger.info("configuration_loaded", section=name, keys=sorted(type(value).model_fields))
        else:
            scalars[name] = value
    logger.info("configuration_initialized", **scalars)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Build the cached services before the first request is served.

    A bad locale list or a broken translations directory stops start-up
    instead of failing the first page load.
    """
    settings = get_settings()
    app.state.settings = settings
    logger.info("application_startup", production=settings.is_production)
    _log_configuration(settings)

    registry = get_locale_registry()
    translations = get_translation_service()
    get_membership_repository()
    app.state.locale_registry = registry
    logger.info(
        "locales_ready",
        supported=list(registry.codes),
        default_locale=registry.default.value,
        loaded=[locale.value for locale in translations.get_available_locales()],
    )

    yield

    logger.info("application_shutdown")

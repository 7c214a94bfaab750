from fastapi import APIRouter, Request

from api.dependencies.rate_limits import get_limiter
from infrastructure.services import LocaleRegistryDep, SettingsDep

router = APIRouter(tags=["System"])
limiter = get_limiter()


# Load balancer and uptime probes poll these every few seconds.
@router.get("/version")
@limiter.limit("50/minute")
def get_version(request: Request, settings: SettingsDep):  # pylint: disable=unused-argument
    """Deployed commit of the application."""
    return {"version": settings.GIT_SHA}


@router.get("/health")
@limiter.limit("50/minute")
def get_health(request: Request, registry: LocaleRegistryDep):  # pylint: disable=unused-argument
    """Liveness check; also reports the locales being served."""
    return {"status": "ok", "locales": list(registry.codes)}

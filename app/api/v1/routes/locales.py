from fastapi import APIRouter, HTTPException, Request, status

from api.dependencies.rate_limits import get_limiter
from infrastructure.services import LocaleRegistryDep, TranslationServiceDep

router = APIRouter(prefix="/locales", tags=["Locales"])
limiter = get_limiter()


def _locale_payload(info) -> dict:
    return {
        "code": info.code,
        "display_name": info.display_name,
        "flag": info.flag,
        "direction": info.direction.value,
        "is_default": info.is_default,
    }


@router.get("")
@limiter.limit("60/minute")
def list_locales(request: Request, registry: LocaleRegistryDep):  # pylint: disable=unused-argument
    """List the enabled locales, default first flagged."""
    return {
        "default": registry.default.value,
        "locales": [_locale_payload(info) for info in registry.describe_all()],
    }


@router.get("/{code}/dictionary")
@limiter.limit("60/minute")
def get_dictionary(
    request: Request,  # pylint: disable=unused-argument
    code: str,
    registry: LocaleRegistryDep,
    translations: TranslationServiceDep,
):
    """Full translation table for a locale, completed from the default locale.

    Unsupported codes are a 404 rather than a silent fallback, so clients
    notice they asked for something that does not exist.
    """
    locale = registry.get(code)
    if locale is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unsupported locale: {code}",
        )
    return {
        "locale": locale.value,
        "direction": locale.direction.value,
        "messages": translations.get_dictionary(locale),
    }

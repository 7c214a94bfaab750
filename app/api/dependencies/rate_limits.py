"""Shared slowapi limiter.

Routes opt in with `@limiter.limit("N/period")`; the limit is counted per
client address.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from infrastructure.logging import get_module_logger

logger = get_module_logger()

RATE_LIMIT_BODY = {"message": "Rate limit exceeded"}

limiter = Limiter(key_func=get_remote_address)


async def rate_limit_handler(request: Request, exc: Exception):
    """Map RateLimitExceeded to a 429 with a fixed body."""
    if not isinstance(exc, RateLimitExceeded):
        return None
    logger.warning(
        "rate_limit_exceeded",
        path=request.url.path,
        client=get_remote_address(request),
        limit=str(exc.detail),
    )
    return JSONResponse(status_code=429, content=RATE_LIMIT_BODY)


def setup_rate_limiter(app: FastAPI) -> None:
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_handler)


def get_limiter() -> Limiter:
    return limiter

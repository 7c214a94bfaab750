"""Request-scoped logging fields.

The locale middleware binds a correlation id and the request line for the
duration of each request; the session gate adds the signed-in user and
organization. Everything is stored in structlog's context variables, which
`merge_contextvars` copies into each entry.
"""

import uuid
from contextlib import contextmanager
from typing import Any, Iterator, Optional

import structlog

CORRELATION_ID_HEADER = "X-Correlation-ID"


@contextmanager
def bind_request_context(
    correlation_id: Optional[str] = None,
    user_id: Optional[str] = None,
    organization_id: Optional[str] = None,
    request_path: Optional[str] = None,
    request_method: Optional[str] = None,
    **extra_context: Any,
) -> Iterator[None]:
    """Bind request fields for the length of the `with` block.

    A correlation id is generated when the caller has none (no
    X-Correlation-ID header). Fields left as None are not bound. On exit,
    only the keys bound here are removed, even if the block raised.

    Example:
        with bind_request_context(
            correlation_id=request.headers.get(CORRELATION_ID_HEADER),
            request_path=request.url.path,
            request_method=request.method,
        ):
            response = await call_next(request)
    """
    fields = {
        "user_id": user_id,
        "organization_id": organization_id,
        "request_path": request_path,
        "request_method": request_method,
        **extra_context,
    }
    bound = {"correlation_id": correlation_id or str(uuid.uuid4())}
    bound.update({key: value for key, value in fields.items() if value is not None})

    structlog.contextvars.bind_contextvars(**bound)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*bound)


def get_correlation_id() -> Optional[str]:
    """Correlation id of the request being handled, if any."""
    return structlog.contextvars.get_contextvars().get("correlation_id")


def set_correlation_id(correlation_id: str) -> None:
    structlog.contextvars.bind_contextvars(correlation_id=correlation_id)


def clear_request_context() -> None:
    """Drop every bound field; used by tests and work outside a request."""
    structlog.contextvars.clear_contextvars()

"""Structured logging for the property manager.

structlog is configured once, on first import of this package. Modules take a
logger bound to their own name; request-scoped fields (correlation id, path,
method) are bound by the locale middleware and flow into every entry written
while the request is handled.

Example:
    from infrastructure.logging import get_module_logger

    logger = get_module_logger()
    logger.info("locale_redirect", location="/fr/units", source="cookie")

Session tokens, cookies and OAuth secrets are redacted by the masking
processor, so log keys carrying them are safe to pass through.
"""

from infrastructure.logging.context import (
    CORRELATION_ID_HEADER,
    bind_request_context,
    clear_request_context,
    get_correlation_id,
    set_correlation_id,
)
from infrastructure.logging.formatters import SENSITIVE_PATTERNS, mask_sensitive_data
from infrastructure.logging.setup import (
    configure_logging,
    get_logger,
    get_module_logger,
    logger,
)

__all__ = [
    "CORRELATION_ID_HEADER",
    "SENSITIVE_PATTERNS",
    "bind_request_context",
    "clear_request_context",
    "configure_logging",
    "get_correlation_id",
    "get_logger",
    "get_module_logger",
    "logger",
    "mask_sensitive_data",
    "set_correlation_id",
]

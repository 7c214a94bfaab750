"""structlog configuration.

`configure_logging` runs once when this module is imported and the resulting
`logger` is the root every module logger is bound from. Development gets
console output, production gets one JSON object per line, and pytest runs
get no output at all.
"""

import inspect
import logging
import sys
from types import ModuleType
from typing import Any, Optional

import structlog
from structlog.stdlib import BoundLogger

from infrastructure.configuration import settings
from infrastructure.logging.formatters import (
    add_app_info,
    add_environment_info,
    mask_sensitive_data,
    truncate_large_values,
)

APP_NAME = "property-manager"

SILENT = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    return "pytest" in sys.modules


def _stdlib_backed(processors: list[Any]) -> None:
    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def build_processors(prod_mode: bool) -> list[Any]:
    """Processor pipeline, renderer last.

    Request context and call-site fields come first, then masking of
    credentials, then the application stamps.
    """
    environment = "production" if prod_mode else (settings.PREFIX or "local")
    renderer = (
        structlog.processors.JSONRenderer()
        if prod_mode
        else structlog.dev.ConsoleRenderer()
    )
    callsite = [
        structlog.processors.CallsiteParameter.FILENAME,
        structlog.processors.CallsiteParameter.LINENO,
        structlog.processors.CallsiteParameter.FUNC_NAME,
    ]
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(parameters=callsite),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        mask_sensitive_data(),
        truncate_large_values(),
        add_app_info(APP_NAME, settings.GIT_SHA),
        add_environment_info(environment),
        renderer,
    ]


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog on top of the standard library logging module.

    Args:
        log_level: Level name; settings.LOG_LEVEL when omitted.
        is_production: JSON output when true; settings.is_production when
            omitted.

    Returns:
        The root bound logger.
    """
    if _is_test_environment():
        # Bound loggers keep working; nothing reaches a handler.
        _stdlib_backed(
            [
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ]
        )
        logging.basicConfig(format="%(message)s", level=SILENT, force=True)
        return structlog.stdlib.get_logger()

    if is_production is None:
        is_production = settings.is_production
    _stdlib_backed(build_processors(is_production))

    level_name = (log_level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name, logging.INFO),
    )
    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def _caller_module() -> Optional[ModuleType]:
    # Two frames up: past this helper and the public function calling it.
    frame = inspect.currentframe()
    for _ in range(2):
        frame = frame.f_back if frame is not None else None
    return inspect.getmodule(frame) if frame is not None else None


def get_logger(name: Optional[str] = None) -> BoundLogger:
    """Logger bound with `logger_name` (the caller's module when omitted)."""
    if name is None:
        module = _caller_module()
        name = module.__name__ if module is not None else "unknown"
    return logger.bind(logger_name=name)


def get_module_logger() -> BoundLogger:
    """Logger for the calling module.

    Binds `component` (last part of the module name) and `module_path`:

        # in infrastructure/i18n/resolvers.py
        logger = get_module_logger()
        # {"component": "resolvers", "module_path": "infrastructure.i18n.resolvers"}
    """
    module = _caller_module()
    if module is None:
        return logger.bind(component="unknown")
    return logger.bind(
        component=module.__name__.rpartition(".")[2],
        module_path=module.__name__,
    )

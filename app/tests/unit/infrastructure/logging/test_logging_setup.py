"""Unit tests for infrastructure.logging.setup."""

import pytest
import structlog

from infrastructure.logging import setup
from infrastructure.logging.formatters import EventDict


@pytest.mark.unit
class TestLoggingSetup:
    """Test suite for logging configuration."""

    def test_detects_test_environment(self):
        assert setup._is_test_environment() is True

    def test_configure_logging_is_silent_under_pytest(self):
        logger = setup.configure_logging(log_level="DEBUG", is_production=True)
        assert logger is not None
        assert structlog.is_configured()

    def test_production_pipeline_renders_json(self):
        processors = setup.build_processors(prod_mode=True)
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert processors[0] is structlog.contextvars.merge_contextvars

    def test_development_pipeline_renders_console(self):
        processors = setup.build_processors(prod_mode=False)
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_pipeline_masks_before_rendering(self):
        processors = setup.build_processors(prod_mode=True)
        event: EventDict = {"event": "session_refreshed", "access_token": "abc"}
        for processor in processors[6:-1]:
            event = processor(None, "info", event)
        assert event["access_token"] == "***REDACTED***"
        assert event["app_name"] == setup.APP_NAME

    def test_get_logger_binds_name(self):
        logger = setup.get_logger("locale.routing")
        assert logger._context["logger_name"] == "locale.routing"

    def test_module_logger_binds_component(self):
        from infrastructure.i18n import translator

        bound = translator.logger._context
        assert bound["component"] == "translator"
        assert bound["module_path"] == "infrastructure.i18n.translator"

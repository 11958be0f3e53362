"""Unit tests for glossa.logging.setup module.

Tests cover:
- configure_logging function
- get_module_logger function
- Test logging suppression in test environment
"""

import logging

import pytest
import structlog

from glossa.logging.setup import (
    _is_test_environment,
    configure_logging,
    get_module_logger,
)


@pytest.mark.unit
class TestIsTestEnvironment:
    """Test suite for _is_test_environment helper."""

    def test_detects_pytest_in_sys_modules(self):
        """Returns True when pytest is in sys.modules."""
        assert _is_test_environment() is True


@pytest.mark.unit
class TestConfigureLogging:
    """Test suite for configure_logging function."""

    def test_configure_logging_returns_logger(self):
        result = configure_logging()

        assert hasattr(result, "info")
        assert hasattr(result, "warning")

    def test_configure_logging_accepts_overrides(self):
        assert configure_logging(log_level="DEBUG", is_production=True) is not None
        assert configure_logging(log_level="INFO", is_production=False) is not None

    def test_logging_suppressed_during_tests(self):
        configure_logging(log_level="DEBUG")
        assert logging.root.level > logging.CRITICAL


@pytest.mark.unit
class TestGetModuleLogger:
    """Test suite for get_module_logger function."""

    def test_binds_calling_module(self):
        logger = get_module_logger()
        context = structlog.get_context(logger)

        assert context["component"] == "test_logging_setup"
        assert context["module_path"].endswith("test_logging_setup")

    def test_logger_methods_do_not_raise(self):
        logger = get_module_logger()
        logger.info("test_event", key="value")
        logger.warning("test_warning", count=1)

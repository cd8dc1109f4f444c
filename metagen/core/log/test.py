"""Tests for core logging module."""

import logging
from io import StringIO

import pytest

from .lib import get_logger, parse_level, setup_logging


class TestLogging:
    """Test core logging API."""

    @pytest.mark.unit
    def test_get_logger(self) -> None:
        """Verify logger instance creation."""
        logger = get_logger("test")
        assert logger.name == "test"
        assert isinstance(logger, logging.Logger)

    @pytest.mark.unit
    def test_get_logger_default_name(self) -> None:
        """Verify default logger name."""
        logger = get_logger()
        assert logger.name == "metagen"

    @pytest.mark.unit
    def test_setup_logging(self) -> None:
        """Verify logging setup accepts a level name."""
        stream = StringIO()
        setup_logging(level="debug", stream=stream)
        logger = get_logger("test_setup")
        logger.debug("test message")

        # basicConfig is a no-op when logging was already configured,
        # so only the API contract is checked here.
        assert logger.level == logging.NOTSET


class TestParseLevel:
    """Tests for level name resolution."""

    @pytest.mark.unit
    def test_numeric_passthrough(self) -> None:
        """Numeric levels pass through."""
        assert parse_level(logging.WARNING) == logging.WARNING

    @pytest.mark.unit
    def test_name_is_case_insensitive(self) -> None:
        """Level names are case insensitive."""
        assert parse_level("warning") == logging.WARNING
        assert parse_level(" Debug ") == logging.DEBUG

    @pytest.mark.unit
    def test_unknown_name_falls_back_to_info(self) -> None:
        """Unknown names fall back to INFO."""
        assert parse_level("chatty") == logging.INFO

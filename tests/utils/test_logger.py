"""
Tests for logging utilities.

This module tests logging setup and formatter functionality.
"""

import logging
from unittest.mock import patch

import pytest

from genrepo_tool.utils import setup_logging, WrappingFormatter
from genrepo_tool.utils.logger import verbosity_to_level


class TestLoggingUtilities:
    """Test logging utility functions."""

    @pytest.mark.parametrize(
        "verbosity,level",
        [(0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (3, logging.DEBUG)],
    )
    def test_verbosity_to_level(self, verbosity, level):
        """Test -d counts map to logging levels."""
        assert verbosity_to_level(verbosity) == level

    def test_setup_logging_basic(self):
        """Test setup_logging without wrapping uses basicConfig."""
        with patch("logging.basicConfig") as mock_basic_config:
            setup_logging(verbosity=1)
            mock_basic_config.assert_called_once()
            assert mock_basic_config.call_args.kwargs["level"] == logging.INFO

    def test_setup_logging_with_wrapping(self):
        """Test setup_logging with wrapping installs a single wrapping handler."""
        setup_logging(verbosity=2, use_wrapping=True)

        root_logger = logging.getLogger()
        assert root_logger.level == logging.DEBUG
        assert len(root_logger.handlers) == 1
        assert isinstance(root_logger.handlers[0].formatter, WrappingFormatter)

    def test_http_loggers_quiet_below_max_verbosity(self):
        """Test httpx request logs are only shown at -ddd."""
        with patch("logging.basicConfig"):
            setup_logging(verbosity=2)
            assert logging.getLogger("httpx").level == logging.WARNING

            setup_logging(verbosity=3)
            assert logging.getLogger("httpx").level == logging.DEBUG

    def test_wrapping_formatter(self):
        """Test WrappingFormatter wraps long messages only."""
        formatter = WrappingFormatter(width=50)

        short = logging.LogRecord("test", logging.INFO, __file__, 1, "Short message", None, None)
        assert formatter.format(short) == "Short message"

        long_record = logging.LogRecord(
            "test",
            logging.INFO,
            __file__,
            1,
            "This is a very long message that should be wrapped because it exceeds the specified width limit",
            None,
            None,
        )
        formatted = formatter.format(long_record)
        assert "\n" in formatted
        assert all(len(line) <= 50 for line in formatted.splitlines())

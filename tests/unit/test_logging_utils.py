#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for logging configuration."""

import logging

import pytest

from md2bbcode.logging_utils import PACKAGE_LOGGER_NAME, configure_logging, resolve_log_level


@pytest.mark.unit
class TestLoggingUtils:
    """Tests for resolve_log_level and configure_logging."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("debug", logging.DEBUG),
            ("ERROR", logging.ERROR),
            (logging.INFO, logging.INFO),
            ("nonsense", logging.WARNING),
        ],
    )
    def test_resolve_log_level(self, value, expected: int) -> None:
        assert resolve_log_level(value) == expected

    def test_configures_package_logger(self) -> None:
        package_logger = configure_logging("INFO")
        assert package_logger.name == PACKAGE_LOGGER_NAME
        assert package_logger.level == logging.INFO
        assert len(package_logger.handlers) == 1
        assert not package_logger.propagate

    def test_reconfiguring_replaces_handlers(self) -> None:
        configure_logging("INFO")
        package_logger = configure_logging("DEBUG")
        assert len(package_logger.handlers) == 1

    def test_log_file(self, tmp_path) -> None:
        log_file = tmp_path / "md2bbcode.log"
        package_logger = configure_logging(logging.WARNING, log_file=str(log_file))
        logging.getLogger("md2bbcode.renderers").warning("written to file")
        for handler in package_logger.handlers:
            handler.flush()
        assert "WARNING: written to file" in log_file.read_text(encoding="utf-8")

    def test_trace_format(self) -> None:
        package_logger = configure_logging("DEBUG", trace_mode=True)
        assert "%(name)s" in package_logger.handlers[0].formatter._fmt

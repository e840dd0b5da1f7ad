"""Tests for logging utilities."""

import logging
from io import StringIO

from densepath.logging import (
    configure_logging,
    get_logger,
    set_log_level,
)


def test_get_logger_returns_logger():
    """Test that get_logger returns a logger instance."""
    logger = get_logger("test_module")
    assert isinstance(logger, logging.Logger)
    assert logger.name == "densepath.test_module"


def test_get_logger_package_names_unchanged():
    """Module names already under densepath are not prefixed twice."""
    assert get_logger("densepath.graphs.shortest").name == "densepath.graphs.shortest"
    assert get_logger().name == "densepath"


def test_get_logger_caching():
    """Test that get_logger caches loggers."""
    logger1 = get_logger("test_module")
    logger2 = get_logger("test_module")
    assert logger1 is logger2


def test_get_logger_different_modules():
    """Test that different modules get different loggers."""
    logger1 = get_logger("module1")
    logger2 = get_logger("module2")
    assert logger1 is not logger2
    assert logger1.name != logger2.name


def test_set_log_level():
    """Test that set_log_level updates logger levels."""
    logger = get_logger("test_module")

    set_log_level(logging.INFO)
    assert logger.level == logging.INFO

    set_log_level(logging.WARNING)
    assert logger.level == logging.WARNING


def test_set_log_level_string():
    """Test that set_log_level accepts string levels."""
    logger = get_logger("test_module")

    try:
        set_log_level("DEBUG")
        assert logger.level == logging.DEBUG

        set_log_level("error")
        assert logger.level == logging.ERROR
    finally:
        set_log_level(logging.WARNING)


def test_configure_logging():
    """Messages reach the configured stream with the default format."""
    stream = StringIO()
    try:
        configure_logging(level=logging.DEBUG, stream=stream)
        logger = get_logger("test_module")
        logger.debug("Debug message")

        assert "[DEBUG] densepath.test_module: Debug message" in stream.getvalue()
    finally:
        configure_logging(level=logging.WARNING)


def test_configure_logging_custom_format():
    stream = StringIO()
    try:
        configure_logging(level="INFO", format_string="%(message)s", stream=stream)
        get_logger("test_module").info("plain")
        assert stream.getvalue() == "plain\n"
    finally:
        configure_logging(level=logging.WARNING)


def test_configure_logging_applies_to_later_loggers():
    """Loggers created after configuration use its stream and format."""
    stream = StringIO()
    try:
        configure_logging(level=logging.INFO, format_string="%(name)s|%(message)s", stream=stream)
        get_logger("created_after_configure").info("late")
        assert stream.getvalue() == "densepath.created_after_configure|late\n"
    finally:
        configure_logging(level=logging.WARNING)


def test_configure_logging_keeps_one_handler():
    """Repeated configuration replaces handlers rather than stacking them."""
    logger = get_logger("test_module")
    try:
        configure_logging(level=logging.INFO, stream=StringIO())
        configure_logging(level=logging.INFO, stream=StringIO())
        assert len(logger.handlers) == 1
    finally:
        configure_logging(level=logging.WARNING)


def test_logger_does_not_propagate():
    """Test that loggers don't propagate to root logger."""
    logger = get_logger("test_module")
    assert logger.propagate is False


def test_warning_level_filters_info(path_graph):
    """At the default level the algorithms stay quiet."""
    from densepath.graphs import johnson

    stream = StringIO()
    configure_logging(level=logging.WARNING, stream=stream)
    try:
        johnson(path_graph)
        assert stream.getvalue() == ""
    finally:
        configure_logging(level=logging.WARNING)

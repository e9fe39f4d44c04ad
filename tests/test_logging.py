"""Tests for logging utilities."""

import logging
import sys
from io import StringIO

import pytest

from pathconduit import DiGraph, negative_edge_cycle, single_source_bellman_ford
from pathconduit.logging import (
    configure_logging,
    get_logger,
    set_log_level,
)


@pytest.fixture(autouse=True)
def restore_log_level():
    """Put pathconduit loggers back to WARNING on stderr after each test."""
    yield
    configure_logging(level=logging.WARNING)


def test_get_logger_returns_logger():
    """Test that get_logger returns a logger instance."""
    logger = get_logger("test_module")
    assert isinstance(logger, logging.Logger)
    assert logger.name.startswith("pathconduit.")


def test_get_logger_keeps_package_names():
    """Test that package module names are not prefixed twice."""
    assert get_logger("pathconduit.graphs.shortest").name == "pathconduit.graphs.shortest"
    assert get_logger().name == "pathconduit"


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


def test_logger_output():
    """Test that logger outputs messages correctly."""
    old_stderr = sys.stderr
    sys.stderr = captured = StringIO()

    try:
        configure_logging(level=logging.INFO, stream=captured)
        logger = get_logger("test_module")
        logger.info("Test message")

        output = captured.getvalue()
        assert "Test message" in output
        assert "pathconduit.test_module" in output
    finally:
        sys.stderr = old_stderr


def test_set_log_level():
    """Test that set_log_level updates logger levels."""
    logger = get_logger("test_module")

    set_log_level(logging.INFO)
    assert logger.level == logging.INFO
    assert all(handler.level == logging.INFO for handler in logger.handlers)

    set_log_level(logging.WARNING)
    assert logger.level == logging.WARNING


def test_set_log_level_string():
    """Test that set_log_level accepts string levels."""
    logger = get_logger("test_module")

    set_log_level("DEBUG")
    assert logger.level == logging.DEBUG

    set_log_level("ERROR")
    assert logger.level == logging.ERROR


def test_configure_logging():
    """Test configure_logging function."""
    stream = StringIO()
    configure_logging(level=logging.DEBUG, stream=stream)

    logger = get_logger("test_module")
    logger.debug("Debug message")

    assert "Debug message" in stream.getvalue()


def test_configure_logging_format():
    """Test a custom format string."""
    stream = StringIO()
    get_logger("test_module")
    configure_logging(level=logging.INFO, format_string="%(name)s|%(message)s", stream=stream)

    get_logger("test_module").info("hello")
    assert stream.getvalue().strip() == "pathconduit.test_module|hello"


def test_logger_does_not_propagate():
    """Test that loggers don't propagate to root logger."""
    logger = get_logger("test_module")
    assert logger.propagate is False


def test_algorithms_silent_by_default():
    """Test that algorithms log nothing at the default WARNING level."""
    stream = StringIO()
    configure_logging(level=logging.WARNING, stream=stream)

    G = DiGraph()
    G.add_weighted_edges_from([("a", "b", 1), ("b", "a", -2)])
    assert negative_edge_cycle(G)
    single_source_bellman_ford(G, "b", weight=lambda u, v, record: 1)

    assert stream.getvalue() == ""


def test_bellman_ford_debug_trace():
    """Test that Bellman-Ford reports its pass count at DEBUG."""
    stream = StringIO()
    configure_logging(level=logging.DEBUG, stream=stream)

    G = DiGraph()
    G.add_weighted_edges_from([("a", "b", 1), ("b", "c", -2)])
    single_source_bellman_ford(G, "a")

    output = stream.getvalue()
    assert "pathconduit.graphs.shortest" in output
    assert "reached 3 node(s)" in output

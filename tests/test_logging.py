"""Tests for logging utilities."""

import logging
from io import StringIO

import numpy as np

from simplexkit.logging import (
    configure_logging,
    get_logger,
    set_log_level,
)


def test_get_logger_returns_logger():
    """Test that get_logger returns a logger instance."""
    logger = get_logger("test_module")
    assert isinstance(logger, logging.Logger)
    assert logger.name.startswith("simplexkit.")


def test_get_logger_keeps_package_names():
    logger = get_logger("simplexkit.optimize.nelder_mead")
    assert logger.name == "simplexkit.optimize.nelder_mead"
    assert get_logger().name == "simplexkit"


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
    assert logger.level <= logging.INFO

    set_log_level(logging.WARNING)
    assert logger.level <= logging.WARNING


def test_set_log_level_string():
    """Test that set_log_level accepts string levels."""
    logger = get_logger("test_module")

    set_log_level("DEBUG")
    assert logger.level == logging.DEBUG

    set_log_level("error")
    assert logger.level == logging.ERROR

    set_log_level(logging.WARNING)


def test_configure_logging():
    """Test configure_logging function."""
    stream = StringIO()
    try:
        configure_logging(level=logging.DEBUG, stream=stream)

        logger = get_logger("test_module")
        logger.debug("Debug message")

        output = stream.getvalue()
        assert "Debug message" in output
        assert "[DEBUG] simplexkit.test_module" in output
    finally:
        configure_logging(level=logging.WARNING)


def test_configure_logging_custom_format():
    stream = StringIO()
    try:
        configure_logging(level="INFO", format_string="%(levelname)s|%(message)s", stream=stream)
        get_logger("test_module").info("hello")
        assert "INFO|hello" in stream.getvalue()
    finally:
        configure_logging(level=logging.WARNING)


def test_optimizer_reports_convergence_at_info():
    from simplexkit.optimize import GoalType, NelderMead, SimpleScalarValueChecker

    # make sure the module logger exists before reconfiguring handlers
    get_logger("simplexkit.optimize.direct_search")
    stream = StringIO()
    try:
        configure_logging(level=logging.INFO, stream=stream)
        optimizer = NelderMead(checker=SimpleScalarValueChecker(-1, 1e-10))
        optimizer.optimize(lambda x: float(x[0] ** 2), GoalType.MINIMIZE, np.array([1.0]))
        assert "NelderMead converged after" in stream.getvalue()
    finally:
        configure_logging(level=logging.WARNING)


def test_logger_does_not_propagate():
    """Test that loggers don't propagate to root logger."""
    logger = get_logger("test_module")
    assert logger.propagate is False

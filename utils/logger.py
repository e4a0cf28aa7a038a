# utils/logger.py
# This file is part of LEC - A Logical Expression Rewriting Engine
#
# Logging utility for expression rewriting with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for expression rewriting."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class LECLogger:
    """Centralized logger for the rewrite engine with structured output."""

    def __init__(self, name: str = "lec_rewrite", level: LogLevel = LogLevel.INFO):
        """Initialize the LEC logger.

        Args:
            name: Logger name
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(LECFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for rewriting events
    def expression_start(self, expression: str, index: Optional[int] = None):
        """Log the start of one expression's simplification."""
        prefix = f"[{index}] " if index is not None else ""
        self.debug(f"{prefix}Simplifying: {expression}")

    def law_applied(self, step_number: int, description: str):
        """Log a single successful rewrite."""
        self.debug(f"    step {step_number}: {description}")

    def fixpoint_reached(self, result: str, step_count: int):
        """Log termination of the rewrite loop."""
        self.debug(f"    fixpoint after {step_count} step(s): {result}")

    def entry_failed(self, line: int, source: str, reason: str):
        """Log a batch entry that could not be evaluated."""
        self.warning(f"Line {line}: '{source}' failed: {reason}")

    def batch_summary(self, total: int, failed: int):
        """Log the outcome of a batch run."""
        self.info(f"Evaluated {total} expression(s), {failed} failed")


class LECFormatter(logging.Formatter):
    """Custom formatter for LEC logging with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[LECLogger] = None


def get_logger(name: str = "lec_rewrite") -> LECLogger:
    """Get or create the global LEC logger instance.

    Args:
        name: Logger name (default: "lec_rewrite")

    Returns:
        LECLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = LECLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on command line flags.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)

# causa_utils/logger.py
# This file is part of Causa - Causality Tracking for Replicated Data
#
# Logging utility for causality tooling with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for causality tooling."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING


class CausaLogger:
    """Centralized logger for notation parsing, history analysis and the CLI."""

    def __init__(self, name: str = "causa", level: LogLevel = LogLevel.INFO):
        """Initialize the logger.

        Args:
            name: Logger name (typically module name)
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(CausaFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    # Core logging methods
    def debug(self, message: str):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message)

    def info(self, message: str):
        """Log info message (general progress)."""
        self.logger.info(message)

    def warning(self, message: str):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message)

    def error(self, message: str):
        """Log error message (serious problems)."""
        self.logger.error(message)

    # Specialized methods for causality results
    def relation_result(self, left: str, right: str, relation: str):
        """Log the causal relation between two histories."""
        self.info(f"{left} vs {right} → {relation}")

    def merge_result(self, inputs: int, merged: str):
        """Log the join of several vectors."""
        self.info(f"Merged {inputs} vector(s) → {merged}")

    def conflict_detected(self, left: str, right: str):
        """Log a pair of concurrent histories."""
        self.warning(f"⚠️  Concurrent: {left} ‖ {right}")

    def dot_check(self, vector: str, dot: str, seen: bool):
        """Log whether a vector has observed a dot."""
        self.info(f"{dot} {'∈' if seen else '∉'} {vector}")

    def validation_result(self, message: str = ""):
        """Log a successful validation; failures are reported by the caller."""
        self.debug(f"✅ {message}" if message else "✅ Validation successful")


class CausaFormatter(logging.Formatter):
    """Custom formatter with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        return f"[DEBUG] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[CausaLogger] = None


def get_logger(name: str = "causa") -> CausaLogger:
    """Get or create the global logger instance.

    Args:
        name: Logger name (default: "causa")

    Returns:
        CausaLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = CausaLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    logger = get_logger()
    logger.set_level(level)


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

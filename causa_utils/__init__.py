# causa_utils/__init__.py
# This file is part of Causa - Causality Tracking for Replicated Data
#
# Utility module exports; the history reader lives in causa_utils.history_reader

from .logger import (
    LogLevel,
    get_logger,
    set_log_level,
    configure_logging,
)

__all__ = [
    "LogLevel",
    "get_logger",
    "set_log_level",
    "configure_logging",
]

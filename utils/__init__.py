# utils/__init__.py
# This file is part of LEC - A Logical Expression Rewriting Engine
#
# Utility module exports

from .logger import LogLevel, get_logger, set_log_level, configure_logging

__all__ = [
    "LogLevel",
    "get_logger",
    "set_log_level",
    "configure_logging",
]

# utils/__init__.py
# This file is part of Tabula - A Propositional Logic Truth Table Toolkit
#
# Utility module exports

from .logger import (
    LogLevel,
    TabulaLogger,
    get_logger,
    set_log_level,
    configure_logging,
)

__all__ = [
    "LogLevel",
    "TabulaLogger",
    "get_logger",
    "set_log_level",
    "configure_logging",
]

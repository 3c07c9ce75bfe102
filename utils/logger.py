# utils/logger.py
# This file is part of Tabula - A Propositional Logic Truth Table Toolkit
#
# Logging utility for formula parsing and truth tables with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional, Sequence


class LogLevel(Enum):
    """Log levels for Tabula."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class TabulaLogger:
    """Centralized logger for Tabula with structured output."""

    def __init__(self, name: str = "tabula", level: LogLevel = LogLevel.INFO):
        """Initialize the Tabula logger.

        Args:
            name: Logger name (typically module name)
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(TabulaFormatter())

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

    # Specialized methods for formula processing events
    def formula_loaded(self, source: str, canonical: str, variables: Sequence[str]):
        """Log a successfully parsed formula."""
        self.info(f"Formula: {source}")
        if canonical != source.strip():
            self.debug(f"    Canonical form: {canonical}")
        self.debug(f"    Variables: {', '.join(variables) if variables else '(none)'}")

    def table_summary(self, variable_count: int, formula_count: int):
        """Log the size of a truth table about to be enumerated."""
        self.info(
            f"Enumerating {1 << variable_count} rows over {variable_count} "
            f"variable(s) for {formula_count} formula(s)"
        )


class TabulaFormatter(logging.Formatter):
    """Custom formatter for Tabula logging with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        # For DEBUG level, show with level indicator
        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[TabulaLogger] = None


def get_logger(name: str = "tabula") -> TabulaLogger:
    """Get or create the global Tabula logger instance.

    Args:
        name: Logger name (default: "tabula")

    Returns:
        TabulaLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = TabulaLogger(name)
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

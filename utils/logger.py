# utils/logger.py
# This file is part of Entail - A Propositional Argument Validator
#
# Logging utility for argument validation with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional, Sequence


class LogLevel(Enum):
    """Log levels for argument validation."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class ValidatorLogger:
    """Centralized logger for the validator with structured, clean output."""

    def __init__(self, name: str = "entail", level: LogLevel = LogLevel.WARNING):
        """Initialize the validator logger.

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
        console_handler.setFormatter(ValidatorFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    @property
    def level(self) -> int:
        return self.logger.level

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

    # Specialized methods for validation events
    def argument_loaded(
        self, variables: Sequence[str], premise_count: int, source: Optional[str] = None
    ):
        """Log argument declaration."""
        origin = f" from {source}" if source else ""
        self.info(
            f"Argument loaded{origin}: variables={list(variables)}, premises={premise_count}"
        )

    def formula_compiled(self, name: str, source: str, postfix: str):
        """Log a formula's postfix form."""
        self.debug(f"  {name}: '{source.strip()}' -> [{postfix}]")

    def table_built(self, row_count: int, column_count: int):
        """Log truth table construction."""
        self.debug(f"Truth table built: {row_count} rows x {column_count} columns")

    def verdict_reached(
        self, satisfiable: bool, valid: bool, counterexample_row: Optional[int] = None
    ):
        """Log the analysis outcome."""
        row_str = f", counterexample row={counterexample_row}" if counterexample_row is not None else ""
        self.info(f"Verdict: satisfiable={satisfiable}, valid={valid}{row_str}")

    def validation_result(self, success: bool, message: str = ""):
        """Log validation results."""
        if success:
            self.debug(f"✅ {message}" if message else "✅ Validation successful")
        else:
            self.error(f"❌ {message}" if message else "❌ Validation failed")


class ValidatorFormatter(logging.Formatter):
    """Custom formatter for validator logging with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[ValidatorLogger] = None


def get_logger(name: str = "entail") -> ValidatorLogger:
    """Get or create the global validator logger instance.

    Args:
        name: Logger name (default: "entail")

    Returns:
        ValidatorLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = ValidatorLogger(name)
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

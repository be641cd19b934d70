# utils/logger.py
# This file is part of Propcheck - Propositional Entailment by Enumeration
#
# Logging utility for formula checking with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for formula checking."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class FormulaLogger:
    """Centralized logger for formula checking with structured output."""

    def __init__(self, name: str = "propcheck", level: LogLevel = LogLevel.INFO):
        """Initialize the checker logger.

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
        console_handler.setFormatter(FormulaFormatter())

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

    # Specialized methods for checker events
    def formula_loaded(self, label: str, formula_text: str):
        """Log a formula read from the user."""
        self.info(f"{label}: {formula_text}")

    def assignments_generated(self, atom_count: int, assignment_count: int):
        """Log the size of an enumeration run."""
        self.debug(
            f"    🔢 Enumerated {assignment_count} assignment(s) over {atom_count} atom(s)"
        )

    def assignment_checked(self, assignment: str, verdict: bool):
        """Log one evaluated assignment."""
        marker = "🟢" if verdict else "🔴"
        self.debug(f"        {marker} {assignment} → {verdict}")

    def counter_model_found(self, assignment: str):
        """Log a counter-model for an entailment query."""
        self.debug(f"    💥 Counter-model: {assignment}")

    def entailment_verdict(self, verdict: bool):
        """Log final entailment verdict."""
        self.info(f"\n>>> KB ⊨ α: {verdict} <<<")


class FormulaFormatter(logging.Formatter):
    """Custom formatter for checker logging with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[FormulaLogger] = None


def get_logger(name: str = "propcheck") -> FormulaLogger:
    """Get or create the global checker logger instance.

    Args:
        name: Logger name (default: "propcheck")

    Returns:
        FormulaLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = FormulaLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(debug: bool = False):
    """Configure logging based on command line flags.

    Results are printed through INFO, so the default keeps INFO and only
    the debug flag opens up internal tracing.

    Args:
        debug: Enable debug output
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    else:
        set_log_level(LogLevel.INFO)


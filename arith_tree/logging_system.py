"""
Logging System for Expression Tree Evaluation

This module provides the centralized logger behind the diagnostic channel.
Evaluation never fails on an undefined variable or a division by zero; it
substitutes a sentinel value and reports the condition here instead.
"""

import logging
import sys
from typing import Optional
from enum import Enum


class LogLevel(Enum):
    """Enumeration of logging levels for expression evaluation"""
    SILENT = 0      # No output at all, diagnostics included
    MINIMAL = 1     # Diagnostics and final results
    MODERATE = 2    # Self-check progress
    DETAILED = 3    # Per-tree evaluation summaries
    VERBOSE = 4     # Every node visited during evaluation


class DiagnosticKind(Enum):
    """Conditions absorbed during evaluation and reported as diagnostics"""
    UNDEFINED_VARIABLE = "undefined_variable"
    DIVISION_BY_ZERO = "division_by_zero"


class ArithTreeLogger:
    """
    Centralized logger for expression evaluation, writing to the error stream
    """

    def __init__(self, log_level: LogLevel = LogLevel.MODERATE,
                 log_to_file: bool = False, log_file_path: Optional[str] = None):
        self.log_level = log_level
        self.log_to_file = log_to_file
        self.log_file_path = log_file_path

        # Create logger
        self.logger = logging.getLogger('arith_tree')
        self.logger.setLevel(logging.DEBUG)
        self._build_handlers()

    def _build_handlers(self):
        """Replace the handlers to match the current level and file options"""
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        formatter = logging.Formatter('%(message)s')

        # Console handler on stderr, the diagnostic channel
        if self.log_level != LogLevel.SILENT:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        # File handler (optional)
        if self.log_to_file:
            if self.log_file_path is None:
                self.log_file_path = "arith_tree.log"
            file_handler = logging.FileHandler(self.log_file_path)
            file_handler.setFormatter(
                logging.Formatter('%(asctime)s - %(levelname)s - %(message)s', datefmt='%H:%M:%S')
            )
            self.logger.addHandler(file_handler)

    def _should_log(self, required_level: LogLevel) -> bool:
        """Check if message should be logged based on current log level"""
        return self.log_level.value >= required_level.value

    def is_enabled_for(self, level: LogLevel) -> bool:
        return self._should_log(level)

    def set_level(self, level: LogLevel):
        """Change the level, adding or dropping the console handler as needed"""
        self.log_level = level
        self._build_handlers()

    def critical(self, message: str):
        """Always logged unless silent - self-check failures"""
        if self.log_level != LogLevel.SILENT:
            self.logger.error(f"CRITICAL: {message}")

    def diagnostic(self, kind: DiagnosticKind, message: str):
        """Advisory message for a value substituted during evaluation"""
        if self._should_log(LogLevel.MINIMAL):
            self.logger.warning(message, extra={'diagnostic_kind': kind})

    def info(self, message: str, required_level: LogLevel = LogLevel.MINIMAL):
        """General information with configurable level"""
        if self._should_log(required_level):
            self.logger.info(message)

    def debug(self, message: str):
        """Debug information - only in verbose mode"""
        if self._should_log(LogLevel.VERBOSE):
            self.logger.debug(f"DEBUG: {message}")


# Global logger instance
_global_logger: Optional[ArithTreeLogger] = None


def get_logger() -> ArithTreeLogger:
    """Get or create the global logger instance"""
    global _global_logger
    if _global_logger is None:
        _global_logger = ArithTreeLogger()
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global logging level"""
    global _global_logger
    if _global_logger is None:
        _global_logger = ArithTreeLogger(log_level=level)
    else:
        _global_logger.set_level(level)


def configure_logging(log_level: LogLevel = LogLevel.MODERATE,
                      log_to_file: bool = False,
                      log_file_path: Optional[str] = None) -> ArithTreeLogger:
    """Configure the global logging system"""
    global _global_logger
    _global_logger = ArithTreeLogger(
        log_level=log_level,
        log_to_file=log_to_file,
        log_file_path=log_file_path
    )
    return _global_logger


# Convenience functions for common operations
def log_info(message: str, level: LogLevel = LogLevel.MINIMAL):
    """Log info message at specified level"""
    get_logger().info(message, level)


def log_diagnostic(kind: DiagnosticKind, message: str):
    """Log an evaluation diagnostic"""
    get_logger().diagnostic(kind, message)


def log_debug(message: str):
    """Log debug message"""
    get_logger().debug(message)

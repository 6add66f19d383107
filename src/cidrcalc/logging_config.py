"""
Logging configuration for cidrcalc.

Provides console logging and optional rotating file logging for the CLI.
The arithmetic modules never log; only the command layer does.
"""

import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler


class StructuredFormatter(logging.Formatter):
    """Structured formatter for easier log parsing."""

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, 'module_name'):
            record.module_name = record.module
        if not hasattr(record, 'function_name'):
            record.function_name = record.funcName
        return super().format(record)


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    max_bytes: int = 10485760,  # 10MB
    backup_count: int = 5,
    enable_console: bool = True,
) -> logging.Logger:
    """
    Set up logging for cidrcalc.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Log file path; file logging is enabled when given
        max_bytes: Maximum log file size before rotation
        backup_count: Number of backup log files to keep
        enable_console: Enable console logging

    Returns:
        Configured package logger
    """
    logger = logging.getLogger("cidrcalc")
    logger.setLevel(getattr(logging, level.upper()))

    logger.handlers.clear()

    console_fmt = logging.Formatter(
        fmt='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    file_fmt = StructuredFormatter(
        fmt='%(asctime)s | %(levelname)-8s | %(name)-20s | %(module_name)-15s | '
            '%(function_name)-20s | %(lineno)-4d | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Console logs go to stderr; stdout carries command results
    if enable_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(console_fmt)
        logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(file_fmt)
        logger.addHandler(file_handler)

    logger.propagate = False

    return logger


def configure_logging(debug: bool = False, level: str = "WARNING", log_file: str | None = None) -> logging.Logger:
    """
    Quick logging configuration.

    Args:
        debug: Enable debug logging, overriding level
        level: Logging level when debug is off
        log_file: Optional log file path
    """
    return setup_logging(
        level="DEBUG" if debug else level,
        log_file=log_file,
    )

"""
Structured logging configuration.

This module provides centralized logging setup for the entire project.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from src.graph_engine.core.settings import LOG_LEVEL, LOG_FILE

# Handlers go on the package logger; the host application owns the root logger
PACKAGE_LOGGER = "src"


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    console_output: bool = True
) -> logging.Logger:
    """
    Configure logging for the engine.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path to an error log file. If None, uses LOG_FILE from
            settings; when that is unset too, no file handler is installed
        console_output: Whether to output logs to console

    Returns:
        Configured package logger
    """
    log_level = level or LOG_LEVEL
    numeric_level = getattr(logging, log_level.upper(), logging.WARNING)

    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(numeric_level)

    # Remove existing handlers to avoid duplicates
    package_logger.handlers.clear()

    # File handler for system errors only
    file_path = log_file or LOG_FILE
    if file_path:
        Path(file_path).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(file_path, encoding="utf-8")
        file_handler.setLevel(logging.ERROR)
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(formatter)
        package_logger.addHandler(console_handler)

    return package_logger


def setup_logger(
    name: Optional[str] = None,
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    console_output: bool = True
) -> logging.Logger:
    """Configure logging and return a named logger.

    Args:
        name: Optional logger name to retrieve after configuring logging.
        level: Logging level override.
        log_file: Path override for the error log file.
        console_output: Whether to emit logs to stdout.

    Returns:
        Requested logger instance (module-specific if ``name`` provided, otherwise the package logger).
    """
    configured_logger = setup_logging(
        level=level,
        log_file=log_file,
        console_output=console_output,
    )

    if name:
        return get_logger(name)

    return configured_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Logger name (typically __name__ of the module)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


__all__ = ("setup_logging", "setup_logger", "get_logger")


# Initialize logging on module import
setup_logging()

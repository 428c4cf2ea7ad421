"""Centralized logging configuration for fastatools"""

import logging
import sys
from pathlib import Path
from typing import Optional


def setup_logging(
    verbose: bool = False,
    log_file: Optional[Path] = None,
    quiet: bool = False
) -> logging.Logger:
    """
    Configure logging for the application.

    Console output goes to stderr because stdout carries FASTA/JSON data.

    Args:
        verbose: Enable DEBUG level logging
        log_file: Optional file path for log output
        quiet: Only report warnings and errors on the console

    Returns:
        Configured logger instance
    """
    # Determine log level
    if verbose:
        log_level = logging.DEBUG
    elif quiet:
        log_level = logging.WARNING
    else:
        log_level = logging.INFO

    # Create formatter
    log_format = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    formatter = logging.Formatter(log_format, datefmt='%Y-%m-%d %H:%M:%S')

    # Configure package logger
    logger = logging.getLogger('fastatools')
    logger.setLevel(logging.DEBUG if log_file else log_level)
    logger.handlers = []  # Clear any existing handlers

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # File handler (if specified)
    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)  # Always debug level to file
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

        logger.debug(f"Logging to file: {log_file}")

    return logger

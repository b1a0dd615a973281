#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Centralized logging configuration for the allergen scanner.

One named logger is shared by the CLI, the HTTP app and the library code.
Records go to the console and to ``CFG.logs_dir / CFG.log_filename``; the
file is opened on the first record, so runs that log nothing create no
file.
"""

import logging
import os
import sys
from pathlib import Path

# Module-level state
_logger = None
_initialized = False

LOGGER_NAME = "ALLERGEN"


def log_exception_hook(exc_type, exc_value, exc_traceback):
    """Log uncaught exceptions"""
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return

    get_logger().error("Uncaught exception:", exc_info=(exc_type, exc_value, exc_traceback))


def setup_logging(log_dir: Path = None):
    """
    Initialize the logging system once.

    Args:
        log_dir: Directory for the log file. If None, uses config default.

    Returns:
        Logger instance
    """
    global _logger, _initialized

    if _initialized:
        return _logger

    # Import here to avoid circular dependency
    from ..config import CFG

    if log_dir is None:
        log_dir = CFG.logs_dir

    _logger = logging.getLogger(LOGGER_NAME)

    if not _logger.handlers:
        _logger.setLevel(getattr(logging, CFG.log_level.upper(), logging.INFO))
        _logger.propagate = False

        formatter = logging.Formatter(
            "%(asctime)s │ %(levelname)s │ %(message)s", datefmt="%H:%M:%S")

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        _logger.addHandler(console_handler)

        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(
                str(log_dir / CFG.log_filename), encoding='utf-8', delay=True)
            file_handler.setFormatter(logging.Formatter(
                "%(asctime)s │ %(process)d │ %(levelname)s │ %(message)s"))
            _logger.addHandler(file_handler)
        except OSError as e:
            _logger.warning(f"⚠️  Logging to console only, {log_dir} is not writable: {e}")

        _logger.debug(f"Logging initialized (pid {os.getpid()})")

    sys.excepthook = log_exception_hook

    _initialized = True
    return _logger


def get_logger():
    """
    Get the singleton logger instance.

    Returns:
        Logger instance
    """
    if _logger is None:
        setup_logging()
    return _logger

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Core module initialization - sets up shared state for the entire package.

This module ensures that logging is initialized exactly once when the
package is imported.
"""

from .logging import setup_logging, get_logger
from .exceptions import (
    AllergenScannerError,
    PersistenceError,
    DataLoadingError,
    ConfigurationError,
)

# Initialize logging system once
setup_logging()

# Get singleton logger instance for the package
log = get_logger()

log.debug("Allergen scanner core module initialized")

from .state import get_scanner_state  # noqa: E402

__all__ = [
    'log',
    'get_logger',
    'get_scanner_state',
    'AllergenScannerError',
    'PersistenceError',
    'DataLoadingError',
    'ConfigurationError',
]

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Custom exceptions for the allergen scanner.

The matching engine itself never raises; these cover the boundaries
(storage, batch input, configuration).
"""


class AllergenScannerError(Exception):
    """Base exception for all allergen scanner errors."""
    pass


class PersistenceError(AllergenScannerError):
    """Raised when the selected-allergen list cannot be encoded, decoded or written."""
    pass


class DataLoadingError(AllergenScannerError):
    """Raised when batch input cannot be loaded."""
    pass


class ConfigurationError(AllergenScannerError):
    """Raised when configuration is invalid."""
    pass

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Utility modules for the allergen scanner.
"""

from .constants import BUILTIN_CATALOG, BUILTIN_NAMES, get_builtin_synonyms
from .validation import preflight_checks

__all__ = [
    # Constants
    'BUILTIN_CATALOG',
    'BUILTIN_NAMES',
    'get_builtin_synonyms',

    # Validation
    'preflight_checks',
]

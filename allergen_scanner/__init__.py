#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Allergen Scanner - find selected allergens in recognized label text.

This package matches the text a recognizer reads off an ingredient label
against a user-curated list of allergens (with synonyms), reporting each
allergen found as an exact or a fuzzy match.
"""

__version__ = "1.0.0"

# Only export the public API
from .matching.matcher import MatchSettings, find_allergens
from .matching.summary import ScanStatus, ScanSummary, summarize
from .models.allergen import AllergenTerm, MatchResult, MatchType
from .registry.registry import AllergenRegistry
from .data.storage import AllergenStore

__all__ = [
    'find_allergens',
    'MatchSettings',
    'summarize',
    'ScanStatus',
    'ScanSummary',
    'AllergenTerm',
    'MatchResult',
    'MatchType',
    'AllergenRegistry',
    'AllergenStore',
]

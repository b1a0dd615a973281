#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Allergen matching: edit distance, the matcher and scan verdicts.
"""

from .distance import levenshtein
from .matcher import MatchSettings, find_allergens
from .summary import ScanStatus, ScanSummary, summarize

__all__ = [
    'levenshtein',
    'MatchSettings',
    'find_allergens',
    'ScanStatus',
    'ScanSummary',
    'summarize',
]

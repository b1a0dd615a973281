#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Data model for allergens and match results.
"""

from .allergen import AllergenTerm, MatchType, MatchResult

__all__ = [
    'AllergenTerm',
    'MatchType',
    'MatchResult',
]

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Selected-allergen registry.
"""

from .registry import AllergenRegistry

__all__ = [
    'AllergenRegistry',
]

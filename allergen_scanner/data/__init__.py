#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Text preprocessing and storage modules.
"""

from .preprocessing import normalize, tokenize
from .morphology import singularize
from .storage import AllergenStore, encode_allergens, decode_allergens

__all__ = [
    # Preprocessing
    'normalize',
    'tokenize',
    'singularize',

    # Storage
    'AllergenStore',
    'encode_allergens',
    'decode_allergens',
]

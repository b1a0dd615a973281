#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Heuristic plural stripping for allergen words.

This is not a linguistic stemmer. Irregular plurals are under- or
over-stemmed; the rules only need to make "peanuts" meet "peanut" and
"berries" meet "berry".
"""


def singularize(token: str) -> str:
    """
    Reduce a token to its likely singular form.

    Rules, first match wins:

    1. ``-ies`` on a word longer than 4 characters becomes ``-y``
    2. ``-es`` on a word longer than 3 characters loses the final ``s``
    3. ``-s`` on a word longer than 2 characters loses the final ``s``

    Example:
        >>> singularize("berries")
        'berry'
        >>> singularize("boxes")
        'boxe'
        >>> singularize("peanuts")
        'peanut'
        >>> singularize("gas")
        'ga'
    """
    if token.endswith("ies") and len(token) > 4:
        return token[:-3] + "y"
    if token.endswith("es") and len(token) > 3:
        return token[:-1]
    if token.endswith("s") and len(token) > 2:
        return token[:-1]
    return token

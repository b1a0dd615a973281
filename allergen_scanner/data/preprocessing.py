#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Text preprocessing utilities for label text and allergen terms.

Both the recognized label text and every allergen term go through the same
canonicalization so that they can be compared token by token.
"""

import re
from typing import List

# Separators folded away entirely, so "soy-bean" and "soy_bean" read "soybean"
_JOINERS = re.compile(r"[-_]")

# A token is a run of letters and digits; underscore counts as a separator
_TOKEN = re.compile(r"[^\W_]+")


def normalize(text: str) -> str:
    """
    Canonicalize text for comparison.

    Lowercases everything and removes hyphen and underscore characters.
    All other characters pass through untouched; they are dealt with by
    :func:`tokenize`.

    Args:
        text: Raw recognized text or an allergen term

    Returns:
        Normalized string (empty for empty input)

    Example:
        >>> normalize("Soy-Bean Oil")
        'soybean oil'
        >>> normalize("EGG_WHITE, milk")
        'eggwhite, milk'
    """
    if not text:
        return ""
    return _JOINERS.sub("", text.lower())


def tokenize(normalized_text: str) -> List[str]:
    """
    Split normalized text into alphanumeric tokens.

    Any run of characters that are not letters or digits acts as a
    separator. Empty fragments are discarded and tokens keep their
    left-to-right order.

    Example:
        >>> tokenize("contains: milk, soybean (lecithin)")
        ['contains', 'milk', 'soybean', 'lecithin']
    """
    return _TOKEN.findall(normalized_text)

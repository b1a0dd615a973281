#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Levenshtein edit distance.
"""

import numpy as np


def levenshtein(a: str, b: str) -> int:
    """
    Compute the Levenshtein distance between two strings.

    Unit cost for insertion, deletion and substitution, over code points.
    Uses the full (len(a)+1) x (len(b)+1) dynamic-programming table.

    Args:
        a: First string
        b: Second string

    Returns:
        Minimum number of single-character edits turning ``a`` into ``b``

    Example:
        >>> levenshtein("almond", "almnd")
        1
        >>> levenshtein("kitten", "sitting")
        3
    """
    rows, cols = len(a) + 1, len(b) + 1
    dist = np.zeros((rows, cols), dtype=np.int64)
    dist[:, 0] = np.arange(rows)
    dist[0, :] = np.arange(cols)

    for i in range(1, rows):
        for j in range(1, cols):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            dist[i, j] = min(
                dist[i - 1, j] + 1,         # deletion
                dist[i, j - 1] + 1,         # insertion
                dist[i - 1, j - 1] + cost,  # substitution
            )

    return int(dist[rows - 1, cols - 1])

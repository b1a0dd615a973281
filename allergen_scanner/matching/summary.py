#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Scan verdicts built from match results.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Sequence, Tuple

from ..models.allergen import MatchResult, MatchType


class ScanStatus(str, Enum):
    ALLERGENS_DETECTED = "allergens_detected"
    POSSIBLE_ALLERGENS = "possible_allergens"
    SAFE = "safe"
    NO_TEXT = "no_text"


@dataclass(frozen=True)
class ScanSummary:
    """
    What a scan means to the person holding the package.

    Attributes:
        status: Overall verdict
        exact: Names of allergens found exactly, in allergen order
        fuzzy: Names of allergens that were only similar to scanned words
        matches: The underlying match results
    """
    status: ScanStatus
    exact: Tuple[str, ...] = ()
    fuzzy: Tuple[str, ...] = ()
    matches: Tuple[MatchResult, ...] = ()

    @property
    def message(self) -> str:
        if self.status is ScanStatus.ALLERGENS_DETECTED:
            text = f"Allergens detected: {', '.join(self.exact)}"
            if self.fuzzy:
                text += f" (similar to: {', '.join(self.fuzzy)})"
            return text
        if self.status is ScanStatus.POSSIBLE_ALLERGENS:
            return f"Possible allergens, similar to: {', '.join(self.fuzzy)}"
        if self.status is ScanStatus.SAFE:
            return "No allergens detected"
        return "No text recognized"

    def to_dict(self) -> Dict[str, Any]:
        return {
            'status': self.status.value,
            'exact': list(self.exact),
            'fuzzy': list(self.fuzzy),
            'message': self.message,
        }


def summarize(scan_text: str, matches: Sequence[MatchResult]) -> ScanSummary:
    """
    Turn match results into a verdict.

    Exact matches take precedence over fuzzy ones; a scan with text but no
    matches is ``SAFE``; blank text is ``NO_TEXT`` whatever the matches.
    """
    if not scan_text or not scan_text.strip():
        return ScanSummary(ScanStatus.NO_TEXT)

    exact = tuple(m.allergen_name for m in matches if m.match_type is MatchType.EXACT)
    fuzzy = tuple(m.allergen_name for m in matches if m.match_type is MatchType.FUZZY)

    if exact:
        status = ScanStatus.ALLERGENS_DETECTED
    elif fuzzy:
        status = ScanStatus.POSSIBLE_ALLERGENS
    else:
        status = ScanStatus.SAFE

    return ScanSummary(status, exact, fuzzy, tuple(matches))

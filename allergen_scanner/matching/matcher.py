#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Allergen matching engine.

Finds which of the user's allergens appear in recognized label text. Every
allergen is tested against the scanned words through its name and all of
its synonyms: first for an exact hit (equality, containment or plural
insensitive equality), then, only if nothing exact was found, for a fuzzy
hit within a length-proportional edit-distance threshold.

A term is its normalized text reduced to tokens. Multi-word terms such as
"brazil nut" are compared in their compact form ("brazilnut") and also hit
exactly when their words appear next to each other in the scan.

The engine is a pure function of its inputs. It holds no state between
calls and never mutates the allergen list it is given.
"""

from dataclasses import dataclass
from typing import Iterable, List, NamedTuple, Optional, Sequence, Tuple

from ..core import log
from ..core.exceptions import ConfigurationError
from ..data.morphology import singularize
from ..data.preprocessing import normalize, tokenize
from ..models.allergen import AllergenTerm, MatchResult, MatchType
from .distance import levenshtein


@dataclass(frozen=True)
class MatchSettings:
    """
    Fuzzy matching thresholds.

    A term of length ``n`` tolerates ``max(fuzzy_floor, n // fuzzy_divisor)``
    edits. Words shorter than ``min_fuzzy_word_length`` never fuzzy match.
    """
    fuzzy_divisor: int = 4
    fuzzy_floor: int = 1
    min_fuzzy_word_length: int = 3

    def __post_init__(self):
        if self.fuzzy_divisor < 1:
            raise ConfigurationError(f"fuzzy_divisor must be >= 1, got {self.fuzzy_divisor}")
        if self.fuzzy_floor < 0:
            raise ConfigurationError(f"fuzzy_floor must be >= 0, got {self.fuzzy_floor}")
        if self.min_fuzzy_word_length < 0:
            raise ConfigurationError(
                f"min_fuzzy_word_length must be >= 0, got {self.min_fuzzy_word_length}")

    @classmethod
    def from_config(cls, revised: bool = False) -> "MatchSettings":
        """Build settings from ``CFG`` (the revised thresholds when asked)."""
        from ..config import CFG
        source = CFG.revised_match_config if revised else CFG.match_config
        return cls(**source)

    def threshold(self, term_length: int) -> int:
        return max(self.fuzzy_floor, term_length // self.fuzzy_divisor)


class _Word(NamedTuple):
    text: str
    singular: str


class _Term(NamedTuple):
    text: str
    singular: str
    tokens: Tuple[str, ...]


def _canonical_term(raw: str) -> Optional[_Term]:
    """Canonicalize one name or synonym; None if nothing alphanumeric is left."""
    tokens = tuple(tokenize(normalize(raw)))
    if not tokens:
        return None
    # Multi-word terms are compared in their compact form ("brazil nut" -> "brazilnut")
    text = "".join(tokens)
    return _Term(text, singularize(text), tokens)


def _terms_for(allergen: AllergenTerm) -> List[_Term]:
    """Name first, then synonyms in a stable order, without duplicates."""
    seen = set()
    terms = []
    for raw in [allergen.name, *sorted(allergen.synonyms)]:
        term = _canonical_term(raw)
        if term is not None and term.tokens not in seen:
            seen.add(term.tokens)
            terms.append(term)
    return terms


def _has_phrase_match(term: _Term, words: Sequence[_Word]) -> bool:
    """True if the term's tokens occur as a contiguous run of scanned words."""
    size = len(term.tokens)
    token_singulars = [singularize(t) for t in term.tokens]
    for start in range(len(words) - size + 1):
        window = words[start:start + size]
        if all(tok == word.text or singular == word.singular
               for tok, singular, word in zip(term.tokens, token_singulars, window)):
            return True
    return False


def _has_exact_match(term: _Term, words: Sequence[_Word]) -> bool:
    for word in words:
        if term.text == word.text or term.singular == word.singular:
            return True
        # Containment, e.g. "soy" in "soybean"
        if term.text in word.text or term.singular in word.text:
            return True

    if len(term.tokens) > 1:
        return _has_phrase_match(term, words)
    return False


def _has_fuzzy_match(term: _Term, words: Sequence[_Word], settings: MatchSettings) -> bool:
    term_length = len(term.text)
    threshold = settings.threshold(term_length)

    for word in words:
        if len(word.text) < settings.min_fuzzy_word_length:
            continue
        if abs(term_length - len(word.text)) > threshold:
            continue

        if (levenshtein(term.text, word.text) <= threshold
                or levenshtein(term.singular, word.singular) <= threshold):
            return True
    return False


def find_allergens(scan_text: str,
                   allergens: Iterable[AllergenTerm],
                   settings: Optional[MatchSettings] = None) -> List[MatchResult]:
    """
    Detect allergens in recognized label text.

    Allergens are processed independently and in the order given. Each one
    contributes at most one result: ``exact`` if any of its terms hits a
    scanned word exactly, else ``fuzzy`` if any term is within the edit
    distance threshold of a word, else nothing.

    Args:
        scan_text: Raw recognized text, any length, possibly empty
        allergens: Snapshot of the selected allergens
        settings: Fuzzy thresholds (defaults to the configured ones)

    Returns:
        Match results in allergen order

    Example:
        >>> milk = AllergenTerm.create("milk", synonyms=["dairy"])
        >>> find_allergens("Contains: DAIRY-FREE milk-chocolate", [milk])
        [MatchResult(allergen_name='milk', match_type=<MatchType.EXACT: 'exact'>)]
    """
    if settings is None:
        settings = MatchSettings.from_config()

    words = [_Word(w, singularize(w)) for w in tokenize(normalize(scan_text))]
    if not words:
        return []

    results = []
    for allergen in allergens:
        terms = _terms_for(allergen)

        if any(_has_exact_match(term, words) for term in terms):
            results.append(MatchResult(allergen.name, MatchType.EXACT))
        elif any(_has_fuzzy_match(term, words, settings) for term in terms):
            results.append(MatchResult(allergen.name, MatchType.FUZZY))

    log.debug("Matched %d allergen(s) against %d scanned word(s)", len(results), len(words))
    return results

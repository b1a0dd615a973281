#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Data model shared by the registry, the matcher and the storage layer.
"""

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, Iterable, Optional


@dataclass(frozen=True)
class AllergenTerm:
    """
    One user-tracked allergen.

    Instances are never mutated in place; the registry replaces or removes
    them.

    Attributes:
        name: Display name, as entered or as listed in the built-in catalog
        is_custom: True when the user typed the name in, False for built-ins
        synonyms: Other words that count as this allergen
        id: Opaque unique identity
    """
    name: str
    is_custom: bool = False
    synonyms: FrozenSet[str] = frozenset()
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def __post_init__(self):
        if not isinstance(self.synonyms, frozenset):
            object.__setattr__(self, 'synonyms', frozenset(self.synonyms))

    @classmethod
    def create(cls, name: str, is_custom: bool = False,
               synonyms: Optional[Iterable[str]] = None) -> "AllergenTerm":
        return cls(name=name, is_custom=is_custom, synonyms=frozenset(synonyms or ()))

    @property
    def key(self) -> str:
        """Case-insensitive identity of the name, used for de-duplication."""
        return self.name.lower()

    def to_dict(self) -> Dict[str, Any]:
        """Persisted shape: ``{id, name, isCustom, synonyms}``."""
        return {
            'id': str(self.id),
            'name': self.name,
            'isCustom': self.is_custom,
            'synonyms': sorted(self.synonyms),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AllergenTerm":
        """
        Rebuild a term from its persisted shape.

        Raises:
            KeyError, TypeError, ValueError: When the record is malformed
        """
        if not isinstance(data, dict):
            raise TypeError(f"allergen record must be an object, got {type(data).__name__}")
        name = data['name']
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"allergen name must be a non-empty string, got {name!r}")
        synonyms = data.get('synonyms') or []
        if not isinstance(synonyms, list) or not all(isinstance(s, str) for s in synonyms):
            raise ValueError(f"synonyms of {name!r} must be a list of strings")
        is_custom = data.get('isCustom', False)
        if not isinstance(is_custom, bool):
            raise ValueError(f"isCustom of {name!r} must be a boolean, got {is_custom!r}")
        return cls(
            name=name,
            is_custom=is_custom,
            synonyms=frozenset(synonyms),
            id=uuid.UUID(str(data['id'])),
        )


class MatchType(str, Enum):
    """How an allergen was found in the scanned text."""
    EXACT = "exact"   # direct, substring or plural-insensitive hit
    FUZZY = "fuzzy"   # within the edit-distance threshold


@dataclass(frozen=True)
class MatchResult:
    allergen_name: str
    match_type: MatchType

    @property
    def is_exact(self) -> bool:
        return self.match_type is MatchType.EXACT

    def to_dict(self) -> Dict[str, str]:
        return {'allergenName': self.allergen_name, 'matchType': self.match_type.value}

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
The user's selected-allergen list.

The registry only owns data. Anything that needs to react to changes (the
storage layer, a UI) subscribes with :meth:`AllergenRegistry.subscribe`
and receives the new snapshot after every effective mutation.
"""

import uuid
from typing import Callable, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from ..core import log
from ..models.allergen import AllergenTerm
from ..utils.constants import BUILTIN_CATALOG

Snapshot = Tuple[AllergenTerm, ...]
Listener = Callable[[Snapshot], None]


class AllergenRegistry:
    """
    Ordered, case-insensitively unique list of allergen terms.

    Invalid input (blank or duplicate custom names, unknown ids) leaves the
    list untouched and is reported through the return value.
    """

    def __init__(self, allergens: Iterable[AllergenTerm] = (),
                 catalog: Mapping[str, frozenset] = BUILTIN_CATALOG):
        self._catalog = catalog
        self._allergens: List[AllergenTerm] = []
        self._listeners: List[Listener] = []
        self._load(allergens)

    def _load(self, allergens: Iterable[AllergenTerm]):
        seen = set()
        loaded = []
        for allergen in allergens:
            if allergen.key in seen:
                log.warning(f"Dropping duplicate allergen '{allergen.name}'")
                continue
            seen.add(allergen.key)
            loaded.append(allergen)
        self._allergens = loaded

    def _find(self, name: str) -> Optional[int]:
        key = name.lower()
        for index, allergen in enumerate(self._allergens):
            if allergen.key == key:
                return index
        return None

    def _changed(self):
        """
        Notify every listener of the new snapshot.

        A failing listener does not keep the others from being notified.
        The first failure is raised once all of them have run; the
        mutation itself stays applied.
        """
        snapshot = self.snapshot()
        failures = []
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception as e:
                log.error(f"❌ Change listener {getattr(listener, '__qualname__', listener)!s} failed: {e}")
                failures.append(e)
        if failures:
            raise failures[0]

    # ------------------------------------------------------------------
    # Observation
    # ------------------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a change listener.

        Returns:
            A callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def snapshot(self) -> Snapshot:
        """Immutable copy of the list in insertion order."""
        return tuple(self._allergens)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def toggle_builtin(self, name: str) -> bool:
        """
        Select or deselect a built-in allergen.

        Returns:
            True if the allergen is selected afterwards
        """
        name = name.strip()
        if not name:
            return False

        index = self._find(name)
        if index is not None:
            removed = self._allergens.pop(index)
            log.info(f"Deselected allergen '{removed.name}'")
            self._changed()
            return False

        synonyms = self._catalog.get(name.lower(), frozenset())
        self._allergens.append(AllergenTerm.create(name, synonyms=synonyms))
        log.info(f"Selected allergen '{name}' ({len(synonyms)} synonyms)")
        self._changed()
        return True

    def add_custom(self, name: str) -> Optional[AllergenTerm]:
        """
        Add a user-typed allergen.

        Returns:
            The new term, or None if the trimmed name was empty or already
            present (case-insensitively)
        """
        trimmed = name.strip()
        if not trimmed:
            return None
        if self._find(trimmed) is not None:
            log.debug(f"Custom allergen '{trimmed}' already selected")
            return None

        allergen = AllergenTerm.create(trimmed, is_custom=True)
        self._allergens.append(allergen)
        log.info(f"Added custom allergen '{trimmed}'")
        self._changed()
        return allergen

    def remove(self, allergen_id: Union[uuid.UUID, str]) -> bool:
        """Remove an allergen by identity; True if something was removed."""
        try:
            target = allergen_id if isinstance(allergen_id, uuid.UUID) else uuid.UUID(str(allergen_id))
        except ValueError:
            return False

        remaining = [a for a in self._allergens if a.id != target]
        if len(remaining) == len(self._allergens):
            return False

        self._allergens = remaining
        log.info(f"Removed allergen {target}")
        self._changed()
        return True

    def replace_all(self, allergens: Iterable[AllergenTerm]):
        """Swap in a whole new list (used when restoring saved state)."""
        self._load(allergens)
        self._changed()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_selected(self, name: str) -> bool:
        return self._find(name) is not None

    def get(self, allergen_id: Union[uuid.UUID, str]) -> Optional[AllergenTerm]:
        for allergen in self._allergens:
            if str(allergen.id) == str(allergen_id):
                return allergen
        return None

    def __contains__(self, name) -> bool:
        return isinstance(name, str) and self.is_selected(name)

    def __iter__(self) -> Iterator[AllergenTerm]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        return len(self._allergens)

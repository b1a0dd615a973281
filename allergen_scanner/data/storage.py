#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
JSON persistence for the selected-allergen list.

The stored document is a flat JSON array of
``{id, name, isCustom, synonyms}`` records. Loading is best effort: a
missing or unreadable file means "nothing selected yet".
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Union

from ..core import log
from ..core.exceptions import PersistenceError
from ..models.allergen import AllergenTerm


def encode_allergens(allergens: Iterable[AllergenTerm]) -> str:
    """Serialize allergens to the persisted JSON array."""
    return json.dumps([a.to_dict() for a in allergens], indent=2, ensure_ascii=False)


def decode_allergens(payload: Union[str, bytes]) -> List[AllergenTerm]:
    """
    Parse the persisted JSON array.

    Raises:
        PersistenceError: If the payload is not valid JSON or a record is
            malformed
    """
    try:
        data = json.loads(payload)
    except (TypeError, ValueError) as e:
        raise PersistenceError(f"Stored allergens are not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise PersistenceError(f"Stored allergens must be a JSON array, got {type(data).__name__}")

    try:
        return [AllergenTerm.from_dict(record) for record in data]
    except (KeyError, TypeError, ValueError) as e:
        raise PersistenceError(f"Malformed allergen record: {e}") from e


class AllergenStore:
    """
    File-backed store for the selected-allergen list.

    Args:
        path: JSON file location (defaults to ``CFG.storage_path``)
    """

    def __init__(self, path: Optional[Path] = None):
        if path is None:
            from ..config import CFG
            path = CFG.storage_path
        self.path = Path(path)

    def load(self) -> List[AllergenTerm]:
        """
        Load the stored list.

        Returns:
            The stored allergens, or an empty list if nothing was stored or
            the file could not be read or decoded
        """
        if not self.path.exists():
            log.debug(f"No stored allergens at {self.path}")
            return []

        try:
            allergens = decode_allergens(self.path.read_text(encoding='utf-8'))
        except (PersistenceError, OSError) as e:
            log.warning(f"⚠️  Ignoring stored allergens at {self.path}: {e}")
            return []

        log.info(f"Loaded {len(allergens)} allergen(s) from {self.path}")
        return allergens

    def save(self, allergens: Iterable[AllergenTerm]):
        """
        Write the list, replacing the previous file atomically.

        Raises:
            PersistenceError: If the file cannot be written
        """
        payload = encode_allergens(allergens)
        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=str(self.path.parent), prefix=f".{self.path.name}.", suffix=".tmp")
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(payload)
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise PersistenceError(f"Could not save allergens to {self.path}: {e}") from e

        log.debug(f"Saved allergens to {self.path}")

    def attach(self, registry) -> Callable[[], None]:
        """
        Save the registry's list whenever it changes.

        Returns:
            A callable that detaches the store again
        """
        return registry.subscribe(self.save)

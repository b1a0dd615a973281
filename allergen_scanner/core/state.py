#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Centralized state for one scanner session.

Owns the selected-allergen registry and the store it is persisted to, so
the CLI and the HTTP app share a single list per process.
"""

from pathlib import Path
from typing import Optional

# Module-level singleton instance
_instance = None


class ScannerStateManager:
    """
    Lazily restores the registry from storage and keeps it saved.

    The store subscribes to the registry itself; the registry has no
    knowledge of persistence.
    """

    def __init__(self, storage_path: Optional[Path] = None):
        # Import here to avoid circular dependency
        from .logging import get_logger
        from ..config import CFG

        self.log = get_logger()
        self.cfg = CFG
        self.storage_path = storage_path or CFG.storage_path

        self._store = None
        self._registry = None
        self._detach = None

    @property
    def store(self):
        if self._store is None:
            from ..data.storage import AllergenStore
            self._store = AllergenStore(self.storage_path)
        return self._store

    @property
    def registry(self):
        """The selected-allergen registry, restored on first access."""
        if self._registry is None:
            from ..registry.registry import AllergenRegistry
            self._registry = AllergenRegistry(self.store.load())
            self._detach = self.store.attach(self._registry)
            self.log.debug(f"Registry restored with {len(self._registry)} allergen(s)")
        return self._registry

    def clear(self):
        """Forget the registry and store; the next access reloads from disk."""
        if self._detach is not None:
            self._detach()
        self._store = None
        self._registry = None
        self._detach = None


def get_scanner_state() -> ScannerStateManager:
    """
    Get the singleton scanner state instance.

    Returns:
        The singleton ScannerStateManager instance
    """
    global _instance
    if _instance is None:
        _instance = ScannerStateManager()
    return _instance

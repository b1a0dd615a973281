#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Scan sessions: consuming recognized text from a live producer.

A text recognizer emits strings at its own pace, often several per second
and often from a background thread. The session throttles those
emissions, runs the matcher against a snapshot of the registry and keeps
only the newest result.
"""

import threading
import time
from typing import Callable, Optional

from ..core import log
from ..matching.matcher import MatchSettings, find_allergens
from ..matching.summary import ScanSummary, summarize


class ScanSession:
    """
    Throttled consumer of recognized text.

    Args:
        registry: Source of the selected allergens (snapshotted per scan)
        interval: Minimum seconds between two processed scans
        settings: Fuzzy thresholds passed to the matcher
        clock: Monotonic time source
    """

    def __init__(self, registry, interval: Optional[float] = None,
                 settings: Optional[MatchSettings] = None,
                 clock: Callable[[], float] = time.monotonic):
        if interval is None:
            from ..config import CFG
            interval = CFG.scan_interval

        self.registry = registry
        self.interval = interval
        self.settings = settings
        self._clock = clock
        self._lock = threading.Lock()
        self._last_processed = None
        self._sequence = 0
        self._latest = None

    @property
    def latest(self) -> Optional[ScanSummary]:
        """Most recent result that was not superseded."""
        with self._lock:
            return self._latest

    def _due(self) -> bool:
        now = self._clock()
        if self._last_processed is not None and now - self._last_processed < self.interval:
            return False
        self._last_processed = now
        return True

    def begin(self) -> int:
        """
        Start a scan and get its ticket.

        Any scan started earlier is superseded by this one.
        """
        with self._lock:
            self._sequence += 1
            return self._sequence

    def complete(self, ticket: int, text: str) -> Optional[ScanSummary]:
        """
        Match ``text`` for the scan identified by ``ticket``.

        Returns:
            The summary, or None if a newer scan was started meanwhile
        """
        summary = summarize(text, find_allergens(text, self.registry.snapshot(), self.settings))

        with self._lock:
            if ticket != self._sequence:
                log.debug(f"Discarding superseded scan #{ticket} (current #{self._sequence})")
                return None
            self._latest = summary
        return summary

    def submit(self, text: str) -> Optional[ScanSummary]:
        """
        Offer one piece of recognized text.

        Blank text and text arriving within ``interval`` of the previous
        processed scan are ignored.

        Returns:
            The new summary, or None if the text was ignored or superseded
        """
        if not text or not text.strip():
            return None

        with self._lock:
            if not self._due():
                return None

        return self.complete(self.begin(), text)

    def stop(self):
        """Drop the current result and reset the throttle."""
        with self._lock:
            self._sequence += 1
            self._latest = None
            self._last_processed = None
        log.debug("Scan session stopped")

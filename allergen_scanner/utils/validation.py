#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pre-flight checks run before the command line tool does any work.
"""

import os
import tempfile

from ..core import log
from ..core.exceptions import ConfigurationError, PersistenceError
from ..config import CFG
from .constants import BUILTIN_CATALOG


def preflight_checks(revised: bool = False) -> bool:
    """
    Verify configuration, storage and the built-in catalog.

    Problems that make scanning impossible are issues; problems that only
    degrade it (an unreadable saved list) are warnings.

    Returns:
        bool: True if all critical checks pass, False otherwise
    """
    issues = []
    warnings = []

    log.debug("🔍 Running pre-flight checks...")

    # Matching thresholds
    from ..matching.matcher import MatchSettings
    try:
        settings = MatchSettings.from_config(revised=revised)
        log.debug(f"   ✅ Fuzzy thresholds: divisor={settings.fuzzy_divisor}, "
                  f"floor={settings.fuzzy_floor}")
    except (ConfigurationError, TypeError) as e:
        issues.append(f"Invalid matching configuration: {e}")

    if CFG.scan_interval < 0:
        issues.append(f"Scan interval must not be negative, got {CFG.scan_interval}")

    # Storage directory must be writable
    home = CFG.home_dir
    if not home.is_dir():
        issues.append(f"Scanner home directory does not exist: {home}")
    else:
        try:
            with tempfile.TemporaryFile(dir=str(home)):
                pass
            log.debug(f"   ✅ Storage directory writable: {home}")
        except OSError as e:
            issues.append(f"Scanner home directory is not writable: {home} ({e})")

    # Saved selection should decode
    if CFG.storage_path.exists():
        from ..data.storage import decode_allergens
        try:
            decode_allergens(CFG.storage_path.read_text(encoding='utf-8'))
        except (PersistenceError, OSError) as e:
            warnings.append(f"Saved allergen list is unreadable and will be ignored: {e}")

    # Catalog invariants
    bad_keys = [k for k in BUILTIN_CATALOG if k != k.lower() or not k.strip()]
    if bad_keys:
        issues.append(f"Built-in catalog keys must be lowercase and non-empty: {bad_keys}")

    for warning in warnings:
        log.warning(f"   ⚠️  {warning}")
    for issue in issues:
        log.error(f"   ❌ {issue}")

    if not issues:
        log.debug(f"   ✅ Pre-flight checks passed (pid {os.getpid()})")
    return not issues

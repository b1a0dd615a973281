#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Configuration module for the allergen scanner.

Centralized configuration with environment overrides and automatic
directory creation.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Any
import logging

from decouple import config


@dataclass(frozen=True)
class Config:
    """
    Immutable configuration container for the scanner.

    Every value can be overridden through the environment (or a ``.env``
    file) via python-decouple.
    """
    # Directory paths
    home_dir: Path = field(default_factory=lambda: Path(
        config('ALLERGEN_SCANNER_HOME', default='~/.allergen_scanner')).expanduser())
    logs_dir: Path = field(default=None)

    # Selected-allergen list, relative to home_dir
    storage_filename: str = 'selected_allergens.json'

    # Logging
    log_level: str = field(default_factory=lambda: config(
        'ALLERGEN_SCANNER_LOG_LEVEL', default='INFO'))
    log_filename: str = 'allergen_scanner.log'

    # Minimum seconds between two processed scans of a session
    scan_interval: float = field(default_factory=lambda: config(
        'ALLERGEN_SCAN_INTERVAL', default=1.0, cast=float))

    # Fuzzy matching thresholds
    match_config: Dict[str, Any] = field(default_factory=lambda: {
        'fuzzy_divisor': config('ALLERGEN_FUZZY_DIVISOR', default=4, cast=int),
        'fuzzy_floor': config('ALLERGEN_FUZZY_FLOOR', default=1, cast=int),
        'min_fuzzy_word_length': 3,
    })

    # Revised fuzzy thresholds, selectable per call
    revised_match_config: Dict[str, Any] = field(default_factory=lambda: {
        'fuzzy_divisor': 3,
        'fuzzy_floor': 2,
        'min_fuzzy_word_length': 3,
    })

    def __post_init__(self):
        """Derive dependent paths and create missing directories."""
        if self.logs_dir is None:
            object.__setattr__(self, 'logs_dir', self.home_dir / 'logs')

        for field_name in ('home_dir', 'logs_dir'):
            value = getattr(self, field_name)
            if not value.exists():
                try:
                    value.mkdir(parents=True, exist_ok=True)
                    logging.getLogger("ALLERGEN").info(f"Created missing directory: {value}")
                except OSError as e:
                    logging.getLogger("ALLERGEN").warning(f"Could not create {value}: {e}")

    @property
    def storage_path(self) -> Path:
        return self.home_dir / self.storage_filename


# Create the configuration instance
CFG = Config()

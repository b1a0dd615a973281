#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Scan pipelines: live sessions and batch scanning.
"""

from .session import ScanSession
from .batch import scan_texts, batch_scan

__all__ = [
    # Live scanning
    'ScanSession',

    # Batch scanning
    'scan_texts',
    'batch_scan',
]

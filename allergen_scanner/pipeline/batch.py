#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Batch scanning of recognized label texts.

Useful for re-checking a collection of OCR outputs against an allergen
list in one go, e.g. after the user changes their selection.
"""

from pathlib import Path
from typing import Iterable, Optional, Sequence, Union

import pandas as pd
from tqdm import tqdm

from ..core import log
from ..core.exceptions import DataLoadingError
from ..matching.matcher import MatchSettings, find_allergens
from ..matching.summary import summarize
from ..models.allergen import AllergenTerm


def scan_texts(texts: Iterable[str],
               allergens: Sequence[AllergenTerm],
               settings: Optional[MatchSettings] = None,
               progress: bool = False) -> pd.DataFrame:
    """
    Scan many texts against one allergen list.

    Args:
        texts: Recognized texts
        allergens: Allergen snapshot shared by all scans
        settings: Fuzzy thresholds
        progress: Show a tqdm progress bar

    Returns:
        DataFrame with columns ``text``, ``exact``, ``fuzzy`` (comma
        separated allergen names) and ``status``
    """
    if settings is None:
        settings = MatchSettings.from_config()
    allergens = tuple(allergens)
    texts = list(texts)

    rows = []
    for text in tqdm(texts, total=len(texts), desc="   ├─ Scanning", disable=not progress,
                     bar_format="   ├─ {desc}: {percentage:3.0f}%|{bar}| {n_fmt}/{total_fmt} [{elapsed}<{remaining}]"):
        summary = summarize(text, find_allergens(text, allergens, settings))
        rows.append({
            'text': text,
            'exact': ", ".join(summary.exact),
            'fuzzy': ", ".join(summary.fuzzy),
            'status': summary.status.value,
        })

    return pd.DataFrame(rows, columns=['text', 'exact', 'fuzzy', 'status'])


def batch_scan(input_path: Union[str, Path],
               allergens: Sequence[AllergenTerm],
               output_path: Optional[Union[str, Path]] = None,
               column: str = 'text',
               settings: Optional[MatchSettings] = None) -> Path:
    """
    Scan every row of a CSV file.

    Expected CSV format:
    - Must have a text column (``column``, default ``text``)
    - Any other columns are preserved in the output

    Args:
        input_path: Input CSV
        allergens: Allergen snapshot to scan against
        output_path: Output CSV (default ``<stem>_scanned.csv`` beside the input)
        column: Name of the text column
        settings: Fuzzy thresholds

    Returns:
        Path of the written CSV

    Raises:
        DataLoadingError: If the CSV cannot be read or lacks the text column
    """
    input_path = Path(input_path)
    log.info("🔎 BATCH SCAN")
    log.info(f"   ├─ Loading input data: {input_path}")

    try:
        df = pd.read_csv(input_path)
    except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise DataLoadingError(f"Could not read {input_path}: {e}") from e

    if column not in df.columns:
        log.info(f"   ℹ️  Available columns: {list(df.columns)}")
        raise DataLoadingError(f"Missing required '{column}' column in {input_path}")

    null_count = int(df[column].isnull().sum())
    if null_count > 0:
        log.warning(f"   ⚠️  Found {null_count} empty rows, will skip these")
        df = df.dropna(subset=[column]).reset_index(drop=True)

    log.info(f"   ├─ Scanning {len(df)} text(s) against {len(allergens)} allergen(s)")
    scanned = scan_texts(df[column].astype(str), allergens, settings, progress=True)

    results_df = df.copy()
    for name in ('exact', 'fuzzy', 'status'):
        results_df[name] = scanned[name].values

    if output_path is None:
        output_path = input_path.with_name(f"{input_path.stem}_scanned.csv")
    output_path = Path(output_path)
    results_df.to_csv(output_path, index=False)

    counts = results_df['status'].value_counts().to_dict()
    log.info(f"   ├─ Status counts: {counts}")
    log.info(f"   └─ Results saved to: {output_path}")
    return output_path

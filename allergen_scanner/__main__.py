#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Command line entry point for the allergen scanner.
"""

import argparse
import json
import sys

from .core import log, get_scanner_state
from .core.exceptions import AllergenScannerError
from .matching.matcher import MatchSettings, find_allergens
from .matching.summary import summarize
from .models.allergen import AllergenTerm
from .pipeline.batch import batch_scan
from .utils.constants import get_builtin_synonyms
from .utils.validation import preflight_checks


def _adhoc_allergens(names: str):
    """Build terms from ``a,b,c``; built-in names get their catalog synonyms."""
    allergens = []
    for name in (n.strip() for n in names.split(",")):
        if not name:
            continue
        synonyms = get_builtin_synonyms(name)
        allergens.append(AllergenTerm.create(name, is_custom=not synonyms, synonyms=synonyms))
    return allergens


def _print_registry(registry, as_json: bool):
    records = [a.to_dict() for a in registry]
    if as_json:
        print(json.dumps(records, indent=2, ensure_ascii=False))
        return
    if not records:
        print("No allergens selected.")
    for record in records:
        kind = "custom" if record['isCustom'] else "built-in"
        print(f"{record['id']}  {record['name']} ({kind})")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='allergen_scanner',
        description='Detect selected allergens in recognized ingredient-label text')
    parser.add_argument('--text', type=str,
                        help='Recognized text to scan (use "-" to read stdin)')
    parser.add_argument('--batch', type=str,
                        help='Path to CSV file of recognized texts')
    parser.add_argument('--output', type=str, default=None,
                        help='Output CSV for --batch (defaults to <input>_scanned.csv)')
    parser.add_argument('--column', type=str, default='text',
                        help='Text column of the --batch CSV')
    parser.add_argument('--allergens', type=str, default=None,
                        help='Comma separated allergens to use instead of the saved selection')
    parser.add_argument('--toggle', type=str, metavar='NAME',
                        help='Select or deselect a built-in allergen')
    parser.add_argument('--add', type=str, metavar='NAME',
                        help='Add a custom allergen')
    parser.add_argument('--remove', type=str, metavar='ID',
                        help='Remove an allergen by id')
    parser.add_argument('--list', action='store_true',
                        help='List the saved selection')
    parser.add_argument('--revised', action='store_true',
                        help='Use the revised (looser) fuzzy thresholds')
    parser.add_argument('--json', action='store_true',
                        help='Print machine-readable output')
    return parser


def main(argv=None) -> int:
    """
    Command line interface for the allergen scanner.

    Registry commands (``--toggle``, ``--add``, ``--remove``, ``--list``)
    act on the saved selection. Scan commands (``--text``, ``--batch``)
    use the saved selection unless ``--allergens`` is given.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if not any([args.text, args.batch, args.toggle, args.add, args.remove, args.list]):
        parser.print_help()
        return 2

    if not preflight_checks(revised=args.revised):
        log.error("❌ Pre-flight checks failed. Please fix issues before proceeding.")
        return 1

    state = get_scanner_state()

    try:
        if args.toggle:
            selected = state.registry.toggle_builtin(args.toggle)
            print(f"{args.toggle}: {'selected' if selected else 'deselected'}")
        if args.add:
            added = state.registry.add_custom(args.add)
            print(f"Added {added.name} ({added.id})" if added
                  else f"Not added: '{args.add}' is empty or already selected")
        if args.remove:
            removed = state.registry.remove(args.remove)
            print("Removed" if removed else f"No allergen with id {args.remove}")
        if args.list:
            _print_registry(state.registry, args.json)

        if args.text or args.batch:
            allergens = (_adhoc_allergens(args.allergens) if args.allergens is not None
                         else state.registry.snapshot())
            settings = MatchSettings.from_config(revised=args.revised)

            if args.text:
                text = sys.stdin.read() if args.text == '-' else args.text
                summary = summarize(text, find_allergens(text, allergens, settings))
                if args.json:
                    print(json.dumps({
                        'matches': [m.to_dict() for m in summary.matches],
                        'summary': summary.to_dict(),
                    }, indent=2, ensure_ascii=False))
                else:
                    print(summary.message)

            if args.batch:
                out = batch_scan(args.batch, allergens, args.output, args.column, settings)
                print(f"Results saved to {out}")

    except AllergenScannerError as e:
        log.error(f"❌ {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

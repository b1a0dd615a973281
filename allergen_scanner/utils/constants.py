#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Built-in allergen catalog.

The catalog is a read-only mapping built once at import time. Keys are the
lowercase canonical allergen names offered to the user; values are the
synonyms that count as that allergen on a label.
"""

from types import MappingProxyType
from typing import FrozenSet, Mapping

# Synonyms stay more than one edit away from everyday label words and are not
# contained in them ("malt" vs "salt", "cod" in "code"). Such short words only
# appear inside a phrase ("malt extract").
_CATALOG_SOURCE = {
    "milk": [
        "casein", "caseinate", "lactose", "cream", "cheese", "yogurt",
        "yoghurt", "ghee", "lactalbumin",
    ],
    "eggs": [
        "egg", "albumin", "albumen", "ovalbumin", "ovomucoid",
        "lysozyme", "mayonnaise", "meringue",
    ],
    "peanuts": [
        "peanut", "groundnut", "arachis", "goober",
    ],
    "tree nuts": [
        "almond", "cashew", "walnut", "hazelnut", "pecan", "pistachio",
        "macadamia", "brazil nut", "praline", "marzipan",
    ],
    "soy": [
        "soybean", "tofu", "edamame", "miso", "tempeh",
        "tamari", "shoyu",
    ],
    "wheat": [
        "semolina", "durum", "spelt", "farina", "bulgur", "couscous",
        "einkorn", "kamut",
    ],
    "fish": [
        "anchovy", "codfish", "cod liver oil", "salmon", "tuna", "trout", "haddock",
        "pollock", "sardine", "tilapia", "mackerel", "herring",
    ],
    "shellfish": [
        "shrimp", "prawn", "crab", "lobster", "scallop", "clam juice",
        "oyster", "mussel", "crayfish", "langoustine",
    ],
    "sesame": [
        "tahini", "sesame seed", "gingelly",
    ],
    "gluten": [
        "wheat", "barley", "rye flour", "rye bread", "malt extract",
        "malt syrup", "malt vinegar", "spelt", "seitan", "triticale",
    ],
}

BUILTIN_CATALOG: Mapping[str, FrozenSet[str]] = MappingProxyType({
    name: frozenset(synonyms) for name, synonyms in _CATALOG_SOURCE.items()
})

# Display order of the built-in names
BUILTIN_NAMES = tuple(_CATALOG_SOURCE)

del _CATALOG_SOURCE


def get_builtin_synonyms(name: str) -> FrozenSet[str]:
    """
    Look up the synonyms of a built-in allergen, case-insensitively.

    Returns an empty frozenset for names that are not in the catalog.
    """
    return BUILTIN_CATALOG.get(name.strip().lower(), frozenset())

import pytest
from rapidfuzz.distance import Levenshtein

from allergen_scanner.matching.distance import levenshtein


@pytest.mark.parametrize("a, b, expected", [
    ("", "", 0),
    ("milk", "", 4),
    ("", "soy", 3),
    ("almond", "almnd", 1),
    ("kitten", "sitting", 3),
    ("flaw", "lawn", 2),
    ("peanut", "peanut", 0),
])
def test_known_distances(a, b, expected):
    assert levenshtein(a, b) == expected


@pytest.mark.parametrize("a, b", [
    ("shellfish", "shelfish"),
    ("sesame", "sesarne"),
    ("walnut", "wa1nut"),
    ("crème", "creme"),
    ("gluten", "glutenfree"),
    ("oyster", "water"),
])
def test_symmetric_and_agrees_with_rapidfuzz(a, b):
    assert levenshtein(a, b) == levenshtein(b, a) == Levenshtein.distance(a, b)


def test_identity():
    for word in ["", "x", "macadamia", "soybean"]:
        assert levenshtein(word, word) == 0


def test_returns_plain_int():
    assert type(levenshtein("abc", "abd")) is int

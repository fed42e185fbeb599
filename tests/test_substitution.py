"""
Caesar and Affine: single-letter substitutions preserving case and punctuation
"""

import math

import pytest

from cipherlab.affine_engine import Affine
from cipherlab.alphabet import (
    index_to_letter,
    letter_to_index,
    normalize_letters_only_upper,
    to_digraph_vectors,
)
from cipherlab.caesar_engine import Caesar
from cipherlab.errors import InvalidKey

SAMPLES = [
    "",
    "Hello, World!",
    "The quick brown fox jumps over the lazy dog.",
    "Zebra-123 ÄÖ ünïcode stays",
]


def test_alphabet_codec():
    assert letter_to_index("A") == 0
    assert letter_to_index("Z") == 25
    assert index_to_letter(7) == "H"
    assert "".join(index_to_letter(letter_to_index(c)) for c in "HILL") == "HILL"


def test_normalize_letters_only_upper():
    assert normalize_letters_only_upper("short example") == "SHORTEXAMPLE"
    assert normalize_letters_only_upper("a-B c!1é") == "ABC"


def test_to_digraph_vectors():
    assert to_digraph_vectors("SHOR") == [(18, 7), (14, 17)]


def test_caesar_known_vector():
    assert Caesar(3).encrypt("Hello, World!") == "Khoor, Zruog!"
    assert Caesar(3).decrypt("Khoor, Zruog!") == "Hello, World!"


def test_caesar_wraps_and_normalizes_shift():
    assert Caesar(1).encrypt("xyz XYZ") == "yza YZA"
    assert Caesar(-1).encrypt("abc") == "zab"
    assert Caesar(27).encrypt("abc") == Caesar(1).encrypt("abc")


@pytest.mark.parametrize("shift", [-53, -1, 0, 3, 13, 25, 26, 100])
@pytest.mark.parametrize("text", SAMPLES)
def test_caesar_round_trip(text, shift):
    caesar = Caesar(shift)
    assert caesar.decrypt(caesar.encrypt(text)) == text


@pytest.mark.parametrize("shift", [1.5, float("inf"), float("nan"), "3"])
def test_caesar_rejects_non_integer_shift(shift):
    with pytest.raises(InvalidKey):
        Caesar(shift)


def test_affine_known_vector():
    affine = Affine(5, 8)
    assert affine.encrypt("AFFINE CIPHER") == "IHHWVC SWFRCP"
    assert affine.decrypt("IHHWVC SWFRCP") == "AFFINE CIPHER"


def test_affine_preserves_case_and_non_letters():
    assert Affine(5, 8).encrypt("Affine, cipher!") == "Ihhwvc, swfrcp!"


@pytest.mark.parametrize("a", [a for a in range(-27, 60) if math.gcd(a % 26, 26) == 1])
def test_affine_round_trip(a):
    affine = Affine(a, 20)
    for text in SAMPLES:
        assert affine.decrypt(affine.encrypt(text)) == text


@pytest.mark.parametrize("a", [0, 2, 13, 26, -13])
def test_affine_rejects_non_coprime_a(a):
    with pytest.raises(InvalidKey) as exc:
        Affine(a, 1)
    assert "gcd(a,26)=" in str(exc.value)


def test_affine_rejects_non_integer_components():
    with pytest.raises(InvalidKey):
        Affine(5.5, 1)
    with pytest.raises(InvalidKey):
        Affine(5, float("nan"))

"""
Modular arithmetic and 2x2 matrix helpers (mod 26)
"""

import math

import pytest

from cipherlab.cipher_math import cipher_math
from cipherlab.errors import InvalidKey, KeyNotInvertible, NoInverse


@pytest.mark.parametrize("n", [-1000, -27, -26, -1, 0, 1, 25, 26, 27, 1000])
def test_mod_is_always_in_range(n):
    assert 0 <= cipher_math.mod(n, 26) <= 25


def test_mod_wraps_negatives():
    assert cipher_math.mod(-1, 26) == 25
    assert cipher_math.mod(-27, 26) == 25
    assert cipher_math.mod(52, 26) == 0


def test_gcd():
    assert cipher_math.gcd(0, 0) == 0
    assert cipher_math.gcd(12, 18) == 6
    assert cipher_math.gcd(-12, 18) == 6
    assert cipher_math.gcd(7, 26) == 1
    assert cipher_math.gcd(13, 0) == 13


@pytest.mark.parametrize("a,b", [(240, 46), (26, 7), (7, 26), (0, 5), (5, 0)])
def test_extended_gcd_bezout_identity(a, b):
    g, x, y = cipher_math.extended_gcd(a, b)
    assert g == math.gcd(a, b)
    assert a * x + b * y == g


@pytest.mark.parametrize("a", [a for a in range(26) if math.gcd(a, 26) == 1])
def test_mod_inverse(a):
    inv = cipher_math.mod_inverse(a, 26)
    assert 0 <= inv <= 25
    assert (a * inv) % 26 == 1


def test_mod_inverse_of_negative_value():
    assert cipher_math.mod_inverse(-1, 26) == 25


@pytest.mark.parametrize("a", [0, 2, 13, 26])
def test_mod_inverse_fails_when_not_coprime(a):
    with pytest.raises(NoInverse):
        cipher_math.mod_inverse(a, 26)


def test_assert_integer_accepts_integers():
    assert cipher_math.assert_integer(5, "x") == 5
    assert cipher_math.assert_integer(-3, "x") == -3
    assert cipher_math.assert_integer(4.0, "x") == 4


@pytest.mark.parametrize("value", [1.5, float("inf"), float("nan"), "3", None, True])
def test_assert_integer_rejects(value):
    with pytest.raises(InvalidKey) as exc:
        cipher_math.assert_integer(value, "shift")
    assert "shift" in str(exc.value)


def test_determinant():
    assert cipher_math.determinant([[7, 8], [11, 11]]) == 15  # 77 - 88 = -11
    assert cipher_math.determinant([[2, 4], [1, 2]]) == 0


def test_invert_hill_matrix():
    key = [[7, 8], [11, 11]]
    inv = cipher_math.invert(key)
    assert inv == [[25, 22], [1, 23]]
    assert cipher_math.multiply_matrices(key, inv) == [[1, 0], [0, 1]]


def test_invert_rejects_singular_matrix():
    with pytest.raises(KeyNotInvertible):
        cipher_math.invert([[2, 4], [1, 2]])


def test_multiply_vector():
    # "SH" with key HILL -> "AP"
    assert cipher_math.multiply_vector([[7, 8], [11, 11]], (18, 7)) == (0, 15)


def test_normalize_and_large_entries():
    assert cipher_math.normalize([[-1, 27], [52, 10 ** 30]]) == [[25, 1], [0, 10 ** 30 % 26]]
    assert cipher_math.multiply_vector([[10 ** 30, 0], [0, 1]], (1, 1)) == (10 ** 30 % 26, 1)


def test_from_columns():
    assert cipher_math.from_columns((1, 2), (3, 4)) == [[1, 3], [2, 4]]


def test_is_invertible():
    assert cipher_math.is_invertible([[7, 8], [11, 11]])
    assert not cipher_math.is_invertible([[2, 0], [0, 1]])

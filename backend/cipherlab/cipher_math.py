import math
import numbers
import numpy as np
from typing import List, Tuple

from .errors import InvalidKey, KeyNotInvertible, NoInverse

TwoByTwoMatrix = List[List[int]]
Vector = Tuple[int, int]


class CipherMath:
    def __init__(self):
        # Every matrix operation works over Z/26Z
        self.MODULUS = 26

    # --- MODULAR ARITHMETIC ---

    def mod(self, n: int, m: int) -> int:
        """Mathematical modulus, always in [0, m-1] (mod(-1, 26) == 25)."""
        return n % m

    def gcd(self, a: int, b: int) -> int:
        x, y = abs(a), abs(b)
        while y != 0:
            x, y = y, x % y
        return x

    def extended_gcd(self, a: int, b: int) -> Tuple[int, int, int]:
        """
        Extended Euclidean algorithm.
        Returns (g, x, y) such that a*x + b*y == g == gcd(a, b).
        """
        old_r, r = a, b
        old_x, x = 1, 0
        old_y, y = 0, 1
        while r != 0:
            q = old_r // r
            old_r, r = r, old_r - q * r
            old_x, x = x, old_x - q * x
            old_y, y = y, old_y - q * y
        return old_r, old_x, old_y

    def mod_inverse(self, a: int, m: int) -> int:
        """Multiplicative inverse of a modulo m, in [0, m-1]."""
        g, x, _ = self.extended_gcd(self.mod(a, m), m)
        if g != 1:
            raise NoInverse(f"No modular inverse for a={a} mod m={m} (gcd={g})")
        return self.mod(x, m)

    def assert_integer(self, value, label: str) -> int:
        """
        Ensures value is a finite integer and returns it as int.
        Integral floats (3.0) are accepted; bools, fractions, inf and NaN are not.
        """
        if isinstance(value, bool):
            raise InvalidKey(f"{label} must be a finite integer. Got: {value}")
        if isinstance(value, numbers.Integral):
            return int(value)
        if isinstance(value, numbers.Real):
            as_float = float(value)
            if math.isfinite(as_float) and as_float.is_integer():
                return int(as_float)
        raise InvalidKey(f"{label} must be a finite integer. Got: {value}")

    # --- 2x2 MATRICES MOD 26 ---

    def _as_array(self, m: TwoByTwoMatrix) -> np.ndarray:
        # Reduce first so large Python ints never overflow int64
        return np.array([[self.mod(x, self.MODULUS) for x in row] for row in m], dtype=np.int64)

    def determinant(self, m: TwoByTwoMatrix) -> int:
        (a, b), (c, d) = m
        return self.mod(a * d - b * c, self.MODULUS)

    def is_invertible(self, m: TwoByTwoMatrix) -> bool:
        return self.gcd(self.determinant(m), self.MODULUS) == 1

    def invert(self, m: TwoByTwoMatrix) -> TwoByTwoMatrix:
        """Adjugate times inverse determinant, every entry reduced mod 26."""
        (a, b), (c, d) = m
        det = self.determinant(m)
        if self.gcd(det, self.MODULUS) != 1:
            raise KeyNotInvertible(f"Matrix {m} is not invertible mod 26: determinant {det}")
        det_inv = self.mod_inverse(det, self.MODULUS)
        return [
            [self.mod(d * det_inv, self.MODULUS), self.mod(-b * det_inv, self.MODULUS)],
            [self.mod(-c * det_inv, self.MODULUS), self.mod(a * det_inv, self.MODULUS)],
        ]

    def multiply_matrices(self, a: TwoByTwoMatrix, b: TwoByTwoMatrix) -> TwoByTwoMatrix:
        product = (self._as_array(a) @ self._as_array(b)) % self.MODULUS
        return product.tolist()

    def multiply_vector(self, m: TwoByTwoMatrix, v: Vector) -> Vector:
        vec = np.array([self.mod(v[0], self.MODULUS), self.mod(v[1], self.MODULUS)], dtype=np.int64)
        x, y = (self._as_array(m) @ vec) % self.MODULUS
        return int(x), int(y)

    def normalize(self, m: TwoByTwoMatrix) -> TwoByTwoMatrix:
        return self._as_array(m).tolist()

    def from_columns(self, v1: Vector, v2: Vector) -> TwoByTwoMatrix:
        """[[x1, x2], [y1, y2]] from column vectors (x1, y1) and (x2, y2)."""
        return [
            [v1[0], v2[0]],
            [v1[1], v2[1]],
        ]


cipher_math = CipherMath()

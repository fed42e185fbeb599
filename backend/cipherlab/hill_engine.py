from typing import Union

from .alphabet import (
    FILLER_LETTER,
    index_to_letter,
    is_ascii_letter,
    letter_to_index,
    normalize_letters_only_upper,
    to_digraph_vectors,
)
from .cipher_math import TwoByTwoMatrix, cipher_math
from .errors import InvalidKey, KeyNotInvertible, OddLength

HillKeyInput = Union[str, TwoByTwoMatrix]


def parse_hill_key_string(key: str) -> TwoByTwoMatrix:
    """'HILL' -> [[7, 8], [11, 11]] (row-major, A=0..Z=25)."""
    compact = "".join(key.split())
    if len(compact) != 4:
        raise InvalidKey(
            f"Hill string key must be exactly 4 characters (letters). Got length {len(compact)}."
        )
    if not all(is_ascii_letter(ch) for ch in compact):
        raise InvalidKey(f'Hill string key must contain only letters A-Z. Got: "{key}"')

    nums = [letter_to_index(ch) for ch in compact.upper()]
    return [
        [nums[0], nums[1]],
        [nums[2], nums[3]],
    ]


def parse_and_validate_hill_key(key: HillKeyInput) -> TwoByTwoMatrix:
    """
    Accepts a 4-letter string or a 2x2 integer matrix. Entries must be
    integers and the determinant coprime with 26; returns entries in [0, 25].
    """
    if isinstance(key, str):
        matrix = parse_hill_key_string(key)
    else:
        if (
            not isinstance(key, (list, tuple))
            or len(key) != 2
            or any(not isinstance(row, (list, tuple)) or len(row) != 2 for row in key)
        ):
            raise InvalidKey(f"Hill key matrix must be 2x2. Got: {key}")
        matrix = [
            [cipher_math.assert_integer(value, f"Hill key[{r}][{c}]") for c, value in enumerate(row)]
            for r, row in enumerate(key)
        ]

    if not cipher_math.is_invertible(matrix):
        raise KeyNotInvertible(
            f"Invalid Hill key: determinant {cipher_math.determinant(matrix)} is not invertible mod 26."
        )
    return cipher_math.normalize(matrix)


def matrix_to_key_string(matrix: TwoByTwoMatrix) -> str:
    """Row-major 4-letter rendering of a normalized key."""
    return "".join(index_to_letter(value) for row in matrix for value in row)


class Hill:
    """
    2x2 Hill cipher over A-Z. Output is always letters-only uppercase:
    case and punctuation are not preserved.
    """

    def __init__(self, key: HillKeyInput):
        self.key = parse_and_validate_hill_key(key)

    def _apply(self, letters: str, matrix: TwoByTwoMatrix) -> str:
        out = []
        for vector in to_digraph_vectors(letters):
            x, y = cipher_math.multiply_vector(matrix, vector)
            out.append(index_to_letter(x) + index_to_letter(y))
        return "".join(out)

    def encrypt(self, plaintext: str) -> str:
        prepared = normalize_letters_only_upper(plaintext)
        if len(prepared) % 2 != 0:
            prepared += FILLER_LETTER
        return self._apply(prepared, self.key)

    def decrypt(self, ciphertext: str) -> str:
        inverse_key = cipher_math.invert(self.key)
        normalized = normalize_letters_only_upper(ciphertext)
        if len(normalized) % 2 != 0:
            raise OddLength(
                f"Hill ciphertext length must be even (letters-only after normalization). Got {len(normalized)}."
            )
        return self._apply(normalized, inverse_key)

from dataclasses import dataclass
from typing import List, Tuple

from .alphabet import normalize_letters_only_upper, to_digraph_vectors
from .cipher_math import TwoByTwoMatrix, cipher_math
from .errors import (
    InconsistentSnippet,
    InsufficientData,
    LengthMismatch,
    NoInvertiblePair,
    OddLength,
)
from .hill_engine import matrix_to_key_string

MIN_LETTERS = 4  # two digraphs


@dataclass(frozen=True)
class HillRecoveredKey:
    matrix: TwoByTwoMatrix  # row-major, entries in [0, 25]
    key_string: str


def _verify_key(key: TwoByTwoMatrix, p_vecs: List[Tuple[int, int]], c_vecs: List[Tuple[int, int]]) -> bool:
    return all(cipher_math.multiply_vector(key, p) == c for p, c in zip(p_vecs, c_vecs))


def crack_hill_key_known_plaintext(known_plaintext: str, known_ciphertext: str) -> HillRecoveredKey:
    """
    Recovers a 2x2 Hill key (mod 26) from aligned plaintext and ciphertext.

    Non-letters are stripped from both sides. The key is derived from the first
    invertible plaintext digraph pair (ascending i, j) and then checked against
    every digraph of the snippet. A failed check means the snippet is corrupt or
    misaligned, so no other pair is tried.
    """
    p = normalize_letters_only_upper(known_plaintext)
    c = normalize_letters_only_upper(known_ciphertext)

    if len(p) < MIN_LETTERS:
        raise InsufficientData("Known plaintext must contain at least 4 letters (2 digraphs).")
    if len(c) < MIN_LETTERS:
        raise InsufficientData("Ciphertext must contain at least 4 letters (2 digraphs).")
    if len(p) != len(c):
        raise LengthMismatch(
            "Known plaintext and ciphertext must have the same number of letters after removing "
            f"punctuation/spaces. Got plaintext={len(p)}, ciphertext={len(c)}."
        )
    if len(p) % 2 != 0:
        raise OddLength(
            "Known plaintext/ciphertext must have an even number of letters after normalization "
            f"(whole digraphs). Got {len(p)}."
        )

    p_vecs = to_digraph_vectors(p)
    c_vecs = to_digraph_vectors(c)

    for i in range(len(p_vecs)):
        for j in range(i + 1, len(p_vecs)):
            p_pair = cipher_math.from_columns(p_vecs[i], p_vecs[j])
            if not cipher_math.is_invertible(p_pair):
                continue

            c_pair = cipher_math.from_columns(c_vecs[i], c_vecs[j])
            key = cipher_math.normalize(
                cipher_math.multiply_matrices(c_pair, cipher_math.invert(p_pair))
            )

            if not _verify_key(key, p_vecs, c_vecs):
                raise InconsistentSnippet(
                    "The provided plaintext/ciphertext snippet is not consistent with a single "
                    f"2x2 Hill key (mod 26): key {key} derived from digraphs {i} and {j} does not "
                    "reproduce the whole snippet."
                )
            return HillRecoveredKey(matrix=key, key_string=matrix_to_key_string(key))

    raise NoInvertiblePair(
        "Cannot derive a Hill key from this snippet: none of the plaintext digraph pairs form "
        "an invertible 2x2 matrix modulo 26. Try a longer or more varied aligned snippet."
    )

import numpy as np
from dataclasses import dataclass
from typing import Callable, List, Tuple

from .alphabet import ALPHABET_SIZE, FILLER_LETTER, is_ascii_letter, letter_to_index
from .cipher_math import cipher_math
from .errors import CipherError, InvalidKey, LetterNotInSquare, OddLength

SQUARE_SIZE = 5
OMITTED_LETTER = "J"
MERGED_INTO = "I"


@dataclass(frozen=True, eq=False)
class PlayfairKeySquare:
    letters: str            # 25 letters, row-major
    positions: np.ndarray   # shape (26, 2): (row, col) per A-Z, -1 when absent

    def position(self, ch: str) -> Tuple[int, int]:
        row, col = self.positions[letter_to_index(ch)]
        if row < 0:
            raise LetterNotInSquare(f"Letter not in key square: {ch}")
        return int(row), int(col)

    def char_at(self, row: int, col: int) -> str:
        """Letter at (row, col), wrapping around the 5x5 square."""
        return self.letters[cipher_math.mod(row, SQUARE_SIZE) * SQUARE_SIZE + cipher_math.mod(col, SQUARE_SIZE)]

    def rows(self) -> List[List[str]]:
        return np.array(list(self.letters)).reshape(SQUARE_SIZE, SQUARE_SIZE).tolist()


def normalize_playfair_letters(text: str) -> str:
    """Letters only, uppercase, J -> I."""
    return "".join(
        MERGED_INTO if ch.upper() == OMITTED_LETTER else ch.upper()
        for ch in text if is_ascii_letter(ch)
    )


def build_key_square(key: str) -> PlayfairKeySquare:
    compact = "".join(key.split())
    if not compact:
        raise InvalidKey("Playfair key must not be empty.")
    if not all(is_ascii_letter(ch) for ch in compact):
        raise InvalidKey(f'Playfair key must contain letters only (A-Z). Got: "{key}"')

    square = []
    # Key letters first, then the rest of the alphabet without J
    candidates = normalize_playfair_letters(compact) + "".join(
        chr(ord("A") + i) for i in range(ALPHABET_SIZE)
    )
    for ch in candidates:
        if ch != OMITTED_LETTER and ch not in square:
            square.append(ch)

    if len(square) != SQUARE_SIZE * SQUARE_SIZE:
        raise CipherError(f"Key square must be 25 characters, got {len(square)}")

    positions = np.full((ALPHABET_SIZE, 2), -1, dtype=int)
    for idx, ch in enumerate(square):
        positions[letter_to_index(ch)] = divmod(idx, SQUARE_SIZE)
    positions.setflags(write=False)

    return PlayfairKeySquare("".join(square), positions)


def prepare_digraphs(letters: str) -> str:
    """
    Splits letters into digraphs for encryption: a doubled pair gets the filler
    after its first letter, an odd trailing letter gets a filler too.
    """
    s = normalize_playfair_letters(letters)
    out = []
    i = 0
    while i < len(s):
        a = s[i]
        if i + 1 == len(s):
            out.append(a + FILLER_LETTER)
            break
        b = s[i + 1]
        if a == b:
            out.append(a + FILLER_LETTER)
            i += 1
        else:
            out.append(a + b)
            i += 2
    return "".join(out)


def apply_playfair(prepared: str, key_square: PlayfairKeySquare, step: int) -> str:
    """Digraph rules over an even-length A-Z string; step is +1 to encrypt, -1 to decrypt."""
    if len(prepared) % 2 != 0:
        raise OddLength("Playfair input must have even length (letters-only after preparation).")

    out = []
    for i in range(0, len(prepared), 2):
        r1, c1 = key_square.position(prepared[i])
        r2, c2 = key_square.position(prepared[i + 1])

        if r1 == r2:
            out.append(key_square.char_at(r1, c1 + step))
            out.append(key_square.char_at(r2, c2 + step))
        elif c1 == c2:
            out.append(key_square.char_at(r1 + step, c1))
            out.append(key_square.char_at(r2 + step, c2))
        else:
            # Rectangle: keep row, take partner's column
            out.append(key_square.char_at(r1, c2))
            out.append(key_square.char_at(r2, c1))
    return "".join(out)


def transform_preserving_non_letters(original: str, transform: Callable[[str], str]) -> str:
    """
    Runs transform on the letters of original, then splices the result back in
    at the letter positions with the original casing. Surplus letters (fillers)
    are appended at the end.
    """
    letters = [ch for ch in original if is_ascii_letter(ch)]
    is_upper = [ch.isupper() for ch in letters]
    transformed = transform("".join(letters))

    rebuilt = []
    idx = 0
    for ch in original:
        if not is_ascii_letter(ch) or idx >= len(transformed):
            rebuilt.append(ch)
            continue
        out_ch = transformed[idx]
        rebuilt.append(out_ch.upper() if is_upper[idx] else out_ch.lower())
        idx += 1

    if idx < len(transformed):
        rebuilt.append(transformed[idx:])
    return "".join(rebuilt)


class Playfair:
    def __init__(self, key: str):
        self.key_square = build_key_square(key)

    def encrypt(self, plaintext: str) -> str:
        return transform_preserving_non_letters(
            plaintext,
            lambda letters: apply_playfair(prepare_digraphs(letters), self.key_square, 1),
        )

    def decrypt(self, ciphertext: str) -> str:
        def _decrypt_letters(letters: str) -> str:
            normalized = normalize_playfair_letters(letters)
            if len(normalized) % 2 != 0:
                raise OddLength(
                    f"Playfair ciphertext must have an even number of letters. Got {len(normalized)}."
                )
            return apply_playfair(normalized, self.key_square, -1)

        return transform_preserving_non_letters(ciphertext, _decrypt_letters)

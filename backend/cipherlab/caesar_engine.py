from .alphabet import ALPHABET_SIZE
from .cipher_math import cipher_math


class Caesar:
    def __init__(self, shift):
        self.shift = cipher_math.assert_integer(shift, "shift")

    def _shift_letters(self, text: str, shift: int) -> str:
        """Shifts A-Z / a-z by shift (mod 26), other characters unchanged."""
        normalized_shift = cipher_math.mod(shift, ALPHABET_SIZE)
        out = []
        for ch in text:
            if "A" <= ch <= "Z":
                base = ord("A")
            elif "a" <= ch <= "z":
                base = ord("a")
            else:
                out.append(ch)
                continue
            out.append(chr(base + cipher_math.mod(ord(ch) - base + normalized_shift, ALPHABET_SIZE)))
        return "".join(out)

    def encrypt(self, plaintext: str) -> str:
        return self._shift_letters(plaintext, self.shift)

    def decrypt(self, ciphertext: str) -> str:
        return self._shift_letters(ciphertext, -self.shift)

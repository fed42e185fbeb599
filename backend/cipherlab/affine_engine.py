from .alphabet import ALPHABET_SIZE
from .cipher_math import cipher_math
from .errors import InvalidKey


class Affine:
    """
    Affine cipher E(x) = (a*x + b) mod 26, D(y) = a^-1 * (y - b) mod 26.
    'a' must be coprime with 26. Case is preserved and non-letters pass through.
    """

    def __init__(self, a, b):
        self.a, self.b = self._validate_key(a, b)
        self.a_inv = cipher_math.mod_inverse(self.a, ALPHABET_SIZE)

    def _validate_key(self, a, b):
        a = cipher_math.assert_integer(a, "Affine key.a")
        b = cipher_math.assert_integer(b, "Affine key.b")

        a_mod = cipher_math.mod(a, ALPHABET_SIZE)
        g = cipher_math.gcd(a_mod, ALPHABET_SIZE)
        if g != 1:
            raise InvalidKey(
                f"Invalid affine key: 'a' must be coprime with 26. "
                f"Got a={a} (mod 26 => {a_mod}), gcd(a,26)={g}."
            )
        return a_mod, cipher_math.mod(b, ALPHABET_SIZE)

    def _map_letters(self, text: str, fn) -> str:
        out = []
        for ch in text:
            if "A" <= ch <= "Z":
                base = ord("A")
            elif "a" <= ch <= "z":
                base = ord("a")
            else:
                out.append(ch)
                continue
            out.append(chr(base + fn(ord(ch) - base)))
        return "".join(out)

    def encrypt(self, plaintext: str) -> str:
        return self._map_letters(
            plaintext, lambda x: cipher_math.mod(self.a * x + self.b, ALPHABET_SIZE)
        )

    def decrypt(self, ciphertext: str) -> str:
        return self._map_letters(
            ciphertext, lambda y: cipher_math.mod(self.a_inv * (y - self.b), ALPHABET_SIZE)
        )

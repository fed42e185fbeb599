class CipherError(ValueError):
    """Base class for every cipher/cracker failure."""


class InvalidKey(CipherError):
    pass


class KeyNotInvertible(InvalidKey):
    pass


class OddLength(CipherError):
    pass


class LetterNotInSquare(CipherError):
    pass


class NoInverse(CipherError):
    pass


class InsufficientData(CipherError):
    pass


class LengthMismatch(CipherError):
    pass


class NoInvertiblePair(CipherError):
    pass


class InconsistentSnippet(CipherError):
    pass

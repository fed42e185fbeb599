from typing import List, Tuple

ALPHABET_SIZE = 26
FILLER_LETTER = "X"


def is_ascii_letter(ch: str) -> bool:
    return "A" <= ch <= "Z" or "a" <= ch <= "z"


def letter_to_index(ch: str) -> int:
    """Maps A-Z to 0-25."""
    return ord(ch) - ord("A")


def index_to_letter(n: int) -> str:
    """Maps 0-25 to A-Z."""
    return chr(n + ord("A"))


def normalize_letters_only_upper(text: str) -> str:
    """Keeps ASCII letters only, uppercased (spaces/punctuation dropped)."""
    return "".join(ch.upper() for ch in text if is_ascii_letter(ch))


def to_digraph_vectors(letters: str) -> List[Tuple[int, int]]:
    # Expects an even-length A-Z string
    return [
        (letter_to_index(letters[i]), letter_to_index(letters[i + 1]))
        for i in range(0, len(letters), 2)
    ]

"""Caesar cipher over the English alphabet, preserving letter case."""

import string

_ALPHABET_SIZE = len(string.ascii_lowercase)


def _shift_char(char: str, shift: int) -> str:
    for alphabet in (string.ascii_lowercase, string.ascii_uppercase):
        if char in alphabet:
            index = (alphabet.index(char) + shift) % _ALPHABET_SIZE
            return alphabet[index]
    return char


def encrypt_caesar(text: str, shift: int) -> str:
    """Shift every English letter of ``text`` by ``shift`` positions.

    The alphabet wraps around; characters other than English letters
    are left untouched.
    """
    return "".join(_shift_char(char, shift) for char in text)


def decrypt_caesar(text: str, shift: int) -> str:
    """Undo :func:`encrypt_caesar` with the same ``shift``."""
    return encrypt_caesar(text, -shift)
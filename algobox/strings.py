"""String routines: palindromes, pi replacement and Morse code."""

from __future__ import annotations

from collections.abc import Iterable
from string import ascii_lowercase

MORSE_CODES = (
    ".-", "-...", "-.-.", "-..", ".", "..-.", "--.", "....", "..",
    ".---", "-.-", ".-..", "--", "-.", "---", ".--.", "--.-", ".-.",
    "...", "-", "..-", "...-", ".--", "-..-", "-.--", "--..",
)

_MORSE = dict(zip(ascii_lowercase, MORSE_CODES))


def is_palindrome(text: str) -> bool:
    """Tell whether *text* reads the same backwards."""
    return text == text[::-1]


def replace_pi(text: str) -> str:
    """Replace every "pi" in *text*, scanning left to right, with "3.14"."""
    return text.replace("pi", "3.14")


def to_morse(word: str) -> str:
    """Return the Morse transformation of a word of lower-case letters a to z."""
    try:
        return "".join(_MORSE[ch] for ch in word)
    except KeyError as exc:
        raise ValueError(f"not a lower-case letter: {exc.args[0]!r}") from None


def unique_morse_representations(words: Iterable[str]) -> int:
    """Return how many different Morse transformations *words* have."""
    return len({to_morse(word) for word in words})
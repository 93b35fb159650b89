"""Simple text statistics, tokenizing and substring search."""

from __future__ import annotations

import string
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Sequence

_VOWELS = frozenset("aeiou")
_DIGITS = frozenset(string.digits)
_LETTERS = frozenset(string.ascii_lowercase)


@dataclass(frozen=True)
class CharacterCounts:
    """Numbers of digits, vowels and consonants in a text."""

    digits: int = 0
    vowels: int = 0
    consonants: int = 0


def analyze_string(text: str) -> CharacterCounts:
    """Count ASCII digits, vowels and consonants in ``text``, ignoring case."""
    digits = vowels = consonants = 0
    for char in text.lower():
        if char in _DIGITS:
            digits += 1
        elif char in _VOWELS:
            vowels += 1
        elif char in _LETTERS:
            consonants += 1
    return CharacterCounts(digits=digits, vowels=vowels, consonants=consonants)


def tokenize(text: str) -> list[str]:
    """Split lower-cased ``text`` on spaces, cutting each piece at its first period.

    Pieces that end up empty are dropped.
    """
    words = (piece.split(".", 1)[0] for piece in text.lower().split(" "))
    return [word for word in words if word]


def most_frequent_words(tokens: Iterable[str]) -> list[str]:
    """Return every token that occurs the most times, in first-seen order."""
    counts = Counter(tokens)
    if not counts:
        return []
    highest = max(counts.values())
    return [word for word, count in counts.items() if count == highest]


def smallest_token(tokens: Iterable[str]) -> str:
    """Return the lexicographically smallest token, or an empty string if none."""
    return min(tokens, default="")


def find_occurrences(text: str, pattern: str) -> list[int]:
    """Return every index at which ``pattern`` starts in ``text``, overlaps included."""
    return [
        index
        for index in range(len(text) - len(pattern) + 1)
        if text.startswith(pattern, index)
    ]


def format_occurrences(indices: Sequence[int]) -> str:
    """Render indices as ``{a, b, ...}``, or ``{-1}`` when there are none."""
    if not indices:
        return "{-1}"
    return "{" + ", ".join(str(index) for index in indices) + "}"
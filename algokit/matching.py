"""Exact string matching: KMP, Boyer-Moore, Rabin-Karp and Horspool."""

from __future__ import annotations

from typing import Iterator

BASE = 256
MODULUS = 101


def _require_pattern(pattern: str) -> None:
    if not pattern:
        raise ValueError("pattern must not be empty")


def compute_lps(pattern: str) -> list[int]:
    """Return the longest-proper-prefix-that-is-also-suffix table of ``pattern``."""
    lps = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            lps[i] = length
            i += 1
        elif length:
            length = lps[length - 1]
        else:
            i += 1
    return lps


def kmp_search(text: str, pattern: str) -> list[int]:
    """Return every start index of ``pattern`` in ``text`` using Knuth-Morris-Pratt."""
    _require_pattern(pattern)
    lps = compute_lps(pattern)
    n, m = len(text), len(pattern)
    found: list[int] = []
    i = j = 0
    while i < n:
        if pattern[j] == text[i]:
            i += 1
            j += 1
        if j == m:
            found.append(i - j)
            j = lps[j - 1]
        elif i < n and pattern[j] != text[i]:
            if j:
                j = lps[j - 1]
            else:
                i += 1
    return found


def bad_char_table(pattern: str) -> dict[str, int]:
    """Map each character of ``pattern`` to the index of its last occurrence."""
    return {char: index for index, char in enumerate(pattern)}


def boyer_moore_search(text: str, pattern: str) -> list[int]:
    """Return every start index of ``pattern`` in ``text`` using the bad-character rule.

    Characters absent from the pattern count as last seen at index 0.
    """
    _require_pattern(pattern)
    table = bad_char_table(pattern)
    n, m = len(text), len(pattern)
    found: list[int] = []
    shift = 0
    while shift <= n - m:
        j = m - 1
        while j >= 0 and pattern[j] == text[shift + j]:
            j -= 1
        if j < 0:
            found.append(shift)
            shift += m - table.get(text[shift + m], 0) if shift + m < n else 1
        else:
            shift += max(1, j - table.get(text[shift + j], 0))
    return found


def rabin_karp_search(text: str, pattern: str) -> list[int]:
    """Return every start index of ``pattern`` in ``text`` using a rolling hash."""
    _require_pattern(pattern)
    n, m = len(text), len(pattern)
    if m > n:
        return []
    high = pow(BASE, m - 1, MODULUS)
    pattern_hash = window_hash = 0
    for pattern_char, text_char in zip(pattern, text):
        pattern_hash = (pattern_hash * BASE + ord(pattern_char)) % MODULUS
        window_hash = (window_hash * BASE + ord(text_char)) % MODULUS

    found: list[int] = []
    for i in range(n - m + 1):
        if pattern_hash == window_hash and text.startswith(pattern, i):
            found.append(i)
        if i < n - m:
            window_hash = (
                BASE * (window_hash - ord(text[i]) * high) + ord(text[i + m])
            ) % MODULUS
    return found


def shift_table(pattern: str, alphabet: str) -> dict[str, int]:
    """Build the Horspool shift for every character of ``alphabet``.

    Raises ``ValueError`` if the pattern is empty or uses a character
    outside the alphabet.
    """
    _require_pattern(pattern)
    missing = set(pattern) - set(alphabet)
    if missing:
        raise ValueError(f"pattern characters not in alphabet: {sorted(missing)!r}")
    m = len(pattern)
    table = dict.fromkeys(alphabet, m)
    for index, char in enumerate(pattern[:-1]):
        table[char] = m - 1 - index
    return table


def _horspool_matches(pattern: str, text: str, alphabet: str) -> Iterator[int]:
    table = shift_table(pattern, alphabet)
    m = len(pattern)
    i = m - 1
    while i < len(text):
        k = 0
        while k < m and pattern[m - 1 - k] == text[i - k]:
            k += 1
        if k == m:
            yield i - m + 1
        try:
            i += table[text[i]]
        except KeyError:
            raise ValueError(f"text character {text[i]!r} not in alphabet") from None


def horspool_search(pattern: str, text: str, alphabet: str) -> list[int]:
    """Return every start index of ``pattern`` in ``text`` using Horspool's algorithm."""
    return list(_horspool_matches(pattern, text, alphabet))


def horspool_first(pattern: str, text: str, alphabet: str) -> int:
    """Return the first start index of ``pattern`` in ``text``, or -1 if absent."""
    return next(_horspool_matches(pattern, text, alphabet), -1)
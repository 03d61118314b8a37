"""String routines: reversal, palindromes, letter counts and substring removal."""

from __future__ import annotations

from collections import Counter
from string import ascii_lowercase

__all__ = [
    "reverse_string",
    "is_palindrome",
    "letter_frequencies",
    "max_occurring_char",
    "replace_spaces",
    "remove_occurrences",
    "check_inclusion",
    "remove_adjacent_duplicates",
    "compress_letters",
]


def reverse_string(text: str) -> str:
    """Return ``text`` reversed."""
    return text[::-1]


def is_palindrome(text: str) -> bool:
    """Tell whether ``text`` reads the same both ways, ignoring case and non-alphanumerics."""
    cleaned = [ch for ch in text.lower() if ch.isascii() and ch.isalnum()]
    return cleaned == cleaned[::-1]


def letter_frequencies(text: str) -> dict[str, int]:
    """Count each ASCII letter of ``text`` case-insensitively, for all 26 letters in order."""
    counts = Counter(ch.lower() for ch in text if ch.isascii() and ch.isalpha())
    return {letter: counts[letter] for letter in ascii_lowercase}


def max_occurring_char(text: str) -> str:
    """Return the most frequent letter of ``text``; ties go to the earliest letter."""
    frequencies = letter_frequencies(text)
    best_letter = "a"
    best_count = -1
    for letter, count in frequencies.items():
        if count > best_count:
            best_letter, best_count = letter, count
    return best_letter


def replace_spaces(text: str) -> str:
    """Replace every space in ``text`` with ``@40``."""
    return text.replace(" ", "@40")


def remove_occurrences(text: str, part: str) -> str:
    """Repeatedly remove the leftmost occurrence of ``part`` until none is left."""
    if not part:
        raise ValueError("part to remove must not be empty")
    while part in text:
        text = text.replace(part, "", 1)
    return text


def check_inclusion(pattern: str, text: str) -> bool:
    """Tell whether some contiguous window of ``text`` is a permutation of ``pattern``."""
    size = len(pattern)
    if size > len(text):
        return False
    wanted = Counter(pattern)
    window = Counter(text[:size])
    if window == wanted:
        return True
    for start in range(1, len(text) - size + 1):
        leaving = text[start - 1]
        window[leaving] -= 1
        if not window[leaving]:
            del window[leaving]
        window[text[start + size - 1]] += 1
        if window == wanted:
            return True
    return False


def remove_adjacent_duplicates(text: str) -> str:
    """Remove pairs of equal adjacent characters until no such pair remains."""
    kept: list[str] = []
    for ch in text:
        if kept and kept[-1] == ch:
            kept.pop()
        else:
            kept.append(ch)
    return "".join(kept)


def compress_letters(text: str) -> str:
    """Encode a lowercase word as each letter present followed by its count, alphabetically."""
    for ch in text:
        if ch not in ascii_lowercase:
            raise ValueError(f"not a lowercase letter: {ch!r}")
    counts = Counter(text)
    return "".join(f"{letter}{counts[letter]}" for letter in ascii_lowercase if counts[letter])
"""Small string and list helpers."""

from __future__ import annotations

from typing import Iterable

_WHITESPACE = "\t\n \v\f\r"


def split_words(text: str, separator: str) -> list[str]:
    """Split ``text`` on ``separator``, dropping empty pieces."""
    return [word for word in text.split(separator) if word]


def word_count(text: str, separator: str) -> int:
    """Count the words of ``text`` separated by ``separator``.

    A text that does not start with the separator counts a word at its
    start, so an empty text counts one word.
    """
    count = 0 if text.startswith(separator) else 1
    count += sum(
        1
        for previous, current in zip(text, text[1:])
        if current != separator and previous == separator
    )
    return count


def trim(text: str) -> str:
    """Remove leading and trailing whitespace."""
    return text.strip(_WHITESPACE)


def find_within(haystack: str, needle: str, limit: int) -> int:
    """Find ``needle`` lying wholly within the first ``limit`` characters.

    Returns its index, or -1 when it is absent. An empty needle is found
    at index 0.
    """
    if not needle:
        return 0
    return haystack.find(needle, 0, max(limit, 0))


def count_char(text: str, char: str) -> int:
    """Count the occurrences of ``char`` in ``text``."""
    return text.count(char)


def replace_char(text: str, old: str, new: str) -> str:
    """Return ``text`` with every ``old`` character replaced by ``new``."""
    return text.replace(old, new)


def sort_ints(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order."""
    return sorted(values)
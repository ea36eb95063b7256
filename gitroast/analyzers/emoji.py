"""Explicit code-point table for emoji detection in commit messages."""

from __future__ import annotations

# Inclusive (start, end) code-point ranges.
EMOJI_RANGES: tuple[tuple[int, int], ...] = (
    (0x1F600, 0x1F64F),  # Emoticons
    (0x1F300, 0x1F5FF),  # Miscellaneous Symbols and Pictographs
    (0x1F680, 0x1F6FF),  # Transport and Map Symbols
    (0x1F1E0, 0x1F1FF),  # Regional indicator flags
    (0x2600, 0x26FF),  # Miscellaneous Symbols
    (0x2700, 0x27BF),  # Dingbats
)


def is_emoji_code_point(code_point: int) -> bool:
    return any(start <= code_point <= end for start, end in EMOJI_RANGES)


def has_emoji(text: str) -> bool:
    """True when ``text`` contains at least one code point from EMOJI_RANGES."""
    return any(is_emoji_code_point(ord(char)) for char in text)

from __future__ import annotations

import unicodedata
from typing import Iterable

from .model import Member

# Script groups in Korean collation order (CLDR "ko" reorders Hangul and
# Hanja ahead of Latin and other scripts).
_SPACE_OR_PUNCT, _DIGIT, _HANGUL, _HAN, _OTHER = range(5)

_HANGUL_RANGES = (
    (0x1100, 0x11FF),  # Jamo
    (0x3130, 0x318F),  # Compatibility Jamo
    (0xA960, 0xA97F),  # Jamo Extended-A
    (0xAC00, 0xD7A3),  # Syllables
    (0xD7B0, 0xD7FF),  # Jamo Extended-B
)
_HAN_RANGES = (
    (0x3400, 0x4DBF),
    (0x4E00, 0x9FFF),
    (0xF900, 0xFAFF),
    (0x20000, 0x3134F),
)


def _in_ranges(cp: int, ranges: tuple[tuple[int, int], ...]) -> bool:
    return any(lo <= cp <= hi for lo, hi in ranges)


def _script_group(ch: str) -> int:
    cp = ord(ch)
    if _in_ranges(cp, _HANGUL_RANGES):
        return _HANGUL
    if _in_ranges(cp, _HAN_RANGES):
        return _HAN
    if ch.isdigit():
        return _DIGIT
    if ch.isspace() or unicodedata.category(ch)[0] in "PS":
        return _SPACE_OR_PUNCT
    return _OTHER


def korean_name_key(name: str) -> tuple:
    """Collation key for names, approximating `localeCompare(a, b, "ko")`.

    Each character is compared by script group first, then by code point.
    Precomposed Hangul syllables are encoded in 가나다 order, so names
    within the Hangul group sort the way a Korean dictionary does. Latin
    letters compare case-insensitively. Ties fall back to the raw name.
    """
    normalized = unicodedata.normalize("NFC", name)
    folded = normalized.casefold()
    return tuple((_script_group(ch), ch) for ch in folded), normalized


def sort_members(members: Iterable[Member]) -> list[Member]:
    """Return a new list sorted by name (stable for equal names)."""
    return sorted(members, key=lambda m: korean_name_key(m.name))

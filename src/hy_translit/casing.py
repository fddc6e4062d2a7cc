"""
Word-level casing detection and reapplication.

The casing of a transliterated word is decided by its Armenian source word
only.  Latin or Cyrillic letters embedded in the same token do not count.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

from hy_translit.alphabet import is_armenian_letter


class WordCasing(Enum):
    UPPER = "upper"
    LOWER = "lower"
    MIXED = "mixed"  # first letter upper, the rest lower


def classify(
    word: str,
    is_letter: Callable[[str], bool] = is_armenian_letter,
) -> WordCasing:
    """Classify the casing pattern of word.

    Only characters accepted by is_letter are inspected.  A word with both
    upper- and lowercase letters is MIXED, a word with only uppercase
    letters is UPPER, and anything else (including a word with no letters
    at all) is LOWER.
    """
    has_upper = False
    has_lower = False

    for ch in word:
        if not is_letter(ch):
            continue
        if ch.isupper():
            has_upper = True
        else:
            has_lower = True
        if has_upper and has_lower:
            return WordCasing.MIXED

    if has_upper:
        return WordCasing.UPPER
    return WordCasing.LOWER


def apply_casing(text: str, pattern: WordCasing) -> str:
    if pattern is WordCasing.UPPER:
        return text.upper()
    if pattern is WordCasing.LOWER:
        return text.lower()
    if not text:
        return text
    return text[0].upper() + text[1:].lower()

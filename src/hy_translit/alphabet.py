"""
Armenian alphabet tables shared by every script pipeline.

Holds the letter ranges, the vowel set, the presentation-form ligatures,
the punctuation substitution table and the split pattern the tokenizer
uses to separate Armenian runs from everything else.

Usage:
    from hy_translit.alphabet import has_armenian_letter, replace_punctuation

    replace_punctuation("Ինչու՞")   # -> "Ինչու?"
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from types import MappingProxyType


# ── Letters ─────────────────────────────────────────────────────────────────

UPPERCASE_LETTERS = "".join(chr(cp) for cp in range(0x0531, 0x0557))  # Ա..Ֆ
LOWERCASE_LETTERS = "".join(chr(cp) for cp in range(0x0561, 0x0587))  # ա..ֆ

YEV_LIGATURE = "\u0587"  # և

# Alphabetic Presentation Forms block
LIGATURES: Mapping[str, str] = MappingProxyType({
    "\ufb13": "մն",  # ﬓ men-now
    "\ufb14": "մե",  # ﬔ men-ech
    "\ufb15": "մի",  # ﬕ men-ini
    "\ufb16": "վն",  # ﬖ vew-now
    "\ufb17": "մխ",  # ﬗ men-xeh
})

_LETTERS = frozenset(
    UPPERCASE_LETTERS + LOWERCASE_LETTERS + YEV_LIGATURE + "".join(LIGATURES)
)

VOWELS = frozenset("աեէիոօը" "ԱԵԷԻՈՕԸ")


def is_armenian_letter(ch: str) -> bool:
    return ch in _LETTERS


def has_armenian_letter(text: str) -> bool:
    return any(ch in _LETTERS for ch in text)


def is_armenian_vowel(ch: str) -> bool:
    return ch in VOWELS


def expand_ligatures(word: str) -> str:
    """Replace each presentation-form ligature with its two letters."""
    for ligature, expansion in LIGATURES.items():
        if ligature in word:
            word = word.replace(ligature, expansion)
    return word


# ── Punctuation ─────────────────────────────────────────────────────────────

ARMENIAN_PUNCTUATION: Mapping[str, str] = MappingProxyType({
    "\u0559": "'",   # ՙ modifier letter left half ring
    "\u055a": "'",   # ՚ apostrophe
    "\u055b": "'",   # ՛ emphasis mark
    "\u055c": "!",   # ՜ exclamation mark
    "\u055d": ",",   # ՝ comma
    "\u055e": "?",   # ՞ question mark
    "\u055f": ".",   # ՟ abbreviation mark
    "\u0589": ".",   # ։ full stop
    "\u058a": "-",   # ֊ hyphen
    "\u00ab": '"',   # «
    "\u00bb": '"',   # »
})


def punctuation_table(overrides: Mapping[str, str] | None = None) -> dict[int, str]:
    """Build a str.translate table from ARMENIAN_PUNCTUATION plus overrides.

    Override keys must be single characters; values may be any string,
    including the empty string (which deletes the mark).
    """
    merged = dict(ARMENIAN_PUNCTUATION)
    if overrides:
        for mark, replacement in overrides.items():
            if len(mark) != 1:
                raise ValueError(
                    f"Punctuation key must be a single character, got {mark!r}"
                )
            merged[mark] = str(replacement)
    return str.maketrans(merged)


_DEFAULT_PUNCTUATION_TABLE = punctuation_table()


def replace_punctuation(text: str, table: Mapping[int, str] | None = None) -> str:
    return text.translate(_DEFAULT_PUNCTUATION_TABLE if table is None else table)


# ── Tokenization ────────────────────────────────────────────────────────────

# Characters that stay inside one segment.  Whitespace runs and runs of
# anything else become delimiter segments, kept by the capturing group.
_KEEP_TOGETHER = (
    "\u0531-\u0556"          # Ա..Ֆ
    "\u0561-\u0587"          # ա..ֆ, և
    "\ufb13-\ufb17"          # ligatures
    "\u055d\u055b\u0589"     # ՝ ՛ ։
    ",.\\-0-9\u00ab\u00bb"  # , . - digits « »
)

SPLIT_RE = re.compile(f"(\\s+|[^{_KEEP_TOGETHER}]+)")

WHITESPACE_RE = re.compile(r"\s+")


def split_segments(text: str) -> list[str]:
    """Split text into segments, keeping delimiter runs as their own items.

    "".join(split_segments(text)) == text for every input.
    """
    return SPLIT_RE.split(text)

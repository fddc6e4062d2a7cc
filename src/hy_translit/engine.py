"""
Text-level transliteration: tokenizing, the per-word pipeline, dispatch.

Usage:
    from hy_translit.engine import Transliterator, transliterate

    transliterate("Ով է այնտեղ։")          # -> "Ov e ayntegh."
    transliterate("Երևան", "ru")           # -> "Ереван"

    tr = Transliterator.from_config("hy_translit.toml")
    tr.transliterate("some armenian text")

Per word:
    1) Normalize (expand ligatures, collapse multi-letter sequences).
    2) Render the first one or two characters through the first-character
       rules, then map the rest character by character.
    3) Reapply the casing pattern of the original Armenian word.
"""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path

from hy_translit.alphabet import (
    WHITESPACE_RE,
    has_armenian_letter,
    punctuation_table,
    replace_punctuation,
    split_segments,
)
from hy_translit.casing import apply_casing, classify
from hy_translit.rules import apply_first_char_rules
from hy_translit.scripts import Script, UnknownScriptError, get_script

logger = logging.getLogger(__name__)

DEFAULT_SCRIPT = "en"


class Transliterator:
    """Transliterates Armenian text into one target script.

    Instances hold only read-only tables, so one instance can be shared
    freely between callers.
    """

    def __init__(
        self,
        script: str | Script = DEFAULT_SCRIPT,
        punctuation: Mapping[str, str] | None = None,
    ):
        self.script = script if isinstance(script, Script) else get_script(script)
        self.punctuation_overrides = dict(punctuation or {})
        self._punctuation = punctuation_table(self.punctuation_overrides)

    @classmethod
    def from_config(cls, config_path: str | Path = "hy_translit.toml") -> Transliterator:
        """Build a Transliterator from a TOML config file.

        Recognized tables:
            [transliteration]  script = "en" | "ru"
            [punctuation]      single-character mark = replacement
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config not found: {config_path}")

        with config_path.open("rb") as f:
            cfg = tomllib.load(f)

        tr_cfg = cfg.get("transliteration", {})
        script = tr_cfg.get("script", DEFAULT_SCRIPT)
        punctuation = cfg.get("punctuation", {})

        logger.debug("Loaded %s: script=%r, %d punctuation override(s)",
                     config_path, script, len(punctuation))
        return cls(script, punctuation=punctuation)

    # ── Words ────────────────────────────────────────────────────────────

    def _transliterate_raw(self, word: str) -> str:
        """Render a normalized word, ignoring case."""
        if not word:
            return ""

        first, *rest = word
        second = rest[0] if rest else None
        head = apply_first_char_rules(self.script.rules, first, second, self.script.map_char)
        return head + "".join(self.script.map_char(ch) for ch in rest[1:])

    def transliterate_word(self, word: str) -> str:
        """Transliterate a single whitespace-free word, keeping its casing pattern."""
        normalized = self.script.normalize(word)
        raw = self._transliterate_raw(normalized)
        return apply_casing(raw, classify(word))

    # ── Text ─────────────────────────────────────────────────────────────

    def transliterate(self, text: str) -> str:
        """Transliterate arbitrary text.

        Non-Armenian runs (whitespace, foreign scripts, symbols) come back
        unchanged apart from Armenian punctuation substitution.  Whitespace
        inside an Armenian-bearing segment is collapsed to single spaces.
        """
        pieces = []
        for segment in split_segments(text):
            segment = replace_punctuation(segment, self._punctuation)
            if has_armenian_letter(segment):
                words = WHITESPACE_RE.split(segment)
                segment = " ".join(self.transliterate_word(w) for w in words)
            pieces.append(segment)
        return "".join(pieces)

    __call__ = transliterate

    def summary(self) -> str:
        lines = [f"Transliterator -> {self.script.name}"]
        for sub_line in self.script.summary().split("\n"):
            lines.append(f"  {sub_line}")
        lines.append(f"  Punctuation overrides: {len(self.punctuation_overrides)}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Transliterator({self.script.tag!r})"


# ── Module-level entry points ────────────────────────────────────────────────

@lru_cache(maxsize=None)
def get_transliterator(script: str = DEFAULT_SCRIPT) -> Transliterator:
    """Return the shared default Transliterator for a script tag."""
    logger.debug("Building %s pipeline", script)
    return Transliterator(script)


def transliterate(text: str, script: str = DEFAULT_SCRIPT) -> str:
    """Transliterate Armenian text to Latin ("en") or Cyrillic ("ru").

    Raises UnknownScriptError for any other script tag.
    """
    if not isinstance(script, str):
        raise UnknownScriptError(f"Unknown script {script!r}")
    return get_transliterator(script).transliterate(text)


def to_latin(text: str) -> str:
    return transliterate(text, "en")


def to_cyrillic(text: str) -> str:
    return transliterate(text, "ru")

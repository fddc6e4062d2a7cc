"""
Script pipelines: Latin ("en") and Cyrillic ("ru") renderings of Armenian.

A Script bundles everything that differs between target alphabets: the
per-letter table, the multi-letter sentinels and the spellings used by the
word-initial rules.  Both pipelines are built once at import time and are
read-only afterwards.

Usage:
    from hy_translit.scripts import get_script

    latin = get_script("en")
    latin.map_char("խ")         # -> "kh"
    latin.normalize("ուրախ")    # -> sentinel + "րախ"
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from hy_translit.alphabet import expand_ligatures, is_armenian_vowel
from hy_translit.charmap import CharacterMap
from hy_translit.rules import FirstCharRule, InitialSpellings, build_rules
from hy_translit.sentinels import (
    Sentinel,
    SentinelMap,
    U_SENTINEL,
    YA_SENTINEL,
    YEV_SENTINEL,
    YU_SENTINEL,
)


class UnknownScriptError(ValueError):
    """Raised for a script tag other than the registered ones."""


class Script:
    """One target alphabet: character map, sentinel map and first-character rules."""

    def __init__(
        self,
        tag: str,
        name: str,
        char_map: CharacterMap,
        sentinels: SentinelMap,
        spellings: InitialSpellings,
    ):
        if not sentinels.is_sentinel(YEV_SENTINEL):
            raise ValueError(f"Script {tag!r} has no rendering for the conjunction letter")
        self.tag = tag
        self.name = name
        self.char_map = char_map
        self.sentinels = sentinels
        self.spellings = spellings
        self.rules: tuple[FirstCharRule, ...] = build_rules(
            spellings, YEV_SENTINEL, self.map_char, self.is_vowel,
        )

    def map_char(self, ch: str) -> str:
        """Map one (normalized) character; unknown characters pass through."""
        restored = self.sentinels.restore(ch)
        if restored is not None:
            return restored
        return self.char_map.map(ch)

    def is_vowel(self, ch: str) -> bool:
        return is_armenian_vowel(ch) or self.sentinels.is_vowel(ch)

    def normalize(self, word: str) -> str:
        """Expand ligatures, then collapse multi-letter sequences to sentinels."""
        return self.sentinels.substitute(expand_ligatures(word))

    def summary(self) -> str:
        lines = [f"{self.name} script ({self.tag!r})"]
        lines.append(f"  Letters:    {len(self.char_map)} entries")
        lines.append(f"  Sentinels:  {len(self.sentinels)} "
                     f"({len(self.sentinels.forward)} sequences)")
        lines.append(f"  Rules:      {', '.join(r.name for r in self.rules)}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Script({self.tag!r}, {self.name!r})"


# ── Latin ───────────────────────────────────────────────────────────────────

_LATIN_LETTERS = {
    "ա": "a",   "բ": "b",   "գ": "g",   "դ": "d",   "ե": "e",
    "զ": "z",   "է": "e",   "ը": "ə",   "թ": "t'",  "ժ": "zh",
    "ի": "i",   "լ": "l",   "խ": "kh",  "ծ": "ts",  "կ": "k",
    "հ": "h",   "ձ": "dz",  "ղ": "gh",  "ճ": "ch'", "մ": "m",
    "յ": "y",   "ն": "n",   "շ": "sh",  "ո": "o",   "չ": "ch",
    "պ": "p",   "ջ": "j",   "ռ": "r",   "ս": "s",   "վ": "v",
    "տ": "t",   "ր": "r",   "ց": "ts",  "ւ": "u",   "փ": "p'",
    "ք": "k'",  "օ": "o",   "ֆ": "f",
}

LATIN = Script(
    tag="en",
    name="Latin",
    char_map=CharacterMap(_LATIN_LETTERS),
    sentinels=SentinelMap([
        Sentinel(U_SENTINEL, "u", ("ու", "Ու", "ՈՒ"), vowel=True),
        Sentinel(YEV_SENTINEL, "ev", ("և", "եւ", "Եւ", "ԵՒ"), vowel=True),
    ]),
    spellings=InitialSpellings(yev="yev", ye="ye", o="o", vo="vo"),
)


# ── Cyrillic ────────────────────────────────────────────────────────────────

_CYRILLIC_LETTERS = {
    "ա": "а",   "բ": "б",   "գ": "г",   "դ": "д",   "ե": "е",
    "զ": "з",   "է": "э",   "ը": "ы",   "թ": "т'",  "ժ": "ж",
    "ի": "и",   "լ": "л",   "խ": "х",   "ծ": "ц",   "կ": "к",
    "հ": "х",   "ձ": "дз",  "ղ": "гх",  "ճ": "ч'",  "մ": "м",
    "յ": "й",   "ն": "н",   "շ": "ш",   "ո": "о",   "չ": "ч",
    "պ": "п",   "ջ": "ж",   "ռ": "р",   "ս": "с",   "վ": "в",
    "տ": "т",   "ր": "р",   "ց": "ц",   "ւ": "у",   "փ": "п'",
    "ք": "к'",  "օ": "о",   "ֆ": "ф",
}

# յու and յա are single Cyrillic letters; they start with the semivowel,
# so they do not count as vowels after a word-initial Ո.
CYRILLIC = Script(
    tag="ru",
    name="Cyrillic",
    char_map=CharacterMap(_CYRILLIC_LETTERS),
    sentinels=SentinelMap([
        Sentinel(YU_SENTINEL, "ю", ("յու", "Յու", "ՅՈՒ")),
        Sentinel(YA_SENTINEL, "я", ("յա", "Յա", "ՅԱ")),
        Sentinel(U_SENTINEL, "у", ("ու", "Ու", "ՈՒ"), vowel=True),
        Sentinel(YEV_SENTINEL, "ев", ("և", "եւ", "Եւ", "ԵՒ"), vowel=True),
    ]),
    spellings=InitialSpellings(yev="ев", ye="е", o="о", vo="во"),
)


# ── Registry ────────────────────────────────────────────────────────────────

SCRIPTS: Mapping[str, Script] = MappingProxyType({
    LATIN.tag: LATIN,
    CYRILLIC.tag: CYRILLIC,
})


def get_script(tag: str) -> Script:
    try:
        return SCRIPTS[tag]
    except (KeyError, TypeError):
        known = ", ".join(repr(t) for t in SCRIPTS)
        raise UnknownScriptError(
            f"Unknown script {tag!r} (expected one of: {known})"
        ) from None

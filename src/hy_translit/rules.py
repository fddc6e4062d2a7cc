"""
Contextual rules for the first one or two characters of a word.

Word-initial Armenian letters do not always sound the way the per-character
tables say: ե is "ye" at the start of a name, ո is "vo" at the start of a
native word, and the conjunction letter և is "yev" rather than "ev".  Each
case is one FirstCharRule; rules are tried in order and the first match
wins, so the order of the tuple returned by build_rules is part of the
output contract.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

CharMapper = Callable[[str], str]


@dataclass(frozen=True, slots=True)
class FirstCharRule:
    name: str
    match: Callable[[str, str | None], bool]
    render: Callable[[str, str | None], str]

    def __repr__(self) -> str:
        return f"FirstCharRule({self.name})"


@dataclass(frozen=True, slots=True)
class InitialSpellings:
    """Target-script spellings of the word-initial onsets."""
    yev: str  # conjunction letter at word start
    ye: str   # uppercase Ե at word start
    o: str    # Ո before a vowel or վ
    vo: str   # Ո elsewhere


def _tail(second: str | None, map_char: CharMapper) -> str:
    return map_char(second) if second is not None else ""


def yev_rule(yev_sentinel: str, spelling: str, map_char: CharMapper) -> FirstCharRule:
    return FirstCharRule(
        name="YevRule",
        match=lambda first, second: first == yev_sentinel,
        render=lambda first, second: spelling + _tail(second, map_char),
    )


def ye_rule(spelling: str, map_char: CharMapper) -> FirstCharRule:
    # Case-sensitive: a lowercase ե at word start keeps its plain mapping.
    return FirstCharRule(
        name="YeRule",
        match=lambda first, second: first == "Ե",
        render=lambda first, second: spelling + _tail(second, map_char),
    )


def vo_rule(
    plain: str,
    onset: str,
    map_char: CharMapper,
    is_vowel: Callable[[str], bool],
) -> FirstCharRule:
    def render(first: str, second: str | None) -> str:
        if second is not None and (is_vowel(second) or second in ("վ", "Վ")):
            head = plain
        else:
            head = onset
        return head + _tail(second, map_char)

    return FirstCharRule(
        name="VoRule",
        match=lambda first, second: first in ("ո", "Ո"),
        render=render,
    )


def build_rules(
    spellings: InitialSpellings,
    yev_sentinel: str,
    map_char: CharMapper,
    is_vowel: Callable[[str], bool],
) -> tuple[FirstCharRule, ...]:
    return (
        yev_rule(yev_sentinel, spellings.yev, map_char),
        ye_rule(spellings.ye, map_char),
        vo_rule(spellings.o, spellings.vo, map_char, is_vowel),
    )


def apply_first_char_rules(
    rules: tuple[FirstCharRule, ...],
    first: str,
    second: str | None,
    map_char: CharMapper,
) -> str:
    """Render the first character (and the second, if present) of a word.

    Falls back to plain per-character mapping when no rule matches.  The
    caller must skip both characters afterwards.
    """
    if not first:
        # The tokenizer never produces empty words; reaching here is a bug.
        raise RuntimeError("First-character rules applied to an empty word")
    for rule in rules:
        if rule.match(first, second):
            return rule.render(first, second)
    return map_char(first) + _tail(second, map_char)

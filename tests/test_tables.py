"""Tests for CharacterMap (charmap.py) and SentinelMap (sentinels.py)."""

import pytest
from hy_translit.alphabet import LOWERCASE_LETTERS, UPPERCASE_LETTERS
from hy_translit.charmap import CharacterMap
from hy_translit.sentinels import (
    Sentinel,
    SentinelMap,
    U_SENTINEL,
    YEV_SENTINEL,
    YU_SENTINEL,
)


def _full_table(value: str = "x") -> dict[str, str]:
    return {ch: value for ch in LOWERCASE_LETTERS}


# ── CharacterMap ──────────────────────────────────────────────────────────────

def test_charmap_covers_both_cases():
    cm = CharacterMap(_full_table())
    assert len(cm) == 76
    for ch in UPPERCASE_LETTERS + LOWERCASE_LETTERS:
        assert cm[ch] == "x"


def test_charmap_uppercase_inherits_lowercase_value():
    table = _full_table()
    table["խ"] = "kh"
    cm = CharacterMap(table)
    assert cm.map("Խ") == "kh"
    assert cm.map("խ") == "kh"


def test_charmap_identity_fallback():
    cm = CharacterMap(_full_table())
    assert cm.map("7") == "7"
    assert cm.map("q") == "q"
    assert cm.map(".") == "."


def test_charmap_rejects_missing_letter():
    table = _full_table()
    del table["ֆ"]
    with pytest.raises(ValueError, match="missing"):
        CharacterMap(table)


def test_charmap_rejects_non_letter_key():
    table = _full_table()
    table["Ա"] = "a"  # uppercase keys are derived, not given
    with pytest.raises(ValueError, match="non-letter"):
        CharacterMap(table)


def test_charmap_rejects_empty_value():
    table = _full_table()
    table["ա"] = ""
    with pytest.raises(ValueError):
        CharacterMap(table)


def test_charmap_is_read_only():
    cm = CharacterMap(_full_table())
    with pytest.raises(TypeError):
        cm["ա"] = "y"


# ── SentinelMap ───────────────────────────────────────────────────────────────

def _smap() -> SentinelMap:
    return SentinelMap([
        Sentinel(U_SENTINEL, "u", ("ու", "Ու"), vowel=True),
        Sentinel(YEV_SENTINEL, "ev", ("և", "եւ"), vowel=True),
        Sentinel(YU_SENTINEL, "yu", ("յու",)),
    ])


def test_sentinel_forward_and_backward_are_paired():
    smap = _smap()
    for code in smap.forward.values():
        assert code in smap.backward


def test_substitute_replaces_every_occurrence():
    smap = _smap()
    assert smap.substitute("ուրախություն") == f"{U_SENTINEL}րախ{U_SENTINEL}թ{YU_SENTINEL}ն"
    assert smap.substitute("Ուու") == U_SENTINEL * 2


def test_substitute_longest_sequence_first():
    smap = _smap()
    # յու must not become յ + ու
    assert smap.substitute("յուղ") == f"{YU_SENTINEL}ղ"
    assert U_SENTINEL not in smap.substitute("յուղ")


def test_substitute_two_letter_conjunction():
    smap = _smap()
    assert smap.substitute("բարեւ") == f"բար{YEV_SENTINEL}"
    assert smap.substitute("և") == YEV_SENTINEL


def test_restore():
    smap = _smap()
    assert smap.restore(U_SENTINEL) == "u"
    assert smap.restore("ա") is None


def test_vowel_flags():
    smap = _smap()
    assert smap.is_vowel(U_SENTINEL)
    assert smap.is_vowel(YEV_SENTINEL)
    assert not smap.is_vowel(YU_SENTINEL)
    assert not smap.is_vowel("ա")


def test_empty_sentinel_map_is_noop():
    smap = SentinelMap([])
    assert smap.substitute("ուրախ") == "ուրախ"
    assert len(smap) == 0


def test_sentinel_must_be_single_code_point():
    with pytest.raises(ValueError):
        SentinelMap([Sentinel("ab", "u", ("ու",))])


def test_sentinel_rejects_duplicate_sequence():
    with pytest.raises(ValueError, match="two sentinels"):
        SentinelMap([
            Sentinel(U_SENTINEL, "u", ("ու",)),
            Sentinel(YEV_SENTINEL, "ev", ("ու",)),
        ])


def test_sentinel_rejects_duplicate_code():
    with pytest.raises(ValueError, match="Duplicate"):
        SentinelMap([
            Sentinel(U_SENTINEL, "u", ("ու",)),
            Sentinel(U_SENTINEL, "ev", ("և",)),
        ])


def test_sentinel_requires_sequences():
    with pytest.raises(ValueError):
        SentinelMap([Sentinel(U_SENTINEL, "u", ())])

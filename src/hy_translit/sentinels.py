"""
Multi-letter Armenian sequences collapsed into single placeholder code points.

Sequences such as ու (one vowel sound written with two letters) or the
conjunction letter և and its two-letter spelling եւ are replaced by a
sentinel from the Private Use Area before per-character mapping, so the
rest of the pipeline sees them as one unit.  Each sentinel carries the
target-script string it stands for.

Usage:
    from hy_translit.sentinels import Sentinel, SentinelMap

    smap = SentinelMap([Sentinel("\\ue000", "u", ("ու", "Ու"), vowel=True)])
    smap.substitute("ուրախ")   # -> "\\ue000րախ"
    smap.restore("\\ue000")     # -> "u"
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType


# Reserved placeholders.  Private Use Area, never produced by Armenian input.
U_SENTINEL = "\ue000"    # ու
YEV_SENTINEL = "\ue001"  # և / եւ
YU_SENTINEL = "\ue002"   # յու
YA_SENTINEL = "\ue003"   # յա


@dataclass(frozen=True, slots=True)
class Sentinel:
    """One placeholder code point, the sequences it replaces and its rendering."""
    code: str                   # the placeholder code point
    rendering: str              # target-script string restored for it
    sequences: tuple[str, ...]  # Armenian spellings replaced by it
    vowel: bool = False         # counts as a vowel for first-character rules


class SentinelMap:
    """
    Paired forward/backward tables for one script pipeline.

    forward:  Armenian sequence -> sentinel code point
    backward: sentinel code point -> target-script string

    Every forward target has a backward entry by construction.  Forward
    sequences are matched longest-first in a single regex pass, which gives
    global, non-overlapping replacement where a longer sequence is never
    masked by one of its prefixes.
    """

    def __init__(self, sentinels: Iterable[Sentinel]):
        forward: dict[str, str] = {}
        backward: dict[str, str] = {}
        vowels: set[str] = set()

        for s in sentinels:
            if len(s.code) != 1:
                raise ValueError(f"Sentinel must be a single code point, got {s.code!r}")
            if s.code in backward:
                raise ValueError(f"Duplicate sentinel {s.code!r}")
            if not s.sequences:
                raise ValueError(f"Sentinel {s.code!r} replaces no sequences")
            backward[s.code] = s.rendering
            if s.vowel:
                vowels.add(s.code)
            for seq in s.sequences:
                if seq in forward:
                    raise ValueError(f"Sequence {seq!r} mapped to two sentinels")
                forward[seq] = s.code

        self.forward: Mapping[str, str] = MappingProxyType(forward)
        self.backward: Mapping[str, str] = MappingProxyType(backward)
        self.vowels: frozenset[str] = frozenset(vowels)

        ordered = sorted(forward, key=len, reverse=True)
        self._pattern = (
            re.compile("|".join(re.escape(seq) for seq in ordered)) if ordered else None
        )

    def substitute(self, word: str) -> str:
        """Replace every known sequence in word with its sentinel."""
        if self._pattern is None:
            return word
        return self._pattern.sub(lambda m: self.forward[m.group(0)], word)

    def restore(self, ch: str) -> str | None:
        """Target-script string for a sentinel, or None if ch is not one."""
        return self.backward.get(ch)

    def is_sentinel(self, ch: str) -> bool:
        return ch in self.backward

    def is_vowel(self, ch: str) -> bool:
        return ch in self.vowels

    def __len__(self) -> int:
        return len(self.backward)

    def __repr__(self) -> str:
        return f"SentinelMap({len(self.backward)} sentinels, {len(self.forward)} sequences)"

"""Per-script character tables: one Armenian letter -> target-script string."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from hy_translit.alphabet import LOWERCASE_LETTERS, UPPERCASE_LETTERS


class CharacterMap(Mapping[str, str]):
    """
    Immutable letter table covering both cases of the Armenian alphabet.

    Built from a lowercase-keyed table; every uppercase letter inherits the
    value of its lowercase partner, so case is decided later by the casing
    engine and not by the table.
    """

    __slots__ = ("_table",)

    def __init__(self, lowercase_table: Mapping[str, str]):
        missing = [ch for ch in LOWERCASE_LETTERS if ch not in lowercase_table]
        if missing:
            raise ValueError(f"Character map is missing letters: {''.join(missing)}")
        extra = [ch for ch in lowercase_table if ch not in LOWERCASE_LETTERS]
        if extra:
            raise ValueError(f"Character map has non-letter keys: {''.join(extra)}")

        table: dict[str, str] = {}
        for lower, upper in zip(LOWERCASE_LETTERS, UPPERCASE_LETTERS):
            value = lowercase_table[lower]
            if not value:
                raise ValueError(f"Empty mapping for {lower!r}")
            table[lower] = value
            table[upper] = value
        self._table = MappingProxyType(table)

    def map(self, ch: str) -> str:
        """Return the mapped string for ch, or ch itself if it is not a letter."""
        return self._table.get(ch, ch)

    def __getitem__(self, ch: str) -> str:
        return self._table[ch]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"CharacterMap({len(self._table)} entries)"

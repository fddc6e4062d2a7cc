"""hy-translit: Armenian text transliteration into Latin and Cyrillic."""

from hy_translit.casing import WordCasing
from hy_translit.charmap import CharacterMap
from hy_translit.engine import (
    Transliterator,
    get_transliterator,
    to_cyrillic,
    to_latin,
    transliterate,
)
from hy_translit.rules import FirstCharRule
from hy_translit.scripts import CYRILLIC, LATIN, SCRIPTS, Script, UnknownScriptError, get_script
from hy_translit.sentinels import Sentinel, SentinelMap

__all__ = [
    "transliterate", "to_latin", "to_cyrillic",
    "Transliterator", "get_transliterator",
    "Script", "SCRIPTS", "LATIN", "CYRILLIC", "get_script",
    "CharacterMap", "Sentinel", "SentinelMap", "FirstCharRule", "WordCasing",
    "UnknownScriptError",
]

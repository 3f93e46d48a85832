"""IPA symbol to English sound approximation.

IPA 記号を英語話者向けの簡易な綴り（ASCII 寄り）へ置き換える。
2 文字記号（破擦音・二重母音）を 1 文字記号より優先する貪欲マッチで走査する。
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

SEPARATOR = "-"

_STANDARD_SYMBOLS: dict[str, str] = {
    # Consonants
    "p": "p",
    "b": "b",
    "t": "t",
    "d": "d",
    "k": "k",
    "g": "g",
    "f": "f",
    "v": "v",
    "s": "s",
    "z": "z",
    "h": "h",
    "m": "m",
    "n": "n",
    "l": "l",
    "w": "w",
    "ʃ": "sh",
    "ʒ": "zh",
    "tʃ": "ch",
    "dʒ": "j",
    "ŋ": "ng",
    "j": "y",
    "θ": "th",
    "ð": "dh",
    "ɹ": "r",
    "ʔ": "'",  # glottal stop
    "x": "kh",
    "ɲ": "ny",
    # Monophthongs
    "i": "ee",
    "ɪ": "ih",
    "e": "eh",
    "ɛ": "e",
    "æ": "a",
    "ɑ": "ah",
    "ɒ": "o",
    "ɔ": "aw",
    "o": "oh",
    "ʊ": "uh",
    "u": "oo",
    "ʌ": "u",
    "ə": "uh",
    "ɜ": "er",
    # Diphthongs
    "eɪ": "ay",
    "aɪ": "ai",
    "aʊ": "ow",
    "ɔɪ": "oi",
    "oʊ": "oh",
    "ɪə": "eer",
    # Suprasegmentals
    "ˈ": "'",
    "ˌ": ",",
    "ː": ":",
}

STANDARD_SYMBOL_TABLE: Mapping[str, str] = MappingProxyType(_STANDARD_SYMBOLS)


class SymbolMapper:
    """Greedy two-scalar-first tokenizer over a fixed symbol table.

    走査は左から右へ 1 回のみ。各位置で 2 文字の窓を先に照合し、
    なければ 1 文字で照合、表に無い記号はそのまま出力する（エラーにしない）。
    """

    def __init__(self, table: Mapping[str, str] | None = None) -> None:
        source = STANDARD_SYMBOL_TABLE if table is None else table
        for key in source:
            if not 1 <= len(key) <= 2:
                raise ValueError(f"symbol keys must be 1 or 2 code points: {key!r}")
        self._table: Mapping[str, str] = MappingProxyType(dict(source))

    def tokens(self, ipa: str) -> list[str]:
        """Return the mapped tokens of ``ipa`` in order."""
        out: list[str] = []
        index = 0
        length = len(ipa)
        while index < length:
            pair = ipa[index : index + 2]
            if len(pair) == 2 and pair in self._table:
                out.append(self._table[pair])
                index += 2
                continue
            symbol = ipa[index]
            out.append(self._table.get(symbol, symbol))
            index += 1
        return out

    def translate(self, ipa: str) -> str:
        """Convert an IPA string into a hyphen-joined English sound string."""
        return SEPARATOR.join(self.tokens(ipa))


_STANDARD_MAPPER = SymbolMapper()


def ipa_to_english_sound(ipa: str) -> str:
    """Translate with the standard table."""
    return _STANDARD_MAPPER.translate(ipa)

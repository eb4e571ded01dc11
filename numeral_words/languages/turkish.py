"""
Turkish.

"bir" is dropped before "yüz" and "bin" (yüz, bin, bin yüz), but kept
before the larger scales (bir milyon). With ``drop_spaces`` the whole
number becomes a single word: "binikiyüzotuzdört".
"""

from __future__ import annotations

from ..models import TurkishOptions
from ..plurals import invariant
from ..profile import GrammarContext, LanguageProfile, build_lookup, require_scales, require_table
from ..segments import Grouping

_ONES = ("", "bir", "iki", "üç", "dört", "beş", "altı", "yedi", "sekiz", "dokuz")

_TENS = ("", "on", "yirmi", "otuz", "kırk", "elli", "altmış", "yetmiş", "seksen", "doksan")

_SCALES = ((), ("bin",), ("milyon",), ("milyar",), ("trilyon",), ("katrilyon",), ("kentilyon",))


def _segment_words(value: int) -> tuple[str, ...]:
    hundreds, rest = divmod(value, 100)
    tens, ones = divmod(rest, 10)
    words: list[str] = []
    if hundreds:
        words += ["yüz"] if hundreds == 1 else [_ONES[hundreds], "yüz"]
    if tens:
        words.append(_TENS[tens])
    if ones:
        words.append(_ONES[ones])
    return tuple(words)


def build_turkish() -> LanguageProfile:
    require_table("tr", "ones", _ONES, 10)
    require_table("tr", "tens", _TENS, 10)
    scales = require_scales("tr", _SCALES, invariant)
    segments = build_lookup(_segment_words, 1000)

    def render_segment(value: int, context: GrammarContext) -> str:
        return context.separator.join(segments[value])

    def scale_word(value: int, context: GrammarContext) -> str:
        return invariant(value, scales[context.scale_index])

    def omit_multiplier(value: int, context: GrammarContext) -> bool:
        return context.scale_index == 1 and value == 1

    return LanguageProfile(
        code="tr",
        name="Turkish",
        grouping=Grouping.WESTERN,
        zero_word="sıfır",
        negative_word="eksi",
        decimal_word="virgül",
        render_segment=render_segment,
        scale_word=scale_word,
        max_scale_index=len(scales) - 1,
        options_model=TurkishOptions,
        omit_multiplier=omit_multiplier,
    )

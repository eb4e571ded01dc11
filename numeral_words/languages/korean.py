"""
Korean (Sino-Korean numerals).

Four-digit groups with the myriad scales 만, 억, 조, 경 …; digits and place
words inside a group are written solid, groups are separated by spaces.
"일" is not spoken before 십/백/천 nor before 만, but is kept before 억
and the larger scales:

    12_345       → "만 이천삼백사십오"
    110_000      → "십일만"
    100_000_000  → "일억"
"""

from __future__ import annotations

from ..plurals import invariant
from ..profile import (
    DecimalPolicy,
    GrammarContext,
    LanguageProfile,
    build_lookup,
    require_scales,
    require_table,
)
from ..segments import Grouping

_DIGITS = ("", "일", "이", "삼", "사", "오", "육", "칠", "팔", "구")

_PLACES = ("", "십", "백", "천")

_SCALES = ((), ("만",), ("억",), ("조",), ("경",), ("해",), ("자",), ("양",))


def _segment(value: int) -> str:
    words: list[str] = []
    for place in (3, 2, 1, 0):
        digit = value // 10**place % 10
        if not digit:
            continue
        words.append(("" if digit == 1 and place else _DIGITS[digit]) + _PLACES[place])
    return "".join(words)


def build_korean() -> LanguageProfile:
    require_table("ko", "digits", _DIGITS, 10)
    require_table("ko", "places", _PLACES, 4)
    scales = require_scales("ko", _SCALES, invariant)
    segments = build_lookup(_segment, 10_000)

    def render_segment(value: int, context: GrammarContext) -> str:
        return segments[value]

    def scale_word(value: int, context: GrammarContext) -> str:
        return invariant(value, scales[context.scale_index])

    def omit_multiplier(value: int, context: GrammarContext) -> bool:
        return context.scale_index == 1 and value == 1

    return LanguageProfile(
        code="ko",
        name="Korean",
        grouping=Grouping.MYRIAD,
        zero_word="영",
        negative_word="마이너스",
        decimal_word="점",
        render_segment=render_segment,
        scale_word=scale_word,
        max_scale_index=len(scales) - 1,
        decimal_policy=DecimalPolicy.PER_DIGIT,
        scale_joiner="",
        omit_multiplier=omit_multiplier,
    )

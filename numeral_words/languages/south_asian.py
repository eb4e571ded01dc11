"""
South-Asian family (Hindi).

Indian grouping: the last three digits, then groups of two, with the scale
words हज़ार (10^3), लाख (10^5), करोड़ (10^7), अरब (10^9) and onward.
Numbers below one hundred are irregular and come from a full 0-99 table.

    12_34_56_789  → "बारह करोड़ चौंतीस लाख छप्पन हज़ार सात सौ नवासी"
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

_HINDI_BELOW_HUNDRED = (
    "शून्य", "एक", "दो", "तीन", "चार", "पाँच", "छह", "सात", "आठ", "नौ",
    "दस", "ग्यारह", "बारह", "तेरह", "चौदह", "पंद्रह", "सोलह", "सत्रह", "अठारह", "उन्नीस",
    "बीस", "इक्कीस", "बाईस", "तेईस", "चौबीस", "पच्चीस", "छब्बीस", "सत्ताईस", "अट्ठाईस", "उनतीस",
    "तीस", "इकतीस", "बत्तीस", "तैंतीस", "चौंतीस", "पैंतीस", "छत्तीस", "सैंतीस", "अड़तीस", "उनतालीस",
    "चालीस", "इकतालीस", "बयालीस", "तेतालीस", "चवालीस", "पैंतालीस", "छियालीस", "सैंतालीस", "अड़तालीस", "उनचास",
    "पचास", "इक्यावन", "बावन", "तिरपन", "चौवन", "पचपन", "छप्पन", "सत्तावन", "अट्ठावन", "उनसठ",
    "साठ", "इकसठ", "बासठ", "तिरसठ", "चौंसठ", "पैंसठ", "छियासठ", "सड़सठ", "अड़सठ", "उनहत्तर",
    "सत्तर", "इकहत्तर", "बहत्तर", "तिहत्तर", "चौहत्तर", "पचहत्तर", "छिहत्तर", "सतहत्तर", "अठहत्तर", "उन्यासी",
    "अस्सी", "इक्यासी", "बयासी", "तिरासी", "चौरासी", "पचासी", "छियासी", "सत्तासी", "अट्ठासी", "नवासी",
    "नब्बे", "इक्यानवे", "बानवे", "तिरानवे", "चौरानवे", "पचानवे", "छियानवे", "सत्तानवे", "अट्ठानवे", "निन्यानवे",
)

_HINDI_SCALES = ((), ("हज़ार",), ("लाख",), ("करोड़",), ("अरब",), ("खरब",), ("नील",), ("पद्म",), ("शंख",))


def build_south_asian_profile(
    code: str,
    name: str,
    below_hundred: tuple[str, ...],
    hundred_word: str,
    scales: tuple[tuple[str, ...], ...],
    zero: str,
    negative: str,
    decimal: str,
) -> LanguageProfile:
    """Build a lakh/crore profile from a full 0-99 table and a hundred word."""
    words = require_table(code, "below_hundred", below_hundred, 100, blank=())
    checked_scales = require_scales(code, scales, invariant)

    def segment(value: int) -> str:
        if value == 0:
            return ""
        hundreds, rest = divmod(value, 100)
        if not hundreds:
            return words[rest]
        head = f"{words[hundreds]} {hundred_word}"
        return f"{head} {words[rest]}" if rest else head

    segments = build_lookup(segment, 1000)

    def render_segment(value: int, context: GrammarContext) -> str:
        return segments[value]

    def scale_word(value: int, context: GrammarContext) -> str:
        return invariant(value, checked_scales[context.scale_index])

    return LanguageProfile(
        code=code,
        name=name,
        grouping=Grouping.INDIAN,
        zero_word=zero,
        negative_word=negative,
        decimal_word=decimal,
        render_segment=render_segment,
        scale_word=scale_word,
        max_scale_index=len(checked_scales) - 1,
        decimal_policy=DecimalPolicy.PER_DIGIT,
    )


def build_hindi() -> LanguageProfile:
    return build_south_asian_profile(
        "hi",
        "Hindi",
        _HINDI_BELOW_HUNDRED,
        hundred_word="सौ",
        scales=_HINDI_SCALES,
        zero="शून्य",
        negative="माइनस",
        decimal="दशमलव",
    )

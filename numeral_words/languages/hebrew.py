"""
Hebrew (feminine counting forms).

Each higher group (multiplier plus scale word) is one component of the
number and each element of the units group (hundreds, tens, ones) is
another. The conjunction (ו by default, configurable through ``and_word``)
is prefixed to the final component, and inside a multiplier to every word
after the first:

    21         → "עשרים ואחת"
    120        → "מאה ועשרים"
    1_100      → "אלף ומאה"
    120_000    → "מאה ועשרים אלף"
    2_000      → "אלפיים"           (thousands 1-9 have their own forms)
    1_000_000  → "מיליון"           ("one" is not spoken before scales)
"""

from __future__ import annotations

from ..models import HebrewOptions
from ..plurals import singular_plural
from ..profile import (
    DecimalPolicy,
    GrammarContext,
    LanguageProfile,
    ScalePart,
    require_scales,
    require_table,
)
from ..segments import Grouping

_ONES = ("", "אחת", "שתים", "שלש", "ארבע", "חמש", "שש", "שבע", "שמונה", "תשע")

_TEENS = (
    "עשר", "אחת עשרה", "שתים עשרה", "שלש עשרה", "ארבע עשרה",
    "חמש עשרה", "שש עשרה", "שבע עשרה", "שמונה עשרה", "תשע עשרה",
)

_TENS = ("", "", "עשרים", "שלשים", "ארבעים", "חמישים", "ששים", "שבעים", "שמונים", "תשעים")

_HUNDREDS = (
    "", "מאה", "מאתיים", "שלש מאות", "ארבע מאות",
    "חמש מאות", "שש מאות", "שבע מאות", "שמונה מאות", "תשע מאות",
)

_THOUSANDS = (
    "", "אלף", "אלפיים", "שלשת אלפים", "ארבעת אלפים",
    "חמשת אלפים", "ששת אלפים", "שבעת אלפים", "שמונת אלפים", "תשעת אלפים",
)

_SCALES = (
    (),
    ("אלף", "אלף"),
    ("מיליון", "מיליונים"),
    ("מיליארד", "מיליארדים"),
    ("טריליון", "טריליונים"),
    ("קוודרליון", "קוודרליונים"),
    ("קווינטיליון", "קווינטיליונים"),
)


def _units_components(value: int) -> list[str]:
    """Hundreds, tens and ones of the units group, each a separate component."""
    hundreds, rest = divmod(value, 100)
    tens, ones = divmod(rest, 10)
    components: list[str] = []
    if hundreds:
        components.append(_HUNDREDS[hundreds])
    if tens == 1:
        components.append(_TEENS[ones])
    else:
        if tens:
            components.append(_TENS[tens])
        if ones:
            components.append(_ONES[ones])
    return components


def _higher_group(value: int, and_word: str) -> str:
    """Multiplier of a scale word; words after the first take the conjunction."""
    words = _units_components(value)
    return " ".join(words[:1] + [and_word + word for word in words[1:]])


def _join(parts: list[ScalePart], profile: LanguageProfile, context: GrammarContext) -> str:
    components = [part.text(" ") for part in parts if part.scale_index > 0]
    last = parts[-1]
    if last.scale_index == 0:
        components.extend(_units_components(last.value))
    if len(components) > 1:
        components[-1] = context.options.and_word + components[-1]
    return " ".join(components)


def build_hebrew() -> LanguageProfile:
    require_table("he", "ones", _ONES, 10)
    require_table("he", "teens", _TEENS, 10, blank=())
    require_table("he", "tens", _TENS, 10, blank=(0, 1))
    require_table("he", "hundreds", _HUNDREDS, 10)
    require_table("he", "thousands", _THOUSANDS, 10)
    scales = require_scales("he", _SCALES, singular_plural)

    def render_segment(value: int, context: GrammarContext) -> str:
        if context.scale_index == 0:
            return " ".join(_units_components(value))
        return _higher_group(value, context.options.and_word)

    def scale_word(value: int, context: GrammarContext) -> str:
        if context.scale_index == 1 and value < 10:
            return _THOUSANDS[value]
        return singular_plural(value, scales[context.scale_index])

    def omit_multiplier(value: int, context: GrammarContext) -> bool:
        return value == 1 or (context.scale_index == 1 and value < 10)

    return LanguageProfile(
        code="he",
        name="Hebrew",
        grouping=Grouping.WESTERN,
        zero_word="אפס",
        negative_word="מינוס",
        decimal_word="נקודה",
        render_segment=render_segment,
        scale_word=scale_word,
        max_scale_index=len(scales) - 1,
        decimal_policy=DecimalPolicy.PER_DIGIT,
        options_model=HebrewOptions,
        omit_multiplier=omit_multiplier,
        join=_join,
    )

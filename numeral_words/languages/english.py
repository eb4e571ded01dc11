"""
English (British default, American variant).

    356        → "three hundred and fifty-six"        (en)
    356        → "three hundred fifty-six"            (en-US)
    1_000_001  → "one million and one"                (en)
    10 ** 9    → "one thousand million"               (en, long_scale=True)
"""

from __future__ import annotations

from ..models import AmericanEnglishOptions, ConversionOptions, EnglishOptions
from ..profile import (
    GrammarContext,
    LanguageProfile,
    ScalePart,
    build_lookup,
    require_table,
)
from ..segments import Grouping

# ─── Word Lookup Tables ──────────────────────────────────────────────

_ONES = (
    "", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
    "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen",
    "seventeen", "eighteen", "nineteen",
)

_TENS = ("", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety")

_SHORT_SCALES = (
    "", "thousand", "million", "billion", "trillion", "quadrillion", "quintillion",
    "sextillion", "septillion", "octillion", "nonillion", "decillion", "undecillion",
    "duodecillion", "tredecillion", "quattuordecillion", "quindecillion", "sexdecillion",
    "septendecillion", "octodecillion", "novemdecillion", "vigintillion",
)

# Long scale: each name is a million times the previous one; odd steps
# in between are "thousand <name>".
_LONG_SCALES = (
    "million", "billion", "trillion", "quadrillion", "quintillion",
    "sextillion", "septillion", "octillion", "nonillion", "decillion",
)


def _below_hundred(n: int) -> str:
    if n < 20:
        return _ONES[n]
    tens, ones = divmod(n, 10)
    return f"{_TENS[tens]}-{_ONES[ones]}" if ones else _TENS[tens]


def _segment(value: int, with_and: bool) -> str:
    hundreds, rest = divmod(value, 100)
    words: list[str] = []
    if hundreds:
        words += [_ONES[hundreds], "hundred"]
        if rest and with_and:
            words.append("and")
    if rest:
        words.append(_below_hundred(rest))
    return " ".join(words)


def _long_scale_word(scale_index: int) -> str:
    if scale_index == 1:
        return "thousand"
    name = _LONG_SCALES[scale_index // 2 - 1]
    return f"thousand {name}" if scale_index % 2 else name


def _join(parts: list[ScalePart], profile: LanguageProfile, context: GrammarContext) -> str:
    words: list[str] = []
    for position, part in enumerate(parts):
        following = parts[position + 1] if position + 1 < len(parts) else None
        # long scale: "two thousand five hundred million", not "two thousand million five hundred million"
        if (
            context.options.long_scale
            and part.scale_index % 2
            and part.scale_index > 1
            and following is not None
            and following.scale_index == part.scale_index - 1
        ):
            words.append(f"{part.words} thousand")
        else:
            words.append(part.text(" "))
    last = parts[-1]
    # "one thousand and one", but "one thousand one hundred"
    if context.options.and_conjunction and len(parts) > 1 and last.scale_index == 0 and last.value < 100:
        words.insert(-1, "and")
    return " ".join(words)


def _build(code: str, name: str, options_model: type[ConversionOptions]) -> LanguageProfile:
    require_table(code, "ones", _ONES, 20)
    require_table(code, "tens", _TENS, 10, blank=(0, 1))
    require_table(code, "scales", _SHORT_SCALES, 22)
    with_and = build_lookup(lambda n: _segment(n, with_and=True), 1000)
    without_and = build_lookup(lambda n: _segment(n, with_and=False), 1000)

    def render_segment(value: int, context: GrammarContext) -> str:
        table = with_and if context.options.and_conjunction else without_and
        return table[value]

    def scale_word(value: int, context: GrammarContext) -> str:
        if context.options.long_scale:
            return _long_scale_word(context.scale_index)
        return _SHORT_SCALES[context.scale_index]

    return LanguageProfile(
        code=code,
        name=name,
        grouping=Grouping.WESTERN,
        zero_word="zero",
        negative_word="minus",
        decimal_word="point",
        render_segment=render_segment,
        scale_word=scale_word,
        max_scale_index=len(_SHORT_SCALES) - 1,
        options_model=options_model,
        join=_join,
    )


def build_english() -> LanguageProfile:
    return _build("en", "English", EnglishOptions)


def build_american_english() -> LanguageProfile:
    return _build("en-US", "English (United States)", AmericanEnglishOptions)

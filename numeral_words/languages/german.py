"""
German.

Everything below one million is written as one word with the units before
the tens (einundzwanzig, zweitausenddreihundertvierundvierzig). From
Million upward the scale words are separate feminine-agreeing nouns:

    1_000_001      → "eine Million eins"
    4_000_000_000  → "vier Milliarden"
"""

from __future__ import annotations

from ..plurals import singular_plural
from ..profile import (
    GrammarContext,
    LanguageProfile,
    ScalePart,
    build_lookup,
    require_scales,
    require_table,
)
from ..segments import Grouping

_ONES = (
    "", "eins", "zwei", "drei", "vier", "fünf", "sechs", "sieben", "acht", "neun",
    "zehn", "elf", "zwölf", "dreizehn", "vierzehn", "fünfzehn", "sechzehn",
    "siebzehn", "achtzehn", "neunzehn",
)

_TENS = ("", "", "zwanzig", "dreißig", "vierzig", "fünfzig", "sechzig", "siebzig", "achtzig", "neunzig")

_SCALES = (
    (),
    ("tausend", "tausend"),
    ("Million", "Millionen"),
    ("Milliarde", "Milliarden"),
    ("Billion", "Billionen"),
    ("Billiarde", "Billiarden"),
    ("Trillion", "Trillionen"),
    ("Trilliarde", "Trilliarden"),
    ("Quadrillion", "Quadrillionen"),
    ("Quadrilliarde", "Quadrilliarden"),
)


def _below_hundred(n: int) -> str:
    if n < 20:
        return _ONES[n]
    tens, ones = divmod(n, 10)
    if not ones:
        return _TENS[tens]
    return ("ein" if ones == 1 else _ONES[ones]) + "und" + _TENS[tens]


def _segment(value: int) -> str:
    hundreds, rest = divmod(value, 100)
    words = ("ein" if hundreds == 1 else _ONES[hundreds]) + "hundert" if hundreds else ""
    return words + _below_hundred(rest) if rest else words


def _join(parts: list[ScalePart], profile: LanguageProfile, context: GrammarContext) -> str:
    chunks = [part.text(" ") for part in parts if part.scale_index >= 2]
    compound = "".join(part.words + part.scale_word for part in parts if part.scale_index < 2)
    if compound:
        chunks.append(compound)
    return " ".join(chunks)


def build_german() -> LanguageProfile:
    require_table("de", "ones", _ONES, 20)
    require_table("de", "tens", _TENS, 10, blank=(0, 1))
    scales = require_scales("de", _SCALES, singular_plural)
    segments = build_lookup(_segment, 1000)

    def render_segment(value: int, context: GrammarContext) -> str:
        words = segments[value]
        if context.scale_index == 0 or not words.endswith("eins"):
            return words
        # eintausend, einhunderteintausend, eine Million
        return words[:-1] if context.scale_index == 1 else words[:-1] + "e"

    def scale_word(value: int, context: GrammarContext) -> str:
        return singular_plural(value, scales[context.scale_index])

    return LanguageProfile(
        code="de",
        name="German",
        grouping=Grouping.WESTERN,
        zero_word="null",
        negative_word="minus",
        decimal_word="komma",
        render_segment=render_segment,
        scale_word=scale_word,
        max_scale_index=len(scales) - 1,
        join=_join,
    )

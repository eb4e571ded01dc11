"""
Italian.

Numbers below one million are one word (quattromilacentonovantasei), with
vowel elision at the joins (ventuno, ventotto, centottanta) and an accent
on a final "tre" (ventitré, milletré). Larger scales are separate nouns,
and a final part below one million is linked with "e":

    1_000_001   → "un milione e uno"
    21_000_000  → "ventun milioni"
    4_000_000   → "quattro milioni"
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
    "", "uno", "due", "tre", "quattro", "cinque", "sei", "sette", "otto", "nove",
    "dieci", "undici", "dodici", "tredici", "quattordici", "quindici", "sedici",
    "diciassette", "diciotto", "diciannove",
)

_TENS = ("", "", "venti", "trenta", "quaranta", "cinquanta", "sessanta", "settanta", "ottanta", "novanta")

_SCALES = (
    (),
    ("mille", "mila"),
    ("milione", "milioni"),
    ("miliardo", "miliardi"),
    ("bilione", "bilioni"),
    ("biliardo", "biliardi"),
    ("trilione", "trilioni"),
    ("triliardo", "triliardi"),
    ("quadrilione", "quadrilioni"),
    ("quadriliardo", "quadriliardi"),
)


def _below_hundred(n: int) -> str:
    if n < 20:
        return _ONES[n]
    tens, ones = divmod(n, 10)
    word = _TENS[tens]
    if not ones:
        return word
    if ones in (1, 8):
        word = word[:-1]
    return word + _ONES[ones]


def _segment(value: int) -> str:
    hundreds, rest = divmod(value, 100)
    head = ("cento" if hundreds == 1 else _ONES[hundreds] + "cento") if hundreds else ""
    if not rest:
        return head
    tail = _below_hundred(rest)
    if head and tail.startswith("o"):
        head = head[:-1]
    return head + tail


def _accent(word: str) -> str:
    return word[:-3] + "tré" if len(word) > 3 and word.endswith("tre") else word


def _apocope(word: str) -> str:
    # before a noun scale: un milione, ventun milioni, centun miliardi
    if not word.endswith("uno"):
        return word
    word = word[:-1]
    return word[:-3] + "un" if word.endswith("oun") else word


def _join(parts: list[ScalePart], profile: LanguageProfile, context: GrammarContext) -> str:
    chunks = [part.text(" ") for part in parts if part.scale_index >= 2]
    compound = _accent("".join(part.words + part.scale_word for part in parts if part.scale_index < 2))
    if compound:
        if chunks:
            chunks.append("e")
        chunks.append(compound)
    return " ".join(chunks)


def build_italian() -> LanguageProfile:
    require_table("it", "ones", _ONES, 20)
    require_table("it", "tens", _TENS, 10, blank=(0, 1))
    scales = require_scales("it", _SCALES, singular_plural)
    segments = build_lookup(_segment, 1000)

    def render_segment(value: int, context: GrammarContext) -> str:
        if context.scale_index < 2:
            return segments[value]
        return _apocope(_accent(segments[value]))

    def scale_word(value: int, context: GrammarContext) -> str:
        return singular_plural(value, scales[context.scale_index])

    def omit_multiplier(value: int, context: GrammarContext) -> bool:
        return context.scale_index == 1 and value == 1

    return LanguageProfile(
        code="it",
        name="Italian",
        grouping=Grouping.WESTERN,
        zero_word="zero",
        negative_word="meno",
        decimal_word="virgola",
        render_segment=render_segment,
        scale_word=scale_word,
        max_scale_index=len(scales) - 1,
        omit_multiplier=omit_multiplier,
        join=_join,
    )

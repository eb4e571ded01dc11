"""
French (France) and Belgian French.

Vigesimal counting from seventy in France (soixante-dix, quatre-vingts,
quatre-vingt-dix); Belgium says septante and nonante but keeps
quatre-vingts.

Agreement rules:
  - "cents" and "quatre-vingts" keep their s only at the end of the number
    or before a noun scale (deux cents millions), never before "mille".
  - "mille" is invariable and is never preceded by "un".
  - million, milliard … are nouns: "un million", "deux millions".
"""

from __future__ import annotations

from ..models import FrenchOptions
from ..plurals import singular_plural
from ..profile import GrammarContext, LanguageProfile, build_lookup, require_scales, require_table
from ..segments import Grouping

_ONES = (
    "", "un", "deux", "trois", "quatre", "cinq", "six", "sept", "huit", "neuf",
    "dix", "onze", "douze", "treize", "quatorze", "quinze", "seize",
    "dix-sept", "dix-huit", "dix-neuf",
)

_TENS = ("", "", "vingt", "trente", "quarante", "cinquante", "soixante")

_BELGIAN_TENS = {7: "septante", 9: "nonante"}

_SCALES = (
    (),
    ("mille", "mille"),
    ("million", "millions"),
    ("milliard", "milliards"),
    ("billion", "billions"),
    ("billiard", "billiards"),
    ("trillion", "trillions"),
    ("trilliard", "trilliards"),
    ("quadrillion", "quadrillions"),
    ("quadrilliard", "quadrilliards"),
)


def _below_hundred(n: int, belgian: bool, plural: bool) -> str:
    if n < 20:
        return _ONES[n]
    tens, ones = divmod(n, 10)

    if tens == 8:
        if ones:
            return f"quatre-vingt-{_ONES[ones]}"
        return "quatre-vingts" if plural else "quatre-vingt"
    if tens in (7, 9) and not belgian:
        # 70-79 and 90-99 count on from sixty and eighty with the teens
        if n == 71:
            return "soixante et onze"
        base = "soixante" if tens == 7 else "quatre-vingt"
        return f"{base}-{_ONES[10 + ones]}"

    base = _BELGIAN_TENS[tens] if tens in (7, 9) else _TENS[tens]
    if ones == 0:
        return base
    if ones == 1:
        return f"{base} et un"
    return f"{base}-{_ONES[ones]}"


def _segment(value: int, belgian: bool, plural: bool) -> str:
    hundreds, rest = divmod(value, 100)
    words: list[str] = []
    if hundreds == 1:
        words.append("cent")
    elif hundreds:
        words.append(f"{_ONES[hundreds]} {'cents' if plural and not rest else 'cent'}")
    if rest:
        words.append(_below_hundred(rest, belgian, plural))
    return " ".join(words)


def _build(code: str, name: str, belgian: bool) -> LanguageProfile:
    require_table(code, "ones", _ONES, 20)
    scales = require_scales(code, _SCALES, singular_plural)
    standard = build_lookup(lambda n: _segment(n, belgian, plural=True), 1000)
    before_mille = build_lookup(lambda n: _segment(n, belgian, plural=False), 1000)

    def render_segment(value: int, context: GrammarContext) -> str:
        words = (before_mille if context.scale_index == 1 else standard)[value]
        return words.replace(" ", context.separator) if context.separator != " " else words

    def scale_word(value: int, context: GrammarContext) -> str:
        return singular_plural(value, scales[context.scale_index])

    def omit_multiplier(value: int, context: GrammarContext) -> bool:
        return context.scale_index == 1 and value == 1

    return LanguageProfile(
        code=code,
        name=name,
        grouping=Grouping.WESTERN,
        zero_word="zéro",
        negative_word="moins",
        decimal_word="virgule",
        render_segment=render_segment,
        scale_word=scale_word,
        max_scale_index=len(scales) - 1,
        options_model=FrenchOptions,
        omit_multiplier=omit_multiplier,
    )


def build_french() -> LanguageProfile:
    return _build("fr", "French", belgian=False)


def build_belgian_french() -> LanguageProfile:
    return _build("fr-BE", "French (Belgium)", belgian=True)

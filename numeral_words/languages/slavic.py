"""
Slavic family: Russian and Polish.

Both share the same segment shape (irregular hundreds, teens, tens, ones)
and a three-way plural for scale words; they differ in vocabulary, in the
plural rule, in which scales are feminine, and in whether "one" is spoken
before a scale word:

    ru  2_000   → "две тысячи"        (тысяча is feminine)
    ru  1_000   → "одна тысяча"
    pl  1_000   → "tysiąc"            (jeden is dropped)
    pl  22_000  → "dwadzieścia dwa tysiące"

The caller's ``gender`` applies to the units group and to the decimals.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..models import Gender, GenderedOptions
from ..plurals import PluralRule, polish_plural, slavic_plural
from ..profile import GrammarContext, LanguageProfile, build_lookup, require_scales, require_table
from ..segments import Grouping


@dataclass(frozen=True)
class SlavicVocabulary:
    ones_masculine: tuple[str, ...]
    ones_feminine: tuple[str, ...]
    teens: tuple[str, ...]
    tens: tuple[str, ...]
    hundreds: tuple[str, ...]
    scales: tuple[tuple[str, ...], ...]
    zero: str
    negative: str
    decimal: str


RUSSIAN = SlavicVocabulary(
    ones_masculine=("", "один", "два", "три", "четыре", "пять", "шесть", "семь", "восемь", "девять"),
    ones_feminine=("", "одна", "две", "три", "четыре", "пять", "шесть", "семь", "восемь", "девять"),
    teens=(
        "десять", "одиннадцать", "двенадцать", "тринадцать", "четырнадцать",
        "пятнадцать", "шестнадцать", "семнадцать", "восемнадцать", "девятнадцать",
    ),
    tens=("", "", "двадцать", "тридцать", "сорок", "пятьдесят", "шестьдесят", "семьдесят", "восемьдесят", "девяносто"),
    hundreds=("", "сто", "двести", "триста", "четыреста", "пятьсот", "шестьсот", "семьсот", "восемьсот", "девятьсот"),
    scales=(
        (),
        ("тысяча", "тысячи", "тысяч"),
        ("миллион", "миллиона", "миллионов"),
        ("миллиард", "миллиарда", "миллиардов"),
        ("триллион", "триллиона", "триллионов"),
        ("квадриллион", "квадриллиона", "квадриллионов"),
        ("квинтиллион", "квинтиллиона", "квинтиллионов"),
        ("секстиллион", "секстиллиона", "секстиллионов"),
        ("септиллион", "септиллиона", "септиллионов"),
        ("октиллион", "октиллиона", "октиллионов"),
        ("нониллион", "нониллиона", "нониллионов"),
    ),
    zero="ноль",
    negative="минус",
    decimal="запятая",
)

POLISH = SlavicVocabulary(
    ones_masculine=("", "jeden", "dwa", "trzy", "cztery", "pięć", "sześć", "siedem", "osiem", "dziewięć"),
    ones_feminine=("", "jedna", "dwie", "trzy", "cztery", "pięć", "sześć", "siedem", "osiem", "dziewięć"),
    teens=(
        "dziesięć", "jedenaście", "dwanaście", "trzynaście", "czternaście",
        "piętnaście", "szesnaście", "siedemnaście", "osiemnaście", "dziewiętnaście",
    ),
    tens=(
        "", "", "dwadzieścia", "trzydzieści", "czterdzieści", "pięćdziesiąt",
        "sześćdziesiąt", "siedemdziesiąt", "osiemdziesiąt", "dziewięćdziesiąt",
    ),
    hundreds=("", "sto", "dwieście", "trzysta", "czterysta", "pięćset", "sześćset", "siedemset", "osiemset", "dziewięćset"),
    scales=(
        (),
        ("tysiąc", "tysiące", "tysięcy"),
        ("milion", "miliony", "milionów"),
        ("miliard", "miliardy", "miliardów"),
        ("bilion", "biliony", "bilionów"),
        ("biliard", "biliardy", "biliardów"),
        ("trylion", "tryliony", "trylionów"),
        ("tryliard", "tryliardy", "tryliardów"),
        ("kwadrylion", "kwadryliony", "kwadrylionów"),
        ("kwadryliard", "kwadryliardy", "kwadryliardów"),
        ("kwintylion", "kwintyliony", "kwintylionów"),
    ),
    zero="zero",
    negative="minus",
    decimal="przecinek",
)


def _segment(value: int, ones: tuple[str, ...], vocabulary: SlavicVocabulary) -> str:
    hundreds, rest = divmod(value, 100)
    tens, unit = divmod(rest, 10)
    words: list[str] = []
    if hundreds:
        words.append(vocabulary.hundreds[hundreds])
    if tens == 1:
        words.append(vocabulary.teens[unit])
    else:
        if tens:
            words.append(vocabulary.tens[tens])
        if unit:
            words.append(ones[unit])
    return " ".join(words)


def build_slavic_profile(
    code: str,
    name: str,
    vocabulary: SlavicVocabulary,
    plural_rule: PluralRule,
    feminine_scales: frozenset[int] = frozenset(),
    omit_one: bool = False,
) -> LanguageProfile:
    """Build a profile for a Slavic language from its vocabulary and rules.

    Args:
        feminine_scales: Scale indexes whose noun is feminine (Russian тысяча).
        omit_one: Drop the multiplier "one" before every scale word (Polish).
    """
    masculine_ones = require_table(code, "ones_masculine", vocabulary.ones_masculine, 10)
    feminine_ones = require_table(code, "ones_feminine", vocabulary.ones_feminine, 10)
    require_table(code, "teens", vocabulary.teens, 10, blank=())
    require_table(code, "tens", vocabulary.tens, 10, blank=(0, 1))
    require_table(code, "hundreds", vocabulary.hundreds, 10)
    scales = require_scales(code, vocabulary.scales, plural_rule)

    masculine = build_lookup(lambda n: _segment(n, masculine_ones, vocabulary), 1000)
    feminine = build_lookup(lambda n: _segment(n, feminine_ones, vocabulary), 1000)

    def render_segment(value: int, context: GrammarContext) -> str:
        if context.scale_index:
            is_feminine = context.scale_index in feminine_scales
        else:
            is_feminine = context.options.gender is Gender.FEMININE
        return (feminine if is_feminine else masculine)[value]

    def scale_word(value: int, context: GrammarContext) -> str:
        return plural_rule(value, scales[context.scale_index])

    def omit_multiplier(value: int, context: GrammarContext) -> bool:
        return omit_one and value == 1

    return LanguageProfile(
        code=code,
        name=name,
        grouping=Grouping.WESTERN,
        zero_word=vocabulary.zero,
        negative_word=vocabulary.negative,
        decimal_word=vocabulary.decimal,
        render_segment=render_segment,
        scale_word=scale_word,
        max_scale_index=len(scales) - 1,
        options_model=GenderedOptions,
        omit_multiplier=omit_multiplier,
    )


def build_russian() -> LanguageProfile:
    return build_slavic_profile("ru", "Russian", RUSSIAN, slavic_plural, feminine_scales=frozenset({1}))


def build_polish() -> LanguageProfile:
    return build_slavic_profile("pl", "Polish", POLISH, polish_plural, omit_one=True)

"""
Chinese, Simplified and Traditional, formal (financial) or common numerals.

Four-digit groups with 万 and 亿; larger groups compound them (万亿 = 10^12,
亿亿 = 10^16). Inside one 亿 group the 亿 is said once, after the lower
half:

    222_222_222_222_222 → 贰佰贰拾贰万贰仟贰佰贰拾贰亿贰仟贰佰贰拾贰万贰仟贰佰贰拾贰

One 零 stands for each run of skipped digit positions, whether the run is
inside a group (壹仟零壹拾) or crosses group boundaries (叁万零贰佰壹拾).
"""

from __future__ import annotations

from ..models import ChineseOptions
from ..profile import (
    DecimalPolicy,
    GrammarContext,
    LanguageProfile,
    ScalePart,
    build_lookup,
    require_table,
)
from ..segments import Grouping, skipped_positions

_COMMON_DIGITS = tuple("零一二三四五六七八九")
_COMMON_PLACES = ("", "十", "百", "千")
_FORMAL_PLACES = ("", "拾", "佰", "仟")

_SCRIPTS = {
    "zh-Hans": {
        "name": "Chinese (Simplified)",
        "formal_digits": tuple("零壹贰叁肆伍陆柒捌玖"),
        "myriad": "万",
        "hundred_million": "亿",
        "negative": "负",
        "decimal": "点",
    },
    "zh-Hant": {
        "name": "Chinese (Traditional)",
        "formal_digits": tuple("零壹貳參肆伍陸柒捌玖"),
        "myriad": "萬",
        "hundred_million": "億",
        "negative": "負",
        "decimal": "點",
    },
}

_MAX_SCALE_INDEX = 7


def _segment(value: int, digits: tuple[str, ...], places: tuple[str, ...]) -> str:
    words: list[str] = []
    pending_zero = False
    for place in (3, 2, 1, 0):
        digit = value // 10**place % 10
        if not digit:
            pending_zero = bool(words)
            continue
        if pending_zero:
            words.append(digits[0])
            pending_zero = False
        words.append(digits[digit] + places[place])
    return "".join(words)


def _build(code: str) -> LanguageProfile:
    script = _SCRIPTS[code]
    formal_digits = require_table(code, "formal_digits", script["formal_digits"], 10, blank=())
    common_digits = require_table(code, "common_digits", _COMMON_DIGITS, 10, blank=())
    myriad, hundred_million = script["myriad"], script["hundred_million"]

    formal = build_lookup(lambda n: _segment(n, formal_digits, _FORMAL_PLACES), 10_000)
    common = build_lookup(lambda n: _segment(n, common_digits, _COMMON_PLACES), 10_000)

    def render_segment(value: int, context: GrammarContext) -> str:
        return (formal if context.options.formal else common)[value]

    def scale_word(value: int, context: GrammarContext) -> str:
        index = context.scale_index
        return myriad * (index % 2) + hundred_million * (index // 2)

    def needs_gap(higher, lower, grouping: Grouping) -> bool:
        return skipped_positions(higher, lower, grouping) > 0

    def join(parts: list[ScalePart], profile: LanguageProfile, context: GrammarContext) -> str:
        words: list[str] = []
        for position, part in enumerate(parts):
            scale = part.scale_word
            following = parts[position + 1] if position + 1 < len(parts) else None
            # 贰万亿 + 贰亿 → 贰万贰亿: the lower half carries the shared 亿
            if (
                part.scale_index % 2
                and part.scale_index > 1
                and following is not None
                and following.scale_index == part.scale_index - 1
            ):
                scale = myriad
            if part.gap_before:
                words.append(profile.gap_word)
            words.append(part.words + scale)
        return context.separator.join(words)

    return LanguageProfile(
        code=code,
        name=script["name"],
        grouping=Grouping.MYRIAD,
        zero_word=common_digits[0],
        negative_word=script["negative"],
        decimal_word=script["decimal"],
        render_segment=render_segment,
        scale_word=scale_word,
        max_scale_index=_MAX_SCALE_INDEX,
        decimal_policy=DecimalPolicy.PER_DIGIT,
        options_model=ChineseOptions,
        word_separator="",
        scale_joiner="",
        gap_word=common_digits[0],
        needs_gap=needs_gap,
        join=join,
    )


def build_simplified_chinese() -> LanguageProfile:
    return _build("zh-Hans")


def build_traditional_chinese() -> LanguageProfile:
    return _build("zh-Hant")

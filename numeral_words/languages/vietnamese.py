"""
Vietnamese.

    21         → "hai mươi mốt"        (mốt for a final one after twenty)
    25         → "hai mươi lăm"        (lăm for a final five after ten)
    105        → "một trăm lẻ năm"     (lẻ marks the empty tens place)
    1_000_050  → "một triệu lẻ năm mươi"

A final group below one hundred that follows a higher group is introduced
by "lẻ", however many zero groups lie in between.
"""

from __future__ import annotations

from ..models import Segment
from ..plurals import invariant
from ..profile import GrammarContext, LanguageProfile, build_lookup, require_scales, require_table
from ..segments import Grouping

_ONES = ("không", "một", "hai", "ba", "bốn", "năm", "sáu", "bảy", "tám", "chín")

_SCALES = ((), ("nghìn",), ("triệu",), ("tỷ",), ("nghìn tỷ",), ("triệu tỷ",), ("tỷ tỷ",))


def _below_hundred(n: int) -> str:
    if n < 10:
        return _ONES[n]
    tens, ones = divmod(n, 10)
    head = "mười" if tens == 1 else f"{_ONES[tens]} mươi"
    if ones == 0:
        return head
    if ones == 1 and tens > 1:
        return f"{head} mốt"
    if ones == 5:
        return f"{head} lăm"
    return f"{head} {_ONES[ones]}"


def _segment(value: int) -> str:
    if value == 0:
        return ""
    hundreds, rest = divmod(value, 100)
    if not hundreds:
        return _below_hundred(rest)
    head = f"{_ONES[hundreds]} trăm"
    if not rest:
        return head
    if rest < 10:
        return f"{head} lẻ {_ONES[rest]}"
    return f"{head} {_below_hundred(rest)}"


def _needs_gap(higher: Segment, lower: Segment, grouping: Grouping) -> bool:
    return lower.scale_index == 0 and lower.value < 100


def build_vietnamese() -> LanguageProfile:
    require_table("vi", "ones", _ONES, 10, blank=())
    scales = require_scales("vi", _SCALES, invariant)
    segments = build_lookup(_segment, 1000)

    def render_segment(value: int, context: GrammarContext) -> str:
        return segments[value]

    def scale_word(value: int, context: GrammarContext) -> str:
        return invariant(value, scales[context.scale_index])

    return LanguageProfile(
        code="vi",
        name="Vietnamese",
        grouping=Grouping.WESTERN,
        zero_word="không",
        negative_word="âm",
        decimal_word="phẩy",
        render_segment=render_segment,
        scale_word=scale_word,
        max_scale_index=len(scales) - 1,
        gap_word="lẻ",
        needs_gap=_needs_gap,
    )

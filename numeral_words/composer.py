"""
Scale composer, decimal renderer and assembler.

Flow for one call:

    NumericValue ──► split_segments ──► compose ──────────┐
         │                (per segment: render,           │
         │                 scale word, omission, gap)     ▼
         └────────► render_decimal ─────────────────► assemble ──► "minus twelve point six"

These functions are pure: the same (value, profile, context) always gives
the same string.
"""

from __future__ import annotations

from .exceptions import NumberOutOfRange
from .models import NumericValue, Segment
from .profile import DecimalPolicy, GrammarContext, LanguageProfile, ScalePart
from .segments import split_segments


# ─── Integer Part ────────────────────────────────────────────────────


def integer_to_words(value: int, profile: LanguageProfile, context: GrammarContext) -> str:
    """Spell a non-negative integer; zero short-circuits to the zero word."""
    if value == 0:
        return profile.zero_word
    return compose(split_segments(value, profile.grouping), profile, context)


def compose(
    segments: list[Segment], profile: LanguageProfile, context: GrammarContext
) -> str:
    """Render each non-zero segment with its scale word and join them.

    Raises:
        NumberOutOfRange: If a non-zero segment sits above the language's
            largest scale word.
    """
    parts: list[ScalePart] = []
    previous: Segment | None = None

    for segment in segments:
        if segment.value == 0:
            continue
        if segment.scale_index > profile.max_scale_index:
            raise NumberOutOfRange(
                f"{profile.name} has no scale word for groups above index "
                f"{profile.max_scale_index}",
                {
                    "language": profile.code,
                    "scale_index": segment.scale_index,
                    "max_scale_index": profile.max_scale_index,
                },
            )

        local = context.at(segment.scale_index)
        if segment.scale_index and profile.omit_multiplier(segment.value, local):
            words = ""
        else:
            words = profile.render_segment(segment.value, local)
        scale = profile.scale_word(segment.value, local) if segment.scale_index else ""
        gap = (
            previous is not None
            and profile.needs_gap is not None
            and profile.needs_gap(previous, segment, profile.grouping)
        )

        parts.append(ScalePart(segment=segment, words=words, scale_word=scale, gap_before=gap))
        previous = segment

    return profile.join(parts, profile, context)


# ─── Decimal Part ────────────────────────────────────────────────────


def render_decimal(digits: str, profile: LanguageProfile, context: GrammarContext) -> str:
    """Read the digits after the separator using the profile's decimal policy.

    Leading zeros are always spoken one by one, so "05" never collapses to "5".
    """
    units = context.at(0)
    if profile.decimal_policy is DecimalPolicy.PER_DIGIT:
        words = [
            profile.zero_word if digit == "0" else profile.render_segment(int(digit), units)
            for digit in digits
        ]
    else:
        significant = digits.lstrip("0")
        words = [profile.zero_word] * (len(digits) - len(significant))
        if significant:
            words.append(integer_to_words(int(significant), profile, units))
    return context.separator.join(words)


# ─── Assembly ────────────────────────────────────────────────────────


def assemble(
    numeric: NumericValue,
    integer_words: str,
    decimal_words: str | None,
    profile: LanguageProfile,
    context: GrammarContext,
) -> str:
    """Join negative marker, integer words and decimal words.

    The sign is dropped when the whole value is zero: "-0" and "-0.00" read
    as plain zero.
    """
    words: list[str] = []
    if numeric.is_negative and not numeric.is_zero:
        words.append(profile.negative_word)
    words.append(integer_words)
    if decimal_words is not None:
        words.extend((profile.decimal_word, decimal_words))
    return context.separator.join(words)


def to_words(numeric: NumericValue, profile: LanguageProfile, context: GrammarContext) -> str:
    """Run the full conversion for an already-parsed value."""
    integer_words = integer_to_words(numeric.integer_part, profile, context)
    decimal_words = (
        render_decimal(numeric.decimal_digits, profile, context)
        if numeric.decimal_digits is not None
        else None
    )
    return assemble(numeric, integer_words, decimal_words, profile, context)

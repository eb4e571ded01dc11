"""
Language profiles: the vocabulary and grammar policy of one language.

A profile is plain data plus a handful of pure strategy functions. The
engine in ``composer.py`` never branches on the language code; everything
language-specific flows through these fields:

    render_segment   (value, context) → words for one bounded group
    scale_word       (value, context) → thousand / тысячи / 万 …
    omit_multiplier  (value, context) → drop the multiplier ("mille", not "un mille")
    needs_gap        (higher, lower, grouping) → insert ``gap_word`` (零, lẻ)
    join             (parts, profile, context) → final integer words

Profiles are built once by the registry and shared read-only afterwards.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from pydantic import ValidationError

from .exceptions import ConfigurationError, InvalidOptions
from .models import ConversionOptions, Segment
from .plurals import FORM_COUNTS, PluralRule
from .segments import Grouping


class DecimalPolicy(str, Enum):
    """How the digits after the decimal separator are read."""

    PER_DIGIT = "per_digit"  # 3.14 → "three point one four"
    WHOLE_NUMBER = "whole_number"  # 3.14 → "three point fourteen"


# ─── Per-call Context ────────────────────────────────────────────────


@dataclass(frozen=True)
class GrammarContext:
    """Validated options, the effective word separator and the current scale slot."""

    options: Any
    separator: str = " "
    scale_index: int = 0

    def at(self, scale_index: int) -> GrammarContext:
        return replace(self, scale_index=scale_index)


@dataclass(frozen=True)
class ScalePart:
    """One non-zero segment after rendering, before the final join."""

    segment: Segment
    words: str  # "" when the multiplier is omitted
    scale_word: str  # "" for the units group
    gap_before: bool = False

    @property
    def scale_index(self) -> int:
        return self.segment.scale_index

    @property
    def value(self) -> int:
        return self.segment.value

    def text(self, joiner: str) -> str:
        return joiner.join(word for word in (self.words, self.scale_word) if word)


SegmentRenderer = Callable[[int, GrammarContext], str]
ScaleWordSelector = Callable[[int, GrammarContext], str]
MultiplierPredicate = Callable[[int, GrammarContext], bool]
GapPredicate = Callable[[Segment, Segment, Grouping], bool]
PartJoiner = Callable[[list[ScalePart], "LanguageProfile", GrammarContext], str]


def never_omit(value: int, context: GrammarContext) -> bool:
    return False


def join_parts(parts: list[ScalePart], profile: LanguageProfile, context: GrammarContext) -> str:
    """Default join: gap marker, multiplier and scale word, separated by the word separator."""
    joiner = context.separator if profile.scale_joiner is None else profile.scale_joiner
    words: list[str] = []
    for part in parts:
        if part.gap_before:
            words.append(profile.gap_word)
        words.append(part.text(joiner))
    return context.separator.join(words)


# ─── Profile ─────────────────────────────────────────────────────────


@dataclass(frozen=True)
class LanguageProfile:
    code: str
    name: str
    grouping: Grouping
    zero_word: str
    negative_word: str
    decimal_word: str
    render_segment: SegmentRenderer
    scale_word: ScaleWordSelector
    max_scale_index: int
    decimal_policy: DecimalPolicy = DecimalPolicy.WHOLE_NUMBER
    options_model: type[ConversionOptions] = ConversionOptions
    word_separator: str = " "
    scale_joiner: str | None = None  # None: same as the word separator
    omit_multiplier: MultiplierPredicate = never_omit
    gap_word: str = ""
    needs_gap: GapPredicate | None = None
    join: PartJoiner = join_parts

    def __post_init__(self) -> None:
        for attribute in ("zero_word", "negative_word", "decimal_word"):
            if not getattr(self, attribute):
                raise ConfigurationError(
                    f"Language {self.code!r} has no {attribute}", {"language": self.code}
                )
        if self.max_scale_index < 0:
            raise ConfigurationError(
                f"Language {self.code!r} has a negative max_scale_index",
                {"language": self.code},
            )
        if self.needs_gap is not None and not self.gap_word:
            raise ConfigurationError(
                f"Language {self.code!r} inserts gap markers but has no gap_word",
                {"language": self.code},
            )

    def parse_options(self, raw: Mapping[str, Any] | None = None) -> ConversionOptions:
        """Validate caller options against this language's options model.

        Raises:
            InvalidOptions: For unknown keys or values of the wrong type.
        """
        try:
            return self.options_model.model_validate(dict(raw or {}))
        except ValidationError as exc:
            raise InvalidOptions(
                f"Invalid options for language {self.code!r}",
                {
                    "language": self.code,
                    "errors": exc.errors(include_url=False, include_context=False),
                },
            ) from exc

    def context(self, options: ConversionOptions) -> GrammarContext:
        return GrammarContext(options=options, separator=options.word_separator(self.word_separator))


# ─── Table Checks ────────────────────────────────────────────────────
#
# Vocabulary tables are checked when a profile is built so that a missing
# word fails at load time, never in the middle of a conversion.


def require_table(
    language: str, name: str, table: Sequence[str], size: int, blank: Sequence[int] = (0,)
) -> tuple[str, ...]:
    """Return ``table`` as a tuple after checking its length and entries.

    Indexes listed in ``blank`` may hold empty strings; every other entry must
    be a non-empty string.
    """
    if len(table) != size:
        raise ConfigurationError(
            f"{language}: table {name!r} has {len(table)} entries, expected {size}",
            {"language": language, "table": name},
        )
    for index, word in enumerate(table):
        if not isinstance(word, str) or (not word and index not in blank):
            raise ConfigurationError(
                f"{language}: table {name!r} is missing entry {index}",
                {"language": language, "table": name, "index": index},
            )
    return tuple(table)


def require_scales(
    language: str, scales: Sequence[Sequence[str]], rule: PluralRule
) -> tuple[tuple[str, ...], ...]:
    """Check that every scale level (index 1 upward) has the forms ``rule`` selects from."""
    expected = FORM_COUNTS[rule]
    checked: list[tuple[str, ...]] = [()]
    for index, forms in enumerate(scales[1:], start=1):
        if len(forms) != expected or not all(forms):
            raise ConfigurationError(
                f"{language}: scale {index} needs {expected} non-empty forms",
                {"language": language, "scale_index": index},
            )
        checked.append(tuple(forms))
    return tuple(checked)


def build_lookup(render: Callable[[int], str], bound: int) -> tuple[str, ...]:
    """Precompute ``render`` for every segment value below ``bound``."""
    return tuple(render(value) for value in range(bound))

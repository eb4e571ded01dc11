"""
Pydantic models for conversion data: the parsed number, its segments and
the per-language option sets.

Option models forbid unknown keys: a misspelled option fails loudly at the
boundary instead of being silently ignored.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ─── Parsed Input ────────────────────────────────────────────────────


class NumericValue(BaseModel):
    """Canonical form of a number: sign, unsigned integer part, decimal digits.

    The decimal digits are kept as text so that leading zeros survive
    ("0.05" reads "zero point zero five").
    """

    model_config = ConfigDict(frozen=True)

    is_negative: bool = False
    integer_part: int = Field(0, ge=0)
    decimal_digits: str | None = None

    @field_validator("decimal_digits")
    @classmethod
    def _digits_only(cls, value: str | None) -> str | None:
        if value is not None and (not value or not value.isascii() or not value.isdigit()):
            raise ValueError("decimal_digits must be a non-empty string of 0-9")
        return value

    @property
    def is_zero(self) -> bool:
        """True when the integer part and every decimal digit are zero."""
        return self.integer_part == 0 and not (self.decimal_digits or "").strip("0")


class Segment(BaseModel):
    """One bounded group of digits and the scale step it sits at (0 = units)."""

    model_config = ConfigDict(frozen=True)

    value: int = Field(ge=0)
    scale_index: int = Field(ge=0)


# ─── Conversion Options ──────────────────────────────────────────────


class Gender(str, Enum):
    """Grammatical gender for the units group of gendered languages."""

    MASCULINE = "masculine"
    FEMININE = "feminine"


class ConversionOptions(BaseModel):
    """Options shared by every language (none) plus the strictness contract."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    def word_separator(self, default: str) -> str:
        """The separator placed between words; options may override it."""
        return default


class EnglishOptions(ConversionOptions):
    and_conjunction: bool = Field(
        True, description='Insert "and" after hundreds and before a final small group.'
    )
    long_scale: bool = Field(
        False, description='Long-scale names: 10^9 is "thousand million", 10^12 is "billion".'
    )


class AmericanEnglishOptions(EnglishOptions):
    and_conjunction: bool = Field(
        False, description='Insert "and" after hundreds and before a final small group.'
    )


class FrenchOptions(ConversionOptions):
    with_hyphen_separator: bool = Field(
        False, description="Join every word with a hyphen (1990 spelling reform)."
    )

    def word_separator(self, default: str) -> str:
        return "-" if self.with_hyphen_separator else default


class TurkishOptions(ConversionOptions):
    drop_spaces: bool = Field(False, description="Write the whole number as one word.")

    def word_separator(self, default: str) -> str:
        return "" if self.drop_spaces else default


class GenderedOptions(ConversionOptions):
    gender: Gender = Field(
        Gender.MASCULINE, description="Gender of the counted noun (units group and decimals)."
    )


class HebrewOptions(ConversionOptions):
    and_word: str = Field("ו", description="Conjunction prefixed to the last element.")


class ChineseOptions(ConversionOptions):
    formal: bool = Field(True, description="Use the formal (financial) numerals 壹贰叁 instead of 一二三.")

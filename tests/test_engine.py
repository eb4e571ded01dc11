"""
Engine tests: composition properties that must hold for every language,
profile build-time checks, range limits and option handling.

Run: pytest tests/ -v
"""

from __future__ import annotations

import pytest

from numeral_words import convert
from numeral_words.composer import assemble, compose, integer_to_words, render_decimal
from numeral_words.exceptions import (
    ConfigurationError,
    InvalidOptions,
    NumberOutOfRange,
)
from numeral_words.languages import BUILDERS
from numeral_words.models import NumericValue, Segment
from numeral_words.plurals import singular_plural, slavic_plural
from numeral_words.profile import (
    DecimalPolicy,
    GrammarContext,
    LanguageProfile,
    require_scales,
    require_table,
)
from numeral_words.registry import LanguageRegistry
from numeral_words.segments import Grouping

ALL_CODES = sorted(BUILDERS)

_registry = LanguageRegistry()


def _profile(code: str) -> LanguageProfile:
    return _registry.resolve(code)


def _toy_profile(**overrides) -> LanguageProfile:
    """A digits-as-words profile with one scale, for engine-level checks."""
    fields = dict(
        code="xx",
        name="Toy",
        grouping=Grouping.WESTERN,
        zero_word="nil",
        negative_word="neg",
        decimal_word="dot",
        render_segment=lambda value, context: str(value) if value else "",
        scale_word=lambda value, context: "k",
        max_scale_index=1,
    )
    fields.update(overrides)
    return LanguageProfile(**fields)


# ═══════════════════════════════════════════════════════════════════════
# PROPERTIES ACROSS ALL LANGUAGES
# ═══════════════════════════════════════════════════════════════════════


class TestEveryLanguage:
    @pytest.mark.parametrize("code", ALL_CODES)
    def test_zero_is_the_zero_word(self, code):
        profile = _profile(code)
        assert convert(0, lang=code) == profile.zero_word

    @pytest.mark.parametrize("code", ALL_CODES)
    def test_negative_zero_has_no_sign(self, code):
        assert convert("-0", lang=code) == convert(0, lang=code)
        assert convert("-0.00", lang=code) == convert("0.00", lang=code)

    @pytest.mark.parametrize("code", ALL_CODES)
    def test_negative_adds_only_the_marker(self, code):
        profile = _profile(code)
        positive = convert(1234, lang=code)
        assert convert(-1234, lang=code) == profile.negative_word + profile.word_separator + positive

    @pytest.mark.parametrize("code", ALL_CODES)
    def test_deterministic(self, code):
        values = [7, 1001, 98_765_432, "3.14", -42]
        assert [convert(v, lang=code) for v in values] == [convert(v, lang=code) for v in values]

    @pytest.mark.parametrize("code", ALL_CODES)
    def test_equal_inputs_of_different_types_agree(self, code):
        assert convert(1234, lang=code) == convert("1234", lang=code) == convert(1234.0, lang=code)

    @pytest.mark.parametrize("code", ALL_CODES)
    def test_segment_renders_empty_only_for_zero(self, code):
        profile = _profile(code)
        context = profile.context(profile.parse_options())
        for scale_index in range(3):
            local = context.at(scale_index)
            for value in range(profile.grouping.bound(scale_index)):
                words = profile.render_segment(value, local)
                assert (words == "") == (value == 0), (code, scale_index, value)

    @pytest.mark.parametrize("code", ALL_CODES)
    def test_largest_scale_is_spoken(self, code):
        profile = _profile(code)
        offset = profile.grouping.offset(profile.max_scale_index)
        assert convert(10**offset, lang=code)

    @pytest.mark.parametrize("code", ALL_CODES)
    def test_beyond_largest_scale_is_out_of_range(self, code):
        profile = _profile(code)
        offset = profile.grouping.offset(profile.max_scale_index + 1)
        with pytest.raises(NumberOutOfRange) as exc_info:
            convert(10**offset, lang=code)
        assert exc_info.value.details["language"] == profile.code


class TestRadixBoundaries:
    @pytest.mark.parametrize(
        "code, boundary, scale_word",
        [
            ("en", 1000, "thousand"),
            ("de", 1000, "tausend"),
            ("ru", 1000, "тысяч"),
            ("tr", 1000, "bin"),
            ("ko", 10_000, "만"),
            ("zh-Hans", 10_000, "万"),
            ("hi", 1000, "हज़ार"),
            ("hi", 100_000, "लाख"),
            ("hi", 10**7, "करोड़"),
        ],
    )
    def test_boundary(self, code, boundary, scale_word):
        assert scale_word not in convert(boundary - 1, lang=code)
        assert convert(boundary, lang=code).count(scale_word) == 1
        assert convert(boundary + 1, lang=code).endswith(convert(1, lang=code))


# ═══════════════════════════════════════════════════════════════════════
# COMPOSER
# ═══════════════════════════════════════════════════════════════════════


class TestComposer:
    def test_zero_short_circuits(self):
        profile = _toy_profile()
        assert integer_to_words(0, profile, GrammarContext(options=None)) == "nil"

    def test_zero_segments_are_skipped(self):
        profile = _toy_profile()
        segments = [Segment(value=5, scale_index=1), Segment(value=0, scale_index=0)]
        assert compose(segments, profile, GrammarContext(options=None)) == "5 k"

    def test_out_of_range_segment(self):
        profile = _toy_profile()
        segments = [Segment(value=1, scale_index=2), Segment(value=0, scale_index=1), Segment(value=0, scale_index=0)]
        with pytest.raises(NumberOutOfRange) as exc_info:
            compose(segments, profile, GrammarContext(options=None))
        assert exc_info.value.details["scale_index"] == 2

    def test_multiplier_omission(self):
        profile = _toy_profile(omit_multiplier=lambda value, context: value == 1)
        context = GrammarContext(options=None)
        assert integer_to_words(1001, profile, context) == "k 1"
        assert integer_to_words(2001, profile, context) == "2 k 1"

    def test_units_group_is_never_omitted(self):
        profile = _toy_profile(omit_multiplier=lambda value, context: value == 1)
        assert integer_to_words(1, profile, GrammarContext(options=None)) == "1"

    def test_gap_marker(self):
        profile = _toy_profile(gap_word="gap", needs_gap=lambda higher, lower, grouping: lower.value < 10)
        context = GrammarContext(options=None)
        assert integer_to_words(1005, profile, context) == "1 k gap 5"
        assert integer_to_words(1050, profile, context) == "1 k 50"

    def test_whole_number_decimals_keep_leading_zeros(self):
        profile = _toy_profile()
        assert render_decimal("0050", profile, GrammarContext(options=None)) == "nil nil 50"

    def test_per_digit_decimals(self):
        profile = _toy_profile(decimal_policy=DecimalPolicy.PER_DIGIT)
        assert render_decimal("105", profile, GrammarContext(options=None)) == "1 nil 5"

    def test_assemble(self):
        profile = _toy_profile()
        context = GrammarContext(options=None)
        numeric = NumericValue(is_negative=True, integer_part=12, decimal_digits="6")
        assert assemble(numeric, "12", "6", profile, context) == "neg 12 dot 6"

    def test_assemble_drops_sign_of_zero(self):
        profile = _toy_profile()
        context = GrammarContext(options=None)
        numeric = NumericValue(is_negative=True, integer_part=0, decimal_digits="00")
        assert assemble(numeric, "nil", "nil nil", profile, context) == "nil dot nil nil"


# ═══════════════════════════════════════════════════════════════════════
# PROFILE BUILD-TIME CHECKS
# ═══════════════════════════════════════════════════════════════════════


class TestProfileChecks:
    def test_table_wrong_size(self):
        with pytest.raises(ConfigurationError, match="expected 3"):
            require_table("xx", "ones", ("", "a"), 3)

    def test_table_missing_entry(self):
        with pytest.raises(ConfigurationError) as exc_info:
            require_table("xx", "ones", ("", "a", ""), 3)
        assert exc_info.value.details["index"] == 2

    def test_table_blank_allowed(self):
        assert require_table("xx", "tens", ("", "", "c"), 3, blank=(0, 1)) == ("", "", "c")

    def test_scales_wrong_form_count(self):
        with pytest.raises(ConfigurationError):
            require_scales("xx", ((), ("thousand",)), singular_plural)

    def test_scales_empty_form(self):
        with pytest.raises(ConfigurationError):
            require_scales("xx", ((), ("a", "", "c")), slavic_plural)

    def test_missing_zero_word(self):
        with pytest.raises(ConfigurationError):
            _toy_profile(zero_word="")

    def test_negative_max_scale(self):
        with pytest.raises(ConfigurationError):
            _toy_profile(max_scale_index=-1)

    def test_gap_rule_without_gap_word(self):
        with pytest.raises(ConfigurationError):
            _toy_profile(needs_gap=lambda higher, lower, grouping: True)

    def test_every_builtin_profile_builds(self):
        for code, builder in BUILDERS.items():
            assert builder().code == code


# ═══════════════════════════════════════════════════════════════════════
# OPTIONS
# ═══════════════════════════════════════════════════════════════════════


class TestOptions:
    def test_unknown_option_rejected(self):
        with pytest.raises(InvalidOptions) as exc_info:
            convert(1, lang="en", bogus=True)
        assert exc_info.value.code == "INVALID_OPTIONS"
        assert exc_info.value.details["language"] == "en"

    def test_option_of_another_language_rejected(self):
        with pytest.raises(InvalidOptions):
            convert(1, lang="fr", and_conjunction=False)

    def test_bad_enum_value_rejected(self):
        with pytest.raises(InvalidOptions):
            convert(1, lang="ru", gender="neuter")

    def test_languages_without_options_reject_any(self):
        with pytest.raises(InvalidOptions):
            convert(1, lang="de", formal=True)

    def test_string_booleans_are_accepted(self):
        assert convert(7, lang="zh-Hans", formal="false") == "七"

    def test_options_do_not_leak_between_calls(self):
        convert(1, lang="ru", gender="feminine")
        assert convert(1, lang="ru") == "один"

"""
Tests for the check factories that test input directly.
"""

import re

import pytest

from keyprompt import checks
from keyprompt.checks import (
    InvalidInputException,
    NonNumericTypeException,
    NumericType,
    ValidationOutcome,
)


class TestValidationOutcome:
    """Test ValidationOutcome construction and conversion."""

    def test_reject_uses_generic_message(self):
        outcome = ValidationOutcome.reject()

        assert outcome.rejected
        assert outcome.message == "Invalid Input"

    def test_accept_has_no_message(self):
        outcome = ValidationOutcome.accept()

        assert outcome.accepted
        assert outcome.message is None
        outcome.raise_if_rejected()

    def test_raise_if_rejected_carries_message(self):
        with pytest.raises(InvalidInputException) as exc_info:
            ValidationOutcome.reject("Nope").raise_if_rejected()

        assert exc_info.value.message == "Nope"
        assert str(exc_info.value) == "Nope"


class TestIs:
    """Test the is_ check."""

    @pytest.mark.parametrize("candidate", ["y", "Y", "n", "N"])
    def test_case_insensitive_accepts(self, candidate):
        assert checks.is_("Y", "N").accepts(candidate)

    @pytest.mark.parametrize("candidate", ["yes", "", "x", " y"])
    def test_case_insensitive_rejects(self, candidate):
        assert not checks.is_("Y", "N").accepts(candidate)

    def test_case_sensitive(self):
        check = checks.is_("Y", case_sensitive=True)

        assert check.case_sensitive
        assert not checks.is_("Y").case_sensitive
        assert check.accepts("Y")
        assert not check.accepts("y")

    def test_case_folding(self):
        assert checks.is_("STRASSE").accepts("straße")

    def test_no_strings_rejects_everything(self):
        assert not checks.is_().accepts("")

    def test_call_raises_on_rejection(self):
        with pytest.raises(InvalidInputException) as exc_info:
            checks.is_("a")("b")

        assert exc_info.value.message == "Invalid Input"


class TestMatchesRegex:
    """Test the matches_regex check."""

    def test_requires_full_match(self):
        check = checks.matches_regex(r"\d+")

        assert check.accepts("123")
        assert not check.accepts("a123")
        assert not check.accepts("123a")

    def test_accepts_compiled_pattern(self):
        check = checks.matches_regex(re.compile("abc", re.IGNORECASE))

        assert check.pattern.flags & re.IGNORECASE
        assert check.accepts("ABC")

    def test_invalid_pattern_fails_at_construction(self):
        with pytest.raises(re.error):
            checks.matches_regex("(")


class TestLength:
    """Test the length check."""

    @pytest.mark.parametrize("candidate", ["abcde", "12345", "     ", "a\nbcd"])
    def test_accepts_exact_length(self, candidate):
        assert checks.length(5).accepts(candidate)

    @pytest.mark.parametrize("candidate", ["", "abcd", "abcdef"])
    def test_rejects_other_lengths(self, candidate):
        assert not checks.length(5).accepts(candidate)

    def test_zero_length(self):
        assert checks.length(0).accepts("")
        assert not checks.length(0).accepts("a")

    def test_negative_length_fails_at_construction(self):
        with pytest.raises(ValueError):
            checks.length(-1)

    def test_pattern_counts_any_character(self):
        assert checks.length(3).pattern.pattern == ".{3}"
        assert checks.length(3).pattern.flags & re.DOTALL


class TestConsistsOf:
    """Test the consists_of check."""

    def test_accepts_allowed_characters(self):
        assert checks.consists_of("abc").accepts("abcabc")

    def test_rejects_other_characters(self):
        assert not checks.consists_of("abc").accepts("abd")

    def test_rejects_empty_input(self):
        assert not checks.consists_of("abc").accepts("")

    def test_character_ranges(self):
        check = checks.consists_of("0-9a-f")

        assert check.accepts("deadbeef42")
        assert not check.accepts("xyz")


class TestNumeric:
    """Test the numeric check."""

    @pytest.mark.parametrize("candidate", ["0", "42", "-7", "007"])
    def test_signed_integers(self, candidate):
        assert checks.numeric().accepts(candidate)

    @pytest.mark.parametrize("candidate", ["", "-", "1.0", "1e5", "+1", " 1", "abc"])
    def test_rejects_non_integers(self, candidate):
        assert not checks.numeric(int).accepts(candidate)

    def test_unsigned_rejects_minus(self):
        check = checks.numeric(NumericType.UINT8)

        assert check.accepts("255")
        assert not check.accepts("-1")

    @pytest.mark.parametrize("candidate", ["1.0", "-0.5", "10.25"])
    def test_floats(self, candidate):
        assert checks.numeric(float).accepts(candidate)

    @pytest.mark.parametrize("candidate", ["1", ".5", "1.", "1e5", "1.0e5", "-.5"])
    def test_floats_require_digits_around_point(self, candidate):
        assert not checks.numeric(NumericType.FLOAT32).accepts(candidate)

    @pytest.mark.parametrize("kind", [str, bool, list, "int", None])
    def test_non_numeric_kind_fails_at_construction(self, kind):
        with pytest.raises(NonNumericTypeException):
            checks.numeric(kind)

    def test_non_numeric_kind_is_type_error(self):
        with pytest.raises(TypeError):
            checks.numeric(str)


class TestRange:
    """Test the range_ check."""

    @pytest.mark.parametrize("value", range(1, 11))
    def test_accepts_inclusive_bounds(self, value):
        assert checks.range_(int, 1, 10).accepts(str(value))

    @pytest.mark.parametrize("candidate", ["0", "11", "abc", "", "5.0", "-1"])
    def test_rejects_outside_or_invalid(self, candidate):
        assert not checks.range_(int, 1, 10).accepts(candidate)

    def test_defaults_to_type_bounds(self):
        check = checks.range_(NumericType.INT8)

        assert check.minimum == -128
        assert check.maximum == 127
        assert check.accepts("-128")
        assert check.accepts("127")
        assert not check.accepts("128")
        assert not check.accepts("-129")

    def test_unbounded_int(self):
        check = checks.range_()

        assert check.minimum is None
        assert check.maximum is None
        assert check.accepts("9" * 100)

    def test_overflow_is_rejection(self):
        assert not checks.range_(NumericType.INT64).accepts("9" * 30)
        assert not checks.range_(float).accepts("9" * 400 + ".0")
        assert not checks.range_(NumericType.FLOAT32).accepts("1" + "0" * 39 + ".0")

    def test_float_range(self):
        check = checks.range_(float, 0.0, 1.0)

        assert check.accepts("0.5")
        assert check.accepts("1.0")
        assert not check.accepts("1.5")
        assert not check.accepts("1")

    def test_only_minimum(self):
        check = checks.range_(int, minimum=18)

        assert check.minimum == 18
        assert check.maximum is None
        assert check.accepts("18")
        assert check.accepts("1000000")
        assert not check.accepts("17")

    def test_inverted_bounds_fail_at_construction(self):
        with pytest.raises(ValueError):
            checks.range_(int, 10, 1)

    def test_non_numeric_kind_fails_at_construction(self):
        with pytest.raises(NonNumericTypeException):
            checks.range_(str)


class TestNumericType:
    """Test NumericType details."""

    def test_integer_bounds(self):
        assert NumericType.UINT16.minimum == 0
        assert NumericType.UINT16.maximum == 65535
        assert NumericType.INT32.minimum == -(2**31)
        assert NumericType.INT32.maximum == 2**31 - 1

    def test_int_is_unbounded(self):
        assert NumericType.INT.minimum is None
        assert NumericType.INT.maximum is None
        assert NumericType.INT.signed

    def test_parse_raises_on_overflow(self):
        with pytest.raises(OverflowError):
            NumericType.UINT8.parse("256")

        assert NumericType.UINT8.parse("255") == 255
        assert NumericType.FLOAT.parse("2.5") == 2.5

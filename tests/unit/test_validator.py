"""
Unit tests for free-text answer validation.

Covers the interpretations validate_answer tries:
- Exact match after normalization
- Numbers with tolerance, word numbers and trailing units
- Fractions and mixed numbers, including against decimals

Run: pytest tests/unit/test_validator.py -v
"""

import pytest

from mathquest.core.validator import (
    ANSWER_TOLERANCE,
    normalize_answer,
    parse_fraction,
    parse_numeric,
    validate_answer,
)


class TestNormalizeAnswer:
    """Test normalize_answer function."""

    def test_trims_and_lowercases(self):
        assert normalize_answer("  YES  ") == "yes"

    def test_drops_thousands_separators(self):
        assert normalize_answer("1,234") == "1234"
        assert normalize_answer("1，234") == "1234"

    def test_drops_degree_sign(self):
        assert normalize_answer("45°") == "45"

    def test_collapses_whitespace(self):
        assert normalize_answer("1   3/4") == "1 3/4"


class TestParseNumeric:
    """Test parse_numeric function."""

    # ========================================
    # Literals
    # ========================================

    def test_integer(self):
        assert parse_numeric("42") == 42.0

    def test_negative_decimal(self):
        assert parse_numeric("-3.5") == -3.5

    def test_leading_dot(self):
        assert parse_numeric(".25") == 0.25

    def test_empty_is_none(self):
        assert parse_numeric("") is None

    # ========================================
    # Words and suffixes
    # ========================================

    def test_word_number(self):
        assert parse_numeric("five") == 5.0

    def test_negative_word_number(self):
        assert parse_numeric("negative three") == -3.0
        assert parse_numeric("minus three") == -3.0

    def test_number_with_unit(self):
        assert parse_numeric("65 degrees") == 65.0

    def test_number_with_chinese_unit(self):
        assert parse_numeric("12个") == 12.0

    def test_percent(self):
        assert parse_numeric("25%") == 25.0

    def test_word_with_suffix(self):
        assert parse_numeric("five faces") == 5.0

    @pytest.mark.parametrize("value", ["15 km/h", "96 m", "96 m²", "96 m2", "12 square meters"])
    def test_any_unit_after_a_space(self, value):
        assert parse_numeric(value) == float(value.split()[0])

    def test_slash_after_a_space_is_not_a_unit(self):
        assert parse_numeric("3 /4") is None

    # ========================================
    # Things that are not a single number
    # ========================================

    def test_fraction_is_not_numeric(self):
        assert parse_numeric("3/4") is None

    def test_mixed_number_is_not_numeric(self):
        assert parse_numeric("1 3/4") is None

    def test_expression_is_not_numeric(self):
        assert parse_numeric("4x^3") is None

    def test_gibberish(self):
        assert parse_numeric("banana") is None


class TestParseFraction:
    """Test parse_fraction function."""

    def test_simple(self):
        assert parse_fraction("3/4") == pytest.approx(0.75)

    def test_spaces_around_slash(self):
        assert parse_fraction("3 / 4") == pytest.approx(0.75)

    def test_mixed(self):
        assert parse_fraction("1 3/4") == pytest.approx(1.75)

    def test_negative_mixed_applies_sign_to_whole_value(self):
        assert parse_fraction("-1 1/2") == pytest.approx(-1.5)

    def test_zero_denominator(self):
        assert parse_fraction("5/0") is None
        assert parse_fraction("1 2/0") is None

    def test_not_a_fraction(self):
        assert parse_fraction("0.5") is None


class TestValidateAnswer:
    """Test validate_answer function."""

    # ========================================
    # Exact and textual
    # ========================================

    def test_exact_match(self):
        assert validate_answer("42", "42") is True

    def test_case_and_whitespace_insensitive(self):
        assert validate_answer("  Yes ", "yes") is True

    def test_text_mismatch(self):
        assert validate_answer("no", "yes") is False

    def test_identical_empty_answers_match(self):
        assert validate_answer("", "") is True
        assert validate_answer("   ", "") is True

    def test_empty_never_matches_a_value(self):
        assert validate_answer("", "5") is False
        assert validate_answer("5", "") is False

    def test_none_is_treated_as_empty(self):
        assert validate_answer(None, "3") is False

    # ========================================
    # Numeric
    # ========================================

    def test_integer_vs_decimal(self):
        assert validate_answer("5", "5.00") is True

    def test_within_tolerance(self):
        assert validate_answer("3.14159", "3.14160") is True

    def test_outside_tolerance(self):
        assert validate_answer("3.14", "3.15") is False

    def test_small_difference_rejected(self):
        assert validate_answer("1.001", "1") is False

    def test_custom_tolerance(self):
        assert validate_answer("3.14", "3.15", tolerance=0.02) is True

    def test_word_number(self):
        assert validate_answer("five", "5") is True

    def test_unit_suffix(self):
        assert validate_answer("65 degrees", "65") is True

    def test_compound_unit_suffix(self):
        assert validate_answer("15 km/h", "15") is True
        assert validate_answer("96 m²", "96") is True
        assert validate_answer("96 m", "97") is False

    def test_thousands_separator(self):
        assert validate_answer("1,024", "1024") is True

    # ========================================
    # Fractions
    # ========================================

    def test_equivalent_fractions(self):
        assert validate_answer("6/8", "3/4") is True

    def test_fraction_vs_decimal(self):
        assert validate_answer("0.5", "1/2") is True
        assert validate_answer("1/2", "0.5") is True

    def test_mixed_vs_improper(self):
        assert validate_answer("1 3/4", "7/4") is True

    def test_fraction_mismatch(self):
        assert validate_answer("2/3", "3/4") is False

    def test_fraction_vs_text(self):
        assert validate_answer("banana", "1/2") is False

    def test_zero_denominator_does_not_parse(self):
        assert validate_answer("2/0", "1/0") is False
        assert validate_answer("0", "1/0") is False

    def test_default_tolerance_constant(self):
        assert ANSWER_TOLERANCE == 1e-4


@pytest.mark.parametrize(
    "user, correct, expected",
    [
        ("1/2", "0.5", True),
        ("1 3/4", "1.75", True),
        ("five", "5", True),
        ("65 degrees", "65°", True),
        ("-1/2", "-0.5", True),
        ("3/0", "anything", False),
        ("", "5", False),
    ],
)
def test_validation_scenarios(user, correct, expected):
    assert validate_answer(user, correct) is expected

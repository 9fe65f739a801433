"""
Unit tests for typed canonical answers.

Run: pytest tests/unit/test_answers.py -v
"""

import math

import pytest

from mathquest.core.answers import (
    ChoiceAnswer,
    DecimalAnswer,
    FractionAnswer,
    IntegerAnswer,
    SymbolicAnswer,
)


class TestIntegerAnswer:

    def test_render(self):
        assert IntegerAnswer(42).render() == "42"

    def test_accepts_equivalents(self):
        answer = IntegerAnswer(5)
        assert answer.accepts("5")
        assert answer.accepts("five")
        assert answer.accepts("5.0")
        assert answer.accepts("10/2")

    def test_rejects_wrong_value(self):
        assert not IntegerAnswer(5).accepts("6")


class TestDecimalAnswer:

    def test_render_rounds_to_places(self):
        assert DecimalAnswer(math.sqrt(50)).render() == "7.07"
        assert DecimalAnswer(5.0).render() == "5.00"
        assert DecimalAnswer(3.5, places=1).render() == "3.5"

    def test_accepts_rounded_value(self):
        answer = DecimalAnswer(math.sqrt(50))
        assert answer.accepts("7.07")
        assert not answer.accepts("7.1")

    def test_whole_value_accepts_integer(self):
        assert DecimalAnswer(5.0).accepts("5")


class TestFractionAnswer:

    def test_of_reduces(self):
        answer = FractionAnswer.of(6, 8)
        assert (answer.numerator, answer.denominator) == (3, 4)

    def test_of_moves_sign_to_numerator(self):
        answer = FractionAnswer.of(3, -6)
        assert (answer.numerator, answer.denominator) == (-1, 2)

    def test_zero_denominator_raises(self):
        with pytest.raises(ZeroDivisionError):
            FractionAnswer.of(1, 0)

    def test_whole_renders_as_integer(self):
        answer = FractionAnswer.of(8, 2)
        assert answer.is_whole
        assert answer.render() == "4"

    def test_render(self):
        assert FractionAnswer.of(10, 4).render() == "5/2"

    def test_to_float(self):
        assert FractionAnswer.of(1, 4).to_float() == pytest.approx(0.25)

    def test_accepts_equivalent_forms(self):
        answer = FractionAnswer.of(5, 2)
        assert answer.accepts("5/2")
        assert answer.accepts("10/4")
        assert answer.accepts("2 1/2")
        assert answer.accepts("2.5")
        assert not answer.accepts("2/5")


class TestSymbolicAnswer:

    def test_render(self):
        assert SymbolicAnswer("12x^2 + 6").render() == "12x^2 + 6"

    def test_ignores_spaces_and_multiplication(self):
        answer = SymbolicAnswer("12x^2 + 6")
        assert answer.accepts("12x^2+6")
        assert answer.accepts("12 * x^2 + 6")
        assert answer.accepts("12·x^2 + 6")

    def test_rejects_different_expression(self):
        assert not SymbolicAnswer("12x^2 + 6").accepts("12x^2 + 7")

    def test_radical_spellings(self):
        answer = SymbolicAnswer("sqrt(3)/2", approx=math.sqrt(3) / 2)
        assert answer.accepts("√3/2")
        assert answer.accepts("sqrt 3 / 2")

    def test_decimal_approximation(self):
        answer = SymbolicAnswer("sqrt(2)/2", approx=math.sqrt(2) / 2)
        assert answer.accepts("0.707")
        assert not answer.accepts("0.5")

    def test_no_approximation_without_approx(self):
        assert not SymbolicAnswer("6x").accepts("6")

    def test_empty_is_rejected(self):
        assert not SymbolicAnswer("6x").accepts("")


class TestChoiceAnswer:

    def test_render(self):
        assert ChoiceAnswer(True).render() == "yes"
        assert ChoiceAnswer(False).render() == "no"

    @pytest.mark.parametrize("text", ["yes", "Yes", "y", "TRUE", "是", "yes!"])
    def test_yes_spellings(self, text):
        assert ChoiceAnswer(True).accepts(text)

    @pytest.mark.parametrize("text", ["no", "N", "false", "否", "不是", "no."])
    def test_no_spellings(self, text):
        assert ChoiceAnswer(False).accepts(text)

    def test_opposite_is_rejected(self):
        assert not ChoiceAnswer(True).accepts("no")
        assert not ChoiceAnswer(False).accepts("yes")

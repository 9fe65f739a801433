"""
Typed canonical answers.

A synthesizer computes its answer as one of these variants from the same
draws it writes into the prompt. Each variant knows how to render itself to
the canonical string stored on the question and how to decide whether a
learner's free text is equivalent to it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from math import gcd
from typing import Protocol

from mathquest.core.validator import (
    ANSWER_TOLERANCE,
    normalize_answer,
    parse_fraction,
    parse_numeric,
    validate_answer,
)


class Answer(Protocol):
    """Protocol for canonical answer variants."""

    kind: str

    def render(self) -> str:
        """Canonical string form."""
        ...

    def accepts(self, user_answer: str, tolerance: float = ANSWER_TOLERANCE) -> bool:
        """True if ``user_answer`` is equivalent to this answer."""
        ...


@dataclass(frozen=True)
class IntegerAnswer:
    value: int
    kind: str = "integer"

    def render(self) -> str:
        return str(self.value)

    def accepts(self, user_answer: str, tolerance: float = ANSWER_TOLERANCE) -> bool:
        return validate_answer(user_answer, self.render(), tolerance=tolerance)


@dataclass(frozen=True)
class DecimalAnswer:
    """A decimal rounded for display to ``places`` digits."""

    value: float
    places: int = 2
    kind: str = "decimal"

    def render(self) -> str:
        return f"{self.value:.{self.places}f}"

    def accepts(self, user_answer: str, tolerance: float = ANSWER_TOLERANCE) -> bool:
        return validate_answer(user_answer, self.render(), tolerance=tolerance)


@dataclass(frozen=True)
class FractionAnswer:
    """
    A fraction in lowest terms with a positive denominator.

    Build with ``FractionAnswer.of`` so the invariant holds.
    """

    numerator: int
    denominator: int
    kind: str = "fraction"

    @classmethod
    def of(cls, numerator: int, denominator: int) -> FractionAnswer:
        if denominator == 0:
            raise ZeroDivisionError("fraction denominator is zero")
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        common = gcd(numerator, denominator) or 1
        return cls(numerator // common, denominator // common)

    @property
    def is_whole(self) -> bool:
        return self.denominator == 1

    def to_float(self) -> float:
        return self.numerator / self.denominator

    def render(self) -> str:
        if self.is_whole:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"

    def accepts(self, user_answer: str, tolerance: float = ANSWER_TOLERANCE) -> bool:
        return validate_answer(user_answer, self.render(), tolerance=tolerance)


_SYMBOLIC_NOISE_RE = re.compile(r"[\s*()]")


def _symbolic_key(text: str) -> str:
    key = normalize_answer(text).replace("√", "sqrt").replace("·", "")
    return _SYMBOLIC_NOISE_RE.sub("", key)


@dataclass(frozen=True)
class SymbolicAnswer:
    """
    A short expression such as "12x^2 + 6" or "sqrt(3)/2".

    Compared textually after dropping spaces, multiplication signs and
    parentheses. When ``approx`` is set, a decimal within ``approx_tolerance``
    is also accepted.
    """

    text: str
    approx: float | None = None
    approx_tolerance: float = 5e-3
    kind: str = "symbolic"

    def render(self) -> str:
        return self.text

    def accepts(self, user_answer: str, tolerance: float = ANSWER_TOLERANCE) -> bool:
        if not normalize_answer(user_answer or ""):
            return False
        if _symbolic_key(user_answer) == _symbolic_key(self.text):
            return True
        if self.approx is not None:
            normalized = normalize_answer(user_answer)
            value = parse_numeric(normalized)
            if value is None:
                value = parse_fraction(normalized)
            if value is not None:
                return abs(value - self.approx) < max(tolerance, self.approx_tolerance)
        return False


_YES = {"yes", "y", "true", "是", "是的"}
_NO = {"no", "n", "false", "否", "不是"}


@dataclass(frozen=True)
class ChoiceAnswer:
    """A yes/no answer."""

    value: bool
    kind: str = "choice"

    def render(self) -> str:
        return "yes" if self.value else "no"

    def accepts(self, user_answer: str, tolerance: float = ANSWER_TOLERANCE) -> bool:
        normalized = normalize_answer(user_answer or "").rstrip(".!")
        if self.value:
            return normalized in _YES
        return normalized in _NO

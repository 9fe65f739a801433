"""
Base protocol and helpers for question synthesizers.

A synthesizer template draws its operands, computes the typed answer from
those operands, and only then formats text around them. Templates return a
QuestionDraft; the builder turns drafts into AdaptiveQuestions.
"""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Protocol

from mathquest.core.answers import Answer
from mathquest.core.models import BilingualText, MasteryDomain


@dataclass(frozen=True)
class QuestionDraft:
    """A synthesized question before fun-fact annotation."""

    prompt: BilingualText
    answer: Answer
    hints: tuple[BilingualText, ...]
    explanation: BilingualText
    domain: MasteryDomain
    knowledge_point_slug: str
    level: int
    template: str


class Synthesizer(Protocol):
    """Protocol for per-domain question synthesizers."""

    domain: MasteryDomain

    def build(self, level: int, rng: random.Random) -> QuestionDraft:
        """Generate one question for ``level`` (1-5) using ``rng``."""
        ...


Template = Callable[[int, random.Random], QuestionDraft]


def pick_template(rng: random.Random, templates: Sequence[Template]) -> Template:
    """Choose one template uniformly."""
    return templates[rng.randrange(len(templates))]


def hints(*pairs: tuple[str, str]) -> tuple[BilingualText, ...]:
    """Build an ordered hint sequence from (en, zh) pairs."""
    return tuple(BilingualText(en, zh) for en, zh in pairs)


# ============================================================================
# Number helpers
# ============================================================================


def euclid_gcd(a: int, b: int) -> int:
    """Greatest common divisor by the Euclidean algorithm."""
    x, y = abs(a), abs(b)
    while y:
        x, y = y, x % y
    return x


def lcm(a: int, b: int) -> int:
    if a == 0 or b == 0:
        return 0
    return abs(a * b) // euclid_gcd(a, b)


def smallest_factor(n: int) -> int | None:
    """Smallest divisor in [2, sqrt(n)], or None if there is none."""
    i = 2
    while i * i <= n:
        if n % i == 0:
            return i
        i += 1
    return None


def is_prime(n: int) -> bool:
    """Trial division up to sqrt(n)."""
    if n < 2:
        return False
    return smallest_factor(n) is None


def format_term(coefficient: int, power: int) -> str:
    """Render c·x^p as "cx^p", "cx" or "c"."""
    if power == 0:
        return str(coefficient)
    if power == 1:
        return f"{coefficient}x"
    return f"{coefficient}x^{power}"


def format_signed(value: int) -> str:
    """" + 3" / " - 3" for appending a constant to an expression."""
    return f" + {value}" if value >= 0 else f" - {abs(value)}"

"""
Core data models shared by the recommender, the synthesizers and the builder.

Design:
- MasteryDomain: closed enum of the ten math domains
- MasteryProfile: read-only rolling performance snapshot for one learner/topic
- KnowledgePointDef: static taxonomy entry
- BilingualText: an English/Chinese text pair (hints, explanations, facts)
- AdaptiveQuestion: the immutable, ready-to-render generated question
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from mathquest.core.answers import Answer


MIN_LEVEL = 1
MAX_LEVEL = 5


class MasteryDomain(str, Enum):
    """Top-level math subject categories."""

    ARITHMETIC = "ARITHMETIC"
    ALGEBRA = "ALGEBRA"
    GEOMETRY = "GEOMETRY"
    FRACTIONS = "FRACTIONS"
    NUMBER_THEORY = "NUMBER_THEORY"
    PROBABILITY = "PROBABILITY"
    STATISTICS = "STATISTICS"
    TRIGONOMETRY = "TRIGONOMETRY"
    CALCULUS = "CALCULUS"
    WORD_PROBLEMS = "WORD_PROBLEMS"

    @property
    def display_name(self) -> str:
        """Human-readable name."""
        return self.value.replace("_", " ").title()


@dataclass(frozen=True)
class MasteryProfile:
    """
    Rolling performance snapshot for one learner on one topic.

    Owned and persisted by the caller; the engine only reads it.
    """

    accuracy: float = 0.0  # 0..1
    avg_time_ms: float = 0.0
    streak: int = 0
    level: float = MIN_LEVEL  # 1..5

    def to_dict(self) -> dict[str, Any]:
        return {
            "accuracy": self.accuracy,
            "avg_time_ms": self.avg_time_ms,
            "streak": self.streak,
            "level": self.level,
        }


@dataclass(frozen=True)
class KnowledgePointDef:
    """A named, leveled sub-topic within a domain."""

    slug: str
    domain: MasteryDomain
    name_en: str
    name_zh: str
    min_level: int
    max_level: int

    def covers(self, level: int) -> bool:
        """True if the knowledge point is active at ``level``."""
        return self.min_level <= level <= self.max_level


@dataclass(frozen=True)
class BilingualText:
    """English/Chinese text pair."""

    en: str
    zh: str

    def get(self, lang: str) -> str:
        return self.zh if lang == "zh" else self.en

    def to_dict(self) -> dict[str, str]:
        return {"en": self.en, "zh": self.zh}


@dataclass(frozen=True)
class AdaptiveQuestion:
    """
    A generated question, ready to render.

    ``answer`` is the canonical string form of ``answer_value``; both are
    produced from the same random draws that appear in the prompt.
    """

    prompt_en: str
    prompt_zh: str
    answer: str
    hints: tuple[BilingualText, ...]
    explanation_en: str
    explanation_zh: str
    fun_fact_en: str
    fun_fact_zh: str
    domain: MasteryDomain
    knowledge_point_slug: str
    level: int
    answer_value: Answer | None = field(default=None, compare=False)
    template: str = ""
    seed: int | None = None

    def check(self, user_answer: str, tolerance: float | None = None) -> bool:
        """Grade a learner answer against this question's canonical answer."""
        from mathquest.core.validator import ANSWER_TOLERANCE, validate_answer

        tol = ANSWER_TOLERANCE if tolerance is None else tolerance
        if self.answer_value is None:
            return validate_answer(user_answer, self.answer, tolerance=tol)
        return self.answer_value.accepts(user_answer, tolerance=tol)

    def prompt(self, lang: str = "en") -> str:
        return self.prompt_zh if lang == "zh" else self.prompt_en

    def explanation(self, lang: str = "en") -> str:
        return self.explanation_zh if lang == "zh" else self.explanation_en

    def fun_fact(self, lang: str = "en") -> str:
        return self.fun_fact_zh if lang == "zh" else self.fun_fact_en

    def to_dict(self) -> dict[str, Any]:
        return {
            "prompt_en": self.prompt_en,
            "prompt_zh": self.prompt_zh,
            "answer": self.answer,
            "answer_kind": self.answer_value.kind if self.answer_value else None,
            "hints": [h.to_dict() for h in self.hints],
            "explanation_en": self.explanation_en,
            "explanation_zh": self.explanation_zh,
            "fun_fact_en": self.fun_fact_en,
            "fun_fact_zh": self.fun_fact_zh,
            "domain": self.domain.value,
            "knowledge_point_slug": self.knowledge_point_slug,
            "level": self.level,
            "template": self.template,
            "seed": self.seed,
        }

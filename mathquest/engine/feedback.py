"""
Attempt grading and learner feedback.

grade_attempt checks an answer against a question's typed answer and
packages everything a UI shows after submission: the explanation, a concept
note for the knowledge point and, on a miss, an encouragement plus the
first hint as a coaching tip. It also returns the profile updated for the
attempt; persisting it is the caller's job.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any

from loguru import logger

from mathquest.config import get_settings
from mathquest.core.mastery import next_profile
from mathquest.core.models import AdaptiveQuestion, BilingualText, MasteryProfile
from mathquest.core.taxonomy import concept_note

ENCOURAGEMENTS: tuple[BilingualText, ...] = (
    BilingualText("Great effort. You're getting stronger with each try.", "你已经很努力了，每次尝试都在进步。"),
    BilingualText("Nice persistence. Mistakes are part of learning math.", "坚持得很好，做错是学会数学的一部分。"),
    BilingualText("Good attempt. Let's adjust and tackle the next one.", "这次尝试不错，我们调整一下继续下一题。"),
)

DEFAULT_COACHING_TIP = BilingualText(
    "Try breaking the question into smaller steps.",
    "试着把题目拆成更小的步骤。",
)


@dataclass(frozen=True)
class AttemptResult:
    """Outcome of one submitted answer."""

    is_correct: bool
    correct_answer: str
    explanation: BilingualText
    concept_note: BilingualText
    encouragement: BilingualText | None
    coaching_tip: BilingualText | None
    updated_profile: MasteryProfile

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_correct": self.is_correct,
            "correct_answer": self.correct_answer,
            "explanation": self.explanation.to_dict(),
            "concept_note": self.concept_note.to_dict(),
            "encouragement": self.encouragement.to_dict() if self.encouragement else None,
            "coaching_tip": self.coaching_tip.to_dict() if self.coaching_tip else None,
            "updated_profile": self.updated_profile.to_dict(),
        }


def grade_attempt(
    question: AdaptiveQuestion,
    user_answer: str,
    response_time_ms: float,
    profile: MasteryProfile,
    rng: random.Random | None = None,
) -> AttemptResult:
    """
    Grade one attempt and compute the follow-up feedback.

    Args:
        question: The question that was shown
        user_answer: The learner's free-text answer
        response_time_ms: Time taken to answer
        profile: Mastery snapshot before this attempt
        rng: Random source for picking an encouragement

    Returns:
        AttemptResult with the updated profile
    """
    rng = rng or random.Random()
    is_correct = question.check(user_answer, tolerance=get_settings().answer_tolerance)
    updated = next_profile(profile, is_correct, response_time_ms)

    logger.debug(
        f"Graded {question.template or question.domain.value}: correct={is_correct}, "
        f"level {profile.level} -> {updated.level}"
    )

    if is_correct:
        encouragement = None
        coaching_tip = None
    else:
        encouragement = ENCOURAGEMENTS[rng.randrange(len(ENCOURAGEMENTS))]
        coaching_tip = question.hints[0] if question.hints else DEFAULT_COACHING_TIP

    return AttemptResult(
        is_correct=is_correct,
        correct_answer=question.answer,
        explanation=BilingualText(question.explanation_en, question.explanation_zh),
        concept_note=concept_note(question.knowledge_point_slug),
        encouragement=encouragement,
        coaching_tip=coaching_tip,
        updated_profile=updated,
    )

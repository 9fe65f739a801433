"""
MathQuest - adaptive math question engine.

Turns a topic tag and a learner's mastery profile into a fresh, bilingual
practice question at the right difficulty, and grades free-text answers.
"""
from mathquest.core import (
    KNOWLEDGE_POINT_TAXONOMY,
    AdaptiveQuestion,
    MasteryDomain,
    MasteryProfile,
    infer_domain_from_tag,
    next_profile,
    recommend_next_level,
    resolve_generation_tag,
    validate_answer,
)
from mathquest.engine import (
    AttemptResult,
    PracticeTrack,
    build_adaptive_question,
    grade_attempt,
)

__version__ = "0.1.0"

__all__ = [
    "AdaptiveQuestion",
    "AttemptResult",
    "KNOWLEDGE_POINT_TAXONOMY",
    "MasteryDomain",
    "MasteryProfile",
    "PracticeTrack",
    "build_adaptive_question",
    "grade_attempt",
    "infer_domain_from_tag",
    "next_profile",
    "recommend_next_level",
    "resolve_generation_tag",
    "validate_answer",
]

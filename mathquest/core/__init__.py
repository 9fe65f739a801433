"""
Core layer: data models, answer validation, taxonomy, leveling and tag classification.

Nothing in this package performs I/O or holds mutable state.
"""
from mathquest.core.answers import (
    Answer,
    ChoiceAnswer,
    DecimalAnswer,
    FractionAnswer,
    IntegerAnswer,
    SymbolicAnswer,
)
from mathquest.core.classifier import (
    DOMAIN_RULES,
    DomainRule,
    infer_domain_from_tag,
    resolve_generation_tag,
)
from mathquest.core.mastery import next_profile, recommend_next_level
from mathquest.core.models import (
    AdaptiveQuestion,
    BilingualText,
    KnowledgePointDef,
    MasteryDomain,
    MasteryProfile,
)
from mathquest.core.taxonomy import KNOWLEDGE_POINT_TAXONOMY, concept_note, get_knowledge_point
from mathquest.core.validator import ANSWER_TOLERANCE, validate_answer

__all__ = [
    # Models
    "AdaptiveQuestion",
    "BilingualText",
    "KnowledgePointDef",
    "MasteryDomain",
    "MasteryProfile",
    # Answers
    "Answer",
    "ChoiceAnswer",
    "DecimalAnswer",
    "FractionAnswer",
    "IntegerAnswer",
    "SymbolicAnswer",
    # Operations
    "validate_answer",
    "recommend_next_level",
    "next_profile",
    "infer_domain_from_tag",
    "resolve_generation_tag",
    "concept_note",
    "get_knowledge_point",
    # Constants
    "ANSWER_TOLERANCE",
    "DOMAIN_RULES",
    "DomainRule",
    "KNOWLEDGE_POINT_TAXONOMY",
]

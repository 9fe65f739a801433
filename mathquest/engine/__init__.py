"""
Question engine: synthesizers, fun facts, the builder facade, practice
tracks and attempt feedback.
"""
from mathquest.engine.builder import build_adaptive_question, template_signature
from mathquest.engine.feedback import AttemptResult, grade_attempt
from mathquest.engine.fun_facts import pick_fun_fact
from mathquest.engine.session import PracticeTrack
from mathquest.engine.synthesizers import SYNTHESIZERS, get_synthesizer

__all__ = [
    "AttemptResult",
    "PracticeTrack",
    "SYNTHESIZERS",
    "build_adaptive_question",
    "get_synthesizer",
    "grade_attempt",
    "pick_fun_fact",
    "template_signature",
]

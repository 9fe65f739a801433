"""
Unit tests for attempt grading and feedback.

Run: pytest tests/unit/test_feedback.py -v
"""

import random
from dataclasses import replace
from fractions import Fraction

import pytest

from mathquest.core.models import MasteryProfile
from mathquest.core.taxonomy import concept_note
from mathquest.engine.builder import build_adaptive_question
from mathquest.engine.feedback import DEFAULT_COACHING_TIP, ENCOURAGEMENTS, grade_attempt


@pytest.fixture
def question(steady_profile):
    return build_adaptive_question("fractions", steady_profile, seed=21)


class TestGradeAttempt:

    def test_correct_answer(self, question, steady_profile):
        result = grade_attempt(question, question.answer, 12000, steady_profile)
        assert result.is_correct
        assert result.encouragement is None
        assert result.coaching_tip is None
        assert result.updated_profile.streak == steady_profile.streak + 1
        assert result.updated_profile.accuracy > steady_profile.accuracy

    def test_wrong_answer(self, question, steady_profile):
        result = grade_attempt(question, "not even close", 12000, steady_profile, rng=random.Random(0))
        assert not result.is_correct
        assert result.correct_answer == question.answer
        assert result.encouragement in ENCOURAGEMENTS
        assert result.coaching_tip == question.hints[0]
        assert result.updated_profile.streak == 0

    def test_feedback_content(self, question, steady_profile):
        result = grade_attempt(question, question.answer, 12000, steady_profile)
        assert result.explanation.en == question.explanation_en
        assert result.explanation.zh == question.explanation_zh
        assert result.concept_note == concept_note(question.knowledge_point_slug)

    def test_equivalent_answer_counts(self, steady_profile):
        question = build_adaptive_question("fractions", steady_profile, seed=21)
        value = float(Fraction(question.answer))
        result = grade_attempt(question, f"{value:.6f}", 12000, steady_profile)
        assert result.is_correct

    def test_tolerance_comes_from_settings(self, monkeypatch, question, steady_profile):
        monkeypatch.setenv("MATHQUEST_ANSWER_TOLERANCE", "1000")
        result = grade_attempt(question, "0", 12000, steady_profile)
        assert result.is_correct

    def test_default_tip_without_hints(self, question, steady_profile):
        bare = replace(question, hints=())
        result = grade_attempt(bare, "not even close", 12000, steady_profile)
        assert result.coaching_tip == DEFAULT_COACHING_TIP

    def test_to_dict(self, question, steady_profile):
        data = grade_attempt(question, "nope", 12000, steady_profile, rng=random.Random(1)).to_dict()
        assert data["is_correct"] is False
        assert set(data["encouragement"]) == {"en", "zh"}
        assert data["updated_profile"]["streak"] == 0

    def test_profile_is_not_modified(self, question):
        before = MasteryProfile(accuracy=0.5, avg_time_ms=20000, streak=2, level=2)
        grade_attempt(question, question.answer, 5000, before)
        assert before == MasteryProfile(accuracy=0.5, avg_time_ms=20000, streak=2, level=2)

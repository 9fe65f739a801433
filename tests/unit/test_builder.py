"""
Unit tests for the adaptive question builder.

Run: pytest tests/unit/test_builder.py -v
"""

import random

import pytest

from mathquest.core.models import AdaptiveQuestion, BilingualText, MasteryDomain, MasteryProfile
from mathquest.engine.builder import build_adaptive_question, template_signature
from mathquest.engine.fun_facts import FUN_FACTS, KNOWLEDGE_POINT_FACTS


class TestBuildAdaptiveQuestion:
    """Test build_adaptive_question function."""

    def test_routes_tag_to_domain(self, steady_profile):
        question = build_adaptive_question("Derivatives and integrals", steady_profile, seed=1)
        assert question.domain == MasteryDomain.CALCULUS

    def test_level_follows_profile(self):
        fast = MasteryProfile(accuracy=0.9, avg_time_ms=15000, streak=5, level=3)
        struggling = MasteryProfile(accuracy=0.4, avg_time_ms=70000, streak=0, level=3)
        assert build_adaptive_question("fractions", fast, seed=2).level == 5
        assert build_adaptive_question("fractions", struggling, seed=2).level == 1

    def test_unknown_tag_builds_arithmetic(self, beginner_profile):
        question = build_adaptive_question("something else entirely", beginner_profile, seed=3)
        assert question.domain == MasteryDomain.ARITHMETIC
        assert question.level == 1
        assert question.knowledge_point_slug == "addition-subtraction"

    def test_seed_is_reproducible(self, steady_profile):
        first = build_adaptive_question("probability", steady_profile, seed=42)
        second = build_adaptive_question("probability", steady_profile, seed=42)
        assert first == second
        assert first.seed == 42

    def test_seed_wins_over_rng(self, steady_profile):
        with_rng = build_adaptive_question("algebra", steady_profile, seed=5, rng=random.Random(999))
        plain = build_adaptive_question("algebra", steady_profile, seed=5)
        assert with_rng == plain

    def test_rng_is_used_when_no_seed(self, steady_profile):
        a = build_adaptive_question("algebra", steady_profile, rng=random.Random(8))
        b = build_adaptive_question("algebra", steady_profile, rng=random.Random(8))
        assert a == b
        assert a.seed is None

    def test_answer_string_matches_typed_answer(self, steady_profile):
        for seed in range(30):
            question = build_adaptive_question("statistics", steady_profile, seed=seed)
            assert question.answer == question.answer_value.render()
            assert question.check(question.answer)

    def test_fun_fact_is_keyed_by_draft(self):
        profile = MasteryProfile(accuracy=0.7, avg_time_ms=30000, streak=0, level=4)
        question = build_adaptive_question("geometry", profile, seed=6)
        assert question.knowledge_point_slug == "pythagorean-theorem"
        fact = KNOWLEDGE_POINT_FACTS["pythagorean-theorem"]
        assert (question.fun_fact_en, question.fun_fact_zh) == (fact.en, fact.zh)

    def test_fun_fact_from_domain_pool(self, beginner_profile):
        question = build_adaptive_question("word problems", beginner_profile, seed=4)
        pool = FUN_FACTS[MasteryDomain.WORD_PROBLEMS]
        assert BilingualText(question.fun_fact_en, question.fun_fact_zh) in pool

    @pytest.mark.parametrize("domain", list(MasteryDomain))
    def test_every_domain_and_level(self, domain):
        for level in range(1, 6):
            profile = MasteryProfile(accuracy=0.7, avg_time_ms=30000, streak=0, level=level)
            question = build_adaptive_question(domain.value, profile, seed=level)
            assert question.domain == domain
            assert question.level == level
            assert question.prompt("en") and question.prompt("zh")
            assert question.fun_fact("en") and question.fun_fact("zh")

    def test_to_dict(self, steady_profile):
        data = build_adaptive_question("number theory", steady_profile, seed=9).to_dict()
        assert data["domain"] == "NUMBER_THEORY"
        assert data["answer_kind"] in {"integer", "choice"}
        assert len(data["hints"]) == 2
        assert data["seed"] == 9


class TestCheck:

    def test_check_uses_typed_answer(self, steady_profile):
        question = build_adaptive_question("trig", MasteryProfile(accuracy=0.7, avg_time_ms=30000, level=4), seed=12)
        assert question.check(question.answer)
        assert not question.check("definitely wrong")

    def test_check_without_typed_answer_falls_back_to_validator(self):
        question = _question("What is 1/2 + 1/4?", answer="3/4")
        assert question.check("0.75")
        assert not question.check("0.7")


def _question(prompt_en: str, answer: str = "1", domain=MasteryDomain.FRACTIONS) -> AdaptiveQuestion:
    return AdaptiveQuestion(
        prompt_en=prompt_en,
        prompt_zh=prompt_en,
        answer=answer,
        hints=(),
        explanation_en="",
        explanation_zh="",
        fun_fact_en="",
        fun_fact_zh="",
        domain=domain,
        knowledge_point_slug="same-denominator",
        level=2,
    )


class TestTemplateSignature:
    """Test template_signature function."""

    def test_masks_digits_and_normalizes(self):
        signature = template_signature(_question("  Compute 12/35   +  7/9 "))
        assert signature == "FRACTIONS|same-denominator|compute #/# + #/#"

    def test_same_template_different_numbers(self):
        assert template_signature(_question("Add 3/4 and 1/4")) == template_signature(_question("Add 5/9 and 2/9"))

    def test_different_templates(self):
        assert template_signature(_question("Add 3/4 and 1/4")) != template_signature(_question("Take 3/4 of 8"))

    def test_generated_questions_share_signature_per_template(self, steady_profile):
        seen = {}
        for seed in range(20):
            question = build_adaptive_question("fractions", steady_profile, seed=seed)
            seen.setdefault(question.template, set()).add(template_signature(question))
        assert all(len(signatures) == 1 for signatures in seen.values())

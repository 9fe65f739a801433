"""Unit tests for the fun-fact annotator."""

import random

from mathquest.core.models import MasteryDomain
from mathquest.engine.fun_facts import FUN_FACTS, KNOWLEDGE_POINT_FACTS, pick_fun_fact


def test_every_domain_has_a_pool_of_at_least_two():
    for domain in MasteryDomain:
        assert len(FUN_FACTS[domain]) >= 2, domain.value


def test_facts_are_bilingual():
    for pool in FUN_FACTS.values():
        for fact in pool:
            assert fact.en and fact.zh


def test_knowledge_point_override_wins():
    fact = pick_fun_fact(MasteryDomain.GEOMETRY, "pythagorean-theorem", random.Random(0))
    assert fact == KNOWLEDGE_POINT_FACTS["pythagorean-theorem"]
    assert "3-4-5" in fact.en


def test_falls_back_to_domain_pool():
    fact = pick_fun_fact(MasteryDomain.FRACTIONS, "same-denominator", random.Random(0))
    assert fact in FUN_FACTS[MasteryDomain.FRACTIONS]


def test_domain_pool_draws_vary():
    rng = random.Random(5)
    picks = {pick_fun_fact(MasteryDomain.ARITHMETIC, "multiplication", rng) for _ in range(40)}
    assert len(picks) > 1

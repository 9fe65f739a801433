"""
Adaptive question builder.

Composes the pieces into one call:

    tag --classify--> domain
    profile --recommend--> level
    (domain, level) --synthesizer--> draft
    draft --fun fact--> AdaptiveQuestion
"""

from __future__ import annotations

import random
import re

from loguru import logger

from mathquest.core.classifier import infer_domain_from_tag
from mathquest.core.mastery import recommend_next_level
from mathquest.core.models import AdaptiveQuestion, MasteryProfile
from mathquest.engine.fun_facts import pick_fun_fact
from mathquest.engine.synthesizers import get_synthesizer
from mathquest.engine.synthesizers.base import QuestionDraft


def build_adaptive_question(
    tag_name: str,
    profile: MasteryProfile,
    *,
    seed: int | None = None,
    rng: random.Random | None = None,
) -> AdaptiveQuestion:
    """
    Build one question for a topic tag at the level the profile calls for.

    Args:
        tag_name: Free-text topic tag, e.g. "fractions" or "CCSS-HSA"
        profile: The learner's current mastery snapshot for that topic
        seed: Seed for a fresh random.Random; the same seed, tag and profile
            always produce the same question
        rng: Random source to draw from; ignored when ``seed`` is given

    Returns:
        A fully rendered AdaptiveQuestion
    """
    if seed is not None:
        rng = random.Random(seed)
    elif rng is None:
        rng = random.Random()

    domain = infer_domain_from_tag(tag_name)
    level = recommend_next_level(profile)
    draft = get_synthesizer(domain).build(level, rng)
    logger.debug(f"Built {draft.template} (domain={domain.value}, level={level})")
    return annotate(draft, rng, seed=seed)


def annotate(draft: QuestionDraft, rng: random.Random, seed: int | None = None) -> AdaptiveQuestion:
    """Attach a fun fact to a draft and render its answer."""
    fact = pick_fun_fact(draft.domain, draft.knowledge_point_slug, rng)
    return AdaptiveQuestion(
        prompt_en=draft.prompt.en,
        prompt_zh=draft.prompt.zh,
        answer=draft.answer.render(),
        hints=draft.hints,
        explanation_en=draft.explanation.en,
        explanation_zh=draft.explanation.zh,
        fun_fact_en=fact.en,
        fun_fact_zh=fact.zh,
        domain=draft.domain,
        knowledge_point_slug=draft.knowledge_point_slug,
        level=draft.level,
        answer_value=draft.answer,
        template=draft.template,
        seed=seed,
    )


_DIGITS_RE = re.compile(r"\d+")


def template_signature(question: AdaptiveQuestion) -> str:
    """
    Shape of a question with its numbers masked.

    Two questions from the same template with different operands share a
    signature: "fractions|same-denominator|leo eats #/# of a pizza ...".
    """
    prompt = " ".join(_DIGITS_RE.sub("#", question.prompt_en).lower().split())
    return f"{question.domain.value}|{question.knowledge_point_slug}|{prompt}"

"""
Domain classification for free-text topic tags.

Rules are checked in order and the first match wins, so the order of
DOMAIN_RULES is the priority: a tag mentioning both "function" and "geo" is
GEOMETRY because geometry is checked before algebra. Exact domain names
("WORD_PROBLEMS") head the list, so they win before any keyword rule.
"""

from __future__ import annotations

import random
from dataclasses import dataclass

from loguru import logger

from mathquest.core.models import MasteryDomain

D = MasteryDomain


@dataclass(frozen=True)
class DomainRule:
    """
    Classify a tag into ``domain`` if it contains any of ``keywords``.

    An ``exact`` rule instead requires the whole tag, as a track key, to equal
    one of its keywords.
    """

    domain: MasteryDomain
    keywords: tuple[str, ...]
    exact: bool = False

    def matches(self, tag_name: str) -> bool:
        if self.exact:
            return normalize_track_key(tag_name) in self.keywords
        t = tag_name.lower()
        return any(keyword in t for keyword in self.keywords)


DOMAIN_RULES: tuple[DomainRule, ...] = (
    *(DomainRule(domain, (domain.value,), exact=True) for domain in MasteryDomain),
    DomainRule(D.TRIGONOMETRY, ("trig", "triangle", "sin", "cos")),
    DomainRule(D.CALCULUS, ("calc", "derivative", "integral", "limit")),
    DomainRule(D.STATISTICS, ("stat", "data", "mean", "ap-stats")),
    DomainRule(D.PROBABILITY, ("prob", "chance")),
    DomainRule(D.FRACTIONS, ("fraction", "ratio")),
    DomainRule(D.NUMBER_THEORY, ("number", "prime", "factor")),
    DomainRule(D.GEOMETRY, ("geo", "shape", "angle")),
    DomainRule(D.WORD_PROBLEMS, ("word", "real", "story")),
    DomainRule(D.ALGEBRA, ("alg", "equation", "function", "ccss-hsa", "ccss-hsf")),
)

DEFAULT_DOMAIN = D.ARITHMETIC


def infer_domain_from_tag(tag_name: str) -> MasteryDomain:
    """Classify a topic tag into one of the ten domains (ARITHMETIC by default)."""
    for rule in DOMAIN_RULES:
        if rule.matches(tag_name):
            logger.debug(f"Tag {tag_name!r} -> {rule.domain.value}")
            return rule.domain
    logger.debug(f"Tag {tag_name!r} matched no rule, using {DEFAULT_DOMAIN.value}")
    return DEFAULT_DOMAIN


# ============================================================================
# Generation tags
# ============================================================================

KNOWLEDGE_CHECK_TAGS = {"knowledge_check", "知识检查"}

GRADE_DOMAIN_MAP: dict[str, tuple[MasteryDomain, ...]] = {
    "GRADE_4": (D.ARITHMETIC, D.FRACTIONS, D.GEOMETRY, D.WORD_PROBLEMS, D.NUMBER_THEORY, D.PROBABILITY),
    "GRADE_5": (D.ARITHMETIC, D.FRACTIONS, D.GEOMETRY, D.ALGEBRA, D.WORD_PROBLEMS, D.PROBABILITY),
    "GRADE_6": (D.ARITHMETIC, D.FRACTIONS, D.ALGEBRA, D.GEOMETRY, D.NUMBER_THEORY, D.PROBABILITY, D.STATISTICS),
    "GRADE_7": (D.ALGEBRA, D.GEOMETRY, D.NUMBER_THEORY, D.PROBABILITY, D.STATISTICS, D.WORD_PROBLEMS),
    "GRADE_8": (D.ALGEBRA, D.GEOMETRY, D.TRIGONOMETRY, D.PROBABILITY, D.STATISTICS, D.WORD_PROBLEMS),
}

# Knowledge check walks elementary -> middle -> high school as attempts grow.
ELEMENTARY_CHECK_DOMAINS = (
    D.ARITHMETIC, D.FRACTIONS, D.GEOMETRY, D.WORD_PROBLEMS, D.NUMBER_THEORY, D.PROBABILITY,
)
MIDDLE_CHECK_DOMAINS = (
    D.ARITHMETIC, D.FRACTIONS, D.ALGEBRA, D.GEOMETRY,
    D.NUMBER_THEORY, D.PROBABILITY, D.STATISTICS, D.WORD_PROBLEMS,
)
HIGH_CHECK_DOMAINS = (
    D.ALGEBRA, D.GEOMETRY, D.TRIGONOMETRY, D.PROBABILITY, D.STATISTICS, D.CALCULUS, D.WORD_PROBLEMS,
)


def is_knowledge_check_tag(tag_name: str) -> bool:
    return tag_name.strip().lower() in KNOWLEDGE_CHECK_TAGS


def knowledge_check_domain(attempts: int) -> MasteryDomain:
    """Domain for the ``attempts``-th question of a knowledge check."""
    attempts = max(0, attempts)
    if attempts <= 5:
        return ELEMENTARY_CHECK_DOMAINS[attempts % len(ELEMENTARY_CHECK_DOMAINS)]
    if attempts <= 11:
        return MIDDLE_CHECK_DOMAINS[(attempts - 6) % len(MIDDLE_CHECK_DOMAINS)]
    return HIGH_CHECK_DOMAINS[(attempts - 12) % len(HIGH_CHECK_DOMAINS)]


def normalize_track_key(tag_name: str) -> str:
    """Upper-case a tag and join words with underscores ("grade 5" -> "GRADE_5")."""
    return "_".join(tag_name.strip().upper().split())


def resolve_generation_tag(tag_name: str, attempts: int = 0, rng: random.Random | None = None) -> str:
    """
    Turn a user-facing tag into the tag actually used for generation.

    Knowledge-check tags rotate through a curriculum by attempt count, grade
    tags pick one of that grade's domains, anything else passes through.
    """
    if is_knowledge_check_tag(tag_name):
        return knowledge_check_domain(attempts).value

    grade_domains = GRADE_DOMAIN_MAP.get(normalize_track_key(tag_name))
    if grade_domains:
        rng = rng or random.Random()
        return rng.choice(grade_domains).value

    return tag_name

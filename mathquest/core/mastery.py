"""
Core Mastery Module.

Maps a learner's rolling performance profile to the next difficulty level,
and folds a single attempt into that profile.

Design:
- Two independent upward signals (accurate-and-fast, streak) and two
  independent downward signals (low accuracy, slow answers), each worth
  one level. All four are evaluated on every call, so they can cancel.
- Thresholds live in LEVEL_THRESHOLDS so the policy can be audited in one place.
"""

from __future__ import annotations

import math

from loguru import logger

from mathquest.core.models import MAX_LEVEL, MIN_LEVEL, MasteryProfile

LEVEL_THRESHOLDS = {
    # Advance
    "advance_accuracy": 0.85,        # accuracy >= this ...
    "advance_max_time_ms": 22000,    # ... and 0 < avg time <= this
    "streak_bonus": 5,               # streak >= this
    # Ease back
    "ease_accuracy": 0.55,           # accuracy <= this
    "ease_time_ms": 65000,           # avg time >= this
}

PROFILE_UPDATE = {
    "attempt_weight": 0.2,           # weight of the newest attempt in accuracy
    "time_decay": 0.7,               # weight of the previous rolling mean time
    "min_time_ms": 1000,
    "max_time_ms": 180000,
    "promote_streak": 3,
}


def clamp_level(level: float) -> int:
    """Round half up and clamp into [MIN_LEVEL, MAX_LEVEL]."""
    if math.isnan(level):
        return MIN_LEVEL
    if math.isinf(level):
        return MAX_LEVEL if level > 0 else MIN_LEVEL
    return max(MIN_LEVEL, min(MAX_LEVEL, int(math.floor(level + 0.5))))


def recommend_next_level(profile: MasteryProfile) -> int:
    """
    Recommend the next difficulty level for a learner.

    Args:
        profile: Rolling performance snapshot

    Returns:
        Level between 1 and 5
    """
    t = LEVEL_THRESHOLDS
    level = clamp_level(profile.level)

    if profile.accuracy >= t["advance_accuracy"] and 0 < profile.avg_time_ms <= t["advance_max_time_ms"]:
        level += 1
    if profile.streak >= t["streak_bonus"]:
        level += 1
    if profile.accuracy <= t["ease_accuracy"]:
        level -= 1
    if profile.avg_time_ms >= t["ease_time_ms"]:
        level -= 1

    recommended = max(MIN_LEVEL, min(MAX_LEVEL, level))
    logger.debug(
        f"Recommended level {recommended} (acc={profile.accuracy:.2f}, "
        f"avg={profile.avg_time_ms:.0f}ms, streak={profile.streak}, level={profile.level})"
    )
    return recommended


def next_profile(profile: MasteryProfile, is_correct: bool, response_time_ms: float) -> MasteryProfile:
    """
    Fold one attempt into a mastery profile.

    Accuracy moves a fixed fraction toward 1 (correct) or 0 (wrong); the
    response time is bounded and blended into the rolling mean; the level
    moves by at most one step.
    """
    u = PROFILE_UPDATE
    t = LEVEL_THRESHOLDS
    weight = u["attempt_weight"]

    if is_correct:
        accuracy = profile.accuracy + (1 - profile.accuracy) * weight
    else:
        accuracy = profile.accuracy * (1 - weight)

    bounded_time = max(u["min_time_ms"], min(u["max_time_ms"], response_time_ms))
    if profile.avg_time_ms <= 0:
        avg_time_ms = float(bounded_time)
    else:
        avg_time_ms = float(round(profile.avg_time_ms * u["time_decay"] + bounded_time * (1 - u["time_decay"])))

    streak = profile.streak + 1 if is_correct else 0

    level = clamp_level(profile.level)
    if accuracy >= t["advance_accuracy"] and avg_time_ms <= t["advance_max_time_ms"] and streak >= u["promote_streak"]:
        level += 1
    if accuracy <= t["ease_accuracy"] or avg_time_ms >= t["ease_time_ms"]:
        level -= 1

    return MasteryProfile(
        accuracy=max(0.0, min(1.0, accuracy)),
        avg_time_ms=avg_time_ms,
        streak=streak,
        level=max(MIN_LEVEL, min(MAX_LEVEL, level)),
    )

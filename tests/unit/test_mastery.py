"""
Unit tests for level recommendation and profile updates.

Run: pytest tests/unit/test_mastery.py -v
"""

import pytest

from mathquest.core.mastery import (
    LEVEL_THRESHOLDS,
    clamp_level,
    next_profile,
    recommend_next_level,
)
from mathquest.core.models import MasteryProfile


def profile(accuracy=0.7, avg_time_ms=30000, streak=0, level=3):
    return MasteryProfile(accuracy=accuracy, avg_time_ms=avg_time_ms, streak=streak, level=level)


class TestClampLevel:

    @pytest.mark.parametrize(
        "value, expected",
        [(1, 1), (3, 3), (2.4, 2), (2.5, 3), (4.6, 5), (0, 1), (-7, 1), (9, 5)],
    )
    def test_rounds_half_up_and_clamps(self, value, expected):
        assert clamp_level(value) == expected

    def test_nan_is_minimum(self):
        assert clamp_level(float("nan")) == 1

    def test_infinities(self):
        assert clamp_level(float("inf")) == 5
        assert clamp_level(float("-inf")) == 1


class TestRecommendNextLevel:
    """Test recommend_next_level function."""

    # ========================================
    # Individual rules
    # ========================================

    def test_no_signal_keeps_level(self):
        assert recommend_next_level(profile()) == 3

    def test_accurate_and_fast_advances(self):
        assert recommend_next_level(profile(accuracy=0.9, avg_time_ms=15000)) == 4

    def test_advance_thresholds_are_inclusive(self):
        assert recommend_next_level(profile(accuracy=0.85, avg_time_ms=22000, level=2)) == 3

    def test_accurate_but_no_timing_does_not_advance(self):
        assert recommend_next_level(profile(accuracy=0.95, avg_time_ms=0)) == 3

    def test_accurate_but_slowish_does_not_advance(self):
        assert recommend_next_level(profile(accuracy=0.95, avg_time_ms=22001)) == 3

    def test_streak_bonus(self):
        assert recommend_next_level(profile(streak=5)) == 4

    def test_low_accuracy_eases(self):
        assert recommend_next_level(profile(accuracy=0.55)) == 2

    def test_slow_answers_ease(self):
        assert recommend_next_level(profile(avg_time_ms=65000)) == 2

    # ========================================
    # Combinations and bounds
    # ========================================

    def test_both_upward_signals_stack(self):
        assert recommend_next_level(profile(accuracy=0.9, avg_time_ms=15000, streak=5, level=2)) == 4

    def test_both_downward_signals_stack(self):
        assert recommend_next_level(profile(accuracy=0.5, avg_time_ms=70000, level=4)) == 2

    def test_opposite_signals_cancel(self):
        assert recommend_next_level(profile(avg_time_ms=65000, streak=5)) == 3

    def test_clamped_at_top(self):
        assert recommend_next_level(profile(accuracy=0.9, avg_time_ms=15000, streak=5, level=5)) == 5

    def test_clamped_at_bottom(self):
        assert recommend_next_level(profile(accuracy=0.5, avg_time_ms=70000, level=1)) == 1

    def test_fractional_level_rounds_half_up(self):
        assert recommend_next_level(profile(level=2.5)) == 3

    def test_out_of_range_level_is_clamped_first(self):
        assert recommend_next_level(profile(level=12)) == 5
        assert recommend_next_level(profile(level=-3)) == 1

    def test_new_learner(self, beginner_profile):
        assert recommend_next_level(beginner_profile) == 1

    def test_thresholds_table(self):
        assert LEVEL_THRESHOLDS["advance_accuracy"] == 0.85
        assert LEVEL_THRESHOLDS["advance_max_time_ms"] == 22000
        assert LEVEL_THRESHOLDS["streak_bonus"] == 5
        assert LEVEL_THRESHOLDS["ease_accuracy"] == 0.55
        assert LEVEL_THRESHOLDS["ease_time_ms"] == 65000


class TestNextProfile:
    """Test next_profile function."""

    def test_first_correct_attempt(self, beginner_profile):
        updated = next_profile(beginner_profile, True, 5000)
        assert updated.accuracy == pytest.approx(0.2)
        assert updated.avg_time_ms == 5000
        assert updated.streak == 1
        assert updated.level == 1

    def test_correct_moves_accuracy_toward_one(self):
        updated = next_profile(profile(accuracy=0.5), True, 20000)
        assert updated.accuracy == pytest.approx(0.6)

    def test_wrong_moves_accuracy_toward_zero_and_resets_streak(self):
        updated = next_profile(profile(accuracy=0.6, streak=4), False, 30000)
        assert updated.accuracy == pytest.approx(0.48)
        assert updated.streak == 0
        assert updated.level == 2

    def test_time_is_blended_into_rolling_mean(self):
        updated = next_profile(profile(avg_time_ms=20000), True, 10000)
        assert updated.avg_time_ms == 17000

    def test_time_is_bounded(self):
        slow = next_profile(profile(avg_time_ms=0), True, 500000)
        fast = next_profile(profile(avg_time_ms=0), True, 10)
        assert slow.avg_time_ms == 180000
        assert fast.avg_time_ms == 1000

    def test_promotion_needs_streak_of_three(self):
        promoted = next_profile(profile(accuracy=0.85, avg_time_ms=20000, streak=2), True, 10000)
        held = next_profile(profile(accuracy=0.85, avg_time_ms=20000, streak=1), True, 10000)
        assert promoted.level == 4
        assert held.level == 3

    def test_slow_mean_demotes(self):
        updated = next_profile(profile(accuracy=0.8, avg_time_ms=90000), True, 90000)
        assert updated.level == 2

    def test_level_stays_in_range(self):
        top = next_profile(profile(accuracy=0.99, avg_time_ms=5000, streak=9, level=5), True, 5000)
        bottom = next_profile(profile(accuracy=0.1, level=1), False, 5000)
        assert top.level == 5
        assert bottom.level == 1

    def test_input_profile_is_not_modified(self):
        before = profile()
        next_profile(before, True, 1000)
        assert before == profile()


def test_streak_is_monotonic():
    levels = [recommend_next_level(profile(streak=s, level=2)) for s in range(10)]
    assert levels == sorted(levels)


def test_latency_rule_lowers_by_exactly_one():
    assert recommend_next_level(profile(avg_time_ms=60000)) - recommend_next_level(profile(avg_time_ms=65000)) == 1


@pytest.mark.parametrize("accuracy", [0.0, 0.5, 0.9, 1.0])
@pytest.mark.parametrize("avg_time_ms", [0, 10000, 70000])
@pytest.mark.parametrize("streak", [0, 7])
@pytest.mark.parametrize("level", [-2, 1, 3, 5, 8])
def test_always_in_range(accuracy, avg_time_ms, streak, level):
    assert 1 <= recommend_next_level(profile(accuracy, avg_time_ms, streak, level)) <= 5

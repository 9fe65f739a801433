"""Unit tests for practice tracks."""

import random

from mathquest.core.classifier import HIGH_CHECK_DOMAINS
from mathquest.core.models import MasteryDomain, MasteryProfile
from mathquest.engine.builder import template_signature
from mathquest.engine.session import PracticeTrack


def test_defaults_come_from_settings(monkeypatch):
    monkeypatch.setenv("MATHQUEST_RECENT_TEMPLATE_WINDOW", "3")
    monkeypatch.setenv("MATHQUEST_MAX_TEMPLATE_RETRIES", "2")
    monkeypatch.setenv("MATHQUEST_MAX_TRACKED_KEYS", "40")
    monkeypatch.setenv("MATHQUEST_EVICTED_TRACK_KEYS", "10")
    track = PracticeTrack()
    assert track.window == 3
    assert track.max_retries == 2
    assert track.max_keys == 40
    assert track.evict_count == 10


def test_remembers_signatures_per_track(steady_profile):
    track = PracticeTrack(rng=random.Random(1))
    question = track.next_question("fractions", steady_profile)
    assert track.recent("fractions") == [template_signature(question)]
    assert track.recent("  FRACTIONS ") == track.recent("fractions")
    assert track.recent("algebra") == []


def test_window_bounds_memory(steady_profile):
    track = PracticeTrack(rng=random.Random(2), window=2, max_retries=0)
    for _ in range(5):
        track.next_question("algebra", steady_profile)
    assert len(track.recent("algebra")) == 2


def test_avoids_immediate_repeat(steady_profile):
    track = PracticeTrack(rng=random.Random(3), window=1, max_retries=50)
    templates = [track.next_question("geometry", steady_profile).template for _ in range(6)]
    assert all(a != b for a, b in zip(templates, templates[1:]))


def test_gives_up_after_retries(steady_profile):
    # Two templates per band and a window of six: repeats are unavoidable.
    track = PracticeTrack(rng=random.Random(4), window=6, max_retries=3)
    questions = [track.next_question("statistics", steady_profile) for _ in range(6)]
    assert len(questions) == 6
    assert len(track.recent("statistics")) == 6


def test_zero_window_remembers_nothing(steady_profile):
    track = PracticeTrack(rng=random.Random(5), window=0)
    track.next_question("calculus", steady_profile)
    assert track.recent("calculus") == []


def test_knowledge_check_follows_attempts():
    track = PracticeTrack(rng=random.Random(6))
    profile = MasteryProfile(accuracy=0.7, avg_time_ms=30000, level=3)
    assert track.next_question("knowledge_check", profile, attempts=1).domain == MasteryDomain.FRACTIONS
    assert track.next_question("knowledge_check", profile, attempts=12).domain == HIGH_CHECK_DOMAINS[0]


def test_reset(steady_profile):
    track = PracticeTrack(rng=random.Random(7))
    track.next_question("fractions", steady_profile)
    track.next_question("algebra", steady_profile)
    track.reset("fractions")
    assert track.recent("fractions") == []
    assert track.recent("algebra")
    track.reset()
    assert track.recent("algebra") == []


def test_oldest_track_keys_are_evicted(steady_profile):
    track = PracticeTrack(rng=random.Random(8), max_keys=5, evict_count=2)
    for n in range(1, 8):
        track.next_question(f"fractions {n}", steady_profile)
    assert len(track._recent) == 5
    assert track.recent("fractions 1") == []
    assert track.recent("fractions 2") == []
    assert track.recent("fractions 3")
    assert track.recent("fractions 7")


def test_track_key_count_stays_bounded(steady_profile):
    track = PracticeTrack(rng=random.Random(9), window=1, max_retries=0, max_keys=20, evict_count=3)
    for n in range(100):
        track.next_question(f"arithmetic {n}", steady_profile)
        assert len(track._recent) <= 20


def test_newest_key_survives_eviction(steady_profile):
    track = PracticeTrack(rng=random.Random(10), max_keys=1, evict_count=300)
    track.next_question("algebra", steady_profile)
    track.next_question("geometry", steady_profile)
    assert track.recent("algebra") == []
    assert track.recent("geometry")

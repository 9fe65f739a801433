"""
Practice tracks.

A PracticeTrack hands out questions for one learner and remembers the last
few template signatures per track, regenerating a bounded number of times to
avoid showing the same template twice in a row.
"""

from __future__ import annotations

import random
from collections import deque

from loguru import logger

from mathquest.config import get_settings
from mathquest.core.classifier import normalize_track_key, resolve_generation_tag
from mathquest.core.models import AdaptiveQuestion, MasteryProfile
from mathquest.engine.builder import build_adaptive_question, template_signature


class PracticeTrack:
    """
    Recent-template memory for practice sessions.

    The track is owned by its caller; nothing is shared between instances.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        window: int | None = None,
        max_retries: int | None = None,
        max_keys: int | None = None,
        evict_count: int | None = None,
    ):
        settings = get_settings()
        self.rng = rng or random.Random()
        self.window = settings.recent_template_window if window is None else window
        self.max_retries = settings.max_template_retries if max_retries is None else max_retries
        self.max_keys = settings.max_tracked_keys if max_keys is None else max_keys
        self.evict_count = settings.evicted_track_keys if evict_count is None else evict_count
        self._recent: dict[str, deque[str]] = {}

    def recent(self, tag_name: str) -> list[str]:
        """Signatures remembered for a track, oldest first."""
        return list(self._recent.get(normalize_track_key(tag_name), ()))

    def next_question(self, tag_name: str, profile: MasteryProfile, attempts: int = 0) -> AdaptiveQuestion:
        """
        Build the next question for a track.

        Knowledge-check and grade tags are resolved to a concrete domain first.
        If every retry lands on a recent template, the last candidate is used.
        """
        key = normalize_track_key(tag_name)
        recent = self._recent.get(key)
        if recent is None:
            recent = self._recent[key] = deque(maxlen=max(self.window, 1))
            self._evict_oldest_keys()

        question = None
        for attempt in range(self.max_retries + 1):
            generation_tag = resolve_generation_tag(tag_name, attempts, self.rng)
            question = build_adaptive_question(generation_tag, profile, rng=self.rng)
            if self.window == 0 or template_signature(question) not in recent:
                break
            logger.debug(f"Track {key}: repeated {question.template}, retry {attempt + 1}/{self.max_retries}")

        if self.window > 0:
            recent.append(template_signature(question))
        return question

    def _evict_oldest_keys(self) -> None:
        if len(self._recent) <= self.max_keys:
            return
        # dicts keep insertion order; the newest key is never evicted
        stale = list(self._recent)[: min(self.evict_count, len(self._recent) - 1)]
        for key in stale:
            del self._recent[key]
        logger.debug(f"Evicted {len(stale)} oldest track keys, {len(self._recent)} remain")

    def reset(self, tag_name: str | None = None) -> None:
        """Forget recent signatures for one track, or for all of them."""
        if tag_name is None:
            self._recent.clear()
        else:
            self._recent.pop(normalize_track_key(tag_name), None)

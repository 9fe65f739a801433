"""
Configuration settings for the MathQuest adaptive engine.

Uses Pydantic Settings for environment variable management with .env file support.
Every field can be overridden with a ``MATHQUEST_`` prefixed variable, e.g.
``MATHQUEST_LOG_LEVEL=DEBUG``.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from mathquest.core.validator import ANSWER_TOLERANCE


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="MATHQUEST_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Answer grading
    # ========================================
    answer_tolerance: float = Field(
        default=ANSWER_TOLERANCE,
        gt=0,
        description="Absolute tolerance for numeric answer equivalence",
    )

    # ========================================
    # Practice tracks
    # ========================================
    recent_template_window: int = Field(
        default=6,
        ge=0,
        description="How many recent template signatures a practice track remembers",
    )
    max_template_retries: int = Field(
        default=8,
        ge=0,
        description="Regeneration attempts before a repeated template is accepted",
    )
    max_tracked_keys: int = Field(
        default=2000,
        ge=1,
        description="Track keys a practice track remembers before evicting the oldest",
    )
    evicted_track_keys: int = Field(
        default=300,
        ge=1,
        description="How many of the oldest track keys to drop once the limit is exceeded",
    )

    # ========================================
    # Presentation & logging
    # ========================================
    default_language: Literal["en", "zh"] = Field(
        default="en",
        description="Language used by the CLI when --lang is not given",
    )
    log_level: str = Field(
        default="WARNING",
        description="Loguru level for the CLI stderr sink",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

"""
Configuration settings for the recall engine.

Uses Pydantic Settings for environment variable management with .env file support.
All variables are prefixed with RECALL_ (e.g. RECALL_KEYWORD_WEIGHT=0.5).

The default values are calibration constants tuned against real answers;
change them only together with a re-calibration of the feedback bands.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="RECALL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Scoring Strategy Weights (must sum to 1.0)
    # ========================================
    keyword_weight: float = Field(
        default=0.45,
        ge=0.0,
        description="Weight of weighted keyword coverage in the final score",
    )
    overlap_weight: float = Field(
        default=0.25,
        ge=0.0,
        description="Weight of best word-overlap (Jaccard) similarity",
    )
    edit_weight: float = Field(
        default=0.15,
        ge=0.0,
        description="Weight of best edit-distance similarity",
    )
    phrase_weight: float = Field(
        default=0.15,
        ge=0.0,
        description="Weight of the two-word phrase bonus",
    )

    # ========================================
    # Keyword Matching
    # ========================================
    keyword_fuzzy_threshold: float = Field(
        default=0.75,
        ge=0.0,
        le=1.0,
        description="Similarity cutoff when looking for keywords in an answer",
    )

    # ========================================
    # SM-2 Scheduling
    # ========================================
    sm2_minimum_ease: float = Field(
        default=1.3,
        gt=0.0,
        description="Lower bound for the ease factor",
    )
    sm2_first_interval: int = Field(
        default=1,
        ge=1,
        description="Days until the first review after a pass (or any fail)",
    )
    sm2_second_interval: int = Field(
        default=6,
        ge=1,
        description="Days until the second review",
    )
    sm2_passing_quality: int = Field(
        default=3,
        ge=0,
        le=5,
        description="Minimum SM-2 quality (0-5) that counts as a pass",
    )

    # ========================================
    # Review Bookkeeping
    # ========================================
    correct_score_threshold: int = Field(
        default=70,
        ge=0,
        le=100,
        description="Score at or above which a review counts as correct",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Logging verbosity level for the CLI",
    )

    @model_validator(mode="after")
    def _check_weights_sum(self) -> "Settings":
        total = self.keyword_weight + self.overlap_weight + self.edit_weight + self.phrase_weight
        if abs(total - 1.0) > 0.001:
            raise ValueError(f"Scoring weights must sum to 1.0, got {total}")
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

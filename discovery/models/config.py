"""
Engine configuration: signal weights, recency decay, admission and diversity.

RecommendationConfig defaults are defined here. Callers may pass a dict
(e.g. loaded from a JSON config file); from_dict() merges it with these defaults
and accepts the camelCase keys used by the web platform's config.
"""

import json
from pathlib import Path
from typing import Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ScoringWeights(BaseModel):
    """Per-signal weights. Each must be non-negative."""

    model_config = ConfigDict(frozen=True)

    recency: float = Field(0.2, ge=0)
    popularity: float = Field(0.15, ge=0)
    engagement: float = Field(0.15, ge=0)
    # Carried for tuning parity; similarity bonuses use fixed constants.
    relevance: float = Field(0.3, ge=0)
    personalization: float = Field(0.2, ge=0)


class RecommendationConfig(BaseModel):
    """Configuration for the recommendation engine."""

    model_config = ConfigDict(frozen=True)

    # -------------------------------------------------------------------------
    # Composite score
    # score = bonuses + w_recency * recency + w_popularity * popularity + w_engagement * engagement
    # -------------------------------------------------------------------------

    weights: ScoringWeights = Field(default_factory=ScoringWeights)

    # -------------------------------------------------------------------------
    # Recency Score
    # recency = 0.5 ** (age_days / half_life_days). Published "now" scores 1.0.
    # -------------------------------------------------------------------------

    half_life_days: float = 7.0

    # -------------------------------------------------------------------------
    # Admission and Diversity
    # -------------------------------------------------------------------------

    # Relevance floor for composite-scored strategies (similar, personalized).
    # Not a probability; scores are only compared within one batch.
    min_score: float = 0.1

    # 0 disables re-ranking. penalty = (author_count + category_count) * factor * 0.2
    diversity_factor: float = Field(0.3, ge=0, le=1)

    # -------------------------------------------------------------------------
    # Engagement Score calibration
    # engagement = min(1, (reactions + comment_weight * comments) / views * engagement_scale)
    # -------------------------------------------------------------------------

    engagement_scale: float = Field(10.0, gt=0)
    comment_weight: float = Field(2.0, ge=0)

    # Tag Jaccard above this marks the item as same_tags.
    tag_match_threshold: float = Field(0.3, ge=0, le=1)

    # -------------------------------------------------------------------------
    # Candidate batches
    # -------------------------------------------------------------------------

    trending_window_days: float = 7.0
    similar_pool_size: int = Field(100, ge=1)
    personalized_pool_size: int = Field(200, ge=1)

    @model_validator(mode="after")
    def positive_windows(self):
        if self.half_life_days <= 0:
            raise ValueError(f"half_life_days must be > 0, got {self.half_life_days}")
        if self.trending_window_days <= 0:
            raise ValueError(
                f"trending_window_days must be > 0, got {self.trending_window_days}"
            )
        return self

    @classmethod
    def from_dict(cls, config_dict: Dict) -> "RecommendationConfig":
        """Create config from dictionary (e.g., loaded from JSON)."""
        flat = dict(config_dict)
        aliases = {
            "decayHalfLife": "half_life_days",
            "minScore": "min_score",
            "diversityFactor": "diversity_factor",
            "engagementScale": "engagement_scale",
            "commentWeight": "comment_weight",
            "tagMatchThreshold": "tag_match_threshold",
            "trendingWindowDays": "trending_window_days",
        }
        for camel, snake in aliases.items():
            if camel in flat:
                flat[snake] = flat.pop(camel)
        if "weights" in flat:
            flat["weights"] = ScoringWeights.model_validate(flat["weights"])
        allowed = set(cls.model_fields)
        filtered = {k: v for k, v in flat.items() if k in allowed}
        return cls.model_validate(filtered)


DEFAULT_CONFIG = RecommendationConfig()


def resolve_config(config: Optional["RecommendationConfig"]) -> "RecommendationConfig":
    """Return config or DEFAULT_CONFIG when none is provided."""
    return config if config is not None else DEFAULT_CONFIG


def load_config(path: Union[Path, str]) -> RecommendationConfig:
    """Load a RecommendationConfig from a JSON file."""
    with open(path) as f:
        return RecommendationConfig.from_dict(json.load(f))

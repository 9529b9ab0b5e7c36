"""Data models for the recommendation engine."""

from .config import (
    DEFAULT_CONFIG,
    RecommendationConfig,
    ScoringWeights,
    load_config,
    resolve_config,
)
from .content import AuthorRef, CandidateItem, CategoryRef, ensure_items
from .context import InterestProfile, RecommendationContext
from .scoring import RecommendationReason, ScoredItem

__all__ = [
    "DEFAULT_CONFIG",
    "AuthorRef",
    "CandidateItem",
    "CategoryRef",
    "InterestProfile",
    "RecommendationConfig",
    "RecommendationContext",
    "RecommendationReason",
    "ScoredItem",
    "ScoringWeights",
    "ensure_items",
    "load_config",
    "resolve_config",
]

"""
Discovery: content recommendation engine.

Single entry point for the package:
- models/: RecommendationConfig, CandidateItem, RecommendationContext, InterestProfile, ScoredItem
- utils/: signal functions (recency, popularity, engagement, tag similarity)
- stages/: ranking (scorer, diversity), strategies, mixed composer
- services/: content repository and interest store contracts
- engine: RecommendationEngine facade
"""

from .engine import RecommendationEngine
from .models import (
    DEFAULT_CONFIG,
    AuthorRef,
    CandidateItem,
    CategoryRef,
    InterestProfile,
    RecommendationConfig,
    RecommendationContext,
    RecommendationReason,
    ScoredItem,
    ScoringWeights,
    load_config,
    resolve_config,
)
from .services import (
    CandidateFilter,
    ContentRepository,
    InMemoryContentRepository,
    InMemoryInterestStore,
    InterestStore,
    JsonContentRepository,
    JsonInterestStore,
)
from .stages import MixedComposer, MixedSource, default_mixed_sources, diversify, merge_by_priority
from .stages.ranking import score_personalized, score_similar
from .stages.strategies import (
    Strategy,
    rank_category,
    rank_editorial,
    rank_personalized,
    rank_popular,
    rank_similar_content,
    rank_trending,
)
from .utils import engagement_score, popularity_score, recency_score, tag_similarity

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONFIG",
    "AuthorRef",
    "CandidateFilter",
    "CandidateItem",
    "CategoryRef",
    "ContentRepository",
    "InMemoryContentRepository",
    "InMemoryInterestStore",
    "InterestProfile",
    "InterestStore",
    "JsonContentRepository",
    "JsonInterestStore",
    "MixedComposer",
    "MixedSource",
    "RecommendationConfig",
    "RecommendationContext",
    "RecommendationEngine",
    "RecommendationReason",
    "ScoredItem",
    "ScoringWeights",
    "Strategy",
    "default_mixed_sources",
    "diversify",
    "engagement_score",
    "load_config",
    "merge_by_priority",
    "popularity_score",
    "rank_category",
    "rank_editorial",
    "rank_personalized",
    "rank_popular",
    "rank_similar_content",
    "rank_trending",
    "recency_score",
    "resolve_config",
    "score_personalized",
    "score_similar",
    "tag_similarity",
]

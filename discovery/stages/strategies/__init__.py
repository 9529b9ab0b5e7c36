"""Retrieval strategies: one policy per module, each with a pure rank function."""

from .base import CandidatePool, Strategy, utc_now
from .category import CategoryStrategy, rank_category
from .editorial import EditorialStrategy, rank_editorial
from .personalized import PersonalizedStrategy, rank_personalized
from .popular import PopularStrategy, rank_popular
from .similar import SimilarContentStrategy, rank_similar_content
from .trending import TrendingStrategy, rank_trending, trending_velocity

__all__ = [
    "CandidatePool",
    "CategoryStrategy",
    "EditorialStrategy",
    "PersonalizedStrategy",
    "PopularStrategy",
    "SimilarContentStrategy",
    "Strategy",
    "TrendingStrategy",
    "rank_category",
    "rank_editorial",
    "rank_personalized",
    "rank_popular",
    "rank_similar_content",
    "rank_trending",
    "trending_velocity",
    "utc_now",
]

"""Signal functions shared by the scorer and the strategies."""

from .scores import (
    age_days,
    age_hours,
    engagement_score,
    max_view_count,
    popularity_score,
    recency_score,
)
from .similarity import tag_overlap_fraction, tag_similarity

__all__ = [
    "age_days",
    "age_hours",
    "engagement_score",
    "max_view_count",
    "popularity_score",
    "recency_score",
    "tag_overlap_fraction",
    "tag_similarity",
]

"""
Scoring model: ScoredItem and the reason vocabulary.

Contains:
- RecommendationReason: why an item ranked where it did
- ScoredItem: a candidate with its composite score, reason, and signal components
"""

from enum import Enum
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field

from .content import CandidateItem


class RecommendationReason(str, Enum):
    SIMILAR_CONTENT = "similar_content"
    SAME_AUTHOR = "same_author"
    SAME_CATEGORY = "same_category"
    SAME_TAGS = "same_tags"
    TRENDING = "trending"
    POPULAR = "popular"
    FOLLOWED_AUTHOR = "followed_author"
    FOLLOWED_CATEGORY = "followed_category"
    FOLLOWED_TAG = "followed_tag"
    READING_HISTORY = "reading_history"
    COLLABORATIVE = "collaborative"
    EDITORIAL_PICK = "editorial_pick"


class ScoredItem(BaseModel):
    """
    A candidate with its score and reason.

    score is an unclamped sum; compare it only within one batch.
    components holds the weighted contribution of each signal that went into score.
    """

    model_config = ConfigDict(frozen=True)

    item: CandidateItem
    score: float
    reason: RecommendationReason
    components: Dict[str, float] = Field(default_factory=dict)

    @property
    def id(self) -> str:
        return self.item.id

    def to_summary(self) -> Dict:
        """Compact dict for logs and CLI output."""
        return {
            "id": self.item.id,
            "title": self.item.title,
            "slug": self.item.slug,
            "score": round(self.score, 6),
            "reason": self.reason.value,
        }

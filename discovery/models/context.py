"""
Request context and viewer interests.

RecommendationContext is the input to the mixed composer and the strategy
selectors. InterestProfile is supplied by the interest store when a viewer is
known; without a viewer it is never built and personalization contributes nothing.
"""

from typing import FrozenSet, Optional

from pydantic import BaseModel, ConfigDict, Field


class RecommendationContext(BaseModel):
    """What the caller knows about the request."""

    model_config = ConfigDict(frozen=True)

    # Seed post for similar-content recommendations.
    post_id: Optional[str] = None
    # Viewer for personalized recommendations.
    user_id: Optional[str] = None
    category_id: Optional[str] = None
    # Ids the caller has already shown; never returned by the mixed feed.
    exclude_ids: FrozenSet[str] = frozenset()
    limit: int = Field(10, ge=1)


class InterestProfile(BaseModel):
    """A viewer's reading history and follows. Every set may be empty."""

    model_config = ConfigDict(frozen=True)

    read_post_ids: FrozenSet[str] = frozenset()
    followed_author_ids: FrozenSet[str] = frozenset()
    followed_category_ids: FrozenSet[str] = frozenset()
    followed_tags: FrozenSet[str] = frozenset()

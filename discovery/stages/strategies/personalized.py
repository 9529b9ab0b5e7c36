"""
Personalized: unread posts boosted by the viewer's followed authors,
categories, and tags, then diversified by author and category.
"""

import logging
from datetime import datetime
from typing import List

from ...models.config import RecommendationConfig
from ...models.content import CandidateItem
from ...models.context import InterestProfile, RecommendationContext
from ...models.scoring import RecommendationReason, ScoredItem
from ...services.content_repository import CandidateFilter
from ...utils.scores import max_view_count
from ..ranking.blended_scoring import score_personalized
from ..ranking.core import admit, rank_and_cap
from ..ranking.diversity import diversify
from .base import CandidatePool, Strategy

logger = logging.getLogger(__name__)


def rank_personalized(
    candidates: List[CandidateItem],
    profile: InterestProfile,
    config: RecommendationConfig,
    now: datetime,
    limit: int,
) -> List[ScoredItem]:
    """
    Drop posts the viewer already read, score the rest, apply min_score,
    diversify, and return the top `limit`.
    """
    unread = [c for c in candidates if c.id not in profile.read_post_ids]
    batch_max = max_view_count(c.view_count for c in unread)
    scored = [score_personalized(c, profile, config, batch_max, now) for c in unread]
    diversified = diversify(admit(scored, config.min_score), config.diversity_factor)
    return rank_and_cap(diversified, limit, config.min_score, label="personalized")


class PersonalizedStrategy(Strategy):
    name = "personalized"
    reason = RecommendationReason.POPULAR

    def applies(self, context: RecommendationContext) -> bool:
        return bool(context.user_id) and self.interest_store is not None

    def select(self, context, config, now, limit) -> CandidatePool:
        profile = self.interest_store.get_interest_profile(context.user_id)
        if profile is None:
            logger.info("[personalized] no interest profile user_id=%s", context.user_id)
            return CandidatePool()
        candidates = self.repository.fetch_candidates(
            CandidateFilter(order_by="published_at", limit=config.personalized_pool_size)
        )
        return CandidatePool(candidates=candidates, profile=profile)

    def rank(self, pool, context, config, now, limit) -> List[ScoredItem]:
        return rank_personalized(pool.candidates, pool.profile, config, now, limit)

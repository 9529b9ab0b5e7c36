"""
Similar content: posts related to a seed post by category, tags, and author.
"""

import logging
from datetime import datetime
from typing import List

from ...models.config import RecommendationConfig
from ...models.content import CandidateItem
from ...models.context import RecommendationContext
from ...models.scoring import RecommendationReason, ScoredItem
from ...services.content_repository import CandidateFilter
from ...utils.scores import max_view_count
from ..ranking.blended_scoring import score_similar
from ..ranking.core import rank_and_cap
from .base import CandidatePool, Strategy

logger = logging.getLogger(__name__)


def rank_similar_content(
    seed: CandidateItem,
    candidates: List[CandidateItem],
    config: RecommendationConfig,
    now: datetime,
    limit: int,
) -> List[ScoredItem]:
    """Score every candidate against the seed, apply min_score, return the top `limit`."""
    pool = [c for c in candidates if c.id != seed.id]
    batch_max = max_view_count(c.view_count for c in pool)
    scored = [score_similar(c, seed, config, batch_max, now) for c in pool]
    return rank_and_cap(scored, limit, config.min_score, label="similar")


class SimilarContentStrategy(Strategy):
    name = "similar"
    reason = RecommendationReason.SIMILAR_CONTENT

    def applies(self, context: RecommendationContext) -> bool:
        return bool(context.post_id)

    def select(self, context, config, now, limit) -> CandidatePool:
        seed = self.repository.get_item(context.post_id)
        if seed is None:
            logger.warning("[similar] seed post not found post_id=%s", context.post_id)
            return CandidatePool()
        candidates = self.repository.fetch_candidates(
            CandidateFilter(
                exclude_ids=frozenset({seed.id}),
                order_by="published_at",
                limit=config.similar_pool_size,
            )
        )
        return CandidatePool(candidates=candidates, seed=seed)

    def rank(self, pool, context, config, now, limit) -> List[ScoredItem]:
        return rank_similar_content(pool.seed, pool.candidates, config, now, limit)

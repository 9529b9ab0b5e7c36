"""
Category: posts in one category, half recency and half popularity.
"""

from datetime import datetime
from typing import AbstractSet, List

from ...models.config import RecommendationConfig
from ...models.content import CandidateItem
from ...models.context import RecommendationContext
from ...models.scoring import RecommendationReason, ScoredItem
from ...services.content_repository import CandidateFilter
from ...utils.scores import max_view_count, popularity_score, recency_score
from ..ranking.core import rank_and_cap
from .base import CandidatePool, Strategy

RECENCY_SHARE = 0.5
POPULARITY_SHARE = 0.5


def rank_category(
    candidates: List[CandidateItem],
    category_id: str,
    config: RecommendationConfig,
    now: datetime,
    limit: int,
    exclude_ids: AbstractSet[str] = frozenset(),
) -> List[ScoredItem]:
    pool = [
        c for c in candidates
        if c.category_id == category_id and c.id not in exclude_ids
    ]
    batch_max = max_view_count(c.view_count for c in pool)
    scored = []
    for item in pool:
        recency = recency_score(item.published_at, config.half_life_days, now) * RECENCY_SHARE
        popularity = popularity_score(item.view_count, batch_max) * POPULARITY_SHARE
        scored.append(
            ScoredItem(
                item=item,
                score=recency + popularity,
                reason=RecommendationReason.SAME_CATEGORY,
                components={"recency": recency, "popularity": popularity},
            )
        )
    return rank_and_cap(scored, limit, config.min_score, label="category")


class CategoryStrategy(Strategy):
    name = "category"
    reason = RecommendationReason.SAME_CATEGORY

    def applies(self, context: RecommendationContext) -> bool:
        return bool(context.category_id)

    def select(self, context, config, now, limit) -> CandidatePool:
        candidates = self.repository.fetch_candidates(
            CandidateFilter(
                category_id=context.category_id,
                exclude_ids=context.exclude_ids,
                order_by="published_at",
                limit=limit * 2,
            )
        )
        return CandidatePool(candidates=candidates)

    def rank(self, pool, context, config, now, limit) -> List[ScoredItem]:
        return rank_category(
            pool.candidates, context.category_id, config, now, limit, context.exclude_ids
        )

"""
Popular: all-time most viewed posts, scored by log-normalized views.
"""

from typing import List, Optional

from ...models.content import CandidateItem
from ...models.scoring import RecommendationReason, ScoredItem
from ...services.content_repository import CandidateFilter
from ...utils.scores import max_view_count, popularity_score
from ..ranking.core import rank_and_cap
from .base import CandidatePool, Strategy


def rank_popular(
    candidates: List[CandidateItem],
    limit: int,
    min_score: Optional[float] = None,
) -> List[ScoredItem]:
    batch_max = max_view_count(c.view_count for c in candidates)
    scored = []
    for item in candidates:
        popularity = popularity_score(item.view_count, batch_max)
        scored.append(
            ScoredItem(
                item=item,
                score=popularity,
                reason=RecommendationReason.POPULAR,
                components={"popularity": popularity},
            )
        )
    return rank_and_cap(scored, limit, min_score, label="popular")


class PopularStrategy(Strategy):
    name = "popular"
    reason = RecommendationReason.POPULAR

    def select(self, context, config, now, limit) -> CandidatePool:
        candidates = self.repository.fetch_candidates(
            CandidateFilter(order_by="view_count", limit=limit)
        )
        return CandidatePool(candidates=candidates)

    def rank(self, pool, context, config, now, limit) -> List[ScoredItem]:
        return rank_popular(pool.candidates, limit, config.min_score)

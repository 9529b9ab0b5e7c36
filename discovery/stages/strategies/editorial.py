"""
Editorial picks: featured posts in curator order (newest feature first).

Scores only encode rank position so merged feeds keep the curated order.
Positions past the admission floor are dropped, so with the default floor at
most ten picks are returned.
"""

from typing import List, Optional

from ...models.content import CandidateItem
from ...models.scoring import RecommendationReason, ScoredItem
from ...services.content_repository import CandidateFilter
from ..ranking.core import rank_and_cap
from .base import CandidatePool, Strategy

POSITION_STEP = 0.1


def position_score(index: int) -> float:
    """1.0 for the first pick, 0.1 less per position. Rounded to exact tenths."""
    return round(1.0 - index * POSITION_STEP, 6)


def rank_editorial(
    candidates: List[CandidateItem],
    limit: int,
    min_score: Optional[float] = None,
) -> List[ScoredItem]:
    """Featured posts, newest first, scored by position."""
    featured = sorted(
        (c for c in candidates if c.is_featured),
        key=lambda c: c.published_at,
        reverse=True,
    )
    scored = [
        ScoredItem(
            item=item,
            score=position_score(index),
            reason=RecommendationReason.EDITORIAL_PICK,
            components={"position": float(index)},
        )
        for index, item in enumerate(featured)
    ]
    return rank_and_cap(scored, limit, min_score, label="editorial")


class EditorialStrategy(Strategy):
    name = "editorial"
    reason = RecommendationReason.EDITORIAL_PICK

    def select(self, context, config, now, limit) -> CandidatePool:
        candidates = self.repository.fetch_candidates(
            CandidateFilter(featured_only=True, order_by="published_at", limit=limit)
        )
        return CandidatePool(candidates=candidates)

    def rank(self, pool, context, config, now, limit) -> List[ScoredItem]:
        return rank_editorial(pool.candidates, limit, config.min_score)

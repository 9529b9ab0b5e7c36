"""
Trending: view velocity (views per hour since publication) within a recent window.
"""

from datetime import datetime, timedelta
from typing import List, Optional

from ...models.content import CandidateItem
from ...models.scoring import RecommendationReason, ScoredItem
from ...services.content_repository import CandidateFilter
from ...utils.scores import age_hours
from ..ranking.core import rank_and_cap
from .base import CandidatePool, Strategy

DEFAULT_WINDOW_DAYS = 7.0


def trending_velocity(item: CandidateItem, now: datetime) -> float:
    """Views per hour; posts younger than an hour count as one hour old."""
    return item.view_count / max(1.0, age_hours(item.published_at, now))


def rank_trending(
    candidates: List[CandidateItem],
    now: datetime,
    limit: int,
    window_days: float = DEFAULT_WINDOW_DAYS,
    min_score: Optional[float] = None,
) -> List[ScoredItem]:
    """Rank posts published within `window_days` by view velocity."""
    cutoff = now - timedelta(days=window_days)
    scored = []
    for item in candidates:
        if item.published_at < cutoff:
            continue
        velocity = trending_velocity(item, now)
        scored.append(
            ScoredItem(
                item=item,
                score=velocity,
                reason=RecommendationReason.TRENDING,
                components={"velocity": velocity},
            )
        )
    return rank_and_cap(scored, limit, min_score, label="trending")


class TrendingStrategy(Strategy):
    name = "trending"
    reason = RecommendationReason.TRENDING

    def __init__(self, repository, interest_store=None, window_days: Optional[float] = None):
        super().__init__(repository, interest_store)
        self.window_days = window_days

    def _window(self, config) -> float:
        return self.window_days if self.window_days is not None else config.trending_window_days

    def select(self, context, config, now, limit) -> CandidatePool:
        # Fetch twice the limit by raw views; velocity reorders within that batch.
        candidates = self.repository.fetch_candidates(
            CandidateFilter(
                published_since=now - timedelta(days=self._window(config)),
                order_by="view_count",
                limit=limit * 2,
            )
        )
        return CandidatePool(candidates=candidates)

    def rank(self, pool, context, config, now, limit) -> List[ScoredItem]:
        return rank_trending(
            pool.candidates, now, limit, self._window(config), config.min_score
        )

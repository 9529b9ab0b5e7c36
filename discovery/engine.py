"""
Recommendation engine facade.

Binds the collaborators and config once and exposes one method per strategy
plus the mixed feed. Each call captures a single `now` (from the injected
clock) and threads it through every scoring function it triggers.

Collaborator failures in a single-strategy call are logged and turned into an
empty list: a recommendation slot degrades to fewer items, never to an error.
"""

import logging
from datetime import datetime
from typing import Callable, Iterable, List, Optional, Sequence

from .models.config import RecommendationConfig, resolve_config
from .models.context import RecommendationContext
from .models.scoring import ScoredItem
from .services.content_repository import ContentRepository
from .services.interest_store import InterestStore
from .stages.composer import MixedComposer, MixedSource, default_mixed_sources
from .stages.strategies import (
    CategoryStrategy,
    EditorialStrategy,
    PersonalizedStrategy,
    PopularStrategy,
    SimilarContentStrategy,
    Strategy,
    TrendingStrategy,
    utc_now,
)

logger = logging.getLogger(__name__)


class RecommendationEngine:
    def __init__(
        self,
        repository: ContentRepository,
        interest_store: Optional[InterestStore] = None,
        config: Optional[RecommendationConfig] = None,
        clock: Optional[Callable[[], datetime]] = None,
        mixed_sources: Optional[Sequence[MixedSource]] = None,
    ):
        self.repository = repository
        self.interest_store = interest_store
        self.config = resolve_config(config)
        self.clock = clock or utc_now
        self.composer = MixedComposer(
            mixed_sources
            if mixed_sources is not None
            else default_mixed_sources(repository, interest_store)
        )

    def _run(self, strategy: Strategy, context: RecommendationContext) -> List[ScoredItem]:
        try:
            return strategy.recommend(context, self.config, self.clock())
        except Exception as e:
            logger.error(
                "[engine] strategy=%s failed: %s: %s", strategy.name, type(e).__name__, e
            )
            return []

    def get_similar_content(self, post_id: str, limit: int = 5) -> List[ScoredItem]:
        context = RecommendationContext(post_id=post_id, limit=limit)
        return self._run(SimilarContentStrategy(self.repository), context)

    def get_personalized_recommendations(self, user_id: str, limit: int = 10) -> List[ScoredItem]:
        context = RecommendationContext(user_id=user_id, limit=limit)
        return self._run(PersonalizedStrategy(self.repository, self.interest_store), context)

    def get_trending_content(
        self, limit: int = 10, window_days: Optional[float] = None
    ) -> List[ScoredItem]:
        context = RecommendationContext(limit=limit)
        return self._run(TrendingStrategy(self.repository, window_days=window_days), context)

    def get_popular_content(self, limit: int = 10) -> List[ScoredItem]:
        return self._run(PopularStrategy(self.repository), RecommendationContext(limit=limit))

    def get_editorial_picks(self, limit: int = 5) -> List[ScoredItem]:
        return self._run(EditorialStrategy(self.repository), RecommendationContext(limit=limit))

    def get_category_recommendations(
        self,
        category_id: str,
        limit: int = 10,
        exclude_ids: Iterable[str] = (),
    ) -> List[ScoredItem]:
        context = RecommendationContext(
            category_id=category_id, limit=limit, exclude_ids=frozenset(exclude_ids)
        )
        return self._run(CategoryStrategy(self.repository), context)

    def get_mixed_recommendations(self, context: RecommendationContext) -> List[ScoredItem]:
        """Mixed feed. Safe to call from inside a running event loop."""
        try:
            return self.composer.compose(context, self.config, self.clock())
        except Exception as e:
            logger.error("[engine] mixed feed failed: %s: %s", type(e).__name__, e)
            return []

    async def get_mixed_recommendations_async(
        self, context: RecommendationContext
    ) -> List[ScoredItem]:
        try:
            return await self.composer.compose_async(context, self.config, self.clock())
        except Exception as e:
            logger.error("[engine] mixed feed failed: %s: %s", type(e).__name__, e)
            return []

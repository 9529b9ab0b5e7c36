"""
Mixed feed: fan out to several strategies concurrently, then merge.

Sources are listed in merge-priority order. All applicable sources run at
once (asyncio.gather over worker threads); once every result is in, the
lists are concatenated in priority order, deduplicated by post id (first
occurrence wins, caller exclusions are never returned), sorted by score, and
truncated. A source that raises contributes nothing.
"""

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import datetime
from typing import AbstractSet, List, Optional, Sequence

from ..models.config import RecommendationConfig, resolve_config
from ..models.context import RecommendationContext
from ..models.scoring import ScoredItem
from ..services.content_repository import ContentRepository
from ..services.interest_store import InterestStore
from .ranking.diversity import sort_by_score
from .strategies import (
    EditorialStrategy,
    PersonalizedStrategy,
    SimilarContentStrategy,
    Strategy,
    TrendingStrategy,
    utc_now,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MixedSource:
    """One strategy in the mixed feed and how many items it contributes."""

    strategy: Strategy
    limit: int


def default_mixed_sources(
    repository: ContentRepository,
    interest_store: Optional[InterestStore] = None,
) -> List[MixedSource]:
    """editorial (3), personalized (5), similar (5), trending (5), in merge-priority order."""
    return [
        MixedSource(EditorialStrategy(repository), 3),
        MixedSource(PersonalizedStrategy(repository, interest_store), 5),
        MixedSource(SimilarContentStrategy(repository), 5),
        MixedSource(TrendingStrategy(repository), 5),
    ]


def merge_by_priority(
    results: Sequence[List[ScoredItem]],
    exclude_ids: AbstractSet[str],
    limit: int,
) -> List[ScoredItem]:
    """
    Concatenate per-source results in the given order, keep the first occurrence
    of each id not in exclude_ids, sort by score (desc, stable), take `limit`.
    """
    seen = set(exclude_ids)
    merged: List[ScoredItem] = []
    for source_items in results:
        for scored in source_items:
            if scored.id in seen:
                continue
            seen.add(scored.id)
            merged.append(scored)
    return sort_by_score(merged)[:limit]


class MixedComposer:
    """Runs a configurable list of sources and merges their results."""

    def __init__(self, sources: Sequence[MixedSource]):
        self.sources = list(sources)

    async def _run_source(
        self,
        source: MixedSource,
        context: RecommendationContext,
        config: RecommendationConfig,
        now: datetime,
    ) -> List[ScoredItem]:
        if not source.strategy.applies(context):
            return []
        return await asyncio.to_thread(
            source.strategy.recommend, context, config, now, source.limit
        )

    async def compose_async(
        self,
        context: RecommendationContext,
        config: Optional[RecommendationConfig] = None,
        now: Optional[datetime] = None,
    ) -> List[ScoredItem]:
        config = resolve_config(config)
        now = now if now is not None else utc_now()

        outcomes = await asyncio.gather(
            *(self._run_source(s, context, config, now) for s in self.sources),
            return_exceptions=True,
        )

        results: List[List[ScoredItem]] = []
        for source, outcome in zip(self.sources, outcomes):
            if isinstance(outcome, BaseException):
                logger.error(
                    "[mixed] source failed strategy=%s error=%s: %s",
                    source.strategy.name, type(outcome).__name__, outcome,
                )
                results.append([])
                continue
            logger.debug("[mixed] strategy=%s returned=%d", source.strategy.name, len(outcome))
            results.append(outcome)

        return merge_by_priority(results, context.exclude_ids, context.limit)

    def compose(
        self,
        context: RecommendationContext,
        config: Optional[RecommendationConfig] = None,
        now: Optional[datetime] = None,
    ) -> List[ScoredItem]:
        """
        Blocking wrapper around compose_async.

        Called from inside a running event loop, the feed is composed on a
        separate thread with its own loop; async callers should prefer
        compose_async, which does not block the loop.
        """
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return asyncio.run(self.compose_async(context, config, now))
        with ThreadPoolExecutor(max_workers=1) as pool:
            return pool.submit(
                asyncio.run, self.compose_async(context, config, now)
            ).result()

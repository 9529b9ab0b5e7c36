"""
Strategy interface: one retrieval policy per subclass.

A strategy selects a candidate pool through the collaborators (select) and
ranks it with a pure function (rank). recommend() runs both with a single
captured `now`, so strategies can be tested in isolation and the mixed
composer can iterate over any list of them.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import ClassVar, List, Optional

from ...models.config import RecommendationConfig, resolve_config
from ...models.content import CandidateItem
from ...models.context import InterestProfile, RecommendationContext
from ...models.scoring import RecommendationReason, ScoredItem
from ...services.content_repository import ContentRepository
from ...services.interest_store import InterestStore

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class CandidatePool:
    """Materialized inputs for one strategy run."""

    candidates: List[CandidateItem] = field(default_factory=list)
    seed: Optional[CandidateItem] = None
    profile: Optional[InterestProfile] = None


class Strategy(ABC):
    """Base class for retrieval strategies."""

    name: ClassVar[str]
    reason: ClassVar[RecommendationReason]

    def __init__(
        self,
        repository: ContentRepository,
        interest_store: Optional[InterestStore] = None,
    ):
        self.repository = repository
        self.interest_store = interest_store

    def applies(self, context: RecommendationContext) -> bool:
        """False when the context lacks what this strategy needs (seed, viewer, ...)."""
        return True

    @abstractmethod
    def select(
        self,
        context: RecommendationContext,
        config: RecommendationConfig,
        now: datetime,
        limit: int,
    ) -> CandidatePool:
        """Fetch the candidate pool from the collaborators."""

    @abstractmethod
    def rank(
        self,
        pool: CandidatePool,
        context: RecommendationContext,
        config: RecommendationConfig,
        now: datetime,
        limit: int,
    ) -> List[ScoredItem]:
        """Score and order the pool; pure given its arguments."""

    def recommend(
        self,
        context: RecommendationContext,
        config: Optional[RecommendationConfig] = None,
        now: Optional[datetime] = None,
        limit: Optional[int] = None,
    ) -> List[ScoredItem]:
        """Select then rank. Returns [] when the strategy does not apply or the pool is empty."""
        config = resolve_config(config)
        now = now if now is not None else utc_now()
        limit = limit if limit is not None else context.limit
        if not self.applies(context):
            logger.debug("[%s] skipped: context does not apply", self.name)
            return []
        pool = self.select(context, config, now, limit)
        if not pool.candidates:
            logger.debug("[%s] empty candidate pool", self.name)
            return []
        return self.rank(pool, context, config, now, limit)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"

"""
Shared ranking steps: admission floor, score ordering, and truncation.

Strategies score their own pools, then hand the scored list here so every
strategy orders and truncates the same way (stable sort, score desc).
"""

import logging
from typing import List, Optional

from ...models.scoring import ScoredItem
from .diversity import sort_by_score

logger = logging.getLogger(__name__)


def admit(scored_list: List[ScoredItem], min_score: float) -> List[ScoredItem]:
    """Keep items whose score reaches the admission floor."""
    return [s for s in scored_list if s.score >= min_score]


def rank_and_cap(
    scored_list: List[ScoredItem],
    limit: int,
    min_score: Optional[float] = None,
    label: str = "rank",
) -> List[ScoredItem]:
    """
    Apply the optional admission floor, sort by score (desc), and take `limit`.
    """
    admitted = scored_list if min_score is None else admit(scored_list, min_score)
    ranked = sort_by_score(admitted)[:limit]
    logger.debug(
        "[%s] scored=%d admitted=%d returned=%d",
        label, len(scored_list), len(admitted), len(ranked),
    )
    return ranked

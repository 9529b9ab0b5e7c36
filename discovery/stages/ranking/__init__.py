"""
Candidate scoring and re-ranking.

Public API: score_similar, score_personalized, diversify, rank_and_cap.
- blended_scoring: composite score per candidate.
- reasons: explicit reason precedence.
- diversity: author/category re-ranking.
- core: admission floor, ordering, truncation.
"""

from .blended_scoring import baseline_components, score_personalized, score_similar
from .core import admit, rank_and_cap
from .diversity import diversify, sort_by_score
from .reasons import (
    PERSONALIZED_REASON_RULES,
    SIMILAR_REASON_RULES,
    MatchSignals,
    resolve_reason,
)

__all__ = [
    "MatchSignals",
    "PERSONALIZED_REASON_RULES",
    "SIMILAR_REASON_RULES",
    "admit",
    "baseline_components",
    "diversify",
    "rank_and_cap",
    "resolve_reason",
    "score_personalized",
    "score_similar",
    "sort_by_score",
]

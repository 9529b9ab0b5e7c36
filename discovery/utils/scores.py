"""
Score helpers: recency, popularity, engagement, and time utilities.

Every function is pure. Callers capture one `now` per request and pass it
through so all items in a response are aged against the same instant.
"""

import math
from datetime import datetime
from typing import Iterable

SECONDS_PER_HOUR = 3600.0
SECONDS_PER_DAY = 86400.0


def age_days(published_at: datetime, now: datetime) -> float:
    """Fractional days since publication; future timestamps count as age 0."""
    return max(0.0, (now - published_at).total_seconds() / SECONDS_PER_DAY)


def age_hours(published_at: datetime, now: datetime) -> float:
    """Fractional hours since publication; future timestamps count as age 0."""
    return max(0.0, (now - published_at).total_seconds() / SECONDS_PER_HOUR)


def recency_score(published_at: datetime, half_life_days: float, now: datetime) -> float:
    """
    Recency score with exponential decay.
    1.0 at publication, 0.5 once the age equals half_life_days.
    """
    return 0.5 ** (age_days(published_at, now) / half_life_days)


def popularity_score(view_count: int, max_views: int) -> float:
    """Log-normalized view count (0–1) relative to the batch maximum."""
    if max_views <= 0:
        return 0.0
    return math.log10(view_count + 1) / math.log10(max_views + 1)


def engagement_score(
    reaction_count: int,
    comment_count: int,
    view_count: int,
    comment_weight: float = 2.0,
    scale: float = 10.0,
) -> float:
    """Interaction rate per view, scaled and capped at 1. Comments weigh more than reactions."""
    if view_count <= 0:
        return 0.0
    rate = (reaction_count + comment_count * comment_weight) / view_count
    return min(1.0, rate * scale)


def max_view_count(view_counts: Iterable[int]) -> int:
    """Largest view count in a batch, 0 for an empty batch."""
    return max(view_counts, default=0)

"""
Reason precedence for composite scoring.

Each rule set is an ordered list of (predicate, reason). The first predicate that
holds decides the reason; when none holds, the strategy's default reason is used.
The orders below reproduce the platform's historical labels:

    similar:       same_author > same_tags > same_category > similar_content
    personalized:  followed_tag > followed_category > followed_author > popular
"""

from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple

from ...models.scoring import RecommendationReason


@dataclass(frozen=True)
class MatchSignals:
    """Boolean match facts computed by the scorer for one candidate."""

    same_author: bool = False
    same_category: bool = False
    tag_match: bool = False
    followed_author: bool = False
    followed_category: bool = False
    followed_tag: bool = False


ReasonRule = Tuple[Callable[[MatchSignals], bool], RecommendationReason]


SIMILAR_REASON_RULES: List[ReasonRule] = [
    (lambda m: m.same_author, RecommendationReason.SAME_AUTHOR),
    (lambda m: m.tag_match, RecommendationReason.SAME_TAGS),
    (lambda m: m.same_category, RecommendationReason.SAME_CATEGORY),
]

PERSONALIZED_REASON_RULES: List[ReasonRule] = [
    (lambda m: m.followed_tag, RecommendationReason.FOLLOWED_TAG),
    (lambda m: m.followed_category, RecommendationReason.FOLLOWED_CATEGORY),
    (lambda m: m.followed_author, RecommendationReason.FOLLOWED_AUTHOR),
]


def resolve_reason(
    rules: Sequence[ReasonRule],
    signals: MatchSignals,
    default: RecommendationReason,
) -> RecommendationReason:
    """Return the reason of the highest-priority rule that matches."""
    for predicate, reason in rules:
        if predicate(signals):
            return reason
    return default

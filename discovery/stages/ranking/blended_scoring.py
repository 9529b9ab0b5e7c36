"""
Per-candidate composite scoring: relevance or personalization bonuses plus a
weighted recency/popularity/engagement baseline.

Builds a ScoredItem for one candidate. The bonuses are fixed calibration
constants; the baseline uses config.weights. Scores are not clamped.
"""

from datetime import datetime
from typing import Dict

from ...models.config import RecommendationConfig
from ...models.content import CandidateItem
from ...models.context import InterestProfile
from ...models.scoring import RecommendationReason, ScoredItem
from ...utils.scores import engagement_score, popularity_score, recency_score
from ...utils.similarity import tag_overlap_fraction, tag_similarity
from .reasons import (
    PERSONALIZED_REASON_RULES,
    SIMILAR_REASON_RULES,
    MatchSignals,
    resolve_reason,
)

SAME_CATEGORY_BONUS = 0.3
TAG_SIMILARITY_BONUS = 0.4
SAME_AUTHOR_BONUS = 0.15

FOLLOWED_AUTHOR_BONUS = 0.4
FOLLOWED_CATEGORY_BONUS = 0.3
FOLLOWED_TAG_BONUS = 0.25


def baseline_components(
    candidate: CandidateItem,
    config: RecommendationConfig,
    batch_max_views: int,
    now: datetime,
) -> Dict[str, float]:
    """Weighted recency, popularity, and engagement contributions."""
    weights = config.weights
    recency = recency_score(candidate.published_at, config.half_life_days, now)
    popularity = popularity_score(candidate.view_count, batch_max_views)
    engagement = engagement_score(
        candidate.reaction_count,
        candidate.comment_count,
        candidate.view_count,
        config.comment_weight,
        config.engagement_scale,
    )
    return {
        "recency": recency * weights.recency,
        "popularity": popularity * weights.popularity,
        "engagement": engagement * weights.engagement,
    }


def score_similar(
    candidate: CandidateItem,
    seed: CandidateItem,
    config: RecommendationConfig,
    batch_max_views: int,
    now: datetime,
) -> ScoredItem:
    """
    Score a candidate against the seed post.

    +0.3 same category, +0.4 * tag Jaccard, +0.15 same author, plus baseline.
    Uncategorized posts never count as sharing a category.
    """
    same_category = (
        candidate.category_id is not None and candidate.category_id == seed.category_id
    )
    tag_sim = tag_similarity(seed.tags, candidate.tags)
    same_author = bool(candidate.author_id) and candidate.author_id == seed.author_id

    components = {
        "category": SAME_CATEGORY_BONUS if same_category else 0.0,
        "tags": tag_sim * TAG_SIMILARITY_BONUS,
        "author": SAME_AUTHOR_BONUS if same_author else 0.0,
    }
    components.update(baseline_components(candidate, config, batch_max_views, now))

    signals = MatchSignals(
        same_author=same_author,
        same_category=same_category,
        tag_match=tag_sim > config.tag_match_threshold,
    )
    reason = resolve_reason(
        SIMILAR_REASON_RULES, signals, RecommendationReason.SIMILAR_CONTENT
    )
    return ScoredItem(
        item=candidate,
        score=sum(components.values()),
        reason=reason,
        components=components,
    )


def score_personalized(
    candidate: CandidateItem,
    profile: InterestProfile,
    config: RecommendationConfig,
    batch_max_views: int,
    now: datetime,
) -> ScoredItem:
    """
    Score a candidate against the viewer's follows.

    Bonuses are scaled by weights.personalization: 0.4 followed author,
    0.3 followed category, 0.25 * share of the post's tags the viewer follows.
    """
    w_personal = config.weights.personalization
    followed_author = candidate.author_id in profile.followed_author_ids
    followed_category = (
        candidate.category_id is not None
        and candidate.category_id in profile.followed_category_ids
    )
    # Followed tags match case-insensitively, not by exact identifier, so a
    # follow on "AI" also matches posts tagged "ai".
    overlap = tag_overlap_fraction(candidate.tags, profile.followed_tags)

    components = {
        "followed_author": FOLLOWED_AUTHOR_BONUS * w_personal if followed_author else 0.0,
        "followed_category": FOLLOWED_CATEGORY_BONUS * w_personal if followed_category else 0.0,
        "followed_tags": overlap * FOLLOWED_TAG_BONUS * w_personal,
    }
    components.update(baseline_components(candidate, config, batch_max_views, now))

    signals = MatchSignals(
        followed_author=followed_author,
        followed_category=followed_category,
        followed_tag=overlap > 0,
    )
    reason = resolve_reason(
        PERSONALIZED_REASON_RULES, signals, RecommendationReason.POPULAR
    )
    return ScoredItem(
        item=candidate,
        score=sum(components.values()),
        reason=reason,
        components=components,
    )

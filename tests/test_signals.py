"""
Signal function tests: recency decay, popularity normalization,
engagement rate, and tag similarity.
"""

from datetime import timedelta

import pytest

from discovery.utils import (
    age_hours,
    engagement_score,
    popularity_score,
    recency_score,
    tag_overlap_fraction,
    tag_similarity,
)

from helpers import NOW


class TestRecencyScore:
    def test_published_now_scores_one(self):
        assert recency_score(NOW, 7, NOW) == 1.0

    def test_age_equal_to_half_life_scores_half(self):
        assert recency_score(NOW - timedelta(days=7), 7, NOW) == pytest.approx(0.5)

    def test_two_half_lives_scores_quarter(self):
        assert recency_score(NOW - timedelta(days=6), 3, NOW) == pytest.approx(0.25)

    def test_more_recent_is_strictly_higher(self):
        newer = recency_score(NOW - timedelta(hours=5), 7, NOW)
        older = recency_score(NOW - timedelta(hours=6), 7, NOW)
        assert newer > older

    def test_future_publication_is_clamped_to_age_zero(self):
        assert recency_score(NOW + timedelta(days=2), 7, NOW) == 1.0
        assert age_hours(NOW + timedelta(days=2), NOW) == 0.0


class TestPopularityScore:
    def test_zero_max_views_scores_zero(self):
        assert popularity_score(0, 0) == 0.0
        assert popularity_score(10, 0) == 0.0

    def test_batch_maximum_scores_one(self):
        assert popularity_score(999, 999) == pytest.approx(1.0)

    def test_log_scale(self):
        assert popularity_score(9, 99) == pytest.approx(0.5)

    def test_monotonic_in_views(self):
        scores = [popularity_score(v, 1000) for v in (1, 10, 100, 1000)]
        assert scores == sorted(scores)
        assert len(set(scores)) == len(scores)


class TestEngagementScore:
    def test_no_views_scores_zero(self):
        assert engagement_score(10, 10, 0) == 0.0

    def test_reactions_per_view_scaled_by_ten(self):
        assert engagement_score(1, 0, 100) == pytest.approx(0.1)

    def test_comments_count_double(self):
        assert engagement_score(0, 1, 100) == pytest.approx(engagement_score(2, 0, 100))

    def test_capped_at_one(self):
        assert engagement_score(50, 50, 100) == 1.0

    def test_calibration_is_configurable(self):
        assert engagement_score(1, 1, 100, comment_weight=1.0, scale=5.0) == pytest.approx(0.1)


class TestTagSimilarity:
    def test_jaccard(self):
        assert tag_similarity(["ai", "ml"], ["ai", "ml", "data"]) == pytest.approx(2 / 3)

    def test_symmetric(self):
        a, b = ["ai", "ml", "web"], ["ml", "data"]
        assert tag_similarity(a, b) == tag_similarity(b, a)

    def test_case_insensitive(self):
        assert tag_similarity(["AI", "Ml"], ["ai", "ml"]) == 1.0

    @pytest.mark.parametrize("other", [[], ["ai"], ["ai", "ml"]])
    def test_empty_side_scores_zero(self, other):
        assert tag_similarity([], other) == 0.0
        assert tag_similarity(other, []) == 0.0

    def test_disjoint_scores_zero(self):
        assert tag_similarity(["a"], ["b"]) == 0.0

    def test_bounded(self):
        for a, b in ((["a"], ["a"]), (["a", "b"], ["b", "c"]), (["x"], ["y", "z"])):
            assert 0.0 <= tag_similarity(a, b) <= 1.0


class TestTagOverlapFraction:
    def test_fraction_of_item_tags_followed(self):
        assert tag_overlap_fraction(["python", "web", "ai", "ml"], {"python", "ai"}) == 0.5

    def test_case_insensitive(self):
        assert tag_overlap_fraction(["Python"], {"python"}) == 1.0

    def test_empty_inputs(self):
        assert tag_overlap_fraction([], {"python"}) == 0.0
        assert tag_overlap_fraction(["python"], set()) == 0.0

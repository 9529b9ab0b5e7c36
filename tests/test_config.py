"""
Configuration and context validation: bad tunables fail before any scoring runs.
"""

import json

import pytest
from pydantic import ValidationError

from discovery.models import (
    DEFAULT_CONFIG,
    InterestProfile,
    RecommendationConfig,
    RecommendationContext,
    ScoringWeights,
    load_config,
    resolve_config,
)


class TestRecommendationConfig:
    def test_documented_defaults(self):
        config = RecommendationConfig()
        assert config.weights == ScoringWeights(
            recency=0.2, popularity=0.15, engagement=0.15, relevance=0.3, personalization=0.2
        )
        assert config.half_life_days == 7
        assert config.min_score == 0.1
        assert config.diversity_factor == 0.3

    def test_resolve_config(self):
        custom = RecommendationConfig(min_score=0.2)
        assert resolve_config(None) is DEFAULT_CONFIG
        assert resolve_config(custom) is custom

    def test_negative_weight_rejected(self):
        with pytest.raises(ValidationError):
            ScoringWeights(recency=-0.1)

    @pytest.mark.parametrize("half_life", [0, -3])
    def test_non_positive_half_life_rejected(self, half_life):
        with pytest.raises(ValidationError, match="half_life_days"):
            RecommendationConfig(half_life_days=half_life)

    @pytest.mark.parametrize("factor", [-0.1, 1.5])
    def test_diversity_factor_bounds(self, factor):
        with pytest.raises(ValidationError):
            RecommendationConfig(diversity_factor=factor)

    def test_immutable(self):
        with pytest.raises(ValidationError):
            DEFAULT_CONFIG.min_score = 0.5

    def test_from_dict_accepts_camel_case(self):
        config = RecommendationConfig.from_dict(
            {
                "weights": {"recency": 0.5, "popularity": 0.1},
                "decayHalfLife": 3,
                "minScore": 0.05,
                "diversityFactor": 0,
                "unknown": "ignored",
            }
        )
        assert config.weights.recency == 0.5
        assert config.weights.engagement == 0.15
        assert config.half_life_days == 3
        assert config.min_score == 0.05
        assert config.diversity_factor == 0

    def test_from_dict_validates(self):
        with pytest.raises(ValidationError):
            RecommendationConfig.from_dict({"weights": {"personalization": -1}})

    def test_load_config(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"half_life_days": 14, "min_score": 0.2}))
        config = load_config(path)
        assert config.half_life_days == 14
        assert config.min_score == 0.2


class TestRecommendationContext:
    def test_defaults(self):
        context = RecommendationContext()
        assert context.limit == 10
        assert context.exclude_ids == frozenset()
        assert context.post_id is None and context.user_id is None

    @pytest.mark.parametrize("limit", [0, -1])
    def test_limit_must_be_positive(self, limit):
        with pytest.raises(ValidationError):
            RecommendationContext(limit=limit)

    def test_exclude_ids_coerced_to_frozenset(self):
        assert RecommendationContext(exclude_ids=["a", "a", "b"]).exclude_ids == frozenset({"a", "b"})

    def test_fields_are_all_read_by_strategies(self):
        assert set(RecommendationContext.model_fields) == {
            "post_id", "user_id", "category_id", "exclude_ids", "limit"
        }


class TestInterestProfile:
    def test_empty_by_default(self):
        profile = InterestProfile()
        assert not profile.read_post_ids
        assert not profile.followed_author_ids
        assert not profile.followed_category_ids
        assert not profile.followed_tags

"""Pipeline stages: candidate scoring and re-ranking, strategies, mixed composition."""

from .composer import MixedComposer, MixedSource, default_mixed_sources, merge_by_priority
from .ranking import diversify, score_personalized, score_similar

__all__ = [
    "MixedComposer",
    "MixedSource",
    "default_mixed_sources",
    "diversify",
    "merge_by_priority",
    "score_personalized",
    "score_similar",
]

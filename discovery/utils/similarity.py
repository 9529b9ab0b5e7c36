"""
Similarity utilities: tag-set overlap for topical matching.
"""

from typing import AbstractSet, Iterable


def _normalize(tags: Iterable[str]) -> set:
    return {t.lower() for t in tags}


def tag_similarity(tags_a: Iterable[str], tags_b: Iterable[str]) -> float:
    """
    Case-insensitive Jaccard index of two tag sets.
    Returns 0.0 when either side is empty, including when both are.
    """
    set_a = _normalize(tags_a)
    set_b = _normalize(tags_b)
    if not set_a or not set_b:
        return 0.0
    return len(set_a & set_b) / len(set_a | set_b)


def tag_overlap_fraction(tags: Iterable[str], followed: AbstractSet[str]) -> float:
    """
    Share of an item's tags that the viewer follows.

    Matching is case-insensitive, the same rule as tag_similarity, rather than
    an exact lookup of the followed identifiers.
    """
    item_tags = [t.lower() for t in tags]
    if not item_tags or not followed:
        return 0.0
    followed_lower = _normalize(followed)
    matching = [t for t in item_tags if t in followed_lower]
    return len(matching) / len(item_tags)

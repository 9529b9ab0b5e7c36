"""
Author/category diversity: score-decay re-ranking for personalized and mixed feeds.

Walks candidates in score order and discounts each one by how many items from
its author and category were already admitted, so a prolific author cannot
fill the whole list.
"""

from typing import Dict, List

from ...models.scoring import ScoredItem

PENALTY_PER_REPEAT = 0.2
ADMISSION_FLOOR = 0.1


def sort_by_score(items: List[ScoredItem]) -> List[ScoredItem]:
    """Stable sort by score, highest first."""
    return sorted(items, key=lambda s: s.score, reverse=True)


def diversify(
    scored_list: List[ScoredItem],
    diversity_factor: float,
) -> List[ScoredItem]:
    """
    Penalize repeated authors and categories.

    For each candidate (score desc):
        penalty = (author_count + category_count) * diversity_factor * 0.2
        adjusted = score * (1 - penalty)
    The candidate is kept with its adjusted score only when adjusted > 0.1;
    counts grow only for kept candidates. Reason and identity are unchanged.

    Args:
        scored_list: Candidates in any order. Not mutated.
        diversity_factor: 0 disables the penalty (input returned sorted by score).

    Returns:
        Kept candidates sorted by adjusted score (desc).
    """
    ordered = sort_by_score(scored_list)
    if diversity_factor == 0:
        return ordered

    selected: List[ScoredItem] = []
    author_count: Dict[str, int] = {}
    category_count: Dict[str, int] = {}

    for scored in ordered:
        author_id = scored.item.author_id
        category_id = scored.item.category_id
        a_count = author_count.get(author_id, 0)
        c_count = category_count.get(category_id, 0) if category_id else 0

        penalty = (a_count + c_count) * diversity_factor * PENALTY_PER_REPEAT
        adjusted = scored.score * (1 - penalty)
        if adjusted <= ADMISSION_FLOOR:
            continue

        components = dict(scored.components)
        components["diversity_penalty"] = penalty
        selected.append(scored.model_copy(update={"score": adjusted, "components": components}))
        author_count[author_id] = a_count + 1
        if category_id:
            category_count[category_id] = c_count + 1

    return sort_by_score(selected)

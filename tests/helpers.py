"""Shared builders for the test suite."""

from datetime import datetime, timedelta, timezone
from typing import Optional, Sequence

from discovery.models import AuthorRef, CandidateItem, CategoryRef, ScoredItem
from discovery.models.scoring import RecommendationReason

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


def make_item(
    item_id: str,
    *,
    hours_old: float = 24,
    views: int = 100,
    reactions: int = 0,
    comments: int = 0,
    tags: Sequence[str] = (),
    author: str = "author-1",
    category: Optional[str] = "cat-1",
    featured: bool = False,
    status: str = "published",
) -> CandidateItem:
    return CandidateItem(
        id=item_id,
        title=f"Post {item_id}",
        slug=f"post-{item_id}",
        published_at=NOW - timedelta(hours=hours_old),
        view_count=views,
        reaction_count=reactions,
        comment_count=comments,
        tags=tuple(tags),
        author=AuthorRef(id=author, username=author, display_name=author.title()),
        category=CategoryRef(id=category, name=category, slug=category) if category else None,
        is_featured=featured,
        status=status,
    )


def make_scored(
    item_id: str,
    score: float,
    *,
    author: str = "author-1",
    category: Optional[str] = "cat-1",
    reason: RecommendationReason = RecommendationReason.POPULAR,
) -> ScoredItem:
    return ScoredItem(
        item=make_item(item_id, author=author, category=category),
        score=score,
        reason=reason,
    )


def post_dict(item_id: str, **overrides) -> dict:
    """Raw post as a repository/JSON file would supply it."""
    data = {
        "id": item_id,
        "title": f"Post {item_id}",
        "slug": f"post-{item_id}",
        "excerpt": None,
        "published_at": (NOW - timedelta(days=1)).isoformat().replace("+00:00", "Z"),
        "view_count": 100,
        "reaction_count": 3,
        "comment_count": 1,
        "tags": ["python"],
        "author": {"id": "author-1", "username": "ada", "display_name": "Ada", "avatar_url": None},
        "category": {"id": "cat-1", "name": "Tech", "slug": "tech", "color": "#00f"},
        "reading_time": 4,
    }
    data.update(overrides)
    return data

"""
Content Repository abstraction.

Supplies candidate posts to the strategies. The engine never queries storage
itself: each strategy describes the batch it wants with a CandidateFilter and
the repository materializes it.
Implementations: in-memory (tests, embedding in other services) and JSON file.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, FrozenSet, Iterable, List, Literal, Optional, Protocol, Union

from pydantic import BaseModel, ConfigDict, Field

from ..models.content import CandidateItem, ensure_items

logger = logging.getLogger(__name__)


class CandidateFilter(BaseModel):
    """Which posts a strategy wants, newest or most viewed first, capped at limit."""

    model_config = ConfigDict(frozen=True)

    published_only: bool = True
    category_id: Optional[str] = None
    author_id: Optional[str] = None
    tag: Optional[str] = None
    exclude_ids: FrozenSet[str] = frozenset()
    published_since: Optional[datetime] = None
    featured_only: bool = False
    order_by: Literal["published_at", "view_count"] = "published_at"
    limit: int = Field(100, ge=1)


class ContentRepository(Protocol):
    """Protocol for post access. Implement for a database, an API, or a file."""

    def fetch_candidates(self, candidate_filter: CandidateFilter) -> List[CandidateItem]:
        """Return posts matching the filter, ordered and capped as requested."""
        ...

    def get_item(self, item_id: str) -> Optional[CandidateItem]:
        """Get one post by id, or None."""
        ...


class InMemoryContentRepository:
    """
    Content repository backed by a list of posts held in memory.
    Used for tests, the CLI, and callers that already loaded their corpus.
    """

    def __init__(self, items: Iterable[Union[Dict[str, Any], CandidateItem]]):
        self._items: List[CandidateItem] = ensure_items(list(items))
        self._by_id: Dict[str, CandidateItem] = {i.id: i for i in self._items}
        if len(self._by_id) != len(self._items):
            raise ValueError("post ids must be unique within a repository")

    def __len__(self) -> int:
        return len(self._items)

    def _matches(self, item: CandidateItem, f: CandidateFilter) -> bool:
        if f.published_only and not item.is_published:
            return False
        if f.category_id is not None and item.category_id != f.category_id:
            return False
        if f.author_id is not None and item.author_id != f.author_id:
            return False
        if f.tag is not None and f.tag.lower() not in {t.lower() for t in item.tags}:
            return False
        if item.id in f.exclude_ids:
            return False
        if f.published_since is not None and item.published_at < f.published_since:
            return False
        if f.featured_only and not item.is_featured:
            return False
        return True

    def fetch_candidates(self, candidate_filter: CandidateFilter) -> List[CandidateItem]:
        matched = [i for i in self._items if self._matches(i, candidate_filter)]
        if candidate_filter.order_by == "view_count":
            matched.sort(key=lambda i: i.view_count, reverse=True)
        else:
            matched.sort(key=lambda i: i.published_at, reverse=True)
        return matched[: candidate_filter.limit]

    def get_item(self, item_id: str) -> Optional[CandidateItem]:
        return self._by_id.get(item_id)


class JsonContentRepository(InMemoryContentRepository):
    """
    Content repository backed by a JSON file.
    Accepts either a list of posts or {"posts": [...]}.
    """

    def __init__(self, path: Union[Path, str]):
        self._path = Path(path)
        if not self._path.exists():
            raise FileNotFoundError(f"Posts JSON not found: {self._path}")
        with open(self._path) as f:
            data = json.load(f)
        posts = data.get("posts", []) if isinstance(data, dict) else data
        super().__init__(posts)
        logger.info("[repository] loaded %d posts from %s", len(self), self._path)

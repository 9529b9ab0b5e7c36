"""
Content model: read-only projection of a publishable post for the ranking pipeline.

Used by the signal functions, the scorer, and every strategy instead of raw dicts.
Built from repository/JSON dicts via CandidateItem.model_validate(d).
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AuthorRef(BaseModel):
    """Author display fields attached to a post."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = ""
    username: str = ""
    display_name: str = ""
    avatar_url: Optional[str] = None


class CategoryRef(BaseModel):
    """Category display fields attached to a post."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    name: str = ""
    slug: str = ""
    color: Optional[str] = None


class CandidateItem(BaseModel):
    """
    A post eligible for scoring.

    id is unique within a candidate batch. published_at is always timezone-aware
    (naive values are read as UTC).
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    title: str = ""
    slug: str = ""
    excerpt: Optional[str] = None
    featured_image_url: Optional[str] = None
    published_at: datetime
    view_count: int = Field(0, ge=0)
    reaction_count: int = Field(0, ge=0)
    comment_count: int = Field(0, ge=0)
    tags: Tuple[str, ...] = ()
    author: AuthorRef = Field(default_factory=AuthorRef)
    category: Optional[CategoryRef] = None
    reading_time: int = 0
    is_featured: bool = False
    status: str = "published"

    @field_validator("published_at")
    @classmethod
    def _aware(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @field_validator("tags", mode="before")
    @classmethod
    def _dedupe_tags(cls, value: Any) -> Tuple[str, ...]:
        if value is None:
            return ()
        seen = []
        for tag in value:
            if tag not in seen:
                seen.append(tag)
        return tuple(seen)

    @field_validator("view_count", "reaction_count", "comment_count", "reading_time", mode="before")
    @classmethod
    def _null_count(cls, value: Any) -> Any:
        return 0 if value is None else value

    @property
    def author_id(self) -> str:
        return self.author.id

    @property
    def category_id(self) -> Optional[str]:
        return self.category.id if self.category is not None else None

    @property
    def is_published(self) -> bool:
        return self.status == "published"


def ensure_items(items: List[Union[Dict[str, Any], "CandidateItem"]]) -> List["CandidateItem"]:
    """Convert list of dicts or CandidateItems to list of CandidateItem models."""
    return [
        CandidateItem.model_validate(i) if isinstance(i, dict) else i
        for i in items
    ]

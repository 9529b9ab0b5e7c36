"""External collaborators: content repository and interest store."""

from .content_repository import (
    CandidateFilter,
    ContentRepository,
    InMemoryContentRepository,
    JsonContentRepository,
)
from .interest_store import InMemoryInterestStore, InterestStore, JsonInterestStore

__all__ = [
    "CandidateFilter",
    "ContentRepository",
    "InMemoryContentRepository",
    "InMemoryInterestStore",
    "InterestStore",
    "JsonContentRepository",
    "JsonInterestStore",
]

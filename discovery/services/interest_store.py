"""
Interest store: a viewer's reading history and follows.

Supplies InterestProfile to the personalized strategy. Only called when the
request carries a viewer id. Implementations: in-memory and JSON file.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Optional, Protocol, Union

from ..models.context import InterestProfile

logger = logging.getLogger(__name__)


class InterestStore(Protocol):
    """Protocol for viewer interests. Implement for a database or a file."""

    def get_interest_profile(self, user_id: str) -> Optional[InterestProfile]:
        """Return the viewer's profile, or None when the viewer is unknown."""
        ...


class InMemoryInterestStore:
    """Interest store holding profiles keyed by user id."""

    def __init__(self, profiles: Optional[Dict[str, Union[Dict, InterestProfile]]] = None):
        self._profiles: Dict[str, InterestProfile] = {
            uid: InterestProfile.model_validate(p) if isinstance(p, dict) else p
            for uid, p in (profiles or {}).items()
        }

    def get_interest_profile(self, user_id: str) -> Optional[InterestProfile]:
        return self._profiles.get(user_id)

    def put(self, user_id: str, profile: InterestProfile) -> None:
        self._profiles[user_id] = profile


class JsonInterestStore(InMemoryInterestStore):
    """
    Interest store backed by a JSON file, e.g.
    {"profiles": {"u1": {"read_post_ids": [...], "followed_author_ids": [...]}}}.
    """

    def __init__(self, path: Union[Path, str]):
        self._path = Path(path)
        if not self._path.exists():
            raise FileNotFoundError(f"Profiles JSON not found: {self._path}")
        with open(self._path) as f:
            data = json.load(f)
        profiles = data.get("profiles", data) if isinstance(data, dict) else {}
        super().__init__(profiles)
        logger.info("[interests] loaded %d profiles from %s", len(self._profiles), self._path)

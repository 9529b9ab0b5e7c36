"""
Collaborator adapter tests: in-memory and JSON content repositories and interest stores.
"""

import json
from datetime import timedelta

import pytest

from discovery.models import CandidateItem, InterestProfile
from discovery.services import (
    CandidateFilter,
    InMemoryContentRepository,
    InMemoryInterestStore,
    JsonContentRepository,
    JsonInterestStore,
)

from helpers import NOW, make_item, post_dict


@pytest.fixture
def repository():
    return InMemoryContentRepository(
        [
            make_item("new", hours_old=1, views=5, tags=["Python"], author="a1", category="tech"),
            make_item("mid", hours_old=10, views=500, author="a2", category="tech", featured=True),
            make_item("old", hours_old=100, views=50, author="a1", category="food"),
            make_item("draft", hours_old=2, views=9000, status="draft"),
        ]
    )


class TestCandidateItem:
    def test_parses_repository_dict(self):
        item = CandidateItem.model_validate(post_dict("p1", tags=["a", "b", "a"], view_count=None))
        assert item.published_at.tzinfo is not None
        assert item.tags == ("a", "b")
        assert item.view_count == 0
        assert item.author_id == "author-1"
        assert item.category_id == "cat-1"

    def test_naive_timestamp_is_utc(self):
        item = CandidateItem(id="x", published_at=NOW.replace(tzinfo=None))
        assert item.published_at == NOW

    def test_uncategorized(self):
        item = CandidateItem.model_validate(post_dict("p1", category=None))
        assert item.category_id is None

    def test_negative_counts_rejected(self):
        with pytest.raises(ValueError):
            CandidateItem.model_validate(post_dict("p1", view_count=-1))


class TestInMemoryContentRepository:
    def test_defaults_to_published_newest_first(self, repository):
        ids = [i.id for i in repository.fetch_candidates(CandidateFilter())]
        assert ids == ["new", "mid", "old"]

    def test_order_by_views(self, repository):
        ids = [i.id for i in repository.fetch_candidates(CandidateFilter(order_by="view_count"))]
        assert ids == ["mid", "old", "new"]

    def test_filters(self, repository):
        fetch = repository.fetch_candidates
        assert [i.id for i in fetch(CandidateFilter(category_id="tech"))] == ["new", "mid"]
        assert [i.id for i in fetch(CandidateFilter(author_id="a1"))] == ["new", "old"]
        assert [i.id for i in fetch(CandidateFilter(tag="python"))] == ["new"]
        assert [i.id for i in fetch(CandidateFilter(featured_only=True))] == ["mid"]
        assert [i.id for i in fetch(CandidateFilter(exclude_ids={"new", "mid"}))] == ["old"]
        since = NOW - timedelta(hours=12)
        assert [i.id for i in fetch(CandidateFilter(published_since=since))] == ["new", "mid"]
        assert len(fetch(CandidateFilter(published_only=False))) == 4

    def test_limit(self, repository):
        assert len(repository.fetch_candidates(CandidateFilter(limit=2))) == 2

    def test_get_item(self, repository):
        assert repository.get_item("mid").view_count == 500
        assert repository.get_item("missing") is None

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValueError, match="unique"):
            InMemoryContentRepository([make_item("a"), make_item("a")])


class TestJsonContentRepository:
    def test_loads_posts_wrapper(self, tmp_path):
        path = tmp_path / "posts.json"
        path.write_text(json.dumps({"posts": [post_dict("p1"), post_dict("p2")]}))
        repo = JsonContentRepository(path)
        assert len(repo) == 2
        assert repo.get_item("p2").title == "Post p2"

    def test_loads_bare_list(self, tmp_path):
        path = tmp_path / "posts.json"
        path.write_text(json.dumps([post_dict("p1")]))
        assert len(JsonContentRepository(path)) == 1

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            JsonContentRepository(tmp_path / "nope.json")


class TestInterestStores:
    def test_in_memory(self):
        store = InMemoryInterestStore({"u1": {"followed_tags": ["ai"]}})
        assert store.get_interest_profile("u1").followed_tags == frozenset({"ai"})
        assert store.get_interest_profile("u2") is None
        store.put("u2", InterestProfile(read_post_ids={"p1"}))
        assert store.get_interest_profile("u2").read_post_ids == frozenset({"p1"})

    def test_json(self, tmp_path):
        path = tmp_path / "profiles.json"
        path.write_text(
            json.dumps({"profiles": {"u1": {"followed_author_ids": ["a1"], "read_post_ids": ["p1"]}}})
        )
        profile = JsonInterestStore(path).get_interest_profile("u1")
        assert profile.followed_author_ids == frozenset({"a1"})
        assert profile.read_post_ids == frozenset({"p1"})

    def test_json_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            JsonInterestStore(tmp_path / "nope.json")

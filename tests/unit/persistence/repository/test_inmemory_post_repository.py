"""Unit tests for the in-memory post repository's title filter."""

from uuid import uuid4

import pytest
import pytest_asyncio

from scribe.domain.value import UserId
from scribe.persistence.repository.inmemory import InMemoryPostRepository
from tests.conftest import make_post

TITLES = ["abc", "a.c", "ABC", "100% real", "x_y"]


@pytest.fixture
def owner_id() -> UserId:
    return UserId(uuid4())


@pytest_asyncio.fixture
async def post_repo(owner_id) -> InMemoryPostRepository:
    repo = InMemoryPostRepository()
    for title in TITLES:
        await repo.save(make_post(owner_id, title=title))
    return repo


async def matching(
    repo: InMemoryPostRepository, owner_id: UserId, keyword: str
) -> set[str]:
    posts = await repo.find_by_owner(owner_id, keyword=keyword, limit=100)
    return {post.title for post in posts}


class TestKeywordFilter:
    """The keyword behaves like ``title LIKE '%keyword%'``."""

    @pytest.mark.asyncio
    async def test_underscore_matches_one_character(self, post_repo, owner_id):
        assert await matching(post_repo, owner_id, "a_c") == {"abc", "a.c"}

    @pytest.mark.asyncio
    async def test_percent_matches_any_run(self, post_repo, owner_id):
        assert await matching(post_repo, owner_id, "1%l") == {"100% real"}

    @pytest.mark.asyncio
    async def test_regex_characters_are_literal(self, post_repo, owner_id):
        assert await matching(post_repo, owner_id, "a.c") == {"a.c"}

    @pytest.mark.asyncio
    async def test_matching_is_case_sensitive(self, post_repo, owner_id):
        assert await matching(post_repo, owner_id, "AB") == {"ABC"}

    @pytest.mark.asyncio
    async def test_count_uses_same_filter(self, post_repo, owner_id):
        assert await post_repo.count(owner_id, "_") == len(TITLES)

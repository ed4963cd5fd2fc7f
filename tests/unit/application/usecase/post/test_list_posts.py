"""Unit tests for ListPostsUseCase."""

from datetime import timedelta
from uuid import uuid4

import pytest

from scribe.application.usecase.post import ListPostsRequest, ListPostsUseCase
from scribe.application.usecase.result import Success
from scribe.domain.repository import PostRepository
from scribe.domain.value import UserId
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def seed_posts(post_repo: PostRepository, owner_id: UserId, count: int) -> None:
    for i in range(count):
        await post_repo.save(
            make_post(owner_id, title=f"Post {i}", age=timedelta(minutes=i))
        )


class TestListPostsUseCase:
    """Tests for ListPostsUseCase."""

    @pytest.mark.asyncio
    async def test_first_page_holds_ten_posts(self, unit_env):
        """Listings should be paginated ten at a time."""
        # Arrange
        use_case = await unit_env.get(ListPostsUseCase)
        post_repo = await unit_env.get(PostRepository)
        owner_id = UserId(uuid4())
        await seed_posts(post_repo, owner_id, 15)

        # Act
        result = await use_case.execute(ListPostsRequest(owner_id=str(owner_id)))

        # Assert
        assert isinstance(result, Success)
        assert len(result.data.items) == 10
        assert result.data.items[0].title == "Post 0"
        assert result.data.current_page == 1
        assert result.data.per_page == 10
        assert result.data.total == 15
        assert result.data.last_page == 2

    @pytest.mark.asyncio
    async def test_second_page(self, unit_env):
        """Second page should hold the remaining posts."""
        use_case = await unit_env.get(ListPostsUseCase)
        post_repo = await unit_env.get(PostRepository)
        owner_id = UserId(uuid4())
        await seed_posts(post_repo, owner_id, 15)

        result = await use_case.execute(ListPostsRequest(owner_id=str(owner_id), page=2))

        assert [item.title for item in result.data.items] == [
            f"Post {i}" for i in range(10, 15)
        ]
        assert result.data.current_page == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize("page", [0, -3])
    async def test_page_below_one_is_first_page(self, unit_env, page):
        """Non-positive pages should fall back to the first page."""
        use_case = await unit_env.get(ListPostsUseCase)
        post_repo = await unit_env.get(PostRepository)
        owner_id = UserId(uuid4())
        await seed_posts(post_repo, owner_id, 3)

        result = await use_case.execute(
            ListPostsRequest(owner_id=str(owner_id), page=page)
        )

        assert result.data.current_page == 1
        assert len(result.data.items) == 3

    @pytest.mark.asyncio
    async def test_keyword_filters_titles(self, unit_env):
        """Keyword should match inside titles."""
        # Arrange
        use_case = await unit_env.get(ListPostsUseCase)
        post_repo = await unit_env.get(PostRepository)
        owner_id = UserId(uuid4())
        await post_repo.save(make_post(owner_id, title="Hello world"))
        await post_repo.save(make_post(owner_id, title="Other"))

        # Act
        result = await use_case.execute(
            ListPostsRequest(owner_id=str(owner_id), keyword="world")
        )

        # Assert
        assert [item.title for item in result.data.items] == ["Hello world"]
        assert result.data.total == 1

    @pytest.mark.asyncio
    async def test_blank_keyword_lists_everything(self, unit_env):
        use_case = await unit_env.get(ListPostsUseCase)
        post_repo = await unit_env.get(PostRepository)
        owner_id = UserId(uuid4())
        await seed_posts(post_repo, owner_id, 2)

        result = await use_case.execute(
            ListPostsRequest(owner_id=str(owner_id), keyword="   ")
        )

        assert result.data.total == 2

    @pytest.mark.asyncio
    async def test_empty_listing(self, unit_env):
        """A user without posts gets an empty first page."""
        use_case = await unit_env.get(ListPostsUseCase)

        result = await use_case.execute(ListPostsRequest(owner_id=str(uuid4())))

        assert result.data.items == []
        assert result.data.total == 0
        assert result.data.last_page == 1


class TestListPostsRequest:
    """Tests for page coercion on ListPostsRequest."""

    @pytest.mark.parametrize(
        ("page", "expected"),
        [(None, 1), ("two", 1), ("", 1), ("0", 1), ("-2", 1), ("3", 3), (4, 4)],
    )
    def test_page_coercion(self, page, expected):
        request = ListPostsRequest(owner_id=str(uuid4()), page=page)

        assert request.page == expected

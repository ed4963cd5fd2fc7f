"""Unit tests for UpdatePostUseCase."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from scribe.application.usecase.post import (
    CoverUpload,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from scribe.adapter.error import StorageError
from scribe.adapter.storage import InMemoryFileStorage
from scribe.application.usecase.result import Invalid, NotFound, Success, Unexpected
from scribe.domain.repository import PostRepository
from scribe.domain.service import CoverService, PostService
from scribe.domain.storage import FileStorage
from scribe.domain.value import UserId
from scribe.persistence.repository.inmemory import InMemoryPostRepository
from tests.conftest import make_post
from tests.di import CommitFailingPostRepository
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

OLD_COVER = "posts/post-1600000000.png"


class UndeletableFileStorage(InMemoryFileStorage):
    """Storage whose deletes always fail."""

    async def delete(self, path: str) -> None:
        raise StorageError(f"Unable to delete {path}")


class TestUpdatePostUseCase:
    """Tests for UpdatePostUseCase."""

    @pytest.mark.asyncio
    async def test_update_fields_keeps_cover(self, unit_env):
        """Updating without an upload should keep the existing cover."""
        # Arrange
        use_case = await unit_env.get(UpdatePostUseCase)
        post_repo = await unit_env.get(PostRepository)
        storage = await unit_env.get(FileStorage)
        owner_id = UserId(uuid4())

        await storage.store(b"old", "posts", "post-1600000000.png")
        post = make_post(owner_id, cover=OLD_COVER)
        long_ago = datetime(2024, 1, 1, tzinfo=timezone.utc)
        post = post.model_copy(update={"updated_at": long_ago})
        await post_repo.save(post)

        request = UpdatePostRequest(
            owner_id=str(owner_id),
            post_id=str(post.id),
            title="New title",
            content="New content",
        )

        # Act
        result = await use_case.execute(request)

        # Assert
        assert isinstance(result, Success)
        assert result.data.title == "New title"
        assert result.data.content == "New content"
        assert result.data.cover == storage.url(OLD_COVER)

        saved = await post_repo.find_by_id(owner_id, post.id)
        assert saved.cover == OLD_COVER
        assert saved.updated_at > long_ago
        assert await storage.exists(OLD_COVER)

    @pytest.mark.asyncio
    async def test_update_replaces_cover(self, unit_env):
        """New upload should replace the cover and remove the old file."""
        # Arrange
        use_case = await unit_env.get(UpdatePostUseCase)
        post_repo = await unit_env.get(PostRepository)
        storage = await unit_env.get(FileStorage)
        owner_id = UserId(uuid4())

        await storage.store(b"old", "posts", "post-1600000000.png")
        post = make_post(owner_id, cover=OLD_COVER)
        await post_repo.save(post)

        request = UpdatePostRequest(
            owner_id=str(owner_id),
            post_id=str(post.id),
            title="Same title",
            content="Same content",
            cover=CoverUpload(filename="new.jpg", content=b"new"),
        )

        # Act
        result = await use_case.execute(request)

        # Assert
        assert isinstance(result, Success)
        saved = await post_repo.find_by_id(owner_id, post.id)
        assert saved.cover != OLD_COVER
        assert saved.cover.endswith(".jpg")
        assert await storage.exists(saved.cover)
        assert not await storage.exists(OLD_COVER)
        assert result.data.cover == storage.url(saved.cover)

    @pytest.mark.asyncio
    async def test_update_replaces_cover_when_old_file_missing(self, unit_env):
        """A dangling old cover path should not break the update."""
        use_case = await unit_env.get(UpdatePostUseCase)
        post_repo = await unit_env.get(PostRepository)
        owner_id = UserId(uuid4())
        post = make_post(owner_id, cover=OLD_COVER)
        await post_repo.save(post)

        result = await use_case.execute(
            UpdatePostRequest(
                owner_id=str(owner_id),
                post_id=str(post.id),
                title="Title",
                content="Content",
                cover=CoverUpload(filename="new.png", content=b"new"),
            )
        )

        assert isinstance(result, Success)

    @pytest.mark.asyncio
    async def test_update_is_published(self, unit_env):
        """is_published should change when sent and be kept when omitted."""
        # Arrange
        use_case = await unit_env.get(UpdatePostUseCase)
        post_repo = await unit_env.get(PostRepository)
        owner_id = UserId(uuid4())
        post = make_post(owner_id, is_published=False)
        await post_repo.save(post)

        # Act
        published = await use_case.execute(
            UpdatePostRequest(
                owner_id=str(owner_id),
                post_id=str(post.id),
                title="Title",
                content="Content",
                is_published="true",
            )
        )
        kept = await use_case.execute(
            UpdatePostRequest(
                owner_id=str(owner_id),
                post_id=str(post.id),
                title="Title",
                content="Content",
            )
        )

        # Assert
        assert published.data.is_published is True
        assert kept.data.is_published is True

    @pytest.mark.asyncio
    async def test_update_validation_runs_before_lookup(self, unit_env):
        """Invalid input should be reported even for unknown posts."""
        use_case = await unit_env.get(UpdatePostUseCase)

        result = await use_case.execute(
            UpdatePostRequest(owner_id=str(uuid4()), post_id=str(uuid4()), content="x")
        )

        assert isinstance(result, Invalid)
        assert result.errors == {"title": ["The title field is required."]}

    @pytest.mark.asyncio
    async def test_update_other_users_post_not_found(self, unit_env):
        """Updating someone else's post should look like a missing post."""
        # Arrange
        use_case = await unit_env.get(UpdatePostUseCase)
        post_repo = await unit_env.get(PostRepository)
        storage = await unit_env.get(FileStorage)
        post = make_post(UserId(uuid4()), title="Original")
        await post_repo.save(post)

        # Act
        result = await use_case.execute(
            UpdatePostRequest(
                owner_id=str(uuid4()),
                post_id=str(post.id),
                title="Hijacked",
                content="Hijacked",
                cover=CoverUpload(filename="evil.png", content=b"evil"),
            )
        )

        # Assert
        assert isinstance(result, NotFound)
        saved = await post_repo.find_by_id(post.owner_id, post.id)
        assert saved.title == "Original"
        assert storage.files == {}

    @pytest.mark.asyncio
    async def test_update_removes_new_cover_when_save_fails(self):
        """A failed commit should drop the new cover and keep the old one."""
        # Arrange
        storage = InMemoryFileStorage()
        post_repo = CommitFailingPostRepository()
        use_case = UpdatePostUseCase(
            post_service=PostService(post_repository=post_repo),
            cover_service=CoverService(storage=storage),
        )
        owner_id = UserId(uuid4())
        await storage.store(b"old", "posts", "post-1600000000.png")
        post = make_post(owner_id, cover=OLD_COVER)
        await post_repo.save(post)

        # Act
        result = await use_case.run(
            UpdatePostRequest(
                owner_id=str(owner_id),
                post_id=str(post.id),
                title="Title",
                content="Content",
                cover=CoverUpload(filename="new.jpg", content=b"new"),
            )
        )

        # Assert
        assert isinstance(result, Unexpected)
        assert list(storage.files) == [OLD_COVER]

    @pytest.mark.asyncio
    async def test_update_succeeds_when_old_cover_cleanup_fails(self):
        """Once committed, a storage failure on the old cover is only logged."""
        # Arrange
        storage = UndeletableFileStorage()
        post_repo = InMemoryPostRepository()
        use_case = UpdatePostUseCase(
            post_service=PostService(post_repository=post_repo),
            cover_service=CoverService(storage=storage),
        )
        owner_id = UserId(uuid4())
        await storage.store(b"old", "posts", "post-1600000000.png")
        post = make_post(owner_id, cover=OLD_COVER)
        await post_repo.save(post)

        # Act
        result = await use_case.run(
            UpdatePostRequest(
                owner_id=str(owner_id),
                post_id=str(post.id),
                title="Title",
                content="Content",
                cover=CoverUpload(filename="new.jpg", content=b"new"),
            )
        )

        # Assert
        assert isinstance(result, Success)
        saved = await post_repo.find_by_id(owner_id, post.id)
        assert saved.cover.endswith(".jpg")
        assert post_repo.commits == 1

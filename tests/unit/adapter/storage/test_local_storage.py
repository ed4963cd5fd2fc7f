"""Unit tests for LocalFileStorage."""

import pytest

from scribe.adapter.error import StorageError
from scribe.adapter.storage import LocalFileStorage


@pytest.fixture
def storage(tmp_path):
    return LocalFileStorage(root=tmp_path, public_url="http://localhost:8000/storage/")


class TestLocalFileStorage:
    """Tests for LocalFileStorage."""

    @pytest.mark.asyncio
    async def test_store_writes_file(self, storage, tmp_path):
        """Stored file should land under root/folder/name."""
        path = await storage.store(b"image", "posts", "post-1700000000.png")

        assert path == "posts/post-1700000000.png"
        assert (tmp_path / "posts" / "post-1700000000.png").read_bytes() == b"image"

    @pytest.mark.asyncio
    async def test_store_overwrites_existing(self, storage, tmp_path):
        await storage.store(b"first", "posts", "a.png")
        await storage.store(b"second", "posts", "a.png")

        assert (tmp_path / "posts" / "a.png").read_bytes() == b"second"

    @pytest.mark.asyncio
    async def test_exists_and_delete(self, storage):
        """Deleted file should no longer exist."""
        path = await storage.store(b"image", "posts", "a.png")
        assert await storage.exists(path)

        await storage.delete(path)

        assert not await storage.exists(path)

    @pytest.mark.asyncio
    async def test_delete_missing_file_is_noop(self, storage):
        await storage.delete("posts/missing.png")

    @pytest.mark.asyncio
    async def test_exists_false_for_directories(self, storage):
        await storage.store(b"image", "posts", "a.png")

        assert not await storage.exists("posts")

    @pytest.mark.asyncio
    async def test_rejects_paths_outside_root(self, storage):
        """Paths escaping the root should be refused."""
        with pytest.raises(StorageError):
            await storage.exists("../outside.png")

        with pytest.raises(StorageError):
            await storage.store(b"x", "../elsewhere", "a.png")

    def test_url(self, storage):
        assert storage.url("posts/a.png") == "http://localhost:8000/storage/posts/a.png"

"""Cover image domain service."""

import re
import time
from pathlib import PurePosixPath
from typing import Callable

import logfire

from scribe.domain.storage import FileStorage

from .base import Service

# Extensions longer than this, or with other characters, are dropped
MAX_EXTENSION_LENGTH = 16
_EXTENSION = re.compile(rf"\.[A-Za-z0-9]{{1,{MAX_EXTENSION_LENGTH}}}")


class CoverService(Service):
    """Domain service for storing and removing post cover images.

    Covers are named ``post-<unix timestamp>.<original extension>`` inside
    the cover folder of the public disk.
    """

    def __init__(
        self,
        storage: FileStorage,
        folder: str = "posts",
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize cover service.

        Args:
            storage: Public file storage
            folder: Folder covers are written to
            clock: Source of the timestamp used in file names
        """
        self.storage = storage
        self.folder = folder
        self.clock = clock

    def make_file_name(self, original_name: str) -> str:
        """Build the stored file name for an upload.

        Args:
            original_name: File name as sent by the client

        Returns:
            ``post-<timestamp>.<ext>``, or ``post-<timestamp>`` when the name
            has no usable extension
        """
        extension = PurePosixPath(original_name.replace("\\", "/")).suffix
        if not _EXTENSION.fullmatch(extension):
            extension = ""
        return f"post-{int(self.clock())}{extension}"

    async def store_cover(self, original_name: str, content: bytes) -> str:
        """Store an uploaded cover.

        Args:
            original_name: File name as sent by the client
            content: File bytes

        Returns:
            Relative path of the stored cover
        """
        name = self.make_file_name(original_name)
        with logfire.span("cover_service.store_cover", name=name, size=len(content)):
            path = await self.storage.store(content, self.folder, name)
            logfire.info("Cover stored", path=path)
            return path

    async def remove_cover(self, path: str) -> bool:
        """Remove a cover if it is still on the disk.

        Args:
            path: Relative path of the cover

        Returns:
            True if a file was deleted
        """
        with logfire.span("cover_service.remove_cover", path=path):
            if not await self.storage.exists(path):
                logfire.warn("Cover already missing", path=path)
                return False

            await self.storage.delete(path)
            logfire.info("Cover removed", path=path)
            return True

    async def discard_cover(self, path: str) -> bool:
        """Best-effort removal for cleanup once the outcome is decided.

        Used after a commit (old cover) or after a failed save (new cover),
        where a storage failure must not change the result. Failures are
        logged with their traceback.

        Args:
            path: Relative path of the cover

        Returns:
            True if a file was deleted
        """
        try:
            return await self.remove_cover(path)
        except Exception as e:
            logfire.exception("Cover cleanup failed", path=path, error=str(e))
            return False

    def cover_url(self, path: str | None) -> str | None:
        """Public URL of a cover, or None when the post has none."""
        if not path:
            return None
        return self.storage.url(path)

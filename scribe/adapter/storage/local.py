"""Local disk implementation of FileStorage.

Files live under a root directory that the API serves as static files.
"""

import asyncio
from pathlib import Path

import logfire

from scribe.adapter.error import StorageError
from scribe.domain.storage import FileStorage


class LocalFileStorage(FileStorage):
    """Public disk backed by a local directory."""

    def __init__(self, root: str | Path, public_url: str) -> None:
        """Initialize local storage.

        Args:
            root: Directory holding the public disk
            public_url: Absolute URL the directory is served under
        """
        self.root = Path(root).resolve()
        self.public_url = public_url.rstrip("/")

    def _resolve(self, path: str) -> Path:
        """Map a relative path onto the disk, rejecting escapes from the root."""
        target = (self.root / path).resolve()
        if target != self.root and self.root not in target.parents:
            raise StorageError(f"Path escapes storage root: {path}")
        return target

    async def store(self, content: bytes, folder: str, name: str) -> str:
        """Write a file under ``folder/name``."""
        relative = f"{folder.strip('/')}/{name}"
        target = self._resolve(relative)

        def _write() -> None:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(content)

        try:
            await asyncio.to_thread(_write)
        except OSError as e:
            logfire.error("Failed to store file", path=relative, error=str(e))
            raise StorageError(f"Unable to store {relative}: {e}") from e

        logfire.debug("File stored", path=relative, size=len(content))
        return relative

    async def exists(self, path: str) -> bool:
        """Check whether a regular file exists at the path."""
        return await asyncio.to_thread(self._resolve(path).is_file)

    async def delete(self, path: str) -> None:
        """Delete the file at the path (no-op when it is already gone)."""
        target = self._resolve(path)
        try:
            await asyncio.to_thread(target.unlink, True)
        except OSError as e:
            logfire.error("Failed to delete file", path=path, error=str(e))
            raise StorageError(f"Unable to delete {path}: {e}") from e

        logfire.debug("File deleted", path=path)

    def url(self, path: str) -> str:
        """Public URL of the file."""
        return f"{self.public_url}/{path.lstrip('/')}"

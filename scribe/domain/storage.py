"""File storage interface.

Paths are relative to the public disk root, e.g. ``posts/post-1700000000.png``.
Implementations live in the adapter layer.
"""

from abc import ABC, abstractmethod


class FileStorage(ABC):
    """Public disk holding uploaded files."""

    @abstractmethod
    async def store(self, content: bytes, folder: str, name: str) -> str:
        """Write a file, replacing any file already at that path.

        Args:
            content: File bytes
            folder: Folder inside the disk
            name: File name inside the folder

        Returns:
            Relative path of the stored file
        """
        pass

    @abstractmethod
    async def exists(self, path: str) -> bool:
        """Check whether a file exists at the relative path."""
        pass

    @abstractmethod
    async def delete(self, path: str) -> None:
        """Delete the file at the relative path."""
        pass

    @abstractmethod
    def url(self, path: str) -> str:
        """Public URL the file is served from."""
        pass

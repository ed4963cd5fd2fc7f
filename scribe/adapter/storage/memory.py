"""In-memory file storage for testing."""

from scribe.domain.storage import FileStorage


class InMemoryFileStorage(FileStorage):
    """In-memory implementation of FileStorage for testing."""

    def __init__(self, public_url: str = "http://testserver/storage") -> None:
        self.public_url = public_url.rstrip("/")
        self.files: dict[str, bytes] = {}

    async def store(self, content: bytes, folder: str, name: str) -> str:
        """Store a file."""
        path = f"{folder.strip('/')}/{name}"
        self.files[path] = content
        return path

    async def exists(self, path: str) -> bool:
        """Check whether a file exists."""
        return path in self.files

    async def delete(self, path: str) -> None:
        """Delete a file."""
        self.files.pop(path, None)

    def url(self, path: str) -> str:
        """Public URL of the file."""
        return f"{self.public_url}/{path.lstrip('/')}"

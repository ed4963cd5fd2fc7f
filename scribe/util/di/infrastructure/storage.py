"""File storage infrastructure providers."""

from dishka import Scope, provide

from scribe.adapter.storage import LocalFileStorage
from scribe.config import StorageSettings
from scribe.domain.storage import FileStorage
from scribe.util.di.base import ProviderBase


class StorageProvider(ProviderBase):
    """Storage component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Production storage provider using the local public disk."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_file_storage(self, storage_settings: StorageSettings) -> FileStorage:
        """Provide public disk storage.

        Returns:
            Local file storage rooted at ``storage.root``
        """
        return LocalFileStorage(
            root=storage_settings.root,
            public_url=storage_settings.public_url,
        )

"""Domain layer DI providers."""

from dishka import Scope, provide

from scribe.config import AuthSettings, StorageSettings
from scribe.domain.repository import PostRepository
from scribe.domain.service import CoverService, JWTService, PostService
from scribe.domain.storage import FileStorage
from scribe.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_cover_service(
        self, storage: FileStorage, storage_settings: StorageSettings
    ) -> CoverService:
        """Provide cover domain service."""
        return CoverService(storage=storage, folder=storage_settings.cover_folder)

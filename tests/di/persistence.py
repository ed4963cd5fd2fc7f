"""Mock persistence providers for testing."""

from dishka import Provider, Scope, provide

from scribe.domain.repository import PostRepository
from scribe.persistence.repository.inmemory import InMemoryPostRepository
from scribe.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so data outlives a single request (E2E tests make several
    requests against one app). Each test builds its own container, so tests
    stay isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_post_repository(self) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository()


class CommitFailingPostRepository(InMemoryPostRepository):
    """In-memory repository whose commits always fail."""

    async def commit(self) -> None:
        raise RuntimeError("commit failed")


class UnavailablePostRepository(InMemoryPostRepository):
    """Repository standing in for a database that cannot be reached."""

    def _fail(self):
        raise RuntimeError("database unavailable")

    async def find_by_id(self, owner_id, post_id):
        self._fail()

    async def find_by_owner(self, owner_id, keyword=None, limit=10, offset=0):
        self._fail()

    async def count(self, owner_id, keyword=None):
        self._fail()

    async def save(self, post):
        self._fail()

    async def delete(self, owner_id, post_id):
        self._fail()

    async def commit(self) -> None:
        self._fail()


class FixedPersistenceProvider(Provider):
    """Persistence replacement serving one given repository instance.

    Not a PersistenceProvider subclass, so it never takes part in the
    automatic mock/prod selection.
    """

    def __init__(self, post_repository: PostRepository) -> None:
        super().__init__()
        self.post_repository = post_repository

    @provide(scope=Scope.APP)
    def get_post_repository(self) -> PostRepository:
        """Provide the given repository."""
        return self.post_repository

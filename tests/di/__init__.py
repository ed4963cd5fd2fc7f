"""Mock providers for testing."""

from .persistence import (
    CommitFailingPostRepository,
    FixedPersistenceProvider,
    MockPersistenceProvider,
    UnavailablePostRepository,
)
from .storage import MockStorageProvider
from .container import build_test_container

__all__ = [
    "CommitFailingPostRepository",
    "FixedPersistenceProvider",
    "MockPersistenceProvider",
    "MockStorageProvider",
    "UnavailablePostRepository",
    "build_test_container",
]

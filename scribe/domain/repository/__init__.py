"""Repository interfaces for Scribe domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from scribe.domain.repository.post import PostRepository

__all__ = [
    "PostRepository",
]

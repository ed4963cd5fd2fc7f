"""Domain model entities for Scribe."""

from scribe.domain.model.post import Post

__all__ = [
    "Post",
]

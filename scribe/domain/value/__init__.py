"""Domain value objects for Scribe."""

from scribe.domain.value.identifiers import PostId, UserId
from scribe.domain.value.types import Page

__all__ = [
    # Identifiers
    "PostId",
    "UserId",
    # Types
    "Page",
]

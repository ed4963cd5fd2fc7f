"""Post aggregate root.

A post belongs to exactly one owner. The owner never changes after creation
and every lookup is scoped by it.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from scribe.domain.model.common import DomainModel
from scribe.domain.value import PostId, UserId


class Post(DomainModel):
    """Post aggregate root."""

    id: PostId
    owner_id: UserId
    title: str = Field(min_length=1, max_length=255)
    content: str = Field(min_length=1)
    # Relative path on the public disk, e.g. "posts/post-1700000000.png"
    cover: Optional[str] = Field(default=None, max_length=255)
    is_published: bool = False
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def is_owned_by(self, user_id: UserId) -> bool:
        """Check whether the given user owns this post."""
        return self.owner_id == user_id

"""Shared post use case models."""

from datetime import datetime

from pydantic import BaseModel

from scribe.domain.model.post import Post
from scribe.domain.service import CoverService


class CoverUpload(BaseModel):
    """Uploaded cover image."""

    filename: str
    content: bytes


class PostResource(BaseModel):
    """Post as returned to clients; ``cover`` is a public URL."""

    id: str
    title: str
    content: str
    cover: str | None
    is_published: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_post(cls, post: Post, cover_service: CoverService) -> "PostResource":
        """Build the resource for a post."""
        return cls(
            id=str(post.id),
            title=post.title,
            content=post.content,
            cover=cover_service.cover_url(post.cover),
            is_published=post.is_published,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )

"""Test configuration and helpers."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

from scribe.config import Settings
from scribe.domain.model.post import Post
from scribe.domain.value import PostId, UserId
from scribe.util.jwt import create_token


def make_post(
    owner_id: UserId,
    title: str = "Test Post",
    content: str = "Some content",
    cover: str | None = None,
    is_published: bool = False,
    age: timedelta = timedelta(0),
) -> Post:
    """Build a post for tests.

    Args:
        owner_id: Owner of the post
        title: Post title
        content: Post body
        cover: Relative cover path, if any
        is_published: Published flag
        age: How long ago the post was created (for ordering)

    Returns:
        Post domain model
    """
    created_at = datetime.now(timezone.utc) - age
    return Post(
        id=PostId(uuid4()),
        owner_id=owner_id,
        title=title,
        content=content,
        cover=cover,
        is_published=is_published,
        created_at=created_at,
        updated_at=created_at,
    )


def make_token(user_id: UserId | None = None) -> str:
    """Issue a valid access token for a (random) user."""
    user_id = user_id or UserId(uuid4())
    return create_token(str(user_id), Settings().auth)

"""In-memory post repository for testing."""

import re
from typing import Optional

from scribe.domain.model.post import Post
from scribe.domain.repository.post import PostRepository
from scribe.domain.value import PostId, UserId


def like_pattern(keyword: str) -> re.Pattern[str]:
    """Compile ``%keyword%`` with SQL LIKE semantics (``%`` any run, ``_`` one char)."""
    parts = []
    for char in keyword:
        if char == "%":
            parts.append(".*")
        elif char == "_":
            parts.append(".")
        else:
            parts.append(re.escape(char))
    return re.compile("".join(parts), re.DOTALL)


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing.

    Writes are visible immediately; ``commit`` only counts calls.
    """

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}
        self.commits = 0

    def _owned(self, owner_id: UserId, keyword: Optional[str]) -> list[Post]:
        posts = [p for p in self._posts.values() if p.is_owned_by(owner_id)]

        # Filter by title, matching the PostgreSQL LIKE filter
        if keyword:
            pattern = like_pattern(keyword)
            posts = [p for p in posts if pattern.search(p.title)]

        return posts

    async def find_by_id(self, owner_id: UserId, post_id: PostId) -> Optional[Post]:
        """Find one of the owner's posts by ID."""
        post = self._posts.get(post_id)
        if post is None or not post.is_owned_by(owner_id):
            return None
        return post

    async def find_by_owner(
        self,
        owner_id: UserId,
        keyword: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Post]:
        """Find the owner's posts, newest first."""
        posts = self._owned(owner_id, keyword)
        posts.sort(key=lambda p: p.created_at, reverse=True)

        # Paginate
        return posts[offset : offset + limit]

    async def count(self, owner_id: UserId, keyword: Optional[str] = None) -> int:
        """Count the owner's posts matching the keyword filter."""
        return len(self._owned(owner_id, keyword))

    async def save(self, post: Post) -> Post:
        """Save or update a post."""
        self._posts[post.id] = post
        return post

    async def delete(self, owner_id: UserId, post_id: PostId) -> None:
        """Delete one of the owner's posts."""
        post = self._posts.get(post_id)
        if post is not None and post.is_owned_by(owner_id):
            del self._posts[post_id]

    async def commit(self) -> None:
        """Record a commit."""
        self.commits += 1

"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from scribe.domain.model.post import Post
from scribe.domain.value import PostId, UserId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Every lookup takes the owner explicitly: a post belonging to another
    user is reported exactly like a missing one.
    """

    @abstractmethod
    async def find_by_id(self, owner_id: UserId, post_id: PostId) -> Optional[Post]:
        """Find one of the owner's posts by ID.

        Args:
            owner_id: The requesting user's ID
            post_id: The post's unique identifier

        Returns:
            The post if found and owned by ``owner_id``, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_owner(
        self,
        owner_id: UserId,
        keyword: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Post]:
        """Find the owner's posts, newest first.

        Args:
            owner_id: The requesting user's ID
            keyword: Only posts whose title contains this text (None for all)
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            Posts ordered by created_at descending
        """
        pass

    @abstractmethod
    async def count(self, owner_id: UserId, keyword: Optional[str] = None) -> int:
        """Count the owner's posts matching the keyword filter.

        Args:
            owner_id: The requesting user's ID
            keyword: Only posts whose title contains this text (None for all)

        Returns:
            Total number of matching posts
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def delete(self, owner_id: UserId, post_id: PostId) -> None:
        """Delete one of the owner's posts (hard delete).

        Args:
            owner_id: The requesting user's ID
            post_id: The post ID to delete
        """
        pass

    @abstractmethod
    async def commit(self) -> None:
        """Make pending writes durable.

        Callers commit before touching anything outside the database (such
        as cover files) that must agree with the stored record.
        """
        pass

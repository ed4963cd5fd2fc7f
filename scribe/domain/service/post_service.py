"""Post domain service."""

import logfire

from scribe.domain.model.post import Post
from scribe.domain.repository import PostRepository
from scribe.domain.value import Page, PostId, UserId

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def save_post(self, post: Post) -> Post:
        """Save and commit a post.

        Args:
            post: Post to save

        Returns:
            Saved post
        """
        with logfire.span(
            "post_service.save_post", post_id=str(post.id), owner_id=str(post.owner_id)
        ):
            saved = await self.post_repository.save(post)
            await self.post_repository.commit()
            logfire.info("Post saved", post_id=str(saved.id))
            return saved

    async def get_post(self, owner_id: UserId, post_id: PostId) -> Post | None:
        """Get one of the owner's posts by ID.

        Args:
            owner_id: Requesting user ID
            post_id: Post ID

        Returns:
            Post if found and owned by the user, None otherwise
        """
        with logfire.span(
            "post_service.get_post", owner_id=str(owner_id), post_id=str(post_id)
        ):
            post = await self.post_repository.find_by_id(owner_id, post_id)

            if post:
                logfire.info("Post found", post_id=str(post_id), title=post.title)
            else:
                logfire.warn(
                    "Post not found", owner_id=str(owner_id), post_id=str(post_id)
                )

            return post

    async def list_posts(
        self,
        owner_id: UserId,
        keyword: str | None,
        page: int,
        per_page: int,
    ) -> Page[Post]:
        """List the owner's posts, newest first, one page at a time.

        Args:
            owner_id: Requesting user ID
            keyword: Title filter (None for all posts)
            page: 1-based page number
            per_page: Page size

        Returns:
            Requested page with the total match count
        """
        with logfire.span(
            "post_service.list_posts",
            owner_id=str(owner_id),
            keyword=keyword,
            page=page,
            per_page=per_page,
        ):
            total = await self.post_repository.count(owner_id, keyword=keyword)
            posts = await self.post_repository.find_by_owner(
                owner_id,
                keyword=keyword,
                limit=per_page,
                offset=(page - 1) * per_page,
            )
            logfire.info("Posts listed", count=len(posts), total=total)
            return Page[Post](items=posts, total=total, page=page, per_page=per_page)

    async def delete_post(self, post: Post) -> None:
        """Delete and commit the removal of a post record.

        Args:
            post: Post to delete
        """
        with logfire.span("post_service.delete_post", post_id=str(post.id)):
            await self.post_repository.delete(post.owner_id, post.id)
            await self.post_repository.commit()
            logfire.info("Post deleted", post_id=str(post.id))

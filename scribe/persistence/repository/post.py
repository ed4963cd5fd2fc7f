"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

import logfire
from sqlalchemy import Select, desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from scribe.domain.model import Post
from scribe.domain.repository.post import PostRepository
from scribe.domain.value import PostId, UserId
from scribe.persistence.mappers import post_to_dict, row_to_post
from scribe.persistence.tables import posts_table


def owned_posts(owner_id: UserId, keyword: Optional[str] = None) -> Select:
    """Select the owner's posts, optionally filtered by title.

    The keyword is used as a LIKE pattern body, so ``%`` and ``_`` keep
    their wildcard meaning.

    Args:
        owner_id: Owner's user ID
        keyword: Title filter (None for all posts)

    Returns:
        Unordered select over posts_table
    """
    stmt = select(posts_table).where(posts_table.c.owner_id == owner_id)
    if keyword:
        stmt = stmt.where(posts_table.c.title.like(f"%{keyword}%"))
    return stmt


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, owner_id: UserId, post_id: PostId) -> Optional[Post]:
        """Find one of the owner's posts by ID."""
        with logfire.span(
            "post_repository.find_by_id", owner_id=str(owner_id), post_id=str(post_id)
        ):
            stmt = owned_posts(owner_id).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                return None

            return row_to_post(row._asdict())

    async def find_by_owner(
        self,
        owner_id: UserId,
        keyword: Optional[str] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> List[Post]:
        """Find the owner's posts, newest first."""
        with logfire.span(
            "post_repository.find_by_owner",
            owner_id=str(owner_id),
            keyword=keyword,
            limit=limit,
            offset=offset,
        ):
            stmt = (
                owned_posts(owner_id, keyword)
                .order_by(desc(posts_table.c.created_at))
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            posts = [row_to_post(row._asdict()) for row in result.fetchall()]

            logfire.info("Found posts", count=len(posts))
            return posts

    async def count(self, owner_id: UserId, keyword: Optional[str] = None) -> int:
        """Count the owner's posts matching the keyword filter."""
        stmt = select(func.count()).select_from(
            owned_posts(owner_id, keyword).subquery()
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        with logfire.span(
            "post_repository.save", post_id=str(post.id), owner_id=str(post.owner_id)
        ):
            existing = await self.find_by_id(post.owner_id, post.id)
            post_dict = post_to_dict(post)

            if existing:
                logfire.info("Updating existing post", post_id=str(post.id))
                stmt = (
                    posts_table.update()
                    .where(posts_table.c.id == post.id)
                    .where(posts_table.c.owner_id == post.owner_id)
                    .values(**post_dict)
                )
            else:
                logfire.info("Inserting new post", post_id=str(post.id))
                stmt = posts_table.insert().values(**post_dict)

            await self.session.execute(stmt)
            await self.session.flush()
            return post

    async def delete(self, owner_id: UserId, post_id: PostId) -> None:
        """Delete one of the owner's posts (hard delete)."""
        stmt = (
            posts_table.delete()
            .where(posts_table.c.id == post_id)
            .where(posts_table.c.owner_id == owner_id)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def commit(self) -> None:
        """Commit the session's transaction."""
        with logfire.span("post_repository.commit"):
            await self.session.commit()

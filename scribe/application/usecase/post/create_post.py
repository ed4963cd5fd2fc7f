"""Create post use case."""

from datetime import datetime, timezone
from typing import Any
from uuid import UUID, uuid4

import logfire
from pydantic import BaseModel

from scribe.application.usecase.base import BaseUseCase
from scribe.application.usecase.post.resource import CoverUpload, PostResource
from scribe.application.usecase.result import Invalid, Result, Success
from scribe.application.validation import validate_post_fields
from scribe.domain.error import ValidationError
from scribe.domain.model.post import Post
from scribe.domain.service import CoverService, PostService
from scribe.domain.value import PostId, UserId


class CreatePostRequest(BaseModel):
    """Create post request.

    Fields are raw request values; they are validated by the use case.
    """

    owner_id: str  # User ID from authenticated user
    title: Any = None
    content: Any = None
    is_published: Any = None
    cover: CoverUpload | None = None


class CreatePostUseCase(BaseUseCase):
    """Use case for creating a new post."""

    def __init__(self, post_service: PostService, cover_service: CoverService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            cover_service: Cover domain service
        """
        self.post_service = post_service
        self.cover_service = cover_service

    async def execute(self, request: CreatePostRequest) -> Result:
        """Execute create post flow.

        Steps:
        1. Validate title/content/is_published
        2. Store the cover, if one was uploaded
        3. Build, save and commit the post (removing the stored cover again
           if any of that fails)

        Args:
            request: Create post request

        Returns:
            ``Success`` with the new post, or ``Invalid``
        """
        try:
            fields = validate_post_fields(
                {
                    "title": request.title,
                    "content": request.content,
                    "is_published": request.is_published,
                }
            )
        except ValidationError as e:
            logfire.info("Post creation rejected", errors=e.errors)
            return Invalid(errors=e.errors)

        with logfire.span(
            "create_post.execute",
            owner_id=request.owner_id,
            title=fields.title,
            has_cover=request.cover is not None,
        ):
            cover_path = None
            if request.cover:
                cover_path = await self.cover_service.store_cover(
                    request.cover.filename, request.cover.content
                )

            try:
                now = datetime.now(timezone.utc)
                post = Post(
                    id=PostId(uuid4()),
                    owner_id=UserId(UUID(request.owner_id)),
                    title=fields.title,
                    content=fields.content,
                    cover=cover_path,
                    is_published=bool(fields.is_published),
                    created_at=now,
                    updated_at=now,
                )
                saved = await self.post_service.save_post(post)
            except Exception:
                if cover_path:
                    await self.cover_service.discard_cover(cover_path)
                raise

            logfire.info("Post created successfully", post_id=str(saved.id))
            return Success[PostResource](
                data=PostResource.from_post(saved, self.cover_service)
            )

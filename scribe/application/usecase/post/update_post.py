"""Update post use case."""

from datetime import datetime, timezone
from typing import Any
from uuid import UUID

import logfire
from pydantic import BaseModel

from scribe.application.usecase.base import BaseUseCase
from scribe.application.usecase.post.get_post import parse_post_id
from scribe.application.usecase.post.resource import CoverUpload, PostResource
from scribe.application.usecase.result import Invalid, NotFound, Result, Success
from scribe.application.validation import validate_post_fields
from scribe.domain.error import ValidationError
from scribe.domain.service import CoverService, PostService
from scribe.domain.value import UserId


class UpdatePostRequest(BaseModel):
    """Update post request.

    Fields are raw request values; they are validated by the use case.
    """

    owner_id: str  # User ID from authenticated user
    post_id: str  # Raw path value, may not be a UUID
    title: Any = None
    content: Any = None
    is_published: Any = None
    cover: CoverUpload | None = None


class UpdatePostUseCase(BaseUseCase):
    """Use case for replacing a post's fields and, optionally, its cover."""

    def __init__(self, post_service: PostService, cover_service: CoverService) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
            cover_service: Cover domain service
        """
        self.post_service = post_service
        self.cover_service = cover_service

    async def execute(self, request: UpdatePostRequest) -> Result:
        """Execute update post flow.

        Steps:
        1. Validate title/content/is_published (before the lookup)
        2. Load the post, scoped to the requesting user
        3. Store the new cover, if one was uploaded
        4. Save and commit the post
        5. Remove the previous cover once the committed record points at
           the new one

        Without a new upload the previous cover is kept. An omitted
        ``is_published`` keeps the previous value.

        Args:
            request: Update post request

        Returns:
            ``Success`` with the updated post, ``Invalid`` or ``NotFound``
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
            logfire.info("Post update rejected", errors=e.errors)
            return Invalid(errors=e.errors)

        post_id = parse_post_id(request.post_id)
        if post_id is None:
            return NotFound(resource="Post", identifier=request.post_id)

        post = await self.post_service.get_post(UserId(UUID(request.owner_id)), post_id)
        if not post:
            return NotFound(resource="Post", identifier=request.post_id)

        with logfire.span(
            "update_post.execute",
            post_id=str(post.id),
            has_cover=request.cover is not None,
        ):
            new_cover = None
            if request.cover:
                new_cover = await self.cover_service.store_cover(
                    request.cover.filename, request.cover.content
                )

            updated = post.model_copy(
                update={
                    "title": fields.title,
                    "content": fields.content,
                    "is_published": post.is_published
                    if fields.is_published is None
                    else fields.is_published,
                    "cover": new_cover or post.cover,
                    "updated_at": datetime.now(timezone.utc),
                }
            )

            try:
                saved = await self.post_service.save_post(updated)
            except Exception:
                if new_cover and new_cover != post.cover:
                    await self.cover_service.discard_cover(new_cover)
                raise

            # The record is committed; same-second uploads with the same
            # extension overwrote the old file in place
            if new_cover and post.cover and post.cover != new_cover:
                await self.cover_service.discard_cover(post.cover)

            logfire.info("Post updated successfully", post_id=str(saved.id))
            return Success[PostResource](
                data=PostResource.from_post(saved, self.cover_service)
            )

"""Delete post use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from scribe.application.usecase.base import BaseUseCase
from scribe.application.usecase.post.get_post import parse_post_id
from scribe.application.usecase.result import NotFound, Result, Success
from scribe.domain.service import CoverService, PostService
from scribe.domain.value import UserId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    owner_id: str  # User ID from authenticated user
    post_id: str  # Raw path value, may not be a UUID


class DeletePostUseCase(BaseUseCase):
    """Use case for deleting a post together with its cover."""

    def __init__(self, post_service: PostService, cover_service: CoverService) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
            cover_service: Cover domain service
        """
        self.post_service = post_service
        self.cover_service = cover_service

    async def execute(self, request: DeletePostRequest) -> Result:
        """Delete and commit the record, then drop its cover file."""
        post_id = parse_post_id(request.post_id)
        if post_id is None:
            return NotFound(resource="Post", identifier=request.post_id)

        post = await self.post_service.get_post(UserId(UUID(request.owner_id)), post_id)
        if not post:
            return NotFound(resource="Post", identifier=request.post_id)

        await self.post_service.delete_post(post)

        if post.cover:
            await self.cover_service.discard_cover(post.cover)

        logfire.info("Post deleted successfully", post_id=str(post.id))
        return Success()

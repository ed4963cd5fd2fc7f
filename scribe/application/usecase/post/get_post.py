"""Get post use case."""

from uuid import UUID

from pydantic import BaseModel

from scribe.application.usecase.base import BaseUseCase
from scribe.application.usecase.post.resource import PostResource
from scribe.application.usecase.result import NotFound, Result, Success
from scribe.domain.service import CoverService, PostService
from scribe.domain.value import PostId, UserId


class GetPostRequest(BaseModel):
    """Get post request."""

    owner_id: str  # User ID from authenticated user
    post_id: str  # Raw path value, may not be a UUID


def parse_post_id(value: str) -> PostId | None:
    """Parse a post ID from a path value, None if it is not a UUID."""
    try:
        return PostId(UUID(value))
    except ValueError:
        return None


class GetPostUseCase(BaseUseCase):
    """Use case for retrieving one of the current user's posts."""

    def __init__(self, post_service: PostService, cover_service: CoverService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            cover_service: Cover domain service (for cover URLs)
        """
        self.post_service = post_service
        self.cover_service = cover_service

    async def execute(self, request: GetPostRequest) -> Result:
        """Look up the post; someone else's post is reported as not found."""
        post_id = parse_post_id(request.post_id)
        if post_id is None:
            return NotFound(resource="Post", identifier=request.post_id)

        post = await self.post_service.get_post(UserId(UUID(request.owner_id)), post_id)
        if not post:
            return NotFound(resource="Post", identifier=request.post_id)

        return Success[PostResource](
            data=PostResource.from_post(post, self.cover_service)
        )

"""List posts use case."""

from typing import Any
from uuid import UUID

from pydantic import BaseModel, field_validator

from scribe.application.usecase.base import BaseUseCase
from scribe.application.usecase.post.resource import PostResource
from scribe.application.usecase.result import Result, Success
from scribe.config import Settings
from scribe.domain.service import CoverService, PostService
from scribe.domain.value import UserId


class ListPostsRequest(BaseModel):
    """List posts request."""

    owner_id: str  # User ID from authenticated user
    keyword: str | None = None
    page: int = 1

    @field_validator("page", mode="before")
    @classmethod
    def lenient_page(cls, value: Any) -> int:
        """Anything that is not a positive integer means the first page."""
        try:
            page = int(value)
        except (TypeError, ValueError):
            return 1
        return max(page, 1)


class ListPostsResponse(BaseModel):
    """One page of the user's posts."""

    items: list[PostResource]
    current_page: int
    per_page: int
    total: int
    last_page: int


class ListPostsUseCase(BaseUseCase):
    """Use case for listing the current user's posts."""

    def __init__(
        self,
        post_service: PostService,
        cover_service: CoverService,
        settings: Settings,
    ) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
            cover_service: Cover domain service (for cover URLs)
            settings: Application settings (page size)
        """
        self.post_service = post_service
        self.cover_service = cover_service
        self.settings = settings

    async def execute(self, request: ListPostsRequest) -> Result:
        """List posts newest first, optionally filtered by title keyword.

        A blank keyword means no filter.
        """
        keyword = request.keyword if request.keyword and request.keyword.strip() else None
        page = await self.post_service.list_posts(
            UserId(UUID(request.owner_id)),
            keyword=keyword,
            page=request.page,
            per_page=self.settings.pagination.per_page,
        )

        return Success[ListPostsResponse](
            data=ListPostsResponse(
                items=[
                    PostResource.from_post(post, self.cover_service)
                    for post in page.items
                ],
                current_page=page.page,
                per_page=page.per_page,
                total=page.total,
                last_page=page.last_page,
            )
        )

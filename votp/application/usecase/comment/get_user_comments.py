"""Get user comments use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from votp.application.usecase.base import BaseUseCase
from votp.config import CommentSettings
from votp.domain.service import CommentService
from votp.domain.value import UserId

from .get_comments import CommentItem


class GetUserCommentsRequest(BaseModel):
    """Get user comments request."""

    user_id: str  # UUID string
    limit: int | None = Field(default=None, ge=1)


class GetUserCommentsResponse(BaseModel):
    """Get user comments response."""

    user_id: str
    comments: list[CommentItem]
    total: int


class GetUserCommentsUseCase(BaseUseCase):
    """Use case for listing a user's most recent comments."""

    def __init__(
        self, comment_service: CommentService, comment_settings: CommentSettings
    ) -> None:
        """Initialize get user comments use case.

        Args:
            comment_service: Comment domain service
            comment_settings: Listing limits
        """
        self.comment_service = comment_service
        self.comment_settings = comment_settings

    async def execute(self, request: GetUserCommentsRequest) -> GetUserCommentsResponse:
        """Execute get user comments flow.

        A missing limit uses the configured default; larger limits are
        capped at the configured maximum.

        Args:
            request: Get user comments request

        Returns:
            Comments by the user, newest first

        Raises:
            ValueError: If user_id is not a valid UUID
        """
        user_id = UserId(UUID(request.user_id))
        limit = min(
            request.limit or self.comment_settings.user_comments_default_limit,
            self.comment_settings.user_comments_max_limit,
        )

        comments = await self.comment_service.get_user_comments(user_id, limit)

        items = [CommentItem.from_comment(comment) for comment in comments]
        return GetUserCommentsResponse(
            user_id=request.user_id, comments=items, total=len(items)
        )

"""Search comments use case."""

from pydantic import BaseModel, Field

from votp.application.usecase.base import BaseUseCase
from votp.config import CommentSettings
from votp.domain.service import CommentService

from .get_comments import CommentItem


class SearchCommentsRequest(BaseModel):
    """Search comments request."""

    term: str
    limit: int | None = Field(default=None, ge=1)


class SearchCommentsResponse(BaseModel):
    """Search comments response."""

    term: str
    comments: list[CommentItem]
    total: int


class SearchCommentsUseCase(BaseUseCase):
    """Use case for searching comment content across all pages."""

    def __init__(
        self, comment_service: CommentService, comment_settings: CommentSettings
    ) -> None:
        """Initialize search comments use case.

        Args:
            comment_service: Comment domain service
            comment_settings: Search limits
        """
        self.comment_service = comment_service
        self.comment_settings = comment_settings

    async def execute(self, request: SearchCommentsRequest) -> SearchCommentsResponse:
        """Execute search flow.

        Args:
            request: Search request

        Returns:
            Matching comments, newest first

        Raises:
            EmptySearchTermError: If the term is blank
        """
        limit = min(
            request.limit or self.comment_settings.search_default_limit,
            self.comment_settings.search_max_limit,
        )

        comments = await self.comment_service.search_comments(request.term, limit)

        items = [CommentItem.from_comment(comment) for comment in comments]
        return SearchCommentsResponse(
            term=request.term, comments=items, total=len(items)
        )

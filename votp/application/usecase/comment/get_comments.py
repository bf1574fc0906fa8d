"""Get comments use case."""

from datetime import datetime

from pydantic import BaseModel

from votp.application.usecase.base import BaseUseCase
from votp.domain.model import Comment
from votp.domain.service import CommentService
from votp.domain.value import SortOrder


class CommentItem(BaseModel):
    """Comment item in response."""

    comment_id: str
    content: str
    url: str
    canonical_url: str
    grouping_key: str
    author_id: str
    parent_id: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentItem":
        """Build a response item from a domain comment."""
        return cls(
            comment_id=str(comment.id),
            content=comment.content,
            url=comment.raw_url,
            canonical_url=comment.canonical_url,
            grouping_key=str(comment.grouping_key),
            author_id=str(comment.author_id),
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    url: str
    order: SortOrder = SortOrder.ASC


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    url: str
    canonical_url: str
    grouping_key: str
    comments: list[CommentItem]
    total: int


class GetCommentsUseCase(BaseUseCase):
    """Use case for getting every comment on the page a URL refers to."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Any URL variant of a page (tracking parameters, www prefix,
        trailing slash) returns the same comments. Replies are included
        flat; clients rebuild threads from parent_id.

        Args:
            request: Get comments request with page URL and ordering

        Returns:
            Comments on the page ordered by creation time

        Raises:
            InvalidUrlError: If the URL cannot be parsed
        """
        canonical, comments = await self.comment_service.get_comments_for_url(
            raw_url=request.url, order=request.order
        )

        items = [CommentItem.from_comment(comment) for comment in comments]
        return GetCommentsResponse(
            url=request.url,
            canonical_url=canonical.canonical_form,
            grouping_key=str(canonical.grouping_key),
            comments=items,
            total=len(items),
        )

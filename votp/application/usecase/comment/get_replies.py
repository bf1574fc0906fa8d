"""Get comment replies use case."""

from uuid import UUID

from pydantic import BaseModel

from votp.application.usecase.base import BaseUseCase
from votp.domain.service import CommentService
from votp.domain.value import CommentId

from .get_comments import CommentItem


class GetCommentRepliesRequest(BaseModel):
    """Get comment replies request."""

    comment_id: str  # UUID string


class GetCommentRepliesResponse(BaseModel):
    """Get comment replies response."""

    parent_id: str
    replies: list[CommentItem]
    total: int


class GetCommentRepliesUseCase(BaseUseCase):
    """Use case for getting the direct replies to a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(
        self, request: GetCommentRepliesRequest
    ) -> GetCommentRepliesResponse:
        """Execute get replies flow.

        Raises:
            ValueError: If comment_id is not a valid UUID
        """
        parent_id = CommentId(UUID(request.comment_id))
        replies = await self.comment_service.get_replies(parent_id)

        items = [CommentItem.from_comment(reply) for reply in replies]
        return GetCommentRepliesResponse(
            parent_id=request.comment_id, replies=items, total=len(items)
        )

"""Update comment use case."""

from uuid import UUID

from pydantic import BaseModel

from votp.application.usecase.base import BaseUseCase
from votp.domain.service import MutationGuard
from votp.domain.value import CommentId

from .get_comments import CommentItem


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    auth_token: str | None
    comment_id: str  # UUID string
    content: str


class UpdateCommentResponse(CommentItem):
    """Update comment response."""


class UpdateCommentUseCase(BaseUseCase):
    """Use case for editing a comment's content."""

    def __init__(self, mutation_guard: MutationGuard) -> None:
        """Initialize update comment use case.

        Args:
            mutation_guard: Authenticating gate for comment writes
        """
        self.mutation_guard = mutation_guard

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Only the author can edit. A missing comment and someone else's
        comment produce the same error.

        Args:
            request: Update comment request

        Returns:
            Updated comment

        Raises:
            ValueError: If comment_id is not a valid UUID
            AuthenticationRequiredError: If the caller is not authenticated
            EmptyContentError: If content is blank
            ContentTooLongError: If content is too long
            NotFoundOrForbiddenError: If missing or not owned by the caller
        """
        comment_id = CommentId(UUID(request.comment_id))

        comment = await self.mutation_guard.update_comment(
            credential=request.auth_token,
            comment_id=comment_id,
            content=request.content,
        )

        return UpdateCommentResponse(
            **CommentItem.from_comment(comment).model_dump()
        )

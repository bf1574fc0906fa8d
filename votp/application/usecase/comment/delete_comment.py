"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from votp.application.usecase.base import BaseUseCase
from votp.domain.service import MutationGuard
from votp.domain.value import CommentId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    auth_token: str | None
    comment_id: str  # UUID string


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: str
    deleted: bool


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting a comment together with its replies."""

    def __init__(self, mutation_guard: MutationGuard) -> None:
        """Initialize delete comment use case.

        Args:
            mutation_guard: Authenticating gate for comment writes
        """
        self.mutation_guard = mutation_guard

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Args:
            request: Delete comment request

        Returns:
            Confirmation of the deletion

        Raises:
            ValueError: If comment_id is not a valid UUID
            AuthenticationRequiredError: If the caller is not authenticated
            NotFoundOrForbiddenError: If missing or not owned by the caller
        """
        comment_id = CommentId(UUID(request.comment_id))

        await self.mutation_guard.delete_comment(
            credential=request.auth_token, comment_id=comment_id
        )

        return DeleteCommentResponse(comment_id=request.comment_id, deleted=True)

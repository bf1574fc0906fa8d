"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from votp.application.usecase.base import BaseUseCase
from votp.domain.service import MutationGuard
from votp.domain.value import CommentId

from .get_comments import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    auth_token: str | None  # Bearer credential of the caller
    content: str
    url: str  # Page URL as seen by the author
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentResponse(CommentItem):
    """Create comment response."""


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on a page or replying to another comment."""

    def __init__(self, mutation_guard: MutationGuard) -> None:
        """Initialize create comment use case.

        Args:
            mutation_guard: Authenticating gate for comment writes
        """
        self.mutation_guard = mutation_guard

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            Created comment

        Raises:
            ValueError: If parent_id is not a valid UUID
            AuthenticationRequiredError: If the caller is not authenticated
            EmptyContentError: If content is blank
            ContentTooLongError: If content is too long
            InvalidUrlError: If the URL cannot be parsed
            ParentNotFoundError: If the parent comment does not exist
        """
        parent_id = CommentId(UUID(request.parent_id)) if request.parent_id else None

        comment = await self.mutation_guard.create_comment(
            credential=request.auth_token,
            content=request.content,
            raw_url=request.url,
            parent_id=parent_id,
        )

        return CreateCommentResponse(
            **CommentItem.from_comment(comment).model_dump()
        )

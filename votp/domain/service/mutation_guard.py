"""Mutation guard: the mandatory gate in front of every comment write."""

import logfire

from votp.domain.error import AuthenticationRequiredError
from votp.domain.model.comment import Comment
from votp.domain.value import CommentId, UserId

from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService


class MutationGuard(Service):
    """Resolves the caller before any comment is created, edited or deleted.

    Authentication runs first, so unauthenticated callers never trigger URL
    canonicalization, content validation or a storage read.
    """

    def __init__(self, jwt_service: JWTService, comment_service: CommentService) -> None:
        """Initialize mutation guard.

        Args:
            jwt_service: Caller identity capability
            comment_service: Comment domain service
        """
        self.jwt_service = jwt_service
        self.comment_service = comment_service

    def require_author(self, credential: str | None) -> UserId:
        """Resolve a bearer credential to an author.

        Args:
            credential: Bearer token, if any

        Returns:
            Authenticated user ID

        Raises:
            AuthenticationRequiredError: If the credential is missing or invalid
        """
        user_id = self.jwt_service.resolve_user_id(credential)
        if user_id is None:
            logfire.warn("Unauthenticated comment mutation rejected")
            raise AuthenticationRequiredError()
        return user_id

    async def create_comment(
        self,
        credential: str | None,
        content: str,
        raw_url: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment as the authenticated caller."""
        author_id = self.require_author(credential)
        return await self.comment_service.create_comment(
            content=content,
            raw_url=raw_url,
            author_id=author_id,
            parent_id=parent_id,
        )

    async def update_comment(
        self, credential: str | None, comment_id: CommentId, content: str
    ) -> Comment:
        """Edit a comment as the authenticated caller."""
        author_id = self.require_author(credential)
        return await self.comment_service.update_comment(
            comment_id=comment_id, content=content, author_id=author_id
        )

    async def delete_comment(self, credential: str | None, comment_id: CommentId) -> None:
        """Delete a comment as the authenticated caller."""
        author_id = self.require_author(credential)
        await self.comment_service.delete_comment(
            comment_id=comment_id, author_id=author_id
        )

"""Comment domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from votp.domain.error import (
    EmptySearchTermError,
    InvalidUrlError,
    NotFoundOrForbiddenError,
    ParentNotFoundError,
)
from votp.domain.model.comment import Comment
from votp.domain.repository import CommentRepository
from votp.domain.value import CanonicalUrl, CommentId, SortOrder, UserId
from votp.util.url import UrlError

from .base import Service
from .canonicalization_service import CanonicalizationService


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        canonicalization_service: CanonicalizationService,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            canonicalization_service: URL canonicalization service
        """
        self.comment_repository = comment_repository
        self.canonicalization_service = canonicalization_service

    async def create_comment(
        self,
        content: str,
        raw_url: str,
        author_id: UserId,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a page or reply to another comment.

        The grouping key is always derived from raw_url here; callers
        cannot supply one.

        Args:
            content: Comment content (trimmed before storing)
            raw_url: Page URL as supplied by the author
            author_id: Authenticated author
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            EmptyContentError: If content is blank
            ContentTooLongError: If content exceeds the maximum length
            InvalidUrlError: If raw_url cannot be parsed
            ParentNotFoundError: If parent_id does not exist
        """
        with logfire.span(
            "comment_service.create_comment",
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            cleaned = Comment.clean_content(content)
            canonical = self._canonicalize(raw_url)

            if parent_id and not await self.comment_repository.exists(parent_id):
                logfire.warn("Parent comment not found", parent_id=str(parent_id))
                raise ParentNotFoundError(str(parent_id))

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                content=cleaned,
                raw_url=raw_url,
                canonical_url=canonical.canonical_form,
                grouping_key=canonical.grouping_key,
                author_id=author_id,
                parent_id=parent_id,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.insert(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                author_id=str(author_id),
                raw_url=raw_url,
                grouping_key=str(saved.grouping_key),
            )
            return saved

    async def update_comment(
        self, comment_id: CommentId, content: str, author_id: UserId
    ) -> Comment:
        """Replace the content of a comment owned by the author.

        Args:
            comment_id: Comment ID
            content: New content (trimmed before storing)
            author_id: Authenticated caller

        Returns:
            Updated comment

        Raises:
            EmptyContentError: If content is blank
            ContentTooLongError: If content exceeds the maximum length
            NotFoundOrForbiddenError: If the comment is missing or not owned
        """
        with logfire.span(
            "comment_service.update_comment",
            comment_id=str(comment_id),
            author_id=str(author_id),
        ):
            cleaned = Comment.clean_content(content)

            updated = await self.comment_repository.update_content(
                comment_id, author_id, cleaned
            )
            if updated is None:
                logfire.warn(
                    "Comment not found or not owned for update",
                    comment_id=str(comment_id),
                    author_id=str(author_id),
                )
                raise NotFoundOrForbiddenError("edit", str(comment_id))

            logfire.info(
                "Comment updated",
                comment_id=str(comment_id),
                content_length=len(updated.content),
            )
            return updated

    async def delete_comment(self, comment_id: CommentId, author_id: UserId) -> None:
        """Delete a comment owned by the author.

        Replies are removed by the storage cascade, not walked here.

        Args:
            comment_id: Comment ID
            author_id: Authenticated caller

        Raises:
            NotFoundOrForbiddenError: If the comment is missing or not owned
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            author_id=str(author_id),
        ):
            deleted = await self.comment_repository.delete(comment_id, author_id)
            if deleted == 0:
                logfire.warn(
                    "Comment not found or not owned for delete",
                    comment_id=str(comment_id),
                    author_id=str(author_id),
                )
                raise NotFoundOrForbiddenError("delete", str(comment_id))

            logfire.info("Comment deleted", comment_id=str(comment_id))

    async def get_comments_for_url(
        self, raw_url: str, order: SortOrder = SortOrder.ASC
    ) -> tuple[CanonicalUrl, list[Comment]]:
        """Get all comments on the page a URL refers to.

        Args:
            raw_url: Any URL variant of the page
            order: Creation time ordering

        Returns:
            The page's canonical URL and its comments

        Raises:
            InvalidUrlError: If raw_url cannot be parsed
        """
        with logfire.span("comment_service.get_comments_for_url", raw_url=raw_url):
            canonical = self._canonicalize(raw_url)
            comments = await self.comment_repository.list_by_grouping_key(
                canonical.grouping_key, order
            )
            logfire.info(
                "Comments retrieved for URL",
                grouping_key=str(canonical.grouping_key),
                count=len(comments),
            )
            return canonical, comments

    async def get_replies(self, parent_id: CommentId) -> list[Comment]:
        """Get direct replies to a comment, oldest first.

        Args:
            parent_id: Parent comment ID

        Returns:
            Replies (empty if the comment has none or does not exist)
        """
        with logfire.span("comment_service.get_replies", parent_id=str(parent_id)):
            return await self.comment_repository.find_children(parent_id)

    async def get_user_comments(self, author_id: UserId, limit: int) -> list[Comment]:
        """Get an author's most recent comments.

        Args:
            author_id: Author user ID
            limit: Maximum number of comments

        Returns:
            Comments, newest first
        """
        with logfire.span(
            "comment_service.get_user_comments", author_id=str(author_id), limit=limit
        ):
            return await self.comment_repository.find_by_author(author_id, limit)

    async def search_comments(self, term: str, limit: int) -> list[Comment]:
        """Search comment content.

        Args:
            term: Text to look for (surrounding whitespace ignored)
            limit: Maximum number of comments

        Returns:
            Matching comments, newest first

        Raises:
            EmptySearchTermError: If term is blank
        """
        term = term.strip()
        if not term:
            raise EmptySearchTermError()

        with logfire.span("comment_service.search_comments", term=term, limit=limit):
            comments = await self.comment_repository.search(term, limit)
            logfire.info("Comment search completed", term=term, count=len(comments))
            return comments

    def _canonicalize(self, raw_url: str) -> CanonicalUrl:
        try:
            return self.canonicalization_service.canonicalize(raw_url)
        except UrlError as e:
            logfire.warn("Invalid comment URL", raw_url=raw_url, error=str(e))
            raise InvalidUrlError(str(e)) from e

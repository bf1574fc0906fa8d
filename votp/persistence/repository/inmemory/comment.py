"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Optional

from votp.domain.error import ParentNotFoundError
from votp.domain.model.comment import Comment
from votp.domain.repository.comment import CommentRepository
from votp.domain.value import CommentId, GroupingKey, SortOrder, UserId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Mirrors the database constraints: inserting a reply to a missing parent
    fails, and deleting a comment removes all of its descendants.
    """

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def exists(self, comment_id: CommentId) -> bool:
        """Check whether a comment exists."""
        return comment_id in self._comments

    async def insert(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        if comment.parent_id and comment.parent_id not in self._comments:
            raise ParentNotFoundError(str(comment.parent_id))
        self._comments[comment.id] = comment
        return comment

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_owned(
        self, comment_id: CommentId, author_id: UserId
    ) -> Optional[Comment]:
        """Find a comment by ID only if it belongs to the author."""
        comment = self._comments.get(comment_id)
        if comment and comment.author_id == author_id:
            return comment
        return None

    async def update_content(
        self, comment_id: CommentId, author_id: UserId, content: str
    ) -> Optional[Comment]:
        """Replace a comment's content if it belongs to the author."""
        comment = await self.find_owned(comment_id, author_id)
        if comment is None:
            return None

        updated = comment.with_content(content, datetime.now())
        self._comments[comment_id] = updated
        return updated

    async def delete(self, comment_id: CommentId, author_id: UserId) -> int:
        """Delete a comment and its descendants if it belongs to the author."""
        if await self.find_owned(comment_id, author_id) is None:
            return 0

        # Cascade
        pending = [comment_id]
        while pending:
            current = pending.pop()
            self._comments.pop(current, None)
            pending.extend(
                c.id for c in self._comments.values() if c.parent_id == current
            )
        return 1

    async def list_by_grouping_key(
        self, grouping_key: GroupingKey, order: SortOrder = SortOrder.ASC
    ) -> list[Comment]:
        """List all comments on a page ordered by creation time."""
        comments = [
            c for c in self._comments.values() if c.grouping_key == grouping_key
        ]
        comments.sort(
            key=lambda c: (c.created_at, str(c.id)), reverse=order == SortOrder.DESC
        )
        return comments

    async def find_children(self, parent_id: CommentId) -> list[Comment]:
        """Find direct replies to a comment, oldest first."""
        comments = [c for c in self._comments.values() if c.parent_id == parent_id]
        comments.sort(key=lambda c: (c.created_at, str(c.id)))
        return comments

    async def find_by_author(self, author_id: UserId, limit: int) -> list[Comment]:
        """Find an author's most recent comments."""
        comments = [c for c in self._comments.values() if c.author_id == author_id]
        comments.sort(key=lambda c: c.created_at, reverse=True)
        return comments[:limit]

    async def search(self, term: str, limit: int) -> list[Comment]:
        """Case-insensitive substring search over comment content."""
        needle = term.casefold()
        comments = [
            c for c in self._comments.values() if needle in c.content.casefold()
        ]
        comments.sort(key=lambda c: c.created_at, reverse=True)
        return comments[:limit]

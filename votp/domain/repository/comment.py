"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from votp.domain.model.comment import Comment
from votp.domain.value import CommentId, GroupingKey, SortOrder, UserId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Ownership-sensitive writes (update_content, delete) filter on both id
    and author in a single statement, so a comment that vanishes or is
    owned by someone else between a check and the write is never touched.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def exists(self, comment_id: CommentId) -> bool:
        """Check whether a comment exists.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            True if the comment exists
        """
        pass

    @abstractmethod
    async def insert(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to insert

        Returns:
            The stored comment

        Raises:
            ParentNotFoundError: If the parent no longer exists at write time
        """
        pass

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_owned(
        self, comment_id: CommentId, author_id: UserId
    ) -> Optional[Comment]:
        """Find a comment by ID only if it belongs to the author.

        Read-only lookup. Writes do not call it first: update_content and
        delete apply the same id and author filter in their own statement.

        Args:
            comment_id: The comment's unique identifier
            author_id: The expected author

        Returns:
            The comment if it exists and is owned by author_id, None otherwise
        """
        pass

    @abstractmethod
    async def update_content(
        self, comment_id: CommentId, author_id: UserId, content: str
    ) -> Optional[Comment]:
        """Replace a comment's content if it belongs to the author.

        Args:
            comment_id: The comment ID
            author_id: The expected author
            content: Validated new content

        Returns:
            The updated comment, None if missing or not owned
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId, author_id: UserId) -> int:
        """Delete a comment if it belongs to the author.

        Replies to the deleted comment are removed with it.

        Args:
            comment_id: The comment ID
            author_id: The expected author

        Returns:
            Number of comments matched by id and author (0 or 1)
        """
        pass

    @abstractmethod
    async def list_by_grouping_key(
        self, grouping_key: GroupingKey, order: SortOrder = SortOrder.ASC
    ) -> List[Comment]:
        """List all comments on a page ordered by creation time.

        Args:
            grouping_key: Grouping key of the page's canonical URL
            order: Creation time ordering

        Returns:
            Comments on the page
        """
        pass

    @abstractmethod
    async def find_children(self, parent_id: CommentId) -> List[Comment]:
        """Find direct replies to a comment, oldest first.

        Args:
            parent_id: The parent comment ID

        Returns:
            List of child comments
        """
        pass

    @abstractmethod
    async def find_by_author(self, author_id: UserId, limit: int) -> List[Comment]:
        """Find an author's most recent comments.

        Args:
            author_id: The author's user ID
            limit: Maximum number of comments to return

        Returns:
            Comments by the author, newest first
        """
        pass

    @abstractmethod
    async def search(self, term: str, limit: int) -> List[Comment]:
        """Case-insensitive substring search over comment content.

        Args:
            term: Literal text to look for (no wildcards)
            limit: Maximum number of comments to return

        Returns:
            Matching comments, newest first
        """
        pass

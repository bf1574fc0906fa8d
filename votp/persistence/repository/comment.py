"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import asc, desc, exists, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from votp.domain.error import ParentNotFoundError
from votp.domain.model import Comment
from votp.domain.repository import CommentRepository
from votp.domain.value import CommentId, GroupingKey, SortOrder, UserId
from votp.persistence.mappers import comment_to_dict, row_to_comment
from votp.persistence.tables import PARENT_FOREIGN_KEY, comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def exists(self, comment_id: CommentId) -> bool:
        """Check whether a comment exists."""
        stmt = select(exists().where(comments_table.c.id == comment_id))
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def insert(self, comment: Comment) -> Comment:
        """Insert a new comment.

        The parent foreign key rejects replies whose parent was deleted
        after the service checked for it.
        """
        stmt = comments_table.insert().values(**comment_to_dict(comment))
        try:
            # Savepoint keeps the request transaction usable after a violation
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError as e:
            if PARENT_FOREIGN_KEY in str(e.orig):
                raise ParentNotFoundError(str(comment.parent_id)) from e
            raise

        return comment

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_owned(
        self, comment_id: CommentId, author_id: UserId
    ) -> Optional[Comment]:
        """Find a comment by ID only if it belongs to the author."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.user_id == author_id)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def update_content(
        self, comment_id: CommentId, author_id: UserId, content: str
    ) -> Optional[Comment]:
        """Replace a comment's content if it belongs to the author."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.user_id == author_id)
            .values(content=content, updated_at=datetime.now())
            .returning(comments_table)
        )

        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

    async def delete(self, comment_id: CommentId, author_id: UserId) -> int:
        """Delete a comment if it belongs to the author.

        Replies go with it through ON DELETE CASCADE.
        """
        stmt = (
            comments_table.delete()
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.user_id == author_id)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def list_by_grouping_key(
        self, grouping_key: GroupingKey, order: SortOrder = SortOrder.ASC
    ) -> List[Comment]:
        """List all comments on a page ordered by creation time."""
        direction = asc if order == SortOrder.ASC else desc
        stmt = (
            select(comments_table)
            .where(comments_table.c.url_hash == grouping_key.root)
            .order_by(
                direction(comments_table.c.created_at), direction(comments_table.c.id)
            )
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_children(self, parent_id: CommentId) -> List[Comment]:
        """Find direct replies to a comment, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.parent_id == parent_id)
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_by_author(self, author_id: UserId, limit: int) -> List[Comment]:
        """Find an author's most recent comments."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.user_id == author_id)
            .order_by(desc(comments_table.c.created_at))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def search(self, term: str, limit: int) -> List[Comment]:
        """Case-insensitive substring search over comment content."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.content.icontains(term, autoescape=True))
            .order_by(desc(comments_table.c.created_at))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

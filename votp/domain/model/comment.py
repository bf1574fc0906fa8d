"""Comment entity.

Comments are attached to third-party web pages and grouped by the
grouping key of the page's canonical URL. Replies reference their parent
by id, so all comments form a forest stored flat.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from votp.domain.error import ContentTooLongError, EmptyContentError
from votp.domain.model.common import DomainModel
from votp.domain.value import CommentId, GroupingKey, UserId

MAX_CONTENT_LENGTH = 5000


class Comment(DomainModel):
    """Comment entity.

    - raw_url: the URL exactly as supplied by the author
    - canonical_url / grouping_key: derived from raw_url at creation time
    - parent_id: direct parent comment (None for top-level)

    The author never changes after creation; updates only replace the
    content and bump updated_at.
    """

    id: CommentId
    content: str = Field(min_length=1, max_length=MAX_CONTENT_LENGTH)
    raw_url: str
    canonical_url: str
    grouping_key: GroupingKey
    author_id: UserId
    parent_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @staticmethod
    def clean_content(raw_content: str) -> str:
        """Trim and validate comment content.

        Length is measured in characters after trimming.

        Args:
            raw_content: Content as submitted

        Returns:
            Trimmed content

        Raises:
            EmptyContentError: If nothing is left after trimming
            ContentTooLongError: If longer than MAX_CONTENT_LENGTH
        """
        content = raw_content.strip()
        if not content:
            raise EmptyContentError()
        if len(content) > MAX_CONTENT_LENGTH:
            raise ContentTooLongError(MAX_CONTENT_LENGTH)
        return content

    def with_content(self, content: str, updated_at: datetime) -> "Comment":
        """Copy of this comment with new content."""
        return self.model_copy(update={"content": content, "updated_at": updated_at})

"""Domain model entities for VOTP."""

from votp.domain.model.comment import MAX_CONTENT_LENGTH, Comment
from votp.domain.model.user import User

__all__ = [
    "Comment",
    "MAX_CONTENT_LENGTH",
    "User",
]

"""PostgreSQL repository implementations."""

from votp.persistence.repository.comment import PostgresCommentRepository
from votp.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresUserRepository",
]

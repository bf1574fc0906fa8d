"""Repository interfaces for VOTP domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from votp.domain.repository.comment import CommentRepository
from votp.domain.repository.user import UserRepository

__all__ = [
    "CommentRepository",
    "UserRepository",
]

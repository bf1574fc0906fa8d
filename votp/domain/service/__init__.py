"""Domain services."""

from .base import Service
from .canonicalization_service import CanonicalizationService
from .comment_service import CommentService
from .jwt_service import JWTService
from .mutation_guard import MutationGuard
from .user_service import UserService

__all__ = [
    "CanonicalizationService",
    "CommentService",
    "JWTService",
    "MutationGuard",
    "Service",
    "UserService",
]

"""Mappers between database rows and domain models.

Column names follow the storage schema (url, normalized_url, url_hash,
user_id); the domain model uses raw_url, canonical_url, grouping_key and
author_id.
"""

from typing import Any, Dict
from uuid import UUID

from votp.domain.model import Comment, User
from votp.domain.value import CommentId, GroupingKey, UserId


def _as_uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_as_uuid(row["id"])),
        content=row["content"],
        raw_url=row["url"],
        canonical_url=row["normalized_url"],
        grouping_key=GroupingKey(row["url_hash"]),
        author_id=UserId(_as_uuid(row["user_id"])),
        parent_id=CommentId(_as_uuid(row["parent_id"]))
        if row.get("parent_id")
        else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion
    """
    return {
        "id": comment.id,
        "content": comment.content,
        "url": comment.raw_url,
        "normalized_url": comment.canonical_url,
        "url_hash": comment.grouping_key.root,
        "user_id": comment.author_id,
        "parent_id": comment.parent_id,
        "created_at": comment.created_at,
        "updated_at": comment.updated_at,
    }


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_as_uuid(row["id"])),
        name=row["name"],
        email=row["email"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return user.model_dump()

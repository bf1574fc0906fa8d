"""Unit tests for persistence mappers."""

from uuid import uuid4

from votp.persistence.mappers import (
    comment_to_dict,
    row_to_comment,
    row_to_user,
    user_to_dict,
)
from tests.factories import make_comment, make_user


class TestCommentMapping:
    """Tests for comment row mapping."""

    def test_dict_uses_storage_column_names(self):
        # Arrange
        comment = make_comment(url="https://www.example.com/a/?ref=x")

        # Act
        row = comment_to_dict(comment)

        # Assert
        assert row["url"] == "https://www.example.com/a/?ref=x"
        assert row["normalized_url"] == "https://example.com/a"
        assert row["url_hash"] == comment.grouping_key.root
        assert row["user_id"] == comment.author_id
        assert row["parent_id"] is None

    def test_row_to_comment_accepts_string_ids(self):
        # Arrange
        comment = make_comment()
        parent_id = uuid4()
        row = {
            **comment_to_dict(comment),
            "id": str(comment.id),
            "user_id": str(comment.author_id),
            "parent_id": str(parent_id),
        }

        # Act
        mapped = row_to_comment(row)

        # Assert
        assert mapped.id == comment.id
        assert mapped.author_id == comment.author_id
        assert mapped.parent_id == parent_id
        assert mapped.grouping_key == comment.grouping_key
        assert mapped.canonical_url == comment.canonical_url


class TestUserMapping:
    """Tests for user row mapping."""

    def test_dict_uses_storage_column_names(self):
        user = make_user(name="Alice")

        row = user_to_dict(user)

        assert set(row) == {"id", "name", "email", "created_at", "updated_at"}
        assert row_to_user(row) == user

    def test_row_to_user_accepts_string_id(self):
        user = make_user()
        row = {**user_to_dict(user), "id": str(user.id)}

        assert row_to_user(row).id == user.id

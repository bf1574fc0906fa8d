"""Unit tests for the Comment entity."""

import pytest

from votp.domain.error import ContentTooLongError, EmptyContentError
from votp.domain.model.comment import MAX_CONTENT_LENGTH, Comment
from tests.factories import make_comment


class TestCleanContent:
    """Tests for Comment.clean_content."""

    def test_trims_surrounding_whitespace(self):
        assert Comment.clean_content("  hello \n") == "hello"

    @pytest.mark.parametrize("raw", ["", "   ", "\n\t "])
    def test_blank_rejected(self, raw):
        with pytest.raises(EmptyContentError):
            Comment.clean_content(raw)

    def test_maximum_length_accepted(self):
        content = "x" * MAX_CONTENT_LENGTH

        assert Comment.clean_content(content) == content

    def test_one_over_maximum_rejected(self):
        with pytest.raises(ContentTooLongError) as exc_info:
            Comment.clean_content("x" * (MAX_CONTENT_LENGTH + 1))

        assert "max 5000 characters" in str(exc_info.value)

    def test_length_measured_after_trim(self):
        content = "  " + "x" * MAX_CONTENT_LENGTH + "  "

        assert len(Comment.clean_content(content)) == MAX_CONTENT_LENGTH

    def test_length_counts_characters_not_bytes(self):
        content = "é" * MAX_CONTENT_LENGTH

        assert Comment.clean_content(content) == content


class TestWithContent:
    """Tests for Comment.with_content."""

    def test_replaces_content_only(self):
        # Arrange
        comment = make_comment(content="before")

        # Act
        updated = comment.with_content("after", comment.updated_at)

        # Assert
        assert updated.content == "after"
        assert updated.id == comment.id
        assert updated.author_id == comment.author_id
        assert updated.grouping_key == comment.grouping_key
        assert comment.content == "before"

"""Unit tests for InMemoryCommentRepository."""

from uuid import uuid4

import pytest

from votp.domain.error import ParentNotFoundError
from votp.domain.value import CommentId, GroupingKey, SortOrder
from votp.persistence.repository.inmemory import InMemoryCommentRepository
from tests.factories import make_comment, minutes_ago


class TestInsert:
    """Tests for insert."""

    @pytest.mark.asyncio
    async def test_insert_and_find(self):
        repo = InMemoryCommentRepository()
        comment = make_comment()

        await repo.insert(comment)

        assert await repo.exists(comment.id)
        assert await repo.find_by_id(comment.id) == comment

    @pytest.mark.asyncio
    async def test_reply_to_missing_parent_rejected(self):
        repo = InMemoryCommentRepository()

        with pytest.raises(ParentNotFoundError):
            await repo.insert(make_comment(parent_id=CommentId(uuid4())))


class TestOwnershipFilteredWrites:
    """update_content and delete only touch the author's own comments."""

    @pytest.mark.asyncio
    async def test_find_owned(self, author_id, other_author_id):
        repo = InMemoryCommentRepository()
        comment = await repo.insert(make_comment(author_id=author_id))

        assert await repo.find_owned(comment.id, author_id) == comment
        assert await repo.find_owned(comment.id, other_author_id) is None

    @pytest.mark.asyncio
    async def test_update_content(self, author_id, other_author_id):
        # Arrange
        repo = InMemoryCommentRepository()
        comment = await repo.insert(make_comment(author_id=author_id, content="a"))

        # Act
        rejected = await repo.update_content(comment.id, other_author_id, "b")
        updated = await repo.update_content(comment.id, author_id, "c")

        # Assert
        assert rejected is None
        assert updated.content == "c"
        assert (await repo.find_by_id(comment.id)).content == "c"

    @pytest.mark.asyncio
    async def test_delete_counts(self, author_id, other_author_id):
        repo = InMemoryCommentRepository()
        comment = await repo.insert(make_comment(author_id=author_id))

        assert await repo.delete(comment.id, other_author_id) == 0
        assert await repo.delete(CommentId(uuid4()), author_id) == 0
        assert await repo.delete(comment.id, author_id) == 1
        assert not await repo.exists(comment.id)

    @pytest.mark.asyncio
    async def test_delete_cascades_to_descendants_only(self, author_id):
        # Arrange
        repo = InMemoryCommentRepository()
        root = await repo.insert(make_comment(author_id=author_id))
        child = await repo.insert(make_comment(parent_id=root.id))
        grandchild = await repo.insert(make_comment(parent_id=child.id))
        sibling = await repo.insert(make_comment())

        # Act
        await repo.delete(root.id, author_id)

        # Assert
        assert not await repo.exists(child.id)
        assert not await repo.exists(grandchild.id)
        assert await repo.exists(sibling.id)


class TestQueries:
    """Tests for the list and search queries."""

    @pytest.mark.asyncio
    async def test_list_by_grouping_key(self):
        # Arrange
        repo = InMemoryCommentRepository()
        newer = await repo.insert(make_comment(created_at=minutes_ago(1)))
        older = await repo.insert(make_comment(created_at=minutes_ago(9)))
        await repo.insert(make_comment(url="https://other.example/"))

        # Act
        asc = await repo.list_by_grouping_key(older.grouping_key)
        desc = await repo.list_by_grouping_key(older.grouping_key, SortOrder.DESC)

        # Assert
        assert [c.id for c in asc] == [older.id, newer.id]
        assert [c.id for c in desc] == [newer.id, older.id]

    @pytest.mark.asyncio
    async def test_list_unknown_grouping_key(self):
        repo = InMemoryCommentRepository()
        await repo.insert(make_comment())

        assert await repo.list_by_grouping_key(GroupingKey("0" * 64)) == []

    @pytest.mark.asyncio
    async def test_search_respects_limit(self):
        repo = InMemoryCommentRepository()
        for minutes in range(5):
            await repo.insert(
                make_comment(content=f"Topic {minutes}", created_at=minutes_ago(minutes))
            )

        results = await repo.search("topic", limit=3)

        assert [c.content for c in results] == ["Topic 0", "Topic 1", "Topic 2"]

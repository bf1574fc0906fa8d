"""Builders for test data shared across test modules."""

from datetime import datetime, timedelta
from uuid import uuid4

from votp.config import Settings
from votp.domain.model.comment import Comment
from votp.domain.model.user import User
from votp.domain.value import CommentId, UserId
from votp.util.jwt import create_token
from votp.util.url import canonicalize

# Same settings source the DI container reads in unit tests
TEST_AUTH_SETTINGS = Settings().auth


def make_token(user_id: UserId | str, email: str = "reader@example.com") -> str:
    """Helper function to issue a bearer token for a test user."""
    return create_token(str(user_id), email, TEST_AUTH_SETTINGS)


def make_comment(
    url: str = "https://example.com/article",
    content: str = "Test comment",
    author_id: UserId | None = None,
    parent_id: CommentId | None = None,
    created_at: datetime | None = None,
) -> Comment:
    """Helper function to build a stored comment for a page.

    Args:
        url: Page URL (canonicalized to fill grouping fields)
        content: Comment content
        author_id: Author (random if omitted)
        parent_id: Parent comment for replies
        created_at: Creation time (now if omitted)

    Returns:
        Comment domain model
    """
    canonical = canonicalize(url)
    created = created_at or datetime.now()
    return Comment(
        id=CommentId(uuid4()),
        content=content,
        raw_url=url,
        canonical_url=canonical.canonical_form,
        grouping_key=canonical.grouping_key,
        author_id=author_id or UserId(uuid4()),
        parent_id=parent_id,
        created_at=created,
        updated_at=created,
    )


def make_user(
    user_id: UserId | None = None,
    name: str = "Reader",
    email: str | None = None,
) -> User:
    """Helper function to build a user account.

    The email is derived from the id unless given, so users built in one
    test never collide on the unique email column.
    """
    user_id = user_id or UserId(uuid4())
    return User(id=user_id, name=name, email=email or f"{user_id}@example.com")


def minutes_ago(minutes: int) -> datetime:
    """Timestamp a number of minutes in the past."""
    return datetime.now() - timedelta(minutes=minutes)

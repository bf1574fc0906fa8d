"""Test configuration and fixtures."""

from uuid import uuid4

import pytest

from votp.domain.value import UserId


@pytest.fixture
def author_id() -> UserId:
    """Author of the comments under test."""
    return UserId(uuid4())


@pytest.fixture
def other_author_id() -> UserId:
    """A second, unrelated user."""
    return UserId(uuid4())

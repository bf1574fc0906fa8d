"""User entity.

Accounts are created by the sign-up flow, which lives outside this
service. Comments only reference users by id; these reads expose the
profile behind that id.
"""

from datetime import datetime

from pydantic import Field

from votp.domain.model.common import DomainModel
from votp.domain.value import UserId


class User(DomainModel):
    """User entity."""

    id: UserId
    name: str = Field(min_length=1, max_length=255)
    email: str = Field(max_length=255)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

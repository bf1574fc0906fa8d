"""Get user profile use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from votp.application.usecase.base import BaseUseCase
from votp.domain.service import UserService
from votp.domain.value import UserId


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    user_id: str  # UUID string


class GetUserProfileResponse(BaseModel):
    """Get user profile response.

    Public view of an account; the email address is left out.
    """

    user_id: str
    name: str
    created_at: datetime


class GetUserProfileUseCase(BaseUseCase):
    """Use case for getting a user's public profile by ID."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetUserProfileRequest) -> GetUserProfileResponse:
        """Execute get user profile flow.

        Raises:
            ValueError: If user_id is not a valid UUID
            NotFoundError: If the user does not exist
        """
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))

        return GetUserProfileResponse(
            user_id=str(user.id),
            name=user.name,
            created_at=user.created_at,
        )

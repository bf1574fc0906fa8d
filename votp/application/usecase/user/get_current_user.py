"""Get current user use case."""

from datetime import datetime

from pydantic import BaseModel

from votp.application.usecase.base import BaseUseCase
from votp.domain.error import AuthenticationRequiredError
from votp.domain.service import JWTService, UserService


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    auth_token: str | None = None  # Bearer JWT


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user_id: str
    name: str
    email: str
    created_at: datetime


class GetCurrentUserUseCase(BaseUseCase):
    """Use case for getting the authenticated caller's account."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Args:
            request: Request with the bearer token

        Returns:
            The caller's account, including email

        Raises:
            AuthenticationRequiredError: If the token is missing or invalid
            NotFoundError: If the account behind the token no longer exists
        """
        user_id = self.jwt_service.resolve_user_id(request.auth_token)
        if user_id is None:
            raise AuthenticationRequiredError()

        user = await self.user_service.get_by_id(user_id)

        return GetCurrentUserResponse(
            user_id=str(user.id),
            name=user.name,
            email=user.email,
            created_at=user.created_at,
        )

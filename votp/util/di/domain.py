"""Domain layer DI providers."""

from dishka import Scope, provide

from votp.config import AuthSettings
from votp.domain.repository import CommentRepository, UserRepository
from votp.domain.service import (
    CanonicalizationService,
    CommentService,
    JWTService,
    MutationGuard,
    UserService,
)
from votp.domain.value import TrackingPolicy
from votp.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_canonicalization_service(
        self, tracking_policy: TrackingPolicy
    ) -> CanonicalizationService:
        """Provide URL canonicalization domain service."""
        return CanonicalizationService(tracking_policy=tracking_policy)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        canonicalization_service: CanonicalizationService,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            canonicalization_service=canonicalization_service,
        )

    @provide
    def get_mutation_guard(
        self, jwt_service: JWTService, comment_service: CommentService
    ) -> MutationGuard:
        """Provide the authenticating gate for comment writes."""
        return MutationGuard(jwt_service=jwt_service, comment_service=comment_service)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

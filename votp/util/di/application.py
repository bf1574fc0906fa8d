"""Application layer DI providers."""

from dishka import Scope, provide

from votp.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentRepliesUseCase,
    GetCommentsUseCase,
    GetUserCommentsUseCase,
    SearchCommentsUseCase,
    UpdateCommentUseCase,
)
from votp.application.usecase.user import (
    GetCurrentUserUseCase,
    GetUserProfileUseCase,
)
from votp.config import CommentSettings
from votp.domain.service import CommentService, JWTService, MutationGuard, UserService
from votp.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Write use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, mutation_guard: MutationGuard
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(mutation_guard=mutation_guard)

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self, mutation_guard: MutationGuard
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(mutation_guard=mutation_guard)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, mutation_guard: MutationGuard
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(mutation_guard=mutation_guard)

    # Read use cases
    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self, comment_service: CommentService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_comment_replies_use_case(
        self, comment_service: CommentService
    ) -> GetCommentRepliesUseCase:
        """Provide get comment replies use case."""
        return GetCommentRepliesUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_get_user_comments_use_case(
        self, comment_service: CommentService, comment_settings: CommentSettings
    ) -> GetUserCommentsUseCase:
        """Provide get user comments use case."""
        return GetUserCommentsUseCase(
            comment_service=comment_service, comment_settings=comment_settings
        )

    @provide(scope=Scope.REQUEST)
    def get_search_comments_use_case(
        self, comment_service: CommentService, comment_settings: CommentSettings
    ) -> SearchCommentsUseCase:
        """Provide search comments use case."""
        return SearchCommentsUseCase(
            comment_service=comment_service, comment_settings=comment_settings
        )

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_get_current_user_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(jwt_service=jwt_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_get_user_profile_use_case(
        self, user_service: UserService
    ) -> GetUserProfileUseCase:
        """Provide get user profile use case."""
        return GetUserProfileUseCase(user_service=user_service)

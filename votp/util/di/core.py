"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from votp.config import AuthSettings, CommentSettings, Settings
from votp.domain.value import TrackingPolicy
from votp.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_comment_settings(self, settings: Settings) -> CommentSettings:
        """Provide comment listing settings."""
        return settings.comments

    @provide(scope=Scope.APP)
    def provide_tracking_policy(self, settings: Settings) -> TrackingPolicy:
        """Provide the configured tracking-parameter policy."""
        return TrackingPolicy.for_version(settings.canonicalization.tracking_policy)

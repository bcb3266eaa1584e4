"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from quill.config import AuthSettings, ContentSettings, MongoSettings, Settings
from quill.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_content_settings(self, settings: Settings) -> ContentSettings:
        return settings.content

    @provide(scope=Scope.APP)
    def provide_mongo_settings(self, settings: Settings) -> MongoSettings:
        return settings.mongo

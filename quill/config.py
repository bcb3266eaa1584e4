"""Application configuration."""

from typing import Literal

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


class MongoSettings(BaseModel):
    """Document store configuration."""

    url: str = "mongodb://localhost:27017"
    database: str = "quill"
    server_selection_timeout_ms: int = 5000

    # Collection names
    posts_collection: str = "posts"
    tags_collection: str = "tags"
    accounts_collection: str = "accounts"


class AuthSettings(BaseModel):
    """Authentication configuration."""

    # JWT settings
    jwt_secret: str = "CHANGE_ME_IN_PRODUCTION"  # Must be overridden in production
    jwt_algorithm: str = "HS256"
    jwt_expiry_days: int = 365


class ContentSettings(BaseModel):
    """Content rules shared by posts, comments and feeds."""

    # Feed index page size
    feed_page_size: int = 15

    # "More posts by this author" on the post detail page
    more_posts_limit: int = 5

    # Random alphanumeric suffix appended to every slug
    slug_suffix_length: int = 30

    max_tags_per_post: int = 3
    max_title_length: int = 300
    max_comment_length: int = 10000

    # Used when an account registers without an avatar
    default_avatar_url: str = (
        "https://ui-avatars.com/api/?background=d90429&color=fff&name="
    )


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, using ``__`` for nested values:

        ENVIRONMENT=production
        MONGO__URL=mongodb://mongo:27017
        MONGO__DATABASE=quill
        AUTH__JWT_SECRET=...
        CONTENT__FEED_PAGE_SIZE=20
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows MONGO__URL syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    host: str = "0.0.0.0"
    port: int = 8000

    # Nested settings
    mongo: MongoSettings = MongoSettings()
    auth: AuthSettings = AuthSettings()
    content: ContentSettings = ContentSettings()
    observability: ObservabilitySettings = ObservabilitySettings()

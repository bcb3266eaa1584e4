"""Domain layer DI providers."""

from dishka import Scope, provide

from quill.config import AuthSettings, ContentSettings
from quill.domain.repository import AccountRepository, PostRepository, TagRepository
from quill.domain.service import (
    AccountService,
    BookmarkService,
    CommentService,
    FollowService,
    JWTService,
    PostService,
    ReactionService,
    TagService,
)
from quill.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider.

    Domain services are REQUEST-scoped to match the repositories they use.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_tag_service(self, tag_repository: TagRepository) -> TagService:
        """Provide tag domain service."""
        return TagService(tag_repository=tag_repository)

    @provide
    def get_account_service(
        self,
        account_repository: AccountRepository,
        post_repository: PostRepository,
        content_settings: ContentSettings,
    ) -> AccountService:
        """Provide account domain service."""
        return AccountService(
            account_repository=account_repository,
            post_repository=post_repository,
            content_settings=content_settings,
        )

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        account_repository: AccountRepository,
        account_service: AccountService,
        tag_service: TagService,
        content_settings: ContentSettings,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository,
            account_repository=account_repository,
            account_service=account_service,
            tag_service=tag_service,
            content_settings=content_settings,
        )

    @provide
    def get_comment_service(
        self,
        post_repository: PostRepository,
        account_service: AccountService,
        content_settings: ContentSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            post_repository=post_repository,
            account_service=account_service,
            content_settings=content_settings,
        )

    @provide
    def get_reaction_service(
        self, post_repository: PostRepository, post_service: PostService
    ) -> ReactionService:
        """Provide reaction domain service."""
        return ReactionService(post_repository=post_repository, post_service=post_service)

    @provide
    def get_bookmark_service(
        self,
        post_repository: PostRepository,
        account_repository: AccountRepository,
        post_service: PostService,
        account_service: AccountService,
    ) -> BookmarkService:
        """Provide bookmark domain service."""
        return BookmarkService(
            post_repository=post_repository,
            account_repository=account_repository,
            post_service=post_service,
            account_service=account_service,
        )

    @provide
    def get_follow_service(
        self,
        account_repository: AccountRepository,
        account_service: AccountService,
        tag_service: TagService,
    ) -> FollowService:
        """Provide follow domain service."""
        return FollowService(
            account_repository=account_repository,
            account_service=account_service,
            tag_service=tag_service,
        )

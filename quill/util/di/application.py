"""Application layer DI providers."""

from dishka import Scope, provide

from quill.application.usecase.account import (
    GetDashboardUseCase,
    GetUserProfileUseCase,
    ListAccountsUseCase,
    RegisterAccountUseCase,
    SetAccountStatusUseCase,
    UpdateProfileUseCase,
)
from quill.application.usecase.bookmark import ToggleSaveUseCase
from quill.application.usecase.comment import (
    CreateCommentUseCase,
    UpdateCommentUseCase,
)
from quill.application.usecase.follow import FollowTagUseCase, FollowUserUseCase
from quill.application.usecase.post import (
    ChangePostStatusUseCase,
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListAllPostsUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
)
from quill.application.usecase.reaction import (
    RemoveReactionUseCase,
    ToggleReactionUseCase,
)
from quill.application.usecase.search import SearchUseCase
from quill.application.usecase.tag import (
    CreateTagUseCase,
    GetTagUseCase,
    ListTagsUseCase,
    UpdateTagUseCase,
)
from quill.domain.service import (
    AccountService,
    BookmarkService,
    CommentService,
    FollowService,
    PostService,
    ReactionService,
    TagService,
)
from quill.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider."""

    scope = Scope.REQUEST

    # Post use cases
    @provide
    def get_create_post_use_case(
        self, post_service: PostService, account_service: AccountService
    ) -> CreatePostUseCase:
        return CreatePostUseCase(
            post_service=post_service, account_service=account_service
        )

    @provide
    def get_update_post_use_case(
        self, post_service: PostService, account_service: AccountService
    ) -> UpdatePostUseCase:
        return UpdatePostUseCase(
            post_service=post_service, account_service=account_service
        )

    @provide
    def get_change_post_status_use_case(
        self, post_service: PostService
    ) -> ChangePostStatusUseCase:
        return ChangePostStatusUseCase(post_service=post_service)

    @provide
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        return DeletePostUseCase(post_service=post_service)

    @provide
    def get_get_post_use_case(
        self, post_service: PostService, account_service: AccountService
    ) -> GetPostUseCase:
        return GetPostUseCase(post_service=post_service, account_service=account_service)

    @provide
    def get_list_posts_use_case(
        self, post_service: PostService, account_service: AccountService
    ) -> ListPostsUseCase:
        return ListPostsUseCase(
            post_service=post_service, account_service=account_service
        )

    @provide
    def get_list_all_posts_use_case(
        self, post_service: PostService, account_service: AccountService
    ) -> ListAllPostsUseCase:
        return ListAllPostsUseCase(
            post_service=post_service, account_service=account_service
        )

    # Comment use cases
    @provide
    def get_create_comment_use_case(
        self, comment_service: CommentService, account_service: AccountService
    ) -> CreateCommentUseCase:
        return CreateCommentUseCase(
            comment_service=comment_service, account_service=account_service
        )

    @provide
    def get_update_comment_use_case(
        self, comment_service: CommentService, account_service: AccountService
    ) -> UpdateCommentUseCase:
        return UpdateCommentUseCase(
            comment_service=comment_service, account_service=account_service
        )

    # Reaction use cases
    @provide
    def get_toggle_reaction_use_case(
        self, reaction_service: ReactionService, post_service: PostService
    ) -> ToggleReactionUseCase:
        return ToggleReactionUseCase(
            reaction_service=reaction_service, post_service=post_service
        )

    @provide
    def get_remove_reaction_use_case(
        self, reaction_service: ReactionService
    ) -> RemoveReactionUseCase:
        return RemoveReactionUseCase(reaction_service=reaction_service)

    # Bookmark and follow use cases
    @provide
    def get_toggle_save_use_case(
        self, bookmark_service: BookmarkService
    ) -> ToggleSaveUseCase:
        return ToggleSaveUseCase(bookmark_service=bookmark_service)

    @provide
    def get_follow_tag_use_case(self, follow_service: FollowService) -> FollowTagUseCase:
        return FollowTagUseCase(follow_service=follow_service)

    @provide
    def get_follow_user_use_case(
        self, follow_service: FollowService
    ) -> FollowUserUseCase:
        return FollowUserUseCase(follow_service=follow_service)

    # Tag use cases
    @provide
    def get_list_tags_use_case(
        self, tag_service: TagService, account_service: AccountService
    ) -> ListTagsUseCase:
        return ListTagsUseCase(tag_service=tag_service, account_service=account_service)

    @provide
    def get_get_tag_use_case(
        self,
        tag_service: TagService,
        post_service: PostService,
        account_service: AccountService,
    ) -> GetTagUseCase:
        return GetTagUseCase(
            tag_service=tag_service,
            post_service=post_service,
            account_service=account_service,
        )

    @provide
    def get_create_tag_use_case(
        self, tag_service: TagService, account_service: AccountService
    ) -> CreateTagUseCase:
        return CreateTagUseCase(
            tag_service=tag_service, account_service=account_service
        )

    @provide
    def get_update_tag_use_case(
        self, tag_service: TagService, account_service: AccountService
    ) -> UpdateTagUseCase:
        return UpdateTagUseCase(
            tag_service=tag_service, account_service=account_service
        )

    # Account use cases
    @provide
    def get_register_account_use_case(
        self, account_service: AccountService
    ) -> RegisterAccountUseCase:
        return RegisterAccountUseCase(account_service=account_service)

    @provide
    def get_user_profile_use_case(
        self,
        account_service: AccountService,
        post_service: PostService,
        comment_service: CommentService,
    ) -> GetUserProfileUseCase:
        return GetUserProfileUseCase(
            account_service=account_service,
            post_service=post_service,
            comment_service=comment_service,
        )

    @provide
    def get_dashboard_use_case(
        self,
        account_service: AccountService,
        post_service: PostService,
        tag_service: TagService,
    ) -> GetDashboardUseCase:
        return GetDashboardUseCase(
            account_service=account_service,
            post_service=post_service,
            tag_service=tag_service,
        )

    @provide
    def get_update_profile_use_case(
        self, account_service: AccountService
    ) -> UpdateProfileUseCase:
        return UpdateProfileUseCase(account_service=account_service)

    @provide
    def get_set_account_status_use_case(
        self, account_service: AccountService
    ) -> SetAccountStatusUseCase:
        return SetAccountStatusUseCase(account_service=account_service)

    @provide
    def get_list_accounts_use_case(
        self, account_service: AccountService
    ) -> ListAccountsUseCase:
        return ListAccountsUseCase(account_service=account_service)

    # Search
    @provide
    def get_search_use_case(
        self, post_service: PostService, account_service: AccountService
    ) -> SearchUseCase:
        return SearchUseCase(post_service=post_service, account_service=account_service)

"""Unit tests for GetPostUseCase."""

import pytest

from quill.application.usecase.post import GetPostRequest, GetPostUseCase
from quill.domain.error import NotFoundError
from quill.domain.service import (
    BookmarkService,
    CommentService,
    FollowService,
    ReactionService,
)
from quill.domain.repository import PostRepository
from quill.domain.value import PostStatus, ToggleResult
from tests.conftest import seed_account, seed_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetPostUseCase:
    """Tests for GetPostUseCase."""

    @pytest.mark.asyncio
    async def test_detail_resolves_every_viewer_flag(self, unit_env):
        """Reacted, commented, saved, followed and comment flags reflect the viewer."""
        # Arrange
        use_case = await unit_env.get(GetPostUseCase)
        reaction_service = await unit_env.get(ReactionService)
        comment_service = await unit_env.get(CommentService)
        bookmark_service = await unit_env.get(BookmarkService)
        follow_service = await unit_env.get(FollowService)
        alice = await seed_account(unit_env, "alice")
        bob = await seed_account(unit_env, "bob")
        post = await seed_post(unit_env, alice, title="Main")
        await comment_service.add_comment(post.slug, alice.id, "author note")
        await comment_service.add_comment(post.slug, bob.id, "reader note")
        await reaction_service.toggle_post_reaction(post.slug, bob.id)
        await reaction_service.toggle_comment_reaction(post.slug, 1, bob.id)
        await bookmark_service.toggle_save(bob.id, post.slug)
        await follow_service.follow_user_toggle(bob.id, "alice")

        # Act
        response = await use_case.execute(
            GetPostRequest(slug=post.slug, viewer_id=bob.id)
        )

        # Assert
        detail = response.post
        assert detail.reacted is True
        assert detail.commented is True
        assert detail.saved is True
        assert detail.reaction_count == 1
        assert detail.comment_count == 2
        assert [c.id for c in detail.comments] == [1, 2]
        assert detail.comments[0].interacted is True
        assert detail.comments[1].interacted is False
        assert response.author.username == "alice"
        assert response.author.followed is True

    @pytest.mark.asyncio
    async def test_anonymous_viewer_sees_no_flags(self, unit_env):
        use_case = await unit_env.get(GetPostUseCase)
        reaction_service = await unit_env.get(ReactionService)
        alice = await seed_account(unit_env, "alice")
        post = await seed_post(unit_env, alice)
        await reaction_service.toggle_post_reaction(post.slug, alice.id)

        response = await use_case.execute(GetPostRequest(slug=post.slug))

        assert response.post.reaction_count == 1
        assert response.post.reacted is False
        assert response.post.saved is False
        assert response.author.followed is False

    @pytest.mark.asyncio
    async def test_saved_flag_agrees_with_next_save_toggle(self, unit_env):
        """A save that only reached the post side still shows as saved."""
        # Arrange
        use_case = await unit_env.get(GetPostUseCase)
        bookmark_service = await unit_env.get(BookmarkService)
        post_repo = await unit_env.get(PostRepository)
        alice = await seed_account(unit_env, "alice")
        bob = await seed_account(unit_env, "bob")
        post = await seed_post(unit_env, alice)
        await post_repo.add_saved_by(post.id, bob.id)

        # Act
        page = await use_case.execute(GetPostRequest(slug=post.slug, viewer_id=bob.id))
        result = await bookmark_service.toggle_save(bob.id, post.slug)

        # Assert
        assert page.post.saved is True
        assert result == ToggleResult.REMOVED

    @pytest.mark.asyncio
    async def test_more_posts_lists_other_published_posts(self, unit_env):
        use_case = await unit_env.get(GetPostUseCase)
        alice = await seed_account(unit_env, "alice")
        main = await seed_post(unit_env, alice, title="Main")
        older = await seed_post(unit_env, alice, title="Older", minutes_ago=5)
        await seed_post(unit_env, alice, title="Hidden", status=PostStatus.DRAFT)

        response = await use_case.execute(GetPostRequest(slug=main.slug))

        assert [p.slug for p in response.more_posts] == [older.slug]

    @pytest.mark.asyncio
    async def test_missing_post_raises_not_found(self, unit_env):
        use_case = await unit_env.get(GetPostUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetPostRequest(slug="nope"))

"""Unit tests for GetDashboardUseCase."""

import pytest

from quill.application.usecase.account import GetDashboardRequest, GetDashboardUseCase
from quill.domain.service import BookmarkService, FollowService
from quill.domain.value import PostStatus
from tests.conftest import seed_account, seed_post, seed_tag
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetDashboardUseCase:
    """Tests for GetDashboardUseCase."""

    @pytest.mark.asyncio
    async def test_dashboard_lists_drafts_follows_and_reading_list(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetDashboardUseCase)
        follow_service = await unit_env.get(FollowService)
        bookmark_service = await unit_env.get(BookmarkService)
        alice = await seed_account(unit_env, "alice")
        bob = await seed_account(unit_env, "bob")
        await seed_tag(unit_env, "rust")
        await seed_post(unit_env, alice, title="Mine")
        await seed_post(unit_env, alice, title="My draft", status=PostStatus.DRAFT)
        bobs = await seed_post(unit_env, bob, title="Bob's")
        await follow_service.follow_tag_toggle(alice.id, "rust")
        await follow_service.follow_user_toggle(alice.id, "bob")
        await bookmark_service.toggle_save(alice.id, bobs.slug)

        # Act
        response = await use_case.execute(GetDashboardRequest(account_id=alice.id))

        # Assert
        assert {p.title for p in response.posts} == {"Mine", "My draft"}
        assert [(t.value, t.followed) for t in response.followed_tags] == [
            ("rust", True)
        ]
        assert [(u.username, u.followed) for u in response.followed_users] == [
            ("bob", True)
        ]
        assert [(p.title, p.saved) for p in response.reading_list] == [
            ("Bob's", True)
        ]

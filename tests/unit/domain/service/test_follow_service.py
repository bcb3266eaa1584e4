"""Unit tests for FollowService."""

import pytest

from quill.domain.error import BadRequestError, NotFoundError
from quill.domain.repository import AccountRepository
from quill.domain.service import FollowService
from quill.domain.value import ToggleResult
from tests.conftest import seed_account, seed_tag
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestFollowTag:
    """Tests for follow_tag_toggle."""

    @pytest.mark.asyncio
    async def test_second_follow_is_inverse_of_first(self, unit_env):
        """Following "rust" twice leaves it unfollowed."""
        # Arrange
        follow_service = await unit_env.get(FollowService)
        account_repo = await unit_env.get(AccountRepository)
        u1 = await seed_account(unit_env, "u1")
        rust = await seed_tag(unit_env, "rust")

        # Act
        first = await follow_service.follow_tag_toggle(u1.id, "rust")
        followed = (await account_repo.find_by_id(u1.id)).followed_tags
        second = await follow_service.follow_tag_toggle(u1.id, "rust")
        unfollowed = (await account_repo.find_by_id(u1.id)).followed_tags

        # Assert
        assert first == ToggleResult.ADDED
        assert followed == [rust.id]
        assert second == ToggleResult.REMOVED
        assert rust.id not in unfollowed

    @pytest.mark.asyncio
    async def test_follow_unknown_tag_fails(self, unit_env):
        follow_service = await unit_env.get(FollowService)
        u1 = await seed_account(unit_env, "u1")

        with pytest.raises(NotFoundError, match="tag not found"):
            await follow_service.follow_tag_toggle(u1.id, "cobol")


class TestFollowUser:
    """Tests for follow_user_toggle."""

    @pytest.mark.asyncio
    async def test_follow_then_unfollow(self, unit_env):
        follow_service = await unit_env.get(FollowService)
        account_repo = await unit_env.get(AccountRepository)
        alice = await seed_account(unit_env, "alice")
        bob = await seed_account(unit_env, "bob")

        first = await follow_service.follow_user_toggle(alice.id, "bob")
        assert first == ToggleResult.ADDED
        assert (await account_repo.find_by_id(alice.id)).followed_users == [bob.id]
        # Only the follower's side is written
        assert (await account_repo.find_by_id(bob.id)).followed_users == []

        second = await follow_service.follow_user_toggle(alice.id, "bob")
        assert second == ToggleResult.REMOVED
        assert (await account_repo.find_by_id(alice.id)).followed_users == []

    @pytest.mark.asyncio
    async def test_self_follow_is_rejected(self, unit_env):
        follow_service = await unit_env.get(FollowService)
        alice = await seed_account(unit_env, "alice")

        with pytest.raises(BadRequestError):
            await follow_service.follow_user_toggle(alice.id, "alice")

    @pytest.mark.asyncio
    async def test_follow_unknown_user_fails(self, unit_env):
        follow_service = await unit_env.get(FollowService)
        alice = await seed_account(unit_env, "alice")

        with pytest.raises(NotFoundError):
            await follow_service.follow_user_toggle(alice.id, "ghost")

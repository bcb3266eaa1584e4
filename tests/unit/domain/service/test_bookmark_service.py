"""Unit tests for BookmarkService."""

import pytest

from quill.domain.error import NotFoundError
from quill.domain.repository import AccountRepository, PostRepository
from quill.domain.service import BookmarkService
from quill.domain.value import ToggleResult
from tests.conftest import seed_account, seed_post
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestToggleSave:
    """Tests for toggle_save."""

    @pytest.mark.asyncio
    async def test_save_writes_both_sides(self, unit_env):
        # Arrange
        bookmark_service = await unit_env.get(BookmarkService)
        post_repo = await unit_env.get(PostRepository)
        account_repo = await unit_env.get(AccountRepository)
        alice = await seed_account(unit_env, "alice")
        bob = await seed_account(unit_env, "bob")
        post = await seed_post(unit_env, alice)

        # Act
        result = await bookmark_service.toggle_save(bob.id, post.slug)

        # Assert
        assert result == ToggleResult.ADDED
        assert (await post_repo.find_by_slug(post.slug)).saved_by == [bob.id]
        assert (await account_repo.find_by_id(bob.id)).reading_list == [post.id]

    @pytest.mark.asyncio
    async def test_toggle_twice_restores_original_state(self, unit_env):
        """save then unsave leaves saved_by and reading_list as they were."""
        # Arrange
        bookmark_service = await unit_env.get(BookmarkService)
        post_repo = await unit_env.get(PostRepository)
        account_repo = await unit_env.get(AccountRepository)
        alice = await seed_account(unit_env, "alice")
        bob = await seed_account(unit_env, "bob")
        carol = await seed_account(unit_env, "carol")
        post = await seed_post(unit_env, alice)
        await bookmark_service.toggle_save(carol.id, post.slug)
        before = (
            (await post_repo.find_by_slug(post.slug)).saved_by,
            (await account_repo.find_by_id(bob.id)).reading_list,
        )

        # Act
        first = await bookmark_service.toggle_save(bob.id, post.slug)
        second = await bookmark_service.toggle_save(bob.id, post.slug)

        # Assert
        after = (
            (await post_repo.find_by_slug(post.slug)).saved_by,
            (await account_repo.find_by_id(bob.id)).reading_list,
        )
        assert (first, second) == (ToggleResult.ADDED, ToggleResult.REMOVED)
        assert after == before
        assert after[0] == [carol.id]

    @pytest.mark.asyncio
    async def test_toggle_repairs_half_applied_save(self, unit_env):
        """A save that only reached the post side is cleared on both sides."""
        # Arrange
        bookmark_service = await unit_env.get(BookmarkService)
        post_repo = await unit_env.get(PostRepository)
        account_repo = await unit_env.get(AccountRepository)
        alice = await seed_account(unit_env, "alice")
        bob = await seed_account(unit_env, "bob")
        post = await seed_post(unit_env, alice)
        await post_repo.add_saved_by(post.id, bob.id)

        # Act
        result = await bookmark_service.toggle_save(bob.id, post.slug)

        # Assert
        assert result == ToggleResult.REMOVED
        assert (await post_repo.find_by_slug(post.slug)).saved_by == []
        assert (await account_repo.find_by_id(bob.id)).reading_list == []

    @pytest.mark.asyncio
    async def test_reading_list_never_holds_duplicates(self, unit_env):
        bookmark_service = await unit_env.get(BookmarkService)
        account_repo = await unit_env.get(AccountRepository)
        alice = await seed_account(unit_env, "alice")
        bob = await seed_account(unit_env, "bob")
        post = await seed_post(unit_env, alice)
        await account_repo.add_to_reading_list(bob.id, post.id)

        await bookmark_service.toggle_save(bob.id, post.slug)

        assert (await account_repo.find_by_id(bob.id)).reading_list == [post.id]

    @pytest.mark.asyncio
    async def test_save_missing_post_fails(self, unit_env):
        bookmark_service = await unit_env.get(BookmarkService)
        bob = await seed_account(unit_env, "bob")

        with pytest.raises(NotFoundError):
            await bookmark_service.toggle_save(bob.id, "nope")

"""Unit tests for AccountService."""

import pytest

from quill.domain.error import DuplicateError, NotFoundError, UnauthorizedError
from quill.domain.repository import AccountRepository, PostRepository
from quill.domain.service import AccountService, CommentService
from quill.domain.value import AccountStatus, CommentId
from tests.conftest import seed_account, seed_post
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestRegisterAccount:
    """Tests for register_account."""

    @pytest.mark.asyncio
    async def test_new_account_is_pending_with_generated_avatar(self, unit_env):
        # Arrange
        account_service = await unit_env.get(AccountService)

        # Act
        account = await account_service.register_account(
            username="alice", name="Alice Liddell", password_hash="hashed"
        )

        # Assert
        assert account.id == 1
        assert account.status == AccountStatus.PENDING
        assert account.avatar.startswith("https://ui-avatars.com/api/")
        assert account.avatar.endswith("name=Alice%20Liddell")
        assert account.reading_list == []

    @pytest.mark.asyncio
    async def test_explicit_avatar_is_kept(self, unit_env):
        account_service = await unit_env.get(AccountService)

        account = await account_service.register_account(
            username="alice",
            name="Alice",
            password_hash="hashed",
            avatar="https://img.example.com/a.png",
        )

        assert account.avatar == "https://img.example.com/a.png"

    @pytest.mark.asyncio
    async def test_taken_username_is_rejected(self, unit_env):
        account_service = await unit_env.get(AccountService)
        await seed_account(unit_env, "alice")

        with pytest.raises(DuplicateError):
            await account_service.register_account(
                username="alice", name="Other", password_hash="hashed"
            )


class TestUpdateProfile:
    """Tests for update_profile and its snapshot cascade."""

    @pytest.mark.asyncio
    async def test_name_and_avatar_cascade_into_post_snapshots(self, unit_env):
        """Every post by the account shows the new name and avatar."""
        # Arrange
        account_service = await unit_env.get(AccountService)
        post_repo = await unit_env.get(PostRepository)
        alice = await seed_account(unit_env, "alice")
        bob = await seed_account(unit_env, "bob")
        first = await seed_post(unit_env, alice, title="First")
        second = await seed_post(unit_env, alice, title="Second")
        other = await seed_post(unit_env, bob, title="Bob's")

        # Act
        updated = await account_service.update_profile(
            alice.id, name="Alice L.", avatar="https://img.example.com/new.png"
        )

        # Assert
        assert updated.name == "Alice L."
        for post in (first, second):
            stored = await post_repo.find_by_slug(post.slug)
            assert stored.author.name == "Alice L."
            assert stored.author.avatar == "https://img.example.com/new.png"
        assert (await post_repo.find_by_slug(other.slug)).author.name == "Bob"

    @pytest.mark.asyncio
    async def test_comment_snapshots_keep_old_name(self, unit_env):
        account_service = await unit_env.get(AccountService)
        comment_service = await unit_env.get(CommentService)
        post_repo = await unit_env.get(PostRepository)
        alice = await seed_account(unit_env, "alice")
        bob = await seed_account(unit_env, "bob")
        post = await seed_post(unit_env, alice)
        await comment_service.add_comment(post.slug, bob.id, "hello")

        await account_service.update_profile(bob.id, name="Robert")

        stored = await post_repo.find_by_slug(post.slug)
        assert stored.find_comment(CommentId(1)).author.name == "Bob"

    @pytest.mark.asyncio
    async def test_bio_only_edit_leaves_posts_alone(self, unit_env):
        account_service = await unit_env.get(AccountService)
        post_repo = await unit_env.get(PostRepository)
        alice = await seed_account(unit_env, "alice")
        post = await seed_post(unit_env, alice)

        updated = await account_service.update_profile(alice.id, bio="Hi there")

        assert updated.bio == "Hi there"
        assert updated.name == alice.name
        assert (await post_repo.find_by_slug(post.slug)).author == post.author

    @pytest.mark.asyncio
    async def test_save_between_read_and_write_is_kept(self, unit_env):
        # Arrange
        account_repo = await unit_env.get(AccountRepository)
        bob = await seed_account(unit_env, "bob")
        stale = await account_repo.find_by_id(bob.id)
        await account_repo.add_to_reading_list(bob.id, 12)

        # Act
        await account_repo.set_profile(stale.edited(name="Robert"))

        # Assert
        stored = await account_repo.find_by_id(bob.id)
        assert stored.name == "Robert"
        assert stored.reading_list == [12]

    @pytest.mark.asyncio
    async def test_profile_edit_keeps_reading_list(self, unit_env):
        account_service = await unit_env.get(AccountService)
        account_repo = await unit_env.get(AccountRepository)
        bob = await seed_account(unit_env, "bob")
        await account_repo.add_to_reading_list(bob.id, 12)

        updated = await account_service.update_profile(
            bob.id, website="https://b.example"
        )

        assert updated.website == "https://b.example"
        assert (await account_repo.find_by_id(bob.id)).reading_list == [12]

    @pytest.mark.asyncio
    async def test_update_missing_account_fails(self, unit_env):
        account_service = await unit_env.get(AccountService)

        with pytest.raises(NotFoundError):
            await account_service.update_profile(99, name="Nobody")


class TestSetAccountStatus:
    """Tests for set_account_status."""

    @pytest.mark.asyncio
    async def test_admin_can_ban(self, unit_env):
        account_service = await unit_env.get(AccountService)
        account_repo = await unit_env.get(AccountRepository)
        admin = await seed_account(unit_env, "root", admin=True)
        alice = await seed_account(unit_env, "alice")

        result = await account_service.set_account_status(
            admin.id, "alice", AccountStatus.BANNED
        )

        assert result.status == AccountStatus.BANNED
        assert (await account_repo.find_by_id(alice.id)).status == AccountStatus.BANNED

    @pytest.mark.asyncio
    async def test_non_admin_is_rejected(self, unit_env):
        account_service = await unit_env.get(AccountService)
        account_repo = await unit_env.get(AccountRepository)
        alice = await seed_account(unit_env, "alice")
        bob = await seed_account(unit_env, "bob")

        with pytest.raises(UnauthorizedError):
            await account_service.set_account_status(
                alice.id, "bob", AccountStatus.BANNED
            )

        stored = await account_repo.find_by_id(bob.id)
        assert stored.status == AccountStatus.ACTIVATED

"""Unit tests for CommentService."""

import pytest

from quill.domain.error import (
    BadRequestError,
    NotFoundError,
    NotOwnedError,
    ParentCommentNotFoundError,
)
from quill.domain.model import TOP_LEVEL
from quill.domain.repository import PostRepository
from quill.domain.service import CommentService
from quill.domain.value import CommentId, PostStatus
from tests.conftest import seed_account, seed_post
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestAddComment:
    """Tests for add_comment."""

    @pytest.mark.asyncio
    async def test_reply_threads_under_parent_and_unknown_parent_fails(
        self, unit_env
    ):
        """bob comments, carol replies to comment 1, dave's reply to 99 fails."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        alice = await seed_account(unit_env, "alice")
        bob = await seed_account(unit_env, "bob")
        carol = await seed_account(unit_env, "carol")
        dave = await seed_account(unit_env, "dave")
        post = await seed_post(unit_env, alice)

        # Act
        await comment_service.add_comment(post.slug, bob.id, "nice post", TOP_LEVEL)
        updated = await comment_service.add_comment(
            post.slug, carol.id, "agree", CommentId(1)
        )

        # Assert
        reply = updated.find_comment(CommentId(2))
        assert reply.parent_id == 1
        assert reply.author.username == "carol"
        assert reply.is_reply

        with pytest.raises(
            ParentCommentNotFoundError, match="parent comment not found"
        ):
            await comment_service.add_comment(post.slug, dave.id, "x", CommentId(99))

    @pytest.mark.asyncio
    async def test_failed_reply_leaves_post_unchanged(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        post_repo = await unit_env.get(PostRepository)
        alice = await seed_account(unit_env, "alice")
        post = await seed_post(unit_env, alice)
        await comment_service.add_comment(post.slug, alice.id, "first")

        with pytest.raises(ParentCommentNotFoundError):
            await comment_service.add_comment(post.slug, alice.id, "x", CommentId(99))

        stored = await post_repo.find_by_slug(post.slug)
        assert stored.comment_count == 1
        assert len(stored.comments) == 1

    @pytest.mark.asyncio
    async def test_comment_ids_increase_and_are_never_reused(self, unit_env):
        """Ids keep climbing across edits, starting at 1."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        alice = await seed_account(unit_env, "alice")
        bob = await seed_account(unit_env, "bob")
        post = await seed_post(unit_env, alice)

        # Act
        ids = []
        for i in range(3):
            updated = await comment_service.add_comment(post.slug, bob.id, f"c{i}")
            ids.append(max(c.id for c in updated.comments))
        await comment_service.update_comment(post.slug, CommentId(2), bob.id, "edited")
        updated = await comment_service.add_comment(post.slug, bob.id, "after edit")
        ids.append(max(c.id for c in updated.comments))

        # Assert
        assert ids == [1, 2, 3, 4]

    @pytest.mark.asyncio
    async def test_comment_count_tracks_comment_list(self, unit_env):
        """comment_count equals the number of comments after every add."""
        comment_service = await unit_env.get(CommentService)
        alice = await seed_account(unit_env, "alice")
        bob = await seed_account(unit_env, "bob")
        post = await seed_post(unit_env, alice)

        for author in (alice, bob, bob):
            updated = await comment_service.add_comment(post.slug, author.id, "hi")
            assert updated.comment_count == len(updated.comments)

        assert updated.comment_count == 3
        assert sorted(updated.commenters) == sorted([alice.id, bob.id])

    @pytest.mark.asyncio
    async def test_comments_are_allowed_on_drafts(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        alice = await seed_account(unit_env, "alice")
        post = await seed_post(unit_env, alice, status=PostStatus.DRAFT)

        updated = await comment_service.add_comment(post.slug, alice.id, "note")

        assert updated.comment_count == 1

    @pytest.mark.asyncio
    async def test_blank_comment_is_rejected(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        alice = await seed_account(unit_env, "alice")
        post = await seed_post(unit_env, alice)

        with pytest.raises(BadRequestError):
            await comment_service.add_comment(post.slug, alice.id, "   ")

    @pytest.mark.asyncio
    async def test_comment_on_missing_post_fails(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        alice = await seed_account(unit_env, "alice")

        with pytest.raises(NotFoundError, match="post not found"):
            await comment_service.add_comment("nope", alice.id, "hello")


class TestUpdateComment:
    """Tests for update_comment."""

    @pytest.mark.asyncio
    async def test_author_can_edit_comment(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        alice = await seed_account(unit_env, "alice")
        post = await seed_post(unit_env, alice)
        await comment_service.add_comment(post.slug, alice.id, "typo")

        updated = await comment_service.update_comment(
            post.slug, CommentId(1), alice.id, "fixed"
        )

        comment = updated.find_comment(CommentId(1))
        assert comment.content == "fixed"
        assert updated.comment_count == 1

    @pytest.mark.asyncio
    async def test_non_author_edit_is_rejected_and_comment_unchanged(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post_repo = await unit_env.get(PostRepository)
        alice = await seed_account(unit_env, "alice")
        mallory = await seed_account(unit_env, "mallory")
        post = await seed_post(unit_env, alice)
        await comment_service.add_comment(post.slug, alice.id, "original")

        # Act & Assert
        with pytest.raises(NotOwnedError):
            await comment_service.update_comment(
                post.slug, CommentId(1), mallory.id, "defaced"
            )

        stored = await post_repo.find_by_slug(post.slug)
        assert stored.find_comment(CommentId(1)).content == "original"

    @pytest.mark.asyncio
    async def test_editing_missing_comment_fails(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        alice = await seed_account(unit_env, "alice")
        post = await seed_post(unit_env, alice)

        with pytest.raises(NotFoundError, match="comment not found"):
            await comment_service.update_comment(
                post.slug, CommentId(5), alice.id, "ghost"
            )


class TestSearchCommentsByAuthor:
    """Tests for search_comments_by_author."""

    @pytest.mark.asyncio
    async def test_returns_comments_with_post_and_parent(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        alice = await seed_account(unit_env, "alice")
        bob = await seed_account(unit_env, "bob")
        first = await seed_post(unit_env, alice, title="First")
        second = await seed_post(unit_env, alice, title="Second")
        await comment_service.add_comment(first.slug, alice.id, "question?")
        await comment_service.add_comment(first.slug, bob.id, "answer", CommentId(1))
        await comment_service.add_comment(second.slug, bob.id, "later")

        # Act
        found = await comment_service.search_comments_by_author("bob")

        # Assert
        by_content = {a.comment.content: a for a in found}
        assert set(by_content) == {"later", "answer"}
        assert by_content["later"].parent is None
        assert by_content["answer"].post.slug == first.slug
        assert by_content["answer"].parent.content == "question?"

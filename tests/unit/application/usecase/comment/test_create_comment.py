"""Unit tests for CreateCommentUseCase."""

import pytest

from quill.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from quill.domain.error import ParentCommentNotFoundError
from tests.conftest import seed_account, seed_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_returns_new_comment_id_and_refreshed_post(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        alice = await seed_account(unit_env, "alice")
        bob = await seed_account(unit_env, "bob")
        post = await seed_post(unit_env, alice)

        # Act
        first = await use_case.execute(
            CreateCommentRequest(slug=post.slug, author_id=bob.id, content="nice")
        )
        reply = await use_case.execute(
            CreateCommentRequest(
                slug=post.slug, author_id=alice.id, content="thanks", parent_id=1
            )
        )

        # Assert
        assert first.comment_id == 1
        assert reply.comment_id == 2
        assert reply.post.comment_count == 2
        assert reply.post.comments[1].parent_id == 1
        assert reply.post.commented is True

    @pytest.mark.asyncio
    async def test_unknown_parent_is_rejected(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        alice = await seed_account(unit_env, "alice")
        post = await seed_post(unit_env, alice)

        with pytest.raises(ParentCommentNotFoundError):
            await use_case.execute(
                CreateCommentRequest(
                    slug=post.slug, author_id=alice.id, content="x", parent_id=99
                )
            )

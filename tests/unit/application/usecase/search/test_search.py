"""Unit tests for SearchUseCase."""

import pytest

from quill.application.usecase.search import SearchRequest, SearchUseCase
from quill.domain.error import BadRequestError
from quill.domain.service import CommentService
from tests.conftest import seed_account, seed_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestSearchUseCase:
    """Tests for SearchUseCase."""

    @pytest.mark.asyncio
    async def test_search_covers_posts_comments_and_usernames(self, unit_env):
        # Arrange
        use_case = await unit_env.get(SearchUseCase)
        comment_service = await unit_env.get(CommentService)
        alice = await seed_account(unit_env, "alice")
        await seed_account(unit_env, "rustacean")
        await seed_post(unit_env, alice, title="Why Rust")
        other = await seed_post(unit_env, alice, title="Go tips")
        await comment_service.add_comment(other.slug, alice.id, "rust does this too")

        # Act
        response = await use_case.execute(SearchRequest(keyword="RUST"))

        # Assert
        assert [p.title for p in response.posts] == ["Why Rust"]
        assert [p.title for p in response.comment_posts] == ["Go tips"]
        assert [a.username for a in response.accounts] == ["rustacean"]

    @pytest.mark.asyncio
    async def test_blank_keyword_is_rejected(self, unit_env):
        use_case = await unit_env.get(SearchUseCase)

        with pytest.raises(BadRequestError):
            await use_case.execute(SearchRequest(keyword="   "))

"""Unit tests for the tag use cases."""

import pytest

from quill.application.usecase.tag import (
    CreateTagRequest,
    CreateTagUseCase,
    GetTagRequest,
    GetTagUseCase,
    ListTagsRequest,
    ListTagsUseCase,
    UpdateTagRequest,
    UpdateTagUseCase,
)
from quill.domain.error import NotFoundError, UnauthorizedError
from quill.domain.repository import TagRepository
from quill.domain.service import FollowService
from quill.domain.value import PostStatus, TagType
from tests.conftest import seed_account, seed_post, seed_tag
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateTagUseCase:
    """Tests for CreateTagUseCase and UpdateTagUseCase."""

    @pytest.mark.asyncio
    async def test_admin_creates_and_updates_tag(self, unit_env):
        create = await unit_env.get(CreateTagUseCase)
        update = await unit_env.get(UpdateTagUseCase)
        admin = await seed_account(unit_env, "root", admin=True)

        created = await create.execute(
            CreateTagRequest(admin_id=admin.id, value="rust", color="#b7410e")
        )
        updated = await update.execute(
            UpdateTagRequest(
                admin_id=admin.id, tag_id=created.tag.id, description="Systems"
            )
        )

        assert created.tag.post_count == 0
        assert updated.tag.value == "rust"
        assert updated.tag.description == "Systems"
        assert updated.tag.color == "#b7410e"

    @pytest.mark.asyncio
    async def test_non_admin_cannot_create_tag(self, unit_env):
        create = await unit_env.get(CreateTagUseCase)
        tag_repo = await unit_env.get(TagRepository)
        alice = await seed_account(unit_env, "alice")

        with pytest.raises(UnauthorizedError):
            await create.execute(CreateTagRequest(admin_id=alice.id, value="rust"))

        assert await tag_repo.find_by_value("rust") is None


class TestGetTagUseCase:
    """Tests for GetTagUseCase."""

    @pytest.mark.asyncio
    async def test_tag_page_lists_published_posts_and_moderators(self, unit_env):
        # Arrange
        use_case = await unit_env.get(GetTagUseCase)
        follow_service = await unit_env.get(FollowService)
        tag_repo = await unit_env.get(TagRepository)
        alice = await seed_account(unit_env, "alice")
        mod = await seed_account(unit_env, "mod")
        rust = await seed_tag(unit_env, "rust")
        await tag_repo.replace(rust.model_copy(update={"moderators": [mod.id]}))
        await seed_post(unit_env, alice, title="Ownership", tags=["rust"])
        await seed_post(
            unit_env, alice, title="WIP", tags=["rust"], status=PostStatus.DRAFT
        )
        await seed_post(unit_env, alice, title="Unrelated")
        await follow_service.follow_tag_toggle(alice.id, "rust")

        # Act
        response = await use_case.execute(
            GetTagRequest(value="rust", viewer_id=alice.id)
        )

        # Assert
        assert response.tag.followed is True
        assert [m.username for m in response.moderators] == ["mod"]
        assert [p.title for p in response.posts] == ["Ownership"]

    @pytest.mark.asyncio
    async def test_unknown_tag_raises_not_found(self, unit_env):
        use_case = await unit_env.get(GetTagUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetTagRequest(value="cobol"))


class TestListTagsUseCase:
    """Tests for ListTagsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_plain_tags_with_follow_flags(self, unit_env):
        use_case = await unit_env.get(ListTagsUseCase)
        follow_service = await unit_env.get(FollowService)
        tag_repo = await unit_env.get(TagRepository)
        alice = await seed_account(unit_env, "alice")
        await seed_tag(unit_env, "python")
        await seed_tag(unit_env, "rust")
        science = await seed_tag(unit_env, "science")
        await tag_repo.replace(science.model_copy(update={"type": TagType.CATEGORY}))
        await follow_service.follow_tag_toggle(alice.id, "rust")

        response = await use_case.execute(ListTagsRequest(viewer_id=alice.id))

        assert [(t.value, t.followed) for t in response.tags] == [
            ("python", False),
            ("rust", True),
        ]

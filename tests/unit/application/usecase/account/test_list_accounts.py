"""Unit tests for ListAccountsUseCase."""

import pytest

from quill.application.usecase.account import (
    ListAccountsRequest,
    ListAccountsUseCase,
)
from quill.domain.error import UnauthorizedError
from quill.domain.value import AccountStatus
from tests.conftest import seed_account
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListAccountsUseCase:
    """Tests for ListAccountsUseCase."""

    @pytest.mark.asyncio
    async def test_admin_sees_every_account_in_id_order(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListAccountsUseCase)
        admin = await seed_account(unit_env, "root", admin=True)
        await seed_account(unit_env, "alice")
        await seed_account(unit_env, "bob")

        # Act
        response = await use_case.execute(ListAccountsRequest(admin_id=admin.id))

        # Assert
        assert response.total == 3
        assert [a.username for a in response.accounts] == ["root", "alice", "bob"]
        root = response.accounts[0]
        assert root.admin is True
        assert root.status == AccountStatus.ACTIVATED

    @pytest.mark.asyncio
    async def test_non_admin_is_rejected(self, unit_env):
        use_case = await unit_env.get(ListAccountsUseCase)
        alice = await seed_account(unit_env, "alice")

        with pytest.raises(UnauthorizedError):
            await use_case.execute(ListAccountsRequest(admin_id=alice.id))

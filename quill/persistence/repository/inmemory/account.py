"""In-memory account repository for testing."""

from typing import Optional

from quill.domain.model import Account
from quill.domain.repository.account import AccountRepository
from quill.domain.value import AccountId, AccountStatus, PostId, TagId

PROFILE_FIELDS = ("name", "avatar", "bio", "website", "private_email", "updated_at")


class InMemoryAccountRepository(AccountRepository):
    """In-memory implementation of AccountRepository for testing.

    List updates behave like ``$addToSet`` and ``$pull``.
    """

    def __init__(self) -> None:
        self._accounts: dict[AccountId, Account] = {}

    def _add(self, account_id: AccountId, field: str, value: int) -> None:
        account = self._accounts.get(account_id)
        if account is None:
            return
        current = getattr(account, field)
        if value not in current:
            self._accounts[account_id] = account.model_copy(
                update={field: [*current, value]}
            )

    def _pull(self, account_id: AccountId, field: str, value: int) -> None:
        account = self._accounts.get(account_id)
        if account is None:
            return
        current = getattr(account, field)
        self._accounts[account_id] = account.model_copy(
            update={field: [v for v in current if v != value]}
        )

    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        return self._accounts.get(account_id)

    async def find_by_username(self, username: str) -> Optional[Account]:
        for account in self._accounts.values():
            if account.username == username:
                return account
        return None

    async def find_by_ids(self, account_ids: list[AccountId]) -> list[Account]:
        return [self._accounts[i] for i in account_ids if i in self._accounts]

    async def search_by_username(self, keyword: str) -> list[Account]:
        needle = keyword.lower()
        return [
            a
            for a in sorted(self._accounts.values(), key=lambda a: a.id)
            if needle in a.username.lower()
        ]

    async def next_id(self) -> AccountId:
        return AccountId(max(self._accounts, default=0) + 1)

    async def insert(self, account: Account) -> Account:
        self._accounts[account.id] = account
        return account

    async def find_all(self) -> list[Account]:
        return sorted(self._accounts.values(), key=lambda a: a.id)

    async def set_profile(self, account: Account) -> None:
        stored = self._accounts.get(account.id)
        if stored is None:
            return
        self._accounts[account.id] = stored.model_copy(
            update={field: getattr(account, field) for field in PROFILE_FIELDS}
        )

    async def set_status(self, account_id: AccountId, status: AccountStatus) -> None:
        account = self._accounts.get(account_id)
        if account:
            self._accounts[account_id] = account.model_copy(update={"status": status})

    async def add_to_reading_list(self, account_id: AccountId, post_id: PostId) -> None:
        self._add(account_id, "reading_list", post_id)

    async def remove_from_reading_list(
        self, account_id: AccountId, post_id: PostId
    ) -> None:
        self._pull(account_id, "reading_list", post_id)

    async def remove_from_all_reading_lists(self, post_id: PostId) -> int:
        holders = [a.id for a in self._accounts.values() if post_id in a.reading_list]
        for account_id in holders:
            self._pull(account_id, "reading_list", post_id)
        return len(holders)

    async def add_followed_tag(self, account_id: AccountId, tag_id: TagId) -> None:
        self._add(account_id, "followed_tags", tag_id)

    async def remove_followed_tag(self, account_id: AccountId, tag_id: TagId) -> None:
        self._pull(account_id, "followed_tags", tag_id)

    async def add_followed_user(
        self, account_id: AccountId, followee_id: AccountId
    ) -> None:
        self._add(account_id, "followed_users", followee_id)

    async def remove_followed_user(
        self, account_id: AccountId, followee_id: AccountId
    ) -> None:
        self._pull(account_id, "followed_users", followee_id)

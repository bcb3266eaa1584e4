"""Account repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from quill.domain.model.account import Account
from quill.domain.value import AccountId, AccountStatus, PostId, TagId


class AccountRepository(ABC):
    """Repository for the Account aggregate.

    Membership updates are set-based: adding an existing member or removing
    an absent one leaves the account unchanged.
    """

    @abstractmethod
    async def find_by_id(self, account_id: AccountId) -> Optional[Account]:
        """Find an account by ID."""
        pass

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[Account]:
        """Find an account by its unique username."""
        pass

    @abstractmethod
    async def find_by_ids(self, account_ids: list[AccountId]) -> list[Account]:
        """Find multiple accounts by ID (missing ids are skipped)."""
        pass

    @abstractmethod
    async def search_by_username(self, keyword: str) -> list[Account]:
        """Find accounts whose username contains the keyword."""
        pass

    @abstractmethod
    async def next_id(self) -> AccountId:
        """Return the highest existing account id + 1 (1 for an empty store)."""
        pass

    @abstractmethod
    async def insert(self, account: Account) -> Account:
        """Insert a new account."""
        pass

    @abstractmethod
    async def find_all(self) -> list[Account]:
        """Every account, ordered by id."""
        pass

    @abstractmethod
    async def set_profile(self, account: Account) -> None:
        """Write only the profile fields of an account.

        Relationship lists and status are left as stored.
        """
        pass

    @abstractmethod
    async def set_status(self, account_id: AccountId, status: AccountStatus) -> None:
        """Set the moderation status of an account."""
        pass

    @abstractmethod
    async def add_to_reading_list(self, account_id: AccountId, post_id: PostId) -> None:
        """Add a post to the account's reading list."""
        pass

    @abstractmethod
    async def remove_from_reading_list(
        self, account_id: AccountId, post_id: PostId
    ) -> None:
        """Remove a post from the account's reading list."""
        pass

    @abstractmethod
    async def remove_from_all_reading_lists(self, post_id: PostId) -> int:
        """Remove a post from every reading list that holds it.

        Returns:
            Number of accounts modified
        """
        pass

    @abstractmethod
    async def add_followed_tag(self, account_id: AccountId, tag_id: TagId) -> None:
        """Follow a tag."""
        pass

    @abstractmethod
    async def remove_followed_tag(self, account_id: AccountId, tag_id: TagId) -> None:
        """Unfollow a tag."""
        pass

    @abstractmethod
    async def add_followed_user(
        self, account_id: AccountId, followee_id: AccountId
    ) -> None:
        """Follow another account."""
        pass

    @abstractmethod
    async def remove_followed_user(
        self, account_id: AccountId, followee_id: AccountId
    ) -> None:
        """Unfollow another account."""
        pass

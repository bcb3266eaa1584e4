"""Account domain service."""

from datetime import datetime
from typing import Optional
from urllib.parse import quote

import logfire

from quill.config import ContentSettings
from quill.domain.error import DuplicateError, NotFoundError, UnauthorizedError
from quill.domain.model import Account
from quill.domain.repository import AccountRepository, PostRepository
from quill.domain.value import AccountId, AccountStatus, TagId

from .base import Service


class AccountService(Service):
    """Domain service for account operations."""

    def __init__(
        self,
        account_repository: AccountRepository,
        post_repository: PostRepository,
        content_settings: ContentSettings,
    ) -> None:
        """Initialize account service.

        Args:
            account_repository: Account repository
            post_repository: Post repository, for the profile cascade
            content_settings: Content settings (default avatar)
        """
        self.account_repository = account_repository
        self.post_repository = post_repository
        self.content_settings = content_settings

    async def get_account_by_id(self, account_id: AccountId) -> Account:
        """Get an account by ID.

        Raises:
            NotFoundError: If the account doesn't exist
        """
        account = await self.account_repository.find_by_id(account_id)
        if account is None:
            logfire.warn("Account not found", account_id=account_id)
            raise NotFoundError("account", account_id)
        return account

    async def find_account(self, account_id: int | None) -> Optional[Account]:
        """Get the viewer's account if there is one, without raising."""
        if account_id is None:
            return None
        return await self.account_repository.find_by_id(AccountId(account_id))

    async def get_account_by_username(self, username: str) -> Account:
        """Get an account by username.

        Raises:
            NotFoundError: If the account doesn't exist
        """
        account = await self.account_repository.find_by_username(username)
        if account is None:
            logfire.warn("Account not found", username=username)
            raise NotFoundError("account", username)
        return account

    async def get_accounts(self, account_ids: list[AccountId]) -> list[Account]:
        """Get accounts by id, skipping missing ones."""
        return await self.account_repository.find_by_ids(account_ids)

    async def list_accounts(self) -> list[Account]:
        """Every account in id order."""
        return await self.account_repository.find_all()

    async def search_accounts(self, keyword: str) -> list[Account]:
        """Find accounts whose username contains the keyword."""
        return await self.account_repository.search_by_username(keyword)

    async def require_admin(self, account_id: AccountId) -> Account:
        """Get an account and check that it is an admin.

        Raises:
            NotFoundError: If the account doesn't exist
            UnauthorizedError: If the account isn't an admin
        """
        account = await self.get_account_by_id(account_id)
        if not account.admin:
            logfire.warn("Admin privilege required", account_id=account_id)
            raise UnauthorizedError(f"account {account.username} is not an admin")
        return account

    def default_avatar(self, name: str) -> str:
        """Generated avatar URL for an account without one."""
        return self.content_settings.default_avatar_url + quote(name)

    async def register_account(
        self,
        username: str,
        name: str,
        password_hash: str,
        school_email: str = "",
        private_email: str = "",
        avatar: Optional[str] = None,
        followed_tags: Optional[list[TagId]] = None,
    ) -> Account:
        """Register a new account in Pending status.

        Args:
            username: Unique username
            name: Display name
            password_hash: Already hashed password
            school_email: School email
            private_email: Private email
            avatar: Avatar URL; a generated one is used when omitted
            followed_tags: Initial tag ids to follow

        Returns:
            The created account

        Raises:
            DuplicateError: If the username is taken
        """
        with logfire.span("account_service.register_account", username=username):
            if await self.account_repository.find_by_username(username):
                logfire.warn("Username already taken", username=username)
                raise DuplicateError("account", username)

            now = datetime.now()
            account = Account(
                id=await self.account_repository.next_id(),
                username=username,
                name=name,
                password_hash=password_hash,
                school_email=school_email,
                private_email=private_email,
                avatar=avatar or self.default_avatar(name),
                status=AccountStatus.PENDING,
                followed_tags=list(dict.fromkeys(followed_tags or [])),
                last_access=now,
                created_at=now,
                updated_at=now,
            )
            saved = await self.account_repository.insert(account)
            logfire.info("Account registered", account_id=saved.id, username=username)
            return saved

    async def update_profile(
        self,
        account_id: AccountId,
        name: Optional[str] = None,
        avatar: Optional[str] = None,
        bio: Optional[str] = None,
        website: Optional[str] = None,
        private_email: Optional[str] = None,
    ) -> Account:
        """Update profile fields and cascade name/avatar into the account's posts.

        Only the profile fields are written, so a save or follow landing
        between the read and the write is kept. Every post snapshot is then
        refreshed in one multi-document update; a failure between the two
        leaves stale snapshots until the next profile edit.

        Raises:
            NotFoundError: If the account doesn't exist
        """
        with logfire.span("account_service.update_profile", account_id=account_id):
            account = await self.get_account_by_id(account_id)

            update: dict = {}
            for field, value in (
                ("name", name),
                ("avatar", avatar),
                ("bio", bio),
                ("website", website),
                ("private_email", private_email),
            ):
                if value is not None:
                    update[field] = value

            saved = account.edited(**update)
            await self.account_repository.set_profile(saved)
            logfire.info("Profile updated", account_id=account_id)

            if name is not None or avatar is not None:
                await self.post_repository.update_author_snapshot(
                    account.username, name=name, avatar=avatar
                )
            return saved

    async def set_account_status(
        self, admin_id: AccountId, username: str, status: AccountStatus
    ) -> Account:
        """Change an account's moderation status (admin only).

        Raises:
            UnauthorizedError: If the actor isn't an admin
            NotFoundError: If either account doesn't exist
        """
        with logfire.span(
            "account_service.set_account_status",
            admin_id=admin_id,
            username=username,
            status=status.value,
        ):
            await self.require_admin(admin_id)
            account = await self.get_account_by_username(username)
            await self.account_repository.set_status(account.id, status)
            logfire.info("Account status changed", username=username, status=status.value)
            return account.model_copy(update={"status": status})

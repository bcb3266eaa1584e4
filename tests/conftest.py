"""Test configuration and shared seeding helpers."""

from datetime import datetime, timedelta

from dishka import AsyncContainer

from quill.domain.model import Account, Post, Tag
from quill.domain.repository import AccountRepository, PostRepository, TagRepository
from quill.domain.value import AccountStatus, AuthorSnapshot, PostStatus


async def seed_account(
    env: AsyncContainer, username: str, admin: bool = False, name: str | None = None
) -> Account:
    """Insert an activated account straight into the repository.

    Args:
        env: Request-scoped test container
        username: Unique username
        admin: Whether the account has admin privilege
        name: Display name (defaults to the capitalized username)

    Returns:
        The stored account
    """
    repo = await env.get(AccountRepository)
    account = Account(
        id=await repo.next_id(),
        username=username,
        name=name or username.capitalize(),
        avatar=f"https://img.example.com/{username}.png",
        admin=admin,
        status=AccountStatus.ACTIVATED,
    )
    return await repo.insert(account)


async def seed_tag(env: AsyncContainer, value: str, post_count: int = 0) -> Tag:
    """Insert a tag straight into the repository."""
    repo = await env.get(TagRepository)
    tag = Tag(id=await repo.next_id(), value=value, post_count=post_count)
    return await repo.insert(tag)


async def seed_post(
    env: AsyncContainer,
    author: Account,
    title: str = "Seeded post",
    status: PostStatus = PostStatus.PUBLISHED,
    minutes_ago: int = 0,
    tags: list[str] | None = None,
) -> Post:
    """Insert a post without going through the tag usage counter.

    ``minutes_ago`` backdates ``created_at`` so tests can control feed order.
    """
    repo = await env.get(PostRepository)
    post_id = await repo.next_id()
    created = datetime.now() - timedelta(minutes=minutes_ago)
    post = Post(
        id=post_id,
        slug=f"seeded-{post_id}",
        author=AuthorSnapshot(
            username=author.username, name=author.name, avatar=author.avatar
        ),
        title=title,
        content=f"Body of {title}",
        status=status,
        tags=tags or [],
        created_at=created,
        updated_at=created,
    )
    return await repo.insert(post)

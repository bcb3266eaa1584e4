"""In-memory post repository for testing."""

from typing import Callable, Optional

from quill.domain.model import Post
from quill.domain.repository.post import PostRepository, feed_sort_key
from quill.domain.value import AccountId, CommentId, PostId, PostStatus


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing.

    Mirrors the guarded updates of the Mongo implementation: a reaction
    write is a no-op when membership already matches.
    """

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    def _select(
        self,
        predicate: Callable[[Post], bool],
        limit: Optional[int] = None,
        offset: int = 0,
    ) -> list[Post]:
        posts = [p for p in self._posts.values() if predicate(p)]
        posts.sort(key=feed_sort_key, reverse=True)
        end = offset + limit if limit else None
        return posts[offset:end]

    async def find_by_slug(self, slug: str) -> Optional[Post]:
        for post in self._posts.values():
            if post.slug == slug:
                return post
        return None

    async def find_by_ids(self, post_ids: list[PostId]) -> list[Post]:
        wanted = set(post_ids)
        return self._select(lambda p: p.id in wanted)

    async def slug_exists(self, slug: str) -> bool:
        return any(post.slug == slug for post in self._posts.values())

    async def next_id(self) -> PostId:
        return PostId(max(self._posts, default=0) + 1)

    async def insert(self, post: Post) -> Post:
        self._posts[post.id] = post
        return post

    async def replace(self, post: Post) -> Post:
        if post.id in self._posts:
            self._posts[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> bool:
        return self._posts.pop(post_id, None) is not None

    async def set_status(self, post_id: PostId, status: PostStatus) -> None:
        post = self._posts.get(post_id)
        if post:
            self._posts[post_id] = post.model_copy(update={"status": status})

    async def add_reaction(self, post_id: PostId, account_id: AccountId) -> bool:
        post = self._posts.get(post_id)
        if post is None or account_id in post.reaction_members:
            return False
        self._posts[post_id] = post.model_copy(
            update={
                "reaction_members": [*post.reaction_members, account_id],
                "reaction_count": post.reaction_count + 1,
            }
        )
        return True

    async def remove_reaction(self, post_id: PostId, account_id: AccountId) -> bool:
        post = self._posts.get(post_id)
        if post is None or account_id not in post.reaction_members:
            return False
        self._posts[post_id] = post.model_copy(
            update={
                "reaction_members": [
                    m for m in post.reaction_members if m != account_id
                ],
                "reaction_count": post.reaction_count - 1,
            }
        )
        return True

    async def _update_comment_reaction(
        self,
        post_id: PostId,
        comment_id: CommentId,
        account_id: AccountId,
        add: bool,
    ) -> bool:
        post = self._posts.get(post_id)
        if post is None:
            return False
        comment = post.find_comment(comment_id)
        if comment is None or (account_id in comment.interact_members) == add:
            return False

        if add:
            members = [*comment.interact_members, account_id]
        else:
            members = [m for m in comment.interact_members if m != account_id]
        updated = comment.model_copy(
            update={"interact_members": members, "interact_count": len(members)}
        )
        comments = [updated if c.id == comment_id else c for c in post.comments]
        self._posts[post_id] = post.model_copy(update={"comments": comments})
        return True

    async def add_comment_reaction(
        self, post_id: PostId, comment_id: CommentId, account_id: AccountId
    ) -> bool:
        return await self._update_comment_reaction(
            post_id, comment_id, account_id, add=True
        )

    async def remove_comment_reaction(
        self, post_id: PostId, comment_id: CommentId, account_id: AccountId
    ) -> bool:
        return await self._update_comment_reaction(
            post_id, comment_id, account_id, add=False
        )

    async def add_saved_by(self, post_id: PostId, account_id: AccountId) -> None:
        post = self._posts.get(post_id)
        if post and account_id not in post.saved_by:
            self._posts[post_id] = post.model_copy(
                update={"saved_by": [*post.saved_by, account_id]}
            )

    async def remove_saved_by(self, post_id: PostId, account_id: AccountId) -> None:
        post = self._posts.get(post_id)
        if post:
            self._posts[post_id] = post.model_copy(
                update={"saved_by": [m for m in post.saved_by if m != account_id]}
            )

    async def find_published(self, limit: int, offset: int = 0) -> list[Post]:
        return self._select(lambda p: p.is_published, limit, offset)

    async def find_all_published(self) -> list[Post]:
        return self._select(lambda p: p.is_published)

    async def find_published_by_author(
        self, username: str, limit: Optional[int] = None
    ) -> list[Post]:
        return self._select(
            lambda p: p.is_published and p.author.username == username, limit
        )

    async def find_by_author(self, username: str) -> list[Post]:
        return self._select(lambda p: p.author.username == username)

    async def find_published_by_tag(self, tag_value: str) -> list[Post]:
        return self._select(lambda p: p.is_published and tag_value in p.tags)

    async def search_published(self, keyword: str) -> list[Post]:
        needle = keyword.lower()
        return self._select(
            lambda p: p.is_published
            and (needle in p.title.lower() or needle in p.content.lower())
        )

    async def search_by_comment_content(self, keyword: str) -> list[Post]:
        needle = keyword.lower()
        return self._select(
            lambda p: p.is_published
            and any(needle in c.content.lower() for c in p.comments)
        )

    async def find_by_comment_author(self, username: str) -> list[Post]:
        return self._select(
            lambda p: any(c.author.username == username for c in p.comments)
        )

    async def update_author_snapshot(
        self, username: str, name: Optional[str] = None, avatar: Optional[str] = None
    ) -> int:
        fields = {}
        if name is not None:
            fields["name"] = name
        if avatar is not None:
            fields["avatar"] = avatar
        if not fields:
            return 0

        modified = 0
        for post_id, post in list(self._posts.items()):
            if post.author.username == username:
                author = post.author.model_copy(update=fields)
                self._posts[post_id] = post.model_copy(update={"author": author})
                modified += 1
        return modified

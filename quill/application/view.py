"""Read views shared by the use cases.

Views are flattened pydantic models assembled from several aggregates
plus the viewer's own relationship flags.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from quill.domain.model import Account, Comment, Post, Tag
from quill.domain.value import AuthorSnapshot, PostStatus, TagType


class AuthorCard(BaseModel):
    """Author snapshot as shown next to content."""

    username: str
    name: str
    avatar: str

    @classmethod
    def of(cls, author: AuthorSnapshot) -> "AuthorCard":
        return cls(username=author.username, name=author.name, avatar=author.avatar)


class ProfileCard(BaseModel):
    """Public profile of an account."""

    id: int
    username: str
    name: str
    avatar: str
    bio: str
    website: str
    followed: bool = False


class PostSummary(BaseModel):
    """Post row in feeds, listings and search results."""

    id: int
    slug: str
    title: str
    banner: Optional[str]
    author: AuthorCard
    status: PostStatus
    tags: list[str]
    comment_count: int
    reaction_count: int
    created_at: datetime
    updated_at: datetime
    saved: bool = False


class CommentView(BaseModel):
    """Embedded comment with the viewer's reaction flag."""

    id: int
    content: str
    author: AuthorCard
    parent_id: int
    interact_count: int
    interacted: bool = False
    created_at: datetime
    updated_at: datetime


class PostDetail(PostSummary):
    """Full post with comments and the viewer's flags."""

    content: str
    comments: list[CommentView]
    reacted: bool = False
    commented: bool = False


class TagView(BaseModel):
    """Tag with the viewer's follow flag."""

    id: int
    value: str
    description: str
    color: str
    image: str
    type: TagType
    post_count: int
    followed: bool = False


def profile_card(account: Account, viewer: Optional[Account] = None) -> ProfileCard:
    """Profile card; ``followed`` is whether the viewer follows the account."""
    return ProfileCard(
        id=account.id,
        username=account.username,
        name=account.name,
        avatar=account.avatar,
        bio=account.bio,
        website=account.website,
        followed=viewer is not None and account.id in viewer.followed_users,
    )


def post_summary(post: Post, viewer: Optional[Account] = None) -> PostSummary:
    """Feed row; ``saved`` comes from the viewer's reading list.

    The detail page overrides ``saved`` from ``post.saved_by``.
    """
    return PostSummary(
        id=post.id,
        slug=post.slug,
        title=post.title,
        banner=post.banner,
        author=AuthorCard.of(post.author),
        status=post.status,
        tags=list(post.tags),
        comment_count=post.comment_count,
        reaction_count=post.reaction_count,
        created_at=post.created_at,
        updated_at=post.updated_at,
        saved=viewer is not None and post.id in viewer.reading_list,
    )


def comment_view(comment: Comment, viewer: Optional[Account] = None) -> CommentView:
    return CommentView(
        id=comment.id,
        content=comment.content,
        author=AuthorCard.of(comment.author),
        parent_id=comment.parent_id,
        interact_count=comment.interact_count,
        interacted=comment.has_interacted(viewer.id if viewer else None),
        created_at=comment.created_at,
        updated_at=comment.updated_at,
    )


def post_detail(post: Post, viewer: Optional[Account] = None) -> PostDetail:
    """Post detail with comments in id order and every viewer flag resolved."""
    summary = post_summary(post, viewer)
    viewer_id = viewer.id if viewer else None
    # Same membership source as BookmarkService.toggle_save
    return PostDetail(
        **summary.model_dump(exclude={"saved"}),
        saved=viewer_id is not None and viewer_id in post.saved_by,
        content=post.content,
        comments=[
            comment_view(c, viewer) for c in sorted(post.comments, key=lambda c: c.id)
        ],
        reacted=viewer_id is not None and viewer_id in post.reaction_members,
        commented=viewer_id is not None and viewer_id in post.commenters,
    )


def tag_view(tag: Tag, viewer: Optional[Account] = None) -> TagView:
    return TagView(
        id=tag.id,
        value=tag.value,
        description=tag.description,
        color=tag.color,
        image=tag.image,
        type=tag.type,
        post_count=tag.post_count,
        followed=viewer is not None and tag.id in viewer.followed_tags,
    )

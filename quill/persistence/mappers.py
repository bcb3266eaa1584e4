"""Mappers for converting between MongoDB documents and domain models.

Documents use camelCase field names. Enum fields are parsed exhaustively
here so the domain layer never sees a raw string status.
"""

from typing import Any, Dict

from quill.domain.error import ServerError
from quill.domain.model import Account, Comment, Post, Tag
from quill.domain.value import (
    AccountId,
    AccountStatus,
    AuthorSnapshot,
    CommentId,
    PostId,
    PostStatus,
    TagId,
    TagType,
)


def parse_post_status(value: str) -> PostStatus:
    """Parse a stored post status."""
    match value:
        case "Draft":
            return PostStatus.DRAFT
        case "Published":
            return PostStatus.PUBLISHED
        case _:
            raise ServerError(f"unknown post status in store: {value!r}")


def parse_account_status(value: str) -> AccountStatus:
    """Parse a stored account status."""
    match value:
        case "Activated":
            return AccountStatus.ACTIVATED
        case "Banned":
            return AccountStatus.BANNED
        case "Pending":
            return AccountStatus.PENDING
        case _:
            raise ServerError(f"unknown account status in store: {value!r}")


def parse_tag_type(value: str) -> TagType:
    """Parse a stored tag type."""
    match value:
        case "Category":
            return TagType.CATEGORY
        case "Tag":
            return TagType.TAG
        case _:
            raise ServerError(f"unknown tag type in store: {value!r}")


def _author_from_doc(doc: Dict[str, Any]) -> AuthorSnapshot:
    return AuthorSnapshot(
        username=doc["userUserName"],
        name=doc.get("userName", ""),
        avatar=doc.get("userAvatar", ""),
    )


def doc_to_comment(doc: Dict[str, Any]) -> Comment:
    """Convert an embedded comment document to a Comment.

    Args:
        doc: Comment sub-document from a post

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(doc["_id"]),
        content=doc["content"],
        author=_author_from_doc(doc),
        parent_id=CommentId(doc.get("parentId", 0)),
        interact_count=doc.get("interact", 0),
        interact_members=[AccountId(i) for i in doc.get("interactList", [])],
        created_at=doc["createdAt"],
        updated_at=doc["updatedAt"],
    )


def comment_to_doc(comment: Comment) -> Dict[str, Any]:
    """Convert a Comment to its embedded document form."""
    return {
        "_id": comment.id,
        "content": comment.content,
        "userUserName": comment.author.username,
        "userName": comment.author.name,
        "userAvatar": comment.author.avatar,
        "createdAt": comment.created_at,
        "updatedAt": comment.updated_at,
        "interact": comment.interact_count,
        "parentId": comment.parent_id,
        "interactList": list(comment.interact_members),
    }


def doc_to_post(doc: Dict[str, Any]) -> Post:
    """Convert a post document to a Post.

    Args:
        doc: Document from the posts collection

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(doc["_id"]),
        slug=doc["slug"],
        author=_author_from_doc(doc),
        title=doc["title"],
        content=doc.get("content", ""),
        banner=doc.get("banner") or None,
        status=parse_post_status(doc["status"]),
        tags=list(doc.get("tag", [])),
        comments=[doc_to_comment(c) for c in doc.get("comment", [])],
        comment_count=doc.get("commentCount", 0),
        reaction_count=doc.get("reactionCount", 0),
        reaction_members=[AccountId(i) for i in doc.get("reactionList", [])],
        commenters=[AccountId(i) for i in doc.get("commentList", [])],
        saved_by=[AccountId(i) for i in doc.get("savedByUser", [])],
        created_at=doc["createdAt"],
        updated_at=doc["updatedAt"],
    )


def post_to_doc(post: Post) -> Dict[str, Any]:
    """Convert a Post to a document for insertion or replacement."""
    return {
        "_id": post.id,
        "userUserName": post.author.username,
        "userName": post.author.name,
        "userAvatar": post.author.avatar,
        "slug": post.slug,
        "banner": post.banner or "",
        "title": post.title,
        "content": post.content,
        "createdAt": post.created_at,
        "updatedAt": post.updated_at,
        "status": post.status.value,
        "tag": list(post.tags),
        "comment": [comment_to_doc(c) for c in post.comments],
        "commentCount": post.comment_count,
        "reactionCount": post.reaction_count,
        "reactionList": list(post.reaction_members),
        "commentList": list(post.commenters),
        "savedByUser": list(post.saved_by),
    }


def doc_to_tag(doc: Dict[str, Any]) -> Tag:
    """Convert a tag document to a Tag."""
    return Tag(
        id=TagId(doc["_id"]),
        value=doc["value"],
        description=doc.get("desc", ""),
        color=doc.get("color", ""),
        image=doc.get("image", ""),
        type=parse_tag_type(doc.get("type", "Tag")),
        post_count=doc.get("post", 0),
        moderators=[AccountId(i) for i in doc.get("moderator", [])],
        created_at=doc["createdAt"],
        updated_at=doc["updatedAt"],
    )


def tag_to_doc(tag: Tag) -> Dict[str, Any]:
    """Convert a Tag to a document."""
    return {
        "_id": tag.id,
        "value": tag.value,
        "desc": tag.description,
        "color": tag.color,
        "image": tag.image,
        "type": tag.type.value,
        "post": tag.post_count,
        "moderator": list(tag.moderators),
        "createdAt": tag.created_at,
        "updatedAt": tag.updated_at,
    }


def doc_to_account(doc: Dict[str, Any]) -> Account:
    """Convert an account document to an Account."""
    return Account(
        id=AccountId(doc["_id"]),
        username=doc["username"],
        name=doc.get("name", ""),
        school_email=doc.get("schoolEmail", ""),
        private_email=doc.get("privateEmail", ""),
        password_hash=doc.get("password", ""),
        avatar=doc.get("avatar", ""),
        bio=doc.get("bio", ""),
        website=doc.get("website", ""),
        admin=doc.get("admin", False),
        status=parse_account_status(doc.get("status", "Pending")),
        followed_tags=[TagId(i) for i in doc.get("followedTag", [])],
        reading_list=[PostId(i) for i in doc.get("readingList", [])],
        followed_users=[AccountId(i) for i in doc.get("followedUser", [])],
        last_access=doc.get("lastAccess", doc["createdAt"]),
        created_at=doc["createdAt"],
        updated_at=doc["updatedAt"],
    )


def account_to_doc(account: Account) -> Dict[str, Any]:
    """Convert an Account to a document."""
    return {
        "_id": account.id,
        "name": account.name,
        "username": account.username,
        "schoolEmail": account.school_email,
        "privateEmail": account.private_email,
        "bio": account.bio,
        "password": account.password_hash,
        "avatar": account.avatar,
        "admin": account.admin,
        "website": account.website,
        "lastAccess": account.last_access,
        "createdAt": account.created_at,
        "updatedAt": account.updated_at,
        "status": account.status.value,
        "followedTag": list(account.followed_tags),
        "readingList": list(account.reading_list),
        "followedUser": list(account.followed_users),
    }

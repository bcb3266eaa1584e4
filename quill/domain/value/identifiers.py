"""Strongly typed identifiers for Quill domain entities.

All entities use monotonically increasing integer ids. Comment ids are
local to the post that embeds them.
"""

from typing import NewType

AccountId = NewType("AccountId", int)
PostId = NewType("PostId", int)
TagId = NewType("TagId", int)
CommentId = NewType("CommentId", int)

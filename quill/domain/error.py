"""Domain layer errors.

Every error carries an ``ErrorKind`` so transports can map it to their own
status codes without inspecting exception types.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of failure categories surfaced to callers."""

    NOT_FOUND = "not_found"
    NOT_OWNED = "not_owned"
    UNAUTHORIZED = "unauthorized"
    DUPLICATE = "duplicate"
    BAD_REQUEST = "bad_request"
    SERVER_ERROR = "server_error"


class DomainError(Exception):
    """Base domain error."""

    kind: ErrorKind = ErrorKind.BAD_REQUEST

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, resource: str, identifier: str | int):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ParentCommentNotFoundError(DomainError):
    """Raised when a reply references a comment that is not in the post."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, slug: str, parent_id: int):
        self.slug = slug
        self.parent_id = parent_id
        super().__init__(f"parent comment not found: {parent_id} in post {slug}")


class NotOwnedError(DomainError):
    """Raised when an account edits content it doesn't own."""

    kind = ErrorKind.NOT_OWNED

    def __init__(self, resource: str, identifier: str | int, actor: str):
        super().__init__(f"{actor} does not own {resource} {identifier}")


class UnauthorizedError(DomainError):
    """Raised when an account lacks a required privilege."""

    kind = ErrorKind.UNAUTHORIZED


class DuplicateError(DomainError):
    """Raised when a uniqueness rule would be violated."""

    kind = ErrorKind.DUPLICATE

    def __init__(self, resource: str, identifier: str | int):
        super().__init__(f"{resource} already exists: {identifier}")


class BadRequestError(DomainError):
    """Raised for semantically invalid operations."""

    kind = ErrorKind.BAD_REQUEST


class ServerError(DomainError):
    """Raised when the document store fails on a write judged valid."""

    kind = ErrorKind.SERVER_ERROR

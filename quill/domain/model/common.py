"""Base model for document-backed entities."""

from datetime import datetime
from typing import Any, Self

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for posts, comments, tags and accounts.

    Instances are immutable; edits produce a new instance that the
    repository writes back.
    """

    model_config = ConfigDict(frozen=True)

    def edited(self, **changes: Any) -> Self:
        """Copy with the given fields replaced and ``updated_at`` refreshed."""
        return self.model_copy(update={**changes, "updated_at": datetime.now()})

"""Reaction use cases."""

from .remove_reaction import (
    RemoveReactionRequest,
    RemoveReactionResponse,
    RemoveReactionUseCase,
)
from .toggle_reaction import (
    ToggleReactionRequest,
    ToggleReactionResponse,
    ToggleReactionUseCase,
)

__all__ = [
    "RemoveReactionRequest",
    "RemoveReactionResponse",
    "RemoveReactionUseCase",
    "ToggleReactionRequest",
    "ToggleReactionResponse",
    "ToggleReactionUseCase",
]

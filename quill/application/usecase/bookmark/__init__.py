"""Bookmark use cases."""

from .toggle_save import ToggleSaveRequest, ToggleSaveResponse, ToggleSaveUseCase

__all__ = [
    "ToggleSaveRequest",
    "ToggleSaveResponse",
    "ToggleSaveUseCase",
]

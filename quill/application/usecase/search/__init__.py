"""Search use cases."""

from .search import SearchRequest, SearchResponse, SearchUseCase

__all__ = [
    "SearchRequest",
    "SearchResponse",
    "SearchUseCase",
]

"""Folder-scoped search and replace for markdown and text files."""

from .api import replace_all, search
from .common.pydantic import ReplaceResult, SearchBlock, SearchQuery, SearchResult, SearchTarget, SearchType
from .errors import MkfindError, QueryError

__all__ = [
    "MkfindError",
    "QueryError",
    "ReplaceResult",
    "SearchBlock",
    "SearchQuery",
    "SearchResult",
    "SearchTarget",
    "SearchType",
    "replace_all",
    "search",
]

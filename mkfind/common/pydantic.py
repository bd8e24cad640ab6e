"""Pydantic base model."""

from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class FrozenBaseModel(BaseModel):
    """Pydantic frozen base model."""

    model_config = ConfigDict(frozen=True, strict=True)


class SearchType(StrEnum):
    """Matching strategy."""

    LITERAL = "literal"
    WILDCARD = "wildcard"
    ADVANCED = "advanced"


class SearchTarget(StrEnum):
    """What a search is applied to."""

    CONTENT = "content"
    FILENAMES = "filenames"


class SearchBlock(StrEnum):
    """Match granularity for content searches."""

    ENTIRE_FILE = "entire-file"
    FILE_LINES = "file-lines"


class SearchQuery(FrozenBaseModel):
    """Search query."""

    root_path: Path
    text: str
    search_type: SearchType = SearchType.LITERAL
    target: SearchTarget = SearchTarget.CONTENT
    block: SearchBlock = SearchBlock.ENTIRE_FILE
    ignore_patterns: list[str] = Field(default_factory=list)


class SearchResult(FrozenBaseModel):
    """Search result."""

    path: Path
    relative_path: str
    match_count: int
    line_number: int | None = None
    line_text: str | None = None
    found_time: int | None = None
    modified_time: int | None = None
    created_time: int | None = None


class ReplaceResult(FrozenBaseModel):
    """Outcome of a replace operation on a single file."""

    path: Path
    relative_path: str
    replacement_count: int
    success: bool
    error: str | None = None

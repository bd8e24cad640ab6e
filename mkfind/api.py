"""Asynchronous entry points."""

import asyncio
from collections.abc import Iterable
from enum import StrEnum
from pathlib import Path
from threading import Event
from typing import TypeVar

from .app.app_config import AppConfig, build_replace_engine, build_search_engine
from .common.clock import Clock
from .common.pydantic import ReplaceResult, SearchBlock, SearchQuery, SearchResult, SearchTarget, SearchType
from .errors import QueryError

E = TypeVar("E", bound=StrEnum)


def _parse_option(enum_type: type[E], value: str | E) -> E:
    try:
        return enum_type(value)
    except ValueError as e:
        allowed = ", ".join(member.value for member in enum_type)
        raise QueryError(f"Invalid {enum_type.__name__} {value!r}; expected one of: {allowed}") from e


def build_query(
    root_path: str | Path,
    query_text: str,
    search_type: str | SearchType = SearchType.LITERAL,
    target: str | SearchTarget = SearchTarget.CONTENT,
    block: str | SearchBlock = SearchBlock.ENTIRE_FILE,
    ignore_patterns: Iterable[str] | None = None,
) -> SearchQuery:
    """Build a SearchQuery from loosely typed arguments."""
    return SearchQuery(
        root_path=Path(root_path),
        text=query_text,
        search_type=_parse_option(SearchType, search_type),
        target=_parse_option(SearchTarget, target),
        block=_parse_option(SearchBlock, block),
        ignore_patterns=list(ignore_patterns or []),
    )


async def search(
    root_path: str | Path,
    query_text: str,
    search_type: str | SearchType = SearchType.LITERAL,
    target: str | SearchTarget = SearchTarget.CONTENT,
    block: str | SearchBlock = SearchBlock.ENTIRE_FILE,
    ignore_patterns: Iterable[str] | None = None,
    *,
    config: AppConfig | None = None,
    clock: Clock | None = None,
    cancel_event: Event | None = None,
) -> list[SearchResult]:
    """Search a folder.

    Raises:
        QueryError: The query is malformed; nothing has been read.
        concurrent.futures.CancelledError: ``cancel_event`` was set.
    """
    query = build_query(root_path, query_text, search_type, target, block, ignore_patterns)
    engine = build_search_engine(config or AppConfig(), clock=clock)
    return await asyncio.to_thread(engine.search, query, cancel_event)


async def replace_all(
    root_path: str | Path,
    search_text: str,
    replace_text: str,
    ignore_patterns: Iterable[str] | None = None,
    *,
    config: AppConfig | None = None,
    cancel_event: Event | None = None,
) -> list[ReplaceResult]:
    """Replace text in every .md and .txt file of a folder (case-sensitive)."""
    engine = build_replace_engine(config or AppConfig())
    return await asyncio.to_thread(
        engine.replace_all, Path(root_path), search_text, replace_text, list(ignore_patterns or []), cancel_event
    )

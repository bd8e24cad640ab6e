"""Search orchestrator."""

import logging
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from pathlib import Path
from threading import Event

from more_itertools import flatten

from ..common.cancellation import check_cancelled
from ..common.clock import Clock, SystemClock
from ..common.pydantic import SearchBlock, SearchQuery, SearchResult, SearchTarget, SearchType
from ..errors import QueryError
from ..index.path_filter import PathFilter
from ..index.traversal import Traverser, relative_to_root
from ..search.line_scanner import scan_lines
from ..search.matcher import Matcher, build_matcher
from ..search.predicate.evaluator import PredicateMatcher
from ..search.text.parsing import TextReader
from ..search.text.timestamps import extract_timestamp

logger = logging.getLogger(__name__)


def file_times(path: Path) -> tuple[int | None, int | None]:
    """Modification and creation times in epoch milliseconds, None when unavailable."""
    try:
        stat = path.stat()
    except OSError:
        return None, None
    # st_birthtime only exists on some platforms
    created = getattr(stat, "st_birthtime", stat.st_ctime)
    return stat.st_mtime_ns // 1_000_000, round(created * 1000)


def _found_time(unit: str) -> int | None:
    ts = extract_timestamp(unit)
    return ts if ts != 0 else None


class SearchEngine:
    """Search orchestrator service."""

    def __init__(
        self,
        reader: TextReader | None = None,
        max_workers: int = 8,
        clock: Clock | None = None,
        ignore_patterns: Iterable[str] = (),
    ):
        """Initialize the search engine."""
        self.reader = reader if reader is not None else TextReader()
        self.max_workers = max_workers
        self.clock = clock if clock is not None else SystemClock()
        self.ignore_patterns = list(ignore_patterns)

    def compile(self, query: SearchQuery) -> Matcher:
        """Validate the query and build its matcher.

        Raises:
            QueryError: Empty query text, an unsupported option combination,
                or a malformed pattern or expression.
        """
        if not query.text:
            raise QueryError("Search query must not be empty.")
        if query.target == SearchTarget.FILENAMES:
            if query.search_type == SearchType.ADVANCED:
                raise QueryError("Advanced search is not supported for filename searches.")
            if query.block == SearchBlock.FILE_LINES:
                raise QueryError("Line-by-line search is only supported for content searches.")

        if query.search_type == SearchType.ADVANCED:
            return PredicateMatcher(query.text, self.clock)
        try:
            return build_matcher(query.text, wildcard=query.search_type == SearchType.WILDCARD)
        except ValueError as e:
            raise QueryError(str(e)) from e

    def search(self, query: SearchQuery, cancel_event: Event | None = None) -> list[SearchResult]:
        """Search for a query.

        Entire-file and filename results are sorted by match count, highest
        first, ties keeping traversal order. Line results keep file traversal
        order, then line order.
        """
        matcher = self.compile(query)
        root = query.root_path.absolute()
        traverser = Traverser(PathFilter([*self.ignore_patterns, *query.ignore_patterns]))
        logger.info("Searching %s for %r (%s, %s, %s)", root, query.text, query.search_type, query.target, query.block)

        if query.target == SearchTarget.FILENAMES:
            results: list[SearchResult] = []
            for path in traverser.walk_entries(root):
                check_cancelled(cancel_event)
                result = self._search_name(path, root, matcher)
                if result is not None:
                    results.append(result)
        else:
            search_file = partial(
                self._search_file, root=root, matcher=matcher, block=query.block, cancel_event=cancel_event
            )
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                results = list(flatten(executor.map(search_file, traverser.walk_files(root))))

        if query.block == SearchBlock.ENTIRE_FILE:
            results.sort(key=lambda x: x.match_count, reverse=True)
        logger.info("Search for %r found %d result(s)", query.text, len(results))
        return results

    def _search_name(self, path: Path, root: Path, matcher: Matcher) -> SearchResult | None:
        match_count = matcher.match(path.name)
        if match_count == 0:
            return None
        modified_time, created_time = file_times(path)
        return SearchResult(
            path=path,
            relative_path=relative_to_root(path, root),
            match_count=match_count,
            found_time=_found_time(path.name),
            modified_time=modified_time,
            created_time=created_time,
        )

    def _search_file(
        self, path: Path, root: Path, matcher: Matcher, block: SearchBlock, cancel_event: Event | None
    ) -> list[SearchResult]:
        check_cancelled(cancel_event)
        try:
            text = self.reader.read(path).text
        except (OSError, UnicodeError) as e:
            logger.debug("Skipping unreadable file %s: %s", path, e)
            return []

        relative_path = relative_to_root(path, root)
        if block == SearchBlock.FILE_LINES:
            line_matches = list(scan_lines(text, matcher))
            if not line_matches:
                return []
            modified_time, created_time = file_times(path)
            return [
                SearchResult(
                    path=path,
                    relative_path=relative_path,
                    match_count=line.match_count,
                    line_number=line.line_number,
                    line_text=line.text,
                    found_time=_found_time(line.text),
                    modified_time=modified_time,
                    created_time=created_time,
                )
                for line in line_matches
            ]

        match_count = matcher.match(text)
        if match_count == 0:
            return []
        modified_time, created_time = file_times(path)
        return [
            SearchResult(
                path=path,
                relative_path=relative_path,
                match_count=match_count,
                found_time=_found_time(text),
                modified_time=modified_time,
                created_time=created_time,
            )
        ]

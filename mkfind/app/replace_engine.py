"""Literal search and replace."""

import logging
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from functools import partial
from pathlib import Path
from threading import Event

from ..common.cancellation import check_cancelled
from ..common.pydantic import ReplaceResult
from ..index.path_filter import PathFilter
from ..index.traversal import Traverser, relative_to_root
from ..search.text.parsing import DecodedText, TextReader

logger = logging.getLogger(__name__)


class ReplaceEngine:
    """Replaces text in every .md and .txt file under a folder.

    Unlike searching, matching is case-sensitive. Each file is rewritten
    independently; a failure is reported on that file's result and does not
    stop the batch.
    """

    def __init__(self, reader: TextReader | None = None, max_workers: int = 8, ignore_patterns: Iterable[str] = ()):
        """Initialize the replace engine."""
        self.reader = reader if reader is not None else TextReader()
        self.max_workers = max_workers
        self.ignore_patterns = list(ignore_patterns)

    def replace_all(
        self,
        root_path: Path,
        search_text: str,
        replace_text: str,
        ignore_patterns: Iterable[str] = (),
        cancel_event: Event | None = None,
    ) -> list[ReplaceResult]:
        """Replace every case-sensitive occurrence of search_text and write files back."""
        if not search_text:
            return []

        root = Path(root_path).absolute()
        traverser = Traverser(PathFilter([*self.ignore_patterns, *ignore_patterns]))
        logger.info("Replacing %r with %r under %s", search_text, replace_text, root)

        replace_file = partial(
            self._replace_file,
            root=root,
            search_text=search_text,
            replace_text=replace_text,
            cancel_event=cancel_event,
        )
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            outcomes = executor.map(replace_file, traverser.walk_files(root))
            results = [result for result in outcomes if result is not None]

        failed = sum(1 for result in results if not result.success)
        logger.info("Replaced text in %d file(s), %d failure(s)", len(results) - failed, failed)
        return results

    def _replace_file(
        self, path: Path, root: Path, search_text: str, replace_text: str, cancel_event: Event | None
    ) -> ReplaceResult | None:
        check_cancelled(cancel_event)
        relative_path = relative_to_root(path, root)
        try:
            decoded = self.reader.read(path)
            replacement_count = decoded.text.count(search_text)
            if replacement_count == 0:
                return None
            updated = decoded.text.replace(search_text, replace_text)
            self.reader.write(path, DecodedText(text=updated, encoding=decoded.encoding))
        except (OSError, UnicodeError) as e:
            logger.warning("Replace failed for %s: %s", path, e)
            return ReplaceResult(
                path=path, relative_path=relative_path, replacement_count=0, success=False, error=str(e)
            )
        return ReplaceResult(path=path, relative_path=relative_path, replacement_count=replacement_count, success=True)

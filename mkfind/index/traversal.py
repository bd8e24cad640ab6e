"""Directory traversal for content and filename searches."""

import os
from collections.abc import Iterable, Iterator
from pathlib import Path

from .path_filter import PathFilter

CONTENT_EXTENSIONS = frozenset({".md", ".txt"})


def is_content_file(path: Path, extensions: Iterable[str] = CONTENT_EXTENSIONS) -> bool:
    """Whether the file extension marks a searchable text file."""
    return path.suffix.lower() in extensions


class Traverser:
    """Recursive walker that prunes excluded directories."""

    def __init__(self, path_filter: PathFilter | None = None, extensions: Iterable[str] = CONTENT_EXTENSIONS):
        """Initialize the traverser."""
        self.path_filter = path_filter if path_filter is not None else PathFilter()
        self.extensions = frozenset(ext.lower() for ext in extensions)

    def _walk(self, root: Path) -> Iterator[tuple[Path, list[str], list[str]]]:
        for dirpath, dirnames, filenames in os.walk(root, topdown=True):
            # Pruning in place stops os.walk from descending into excluded subtrees
            dirnames[:] = sorted(
                d for d in dirnames if not self.path_filter.should_exclude(d, os.path.join(dirpath, d))
            )
            filenames = sorted(
                f for f in filenames if not self.path_filter.should_exclude(f, os.path.join(dirpath, f))
            )
            yield Path(dirpath), dirnames, filenames

    def walk_files(self, root: Path) -> Iterator[Path]:
        """Yield absolute paths of searchable text files below root."""
        root = Path(root).absolute()
        for dirpath, _, filenames in self._walk(root):
            for name in filenames:
                path = dirpath / name
                if is_content_file(path, self.extensions):
                    yield path

    def walk_entries(self, root: Path) -> Iterator[Path]:
        """Yield absolute paths of every file and directory below root."""
        root = Path(root).absolute()
        for dirpath, dirnames, filenames in self._walk(root):
            for name in filenames:
                yield dirpath / name
            for name in dirnames:
                yield dirpath / name


def relative_to_root(path: Path, root: Path) -> str:
    """Path of an entry relative to the traversal root."""
    return str(Path(path).relative_to(Path(root).absolute()))

"""Ignore-pattern filter shared by search and replace."""

import re
from collections.abc import Iterable
from pathlib import Path


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a glob-like ignore pattern where ``*`` matches any run of characters."""
    regex = ".*".join(re.escape(part) for part in pattern.split("*"))
    return re.compile(f"^{regex}$", re.IGNORECASE | re.DOTALL)


class PathFilter:
    """Excludes entries whose name or full path matches an ignore pattern."""

    def __init__(self, patterns: Iterable[str] = ()):
        """Compile the patterns, dropping blank ones."""
        self.patterns = [compile_pattern(p.strip()) for p in patterns if p.strip()]

    def should_exclude(self, name: str, full_path: str | Path) -> bool:
        """Return True if any pattern matches the bare name or the full path."""
        full_path = str(full_path)
        return any(p.match(name) or p.match(full_path) for p in self.patterns)

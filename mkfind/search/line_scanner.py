"""Per-line matching."""

import re
from collections.abc import Iterator
from dataclasses import dataclass

from .matcher import Matcher

_LINE_BREAK_RE = re.compile(r"\r?\n")


@dataclass(frozen=True, slots=True)
class LineMatch:
    """A matching line."""

    line_number: int
    text: str
    match_count: int


def split_lines(text: str) -> list[str]:
    """Split text on LF or CRLF line breaks."""
    return _LINE_BREAK_RE.split(text)


def scan_lines(text: str, matcher: Matcher) -> Iterator[LineMatch]:
    """Apply a matcher to every line, yielding the ones with a positive count."""
    for line_number, line in enumerate(split_lines(text), start=1):
        match_count = matcher.match(line)
        if match_count > 0:
            yield LineMatch(line_number=line_number, text=line, match_count=match_count)

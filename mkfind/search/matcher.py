"""Literal and wildcard matchers."""

import re
from abc import ABC, abstractmethod

WILDCARD = "*"
MAX_WILDCARD_GAP = 25
_GAP_BREAK_RE = re.compile(r"[\r\n\u2028\u2029]")


class Matcher(ABC):
    """Matching strategy applied to a unit of text."""

    @abstractmethod
    def match(self, unit: str) -> int:
        """Return the match count for the unit, 0 when it does not match."""


class LiteralMatcher(Matcher):
    """Case-insensitive substring counter."""

    def __init__(self, query: str):
        """Initialize the matcher."""
        if not query:
            raise ValueError("Literal query must not be empty.")
        self.query = query.lower()

    def match(self, unit: str) -> int:
        """Count non-overlapping occurrences, left to right."""
        return unit.lower().count(self.query)


class WildcardMatcher(Matcher):
    """Matches ``*``-separated segments with a bounded gap between them.

    Every segment after the first has to start within ``max_gap`` characters
    of the end of the previous one, and the gap may not contain a line
    break. The count is the number of non-overlapping chains, leftmost
    first, scanning resuming after each chain's end.
    """

    def __init__(self, pattern: str, max_gap: int = MAX_WILDCARD_GAP):
        """Initialize the matcher."""
        if not pattern.replace(WILDCARD, ""):
            raise ValueError("Wildcard pattern must contain at least one literal character.")
        self.segments = [segment.lower() for segment in pattern.split(WILDCARD)]
        self.max_gap = max_gap

    def _next_start(self, text: str, segment: str, gap_start: int, cursor: int) -> int:
        """Next start of segment at or after cursor that is reachable from gap_start, or -1."""
        start = text.find(segment, cursor, gap_start + self.max_gap + len(segment))
        if start == -1 or _GAP_BREAK_RE.search(text, gap_start, start):
            return -1
        return start

    def _chain_end(self, text: str, pos: int, failed: set[tuple[int, int]]) -> int | None:
        """End of the chain of the remaining segments starting after pos, None if there is none.

        Depth-first search over candidate segment starts; ``failed`` records
        (segment index, gap start) pairs already known not to complete.
        """
        rest = self.segments[1:]
        if not rest:
            return pos
        # Each frame is [segment index, gap start, next candidate position]
        frames = [[0, pos, pos]]
        while frames:
            frame = frames[-1]
            index, gap_start, cursor = frame
            start = self._next_start(text, rest[index], gap_start, cursor)
            if start == -1:
                failed.add((index, gap_start))
                frames.pop()
                continue
            frame[2] = start + 1
            end = start + len(rest[index])
            if index + 1 == len(rest):
                return end
            if (index + 1, end) not in failed:
                frames.append([index + 1, end, end])
        return None

    def match(self, unit: str) -> int:
        """Count complete segment chains in the unit."""
        text = unit.lower()
        first = self.segments[0]
        failed: set[tuple[int, int]] = set()

        count = 0
        pos = 0
        while pos <= len(text):
            start = text.find(first, pos)
            if start == -1:
                break
            end = self._chain_end(text, start + len(first), failed)
            if end is None:
                pos = start + 1
                continue
            count += 1
            pos = max(end, start + 1)
        return count


def build_matcher(query: str, wildcard: bool = False) -> Matcher:
    """Build a literal or wildcard matcher; patterns without ``*`` are literal."""
    if wildcard and WILDCARD in query:
        return WildcardMatcher(query)
    return LiteralMatcher(query)

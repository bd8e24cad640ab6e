"""Test utilities and fake implementations."""

from datetime import datetime
from pathlib import Path

from mkfind.common.clock import Clock


def local_ms(*args: int) -> int:
    """Epoch milliseconds of a local date and time."""
    return round(datetime(*args).timestamp() * 1000)


# Noon on 03/15/2026, local time
FIXED_NOW = local_ms(2026, 3, 15, 12, 0)


class FakeClock(Clock):
    """Clock frozen at a fixed instant."""

    def __init__(self, now_ms: int = FIXED_NOW):
        """Store the instant to report."""
        self._now_ms = now_ms

    def now_ms(self) -> int:
        """Return the frozen time."""
        return self._now_ms


def write_tree(root: Path, files: dict[str, str | bytes]) -> None:
    """Create files below root from a mapping of relative path to content."""
    for relative_path, content in files.items():
        path = root / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_bytes(content.encode("utf-8"))


CORPUS: dict[str, str | bytes] = {
    "readme.md": "# Project Overview\n\nThis project demonstrates the search features.\n",
    "notes.txt": "Random notes file.\nMeeting scheduled for 03/15/2026 10:00 AM.\n",
    "empty.md": "",
    "special-chars.md": "Price is $19.99 plus tax.\nWater (H2O) is wet.\n",
    "unicode.md": "Héllo wörld! Ñoño café résumé.\n日本語テスト\n",
    "also-skip.md": "apple SKIP_MARKER\n",
    "skipme/hidden.md": "apple SKIP_MARKER\n",
    "multi-match/repeated.md": "apple apple APPLE\nApple pie and apple tart\napple apple\n",
    "multi-match/single-match.md": "One apple and a banana.\n",
    "multi-match/no-match.md": "Nothing to see here.\n",
    "recipes/smoothie.txt": "Banana smoothie\nBlend the banana with milk.\n",
    "nested/deep/structure/deep-file.md": "This file tests recursive search.\n",
    "wildcard-testing/hello-world.md": "# Hello World\n\nSay hello world to everyone.\n",
    "wildcard-testing/boundaries.md": "ALPHA_1234567890_1234567890_12345_OMEGA\nStartMARKEREnd\n",
    "data/config.json": '{"text": "apple should not appear"}\n',
    "data/settings.yaml": "note: apple should not appear\n",
    "images/photo.jpg": b"FAKE_BINARY_DATA apple\xff\xfe",
    "journal/entry-past.md": "Journal entry written 03/10/2026 09:00 AM\nPAST_MARKER\n",
    "journal/entry-old.md": "Old entry from 01/02/2025\n",
    "journal/entry-future.md": "FUTURE_MARKER due 03/17/2026 08:00 AM\n",
    "journal/entry-far-future.md": "Planned for 12/25/26\n",
    "journal/entry-today.md": "TODAY_MARKER 03/15/2026 08:30 AM\n",
    "lines/known-lines.md": "first line\nTARGET_WORD on line two\nthird line\nTARGET_WORD and target_word on four\n",
    "lines/crlf.txt": "alpha\r\nbeta FIND_ME\r\ngamma\r\n",
}

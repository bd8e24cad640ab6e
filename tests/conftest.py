"""Pytest configuration and fixtures for the test suite."""

import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from tests.test_utils import CORPUS, FakeClock, write_tree


@pytest.fixture
def temp_workspace() -> Generator[Path, None, None]:
    """Create a temporary workspace for file operations."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def corpus(temp_workspace: Path) -> Path:
    """Provide a folder populated with the sample corpus."""
    root = temp_workspace / "corpus"
    write_tree(root, CORPUS)
    return root


@pytest.fixture
def clock() -> FakeClock:
    """Provide a clock frozen at noon on 03/15/2026."""
    return FakeClock()

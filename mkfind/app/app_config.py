"""App components."""

from pathlib import Path

from pydantic import BaseModel, Field

from ..common.app import app_dirs
from ..common.clock import Clock
from ..search.text.parsing import TextReader
from .replace_engine import ReplaceEngine
from .search_engine import SearchEngine


class AppConfig(BaseModel):
    """App configuration."""

    reader: TextReader = Field(default_factory=TextReader)
    max_workers: int = Field(default=8, ge=1, description="Number of files processed concurrently.")
    ignore_patterns: list[str] = Field(
        default_factory=list, description="Ignore patterns applied to every search and replace."
    )


def load_config(path: Path | None = None) -> AppConfig:
    """Load the config from disk, falling back to defaults when the file does not exist."""
    if path is None:
        path = app_dirs.app_config_path
    if not path.exists():
        return AppConfig()
    return AppConfig.model_validate_json(path.read_text())


def build_search_engine(config: AppConfig, clock: Clock | None = None) -> SearchEngine:
    """Build the search engine."""
    return SearchEngine(
        reader=config.reader,
        max_workers=config.max_workers,
        clock=clock,
        ignore_patterns=config.ignore_patterns,
    )


def build_replace_engine(config: AppConfig) -> ReplaceEngine:
    """Build the replace engine."""
    return ReplaceEngine(
        reader=config.reader,
        max_workers=config.max_workers,
        ignore_patterns=config.ignore_patterns,
    )

"""Exceptions raised by mkfind."""


class MkfindError(Exception):
    """Base class for mkfind errors."""


class QueryError(MkfindError, ValueError):
    """The query is malformed or uses an unsupported combination of options.

    Raised before any file is visited, so a query error always aborts the
    whole invocation rather than being reported against a single file.
    """


class FileTooLargeError(MkfindError, OSError):
    """A file exceeds the configured maximum size."""

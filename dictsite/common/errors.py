"""Exceptions raised while building the site.

SetupError, DataSourceError and ParseError are fatal: they surface before any
page is rendered. WriteError only abandons the page it was raised for.
"""

from pathlib import Path
from typing import Optional


class SiteError(Exception):
    """Base class for site generation errors."""


class SetupError(SiteError):
    """The output directory could not be created or cleared."""


class DataSourceError(SiteError):
    """The input file could not be opened or read."""


class ParseError(SiteError):
    """The input is not a JSON array of well-formed entries."""

    def __init__(self, message: str, index: Optional[int] = None):
        if index is not None:
            message = f"entry {index}: {message}"
        super().__init__(message)
        self.index = index


class WriteError(SiteError):
    """An output file could not be created or written."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"cannot write {path}: {reason}")
        self.path = path
        self.reason = reason

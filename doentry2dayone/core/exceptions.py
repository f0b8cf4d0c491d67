"""
Conversion errors.

``EntryParseError`` is recoverable (the entry is skipped); the others abort
the run.
"""
from pathlib import Path
from typing import Optional, Union


class ConversionError(Exception):
    """Base class for converter errors."""


class SourceBundleError(ConversionError):
    """The source bundle cannot be traversed."""


class EntryParseError(ConversionError):
    """A single entry file could not be parsed."""

    def __init__(self, path: Union[str, Path], reason: str, position: Optional[tuple[int, int]] = None):
        self.path = Path(path)
        self.reason = reason
        self.position = position
        where = f" (line {position[0]}, column {position[1]})" if position else ""
        super().__init__(f"{self.path}: {reason}{where}")


class OutputWriteError(ConversionError):
    """The output document could not be written."""

"""Per-file analysis exceptions: unreadable and unparseable files.

These are recovered locally by the engine. A failing file is recorded in the
corpus summary's error list and never aborts the run.
"""

from pathlib import Path
from typing import Optional

from .base import CcscanError


class AnalysisError(CcscanError):
    """Base class for analysis-related errors."""
    pass


class FileParseError(AnalysisError):
    """Raised when a file cannot be turned into a usable syntax tree."""

    def __init__(self, filepath: Path, reason: str, message: Optional[str] = None):
        super().__init__(
            message or f"Failed to parse file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class FileAccessError(FileParseError):
    """Raised when a file cannot be read from disk."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(filepath, reason, message=f"Cannot access file: {filepath}")

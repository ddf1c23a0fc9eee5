"""Root of the ccscan error hierarchy.

Two families hang off :class:`CcscanError`:

* ``ConfigurationError`` covers bad settings and unusable root paths. These
  stop the run before any file is read and the CLI exits with status 1.
* ``AnalysisError`` covers a single file that cannot be read or parsed. The
  engine turns these into ``FileError`` entries and the run continues.

Command-line misuse is left to click, which exits with status 2.
"""

from typing import Dict, Optional


class CcscanError(Exception):
    """Base class for errors raised by ccscan.

    Attributes:
        message: Human-readable summary shown to the user
        details: Extra context such as the offending path or config key
    """

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({context})"

"""Configuration and discovery exceptions.

All of these are fatal: they are raised before any file is analyzed.
"""

from pathlib import Path
from typing import Any

from .base import CcscanError


class ConfigurationError(CcscanError):
    """Base class for configuration-related errors."""

    pass


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value}",
            details={"key": key, "value": str(value), "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason


class DiscoveryError(ConfigurationError):
    """Raised when the root path does not exist or cannot be read."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Invalid path: {path}", details={"path": str(path), "reason": reason})
        self.path = path
        self.reason = reason

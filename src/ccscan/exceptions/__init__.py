"""Exception hierarchy for ccscan."""

from .analysis import (
    AnalysisError,
    FileAccessError,
    FileParseError,
)
from .base import CcscanError
from .config import (
    ConfigurationError,
    DiscoveryError,
    InvalidConfigError,
)

__all__ = [
    "CcscanError",
    "AnalysisError",
    "FileAccessError",
    "FileParseError",
    "ConfigurationError",
    "DiscoveryError",
    "InvalidConfigError",
]

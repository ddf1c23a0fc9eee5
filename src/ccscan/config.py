"""Configuration loading and management for ccscan.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.ccscan.toml)
    3. Project config (./ccscan.toml)
    4. Explicit config file
    5. Environment variables (CCSCAN_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(threshold=15, output="json")
    >>> config.threshold
    15
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Literal, Optional, get_args, get_origin, get_type_hints

from .exceptions import CcscanError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]
OutputFormat = Literal["table", "json"]

OUTPUT_FORMATS: tuple[str, ...] = ("table", "json")
DEFAULT_THRESHOLD = 10
DEFAULT_EXCLUDE_DIRS: tuple[str, ...] = ("__pycache__", "venv")
DEFAULT_EXTENSIONS: tuple[str, ...] = (".py",)

GLOBAL_CONFIG_NAME = ".ccscan.toml"
PROJECT_CONFIG_NAME = "ccscan.toml"
ENV_PREFIX = "CCSCAN_"


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for one analysis run.

    Attributes:
        Scoring:
            threshold: Functions scoring strictly above this are flagged

        Output control:
            output: Report format, "table" or "json"
            summary: Include the corpus summary block
            verbosity: Logging verbosity level

        Performance tuning:
            workers: Number of parallel workers (None = auto-detect)

        File discovery:
            exclude_dirs: Directory names pruned from the walk
            extensions: File extensions treated as source files
            follow_symlinks: Descend into symlinked directories
    """

    threshold: int = DEFAULT_THRESHOLD

    output: OutputFormat = "table"
    summary: bool = False
    verbosity: Verbosity = "normal"

    workers: Optional[int] = None

    exclude_dirs: tuple[str, ...] = DEFAULT_EXCLUDE_DIRS
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    follow_symlinks: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if isinstance(self.threshold, bool) or not isinstance(self.threshold, int):
            raise InvalidConfigError("threshold", self.threshold, "must be an integer")
        if self.threshold < 0:
            raise InvalidConfigError("threshold", self.threshold, "must be non-negative")

        if self.output not in OUTPUT_FORMATS:
            raise InvalidConfigError(
                "output", self.output, f"must be one of: {', '.join(OUTPUT_FORMATS)}"
            )
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "must be one of: quiet, normal, verbose"
            )

        if self.workers is not None and self.workers < 1:
            raise InvalidConfigError("workers", self.workers, "must be at least 1")

        for key in ("exclude_dirs", "extensions"):
            value = getattr(self, key)
            if not isinstance(value, tuple) or not all(isinstance(v, str) for v in value):
                raise InvalidConfigError(key, value, "must be a list of strings")

        if not self.extensions:
            raise InvalidConfigError("extensions", self.extensions, "must not be empty")
        for ext in self.extensions:
            if not ext.startswith("."):
                raise InvalidConfigError("extensions", ext, "must start with '.'")

    @property
    def verbose(self) -> bool:
        return self.verbosity == "verbose"

    @property
    def quiet(self) -> bool:
        return self.verbosity == "quiet"


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options fall through to files.

    Returns:
        Validated AnalysisConfig instance

    Raises:
        CcscanError: If a config file is missing or unreadable
        InvalidConfigError: If a value fails validation
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / GLOBAL_CONFIG_NAME
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise CcscanError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    overrides = {k: v for k, v in overrides.items() if v is not None}
    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"
    merged.update(overrides)

    for key in ("exclude_dirs", "extensions"):
        if isinstance(merged.get(key), list):
            merged[key] = tuple(merged[key])

    known = {f.name for f in fields(AnalysisConfig)}
    unknown = sorted(set(merged) - known)
    if unknown:
        raise InvalidConfigError(unknown[0], merged[unknown[0]], "unknown configuration key")

    return AnalysisConfig(**merged)


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from CCSCAN_* environment variables.

    Supported environment variables:
        CCSCAN_THRESHOLD: int
        CCSCAN_OUTPUT: table/json
        CCSCAN_SUMMARY: bool (true/false/1/0)
        CCSCAN_VERBOSITY: quiet/normal/verbose
        CCSCAN_WORKERS: int
        CCSCAN_FOLLOW_SYMLINKS: bool

    Tuple fields (exclude_dirs, extensions) are only settable from TOML.
    """
    type_hints = get_type_hints(AnalysisConfig)
    result: dict[str, Any] = {}

    for f in fields(AnalysisConfig):
        env_key = f"{ENV_PREFIX}{f.name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hints[f.name])
        except ValueError as e:
            raise InvalidConfigError(f.name, env_value, f"{env_key}: {e}")
        if parsed is not None:
            result[f.name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the field's type.

    Returns None for types that cannot be expressed as a single string.
    """
    args = get_args(type_hint)
    if type(None) in args:
        non_none = [t for t in args if t is not type(None)]
        type_hint = non_none[0]

    origin = get_origin(type_hint)
    if origin is tuple or type_hint is tuple:
        return None

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        if lower in ("false", "0", "no", "off"):
            return False
        raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict[str, Any]:
    """Load TOML file and return the parsed dict.

    Accepts either top-level keys or a ``[ccscan]`` table.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise CcscanError(f"Invalid config file '{path}': {e}")

    section = data.get("ccscan")
    if isinstance(section, dict):
        return dict(section)
    return data

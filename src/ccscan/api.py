"""Public API for ccscan.

Example:
    >>> from ccscan import analyze
    >>>
    >>> result = analyze("/path/to/code", threshold=15)
    >>> result.summary.flagged_count
    3
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from .analysis.engine import AnalysisEngine, score_tree
from .config import AnalysisConfig, load_config
from .logging_config import get_logger
from .models import AnalysisResult, FileError, ScoredFunction
from .scanning.discovery import discover_files
from .scanning.treesitter_parser import TreeSitterParser

logger = get_logger(__name__)


def analyze(
    path: str | Path = ".",
    config_file: Optional[Path] = None,
    config: Optional[AnalysisConfig] = None,
    **overrides: Any,
) -> AnalysisResult:
    """Analyze every source file under ``path``.

    Steps:
    1. Load configuration (auto-discover TOML + apply overrides), unless an
       explicit ``config`` is given
    2. Discover source files
    3. Parse, locate and score each file on a worker pool
    4. Aggregate the outcomes

    Args:
        path: Directory or single file to analyze
        config_file: Optional explicit config file path
        config: Ready-made configuration; skips loading
        **overrides: Configuration overrides (e.g. threshold=15, workers=2)

    Returns:
        AnalysisResult with per-file reports and the corpus summary

    Raises:
        DiscoveryError: If ``path`` does not exist or is unreadable
        InvalidConfigError: If configuration is invalid
    """
    if config is None:
        config = load_config(config_file=config_file, **overrides)

    root = Path(path)
    walk_errors: list[FileError] = []
    files = discover_files(
        root,
        exclude_dirs=config.exclude_dirs,
        extensions=config.extensions,
        follow_symlinks=config.follow_symlinks,
        errors=walk_errors,
    )

    engine = AnalysisEngine(max_workers=config.workers)
    return engine.run(files, root, threshold=config.threshold, errors=walk_errors)


def score_source(source: str | bytes, path: str = "<string>") -> list[ScoredFunction]:
    """Score the functions of an in-memory source snippet.

    Raises:
        FileParseError: If the source does not parse cleanly
    """
    code = source.encode("utf-8") if isinstance(source, str) else source
    tree = TreeSitterParser().parse(code, path)
    return list(score_tree(tree.root_node, path).functions)

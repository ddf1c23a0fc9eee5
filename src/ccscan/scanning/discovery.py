"""File discovery: the recursive walk that finds candidate source files.

Excluded directory names are passed in explicitly as traversal configuration.
Directory and file names are visited in sorted order so that discovery order,
and therefore report order, is the same on every run.
"""

import os
from pathlib import Path
from typing import Iterable, Optional

from ..config import DEFAULT_EXCLUDE_DIRS, DEFAULT_EXTENSIONS
from ..exceptions import DiscoveryError
from ..logging_config import get_logger
from ..models import FileError

logger = get_logger(__name__)


def discover_files(
    root: Path,
    exclude_dirs: Iterable[str] = DEFAULT_EXCLUDE_DIRS,
    extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    follow_symlinks: bool = False,
    errors: Optional[list[FileError]] = None,
) -> list[Path]:
    """
    Find every source file under ``root``.

    Args:
        root: Directory to walk, or a single source file
        exclude_dirs: Directory names pruned from the walk (exact name match)
        extensions: File extensions to include (e.g. ``(".py",)``)
        follow_symlinks: Descend into symlinked directories
        errors: Sink for directories that could not be listed. Each one is
            appended as a FileError so that it reaches the final report

    Returns:
        Source file paths in deterministic pre-order

    Raises:
        DiscoveryError: If ``root`` does not exist or cannot be read
    """
    root = Path(root)
    if not root.exists():
        raise DiscoveryError(root, "path does not exist")
    if not os.access(root, os.R_OK):
        raise DiscoveryError(root, "path is not readable")

    ext_set = {e.lower() for e in extensions}
    excluded = set(exclude_dirs)

    if root.is_file():
        if root.suffix.lower() in ext_set:
            return [root]
        logger.warning(f"{root} is not a recognized source file")
        return []

    def _on_error(err: OSError) -> None:
        where = _relative(err.filename, root)
        reason = f"cannot list directory: {err.strerror or err}"
        logger.warning(f"Skipping {where}: {reason}")
        if errors is not None:
            errors.append(FileError(path=where, reason=reason))

    files: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(
        root, onerror=_on_error, followlinks=follow_symlinks
    ):
        dirnames[:] = sorted(d for d in dirnames if d not in excluded)
        for name in sorted(filenames):
            if os.path.splitext(name)[1].lower() in ext_set:
                files.append(Path(dirpath) / name)

    logger.info(f"Discovered {len(files)} source file(s) under {root}")
    return files


def _relative(filename: Optional[str], root: Path) -> str:
    if not filename:
        return root.as_posix()
    try:
        return Path(filename).relative_to(root).as_posix()
    except ValueError:
        return Path(filename).as_posix()

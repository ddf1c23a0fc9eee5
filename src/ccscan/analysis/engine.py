"""Analysis engine: per-file pipeline and the worker pool that drives it.

Each file goes through parse -> locate -> score independently. Workers
return their own FileReport or FileError; a single sequential reducer folds
those into the corpus summary in discovery order, so no shared accumulator
needs locking.

Usage:
    engine = AnalysisEngine(max_workers=4)
    result = engine.run(files, root, threshold=10)
"""

from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, Optional, Union

from ..config import DEFAULT_THRESHOLD
from ..exceptions import FileParseError
from ..logging_config import get_logger
from ..models import AnalysisResult, FileError, FileReport, ScoredFunction
from ..scanning.node_kinds import SyntaxNode
from ..scanning.treesitter_parser import TreeSitterParser
from .aggregator import Aggregator
from .counter import count_complexity
from .locator import locate_functions

logger = get_logger(__name__)

# CPU count, capped at 8
_DEFAULT_WORKERS = min(os.cpu_count() or 4, 8)

FileOutcome = Union[FileReport, FileError]


def score_tree(root: SyntaxNode, path: str) -> FileReport:
    """Locate and score every function in one parsed file."""
    functions = tuple(
        ScoredFunction.from_unit(unit, count_complexity(unit.node))
        for unit in locate_functions(root, path)
    )
    return FileReport(path=path, functions=functions)


def display_path(file_path: Path, root: Path) -> str:
    """Path shown in reports: relative to the analyzed root, POSIX style."""
    if root.is_file():
        return file_path.name
    try:
        return file_path.relative_to(root).as_posix()
    except ValueError:
        return file_path.as_posix()


class AnalysisEngine:
    """Runs the per-file pipeline over a list of files.

    Attributes:
        max_workers: Upper bound on parallel file workers
    """

    def __init__(
        self, parser: Optional[TreeSitterParser] = None, max_workers: Optional[int] = None
    ) -> None:
        self._parser = parser or TreeSitterParser()
        self.max_workers = max_workers or _DEFAULT_WORKERS

    def analyze_file(self, file_path: Path, path: str) -> FileReport:
        """Parse and score one file.

        Raises:
            FileParseError: If the file cannot be read or parsed
        """
        tree = self._parser.parse_file(file_path)
        report = score_tree(tree.root_node, path)
        logger.debug(f"Scored {len(report.functions)} function(s) in {path}")
        return report

    def _process(self, file_path: Path, root: Path) -> FileOutcome:
        path = display_path(file_path, root)
        try:
            return self.analyze_file(file_path, path)
        except FileParseError as e:
            logger.warning(f"Skipping {path}: {e.reason}")
            return FileError(path=path, reason=e.reason)
        except Exception as e:
            # Invariant violations are contained to the file that caused them
            logger.debug(f"Unexpected error analyzing {path}", exc_info=True)
            logger.warning(f"Skipping {path}: internal error: {e}")
            return FileError(path=path, reason=f"internal error: {e}")

    def analyze_files(self, file_paths: list[Path], root: Path) -> list[FileOutcome]:
        """Analyze every file, returning outcomes in the input order."""
        if self.max_workers == 1 or len(file_paths) < 2:
            return [self._process(fp, root) for fp in file_paths]

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            return list(executor.map(lambda fp: self._process(fp, root), file_paths))

    def run(
        self,
        file_paths: list[Path],
        root: Path,
        threshold: int = DEFAULT_THRESHOLD,
        errors: Iterable[FileError] = (),
    ) -> AnalysisResult:
        """Analyze files and aggregate the outcomes into an AnalysisResult.

        ``errors`` are failures found before analysis, such as directories
        the walk could not list. They are reported ahead of per-file errors.
        """
        aggregator = Aggregator(threshold)
        for error in errors:
            aggregator.add_error(error)
        reports: list[FileReport] = []

        for outcome in self.analyze_files(file_paths, root):
            if isinstance(outcome, FileError):
                aggregator.add_error(outcome)
            else:
                aggregator.add(outcome)
                reports.append(outcome)

        summary = aggregator.summary()
        logger.info(
            f"Analysis complete: {len(reports)} file(s), "
            f"{summary.total_functions} function(s), {len(summary.errors)} error(s)"
        )
        return AnalysisResult(root=str(root), files=tuple(reports), summary=summary)

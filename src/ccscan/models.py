"""Data models for complexity analysis results.

A FunctionUnit borrows a node from its file's syntax tree and only lives for
that file's analysis. Everything that outlives a file (ScoredFunction,
FileReport, FileError, CorpusSummary) is node-free and immutable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional


@dataclass(frozen=True)
class FunctionUnit:
    """One located function or method definition.

    Attributes:
        name: Function name, or ``<anonymous>`` when the name is missing
        qualified_name: Dot-joined enclosing class/function names plus name
        path: Display path of the file the function lives in
        start_line: First line of the definition (1-indexed)
        end_line: Last line of the definition (1-indexed)
        node: Root syntax node of the definition (borrowed)
    """

    name: str
    qualified_name: str
    path: str
    start_line: int
    end_line: int
    node: Any = field(repr=False, compare=False)


@dataclass(frozen=True)
class ScoredFunction:
    """A function together with its complexity score."""

    name: str
    qualified_name: str
    path: str
    start_line: int
    end_line: int
    score: int

    @classmethod
    def from_unit(cls, unit: FunctionUnit, score: int) -> ScoredFunction:
        return cls(
            name=unit.name,
            qualified_name=unit.qualified_name,
            path=unit.path,
            start_line=unit.start_line,
            end_line=unit.end_line,
            score=score,
        )

    def is_flagged(self, threshold: int) -> bool:
        """True if the score is strictly above the threshold."""
        return self.score > threshold


@dataclass(frozen=True)
class FileReport:
    """Scored functions of one successfully parsed file, in source order."""

    path: str
    functions: tuple[ScoredFunction, ...] = ()

    def flagged(self, threshold: int) -> list[ScoredFunction]:
        return [fn for fn in self.functions if fn.is_flagged(threshold)]


@dataclass(frozen=True)
class FileError:
    """A file that could not be analyzed."""

    path: str
    reason: str


@dataclass(frozen=True)
class CorpusSummary:
    """Corpus-wide statistics.

    ``mean`` and ``max`` are None when no function was scored. ``flagged``
    keeps discovery order, then source order within a file.
    """

    total_functions: int
    threshold: int
    mean: Optional[float] = None
    max: Optional[int] = None
    flagged: tuple[ScoredFunction, ...] = ()
    errors: tuple[FileError, ...] = ()

    @property
    def flagged_count(self) -> int:
        return len(self.flagged)


@dataclass(frozen=True)
class AnalysisResult:
    """Everything produced by one run."""

    root: str
    files: tuple[FileReport, ...]
    summary: CorpusSummary

    @property
    def threshold(self) -> int:
        return self.summary.threshold

    @property
    def errors(self) -> tuple[FileError, ...]:
        return self.summary.errors

    def functions(self) -> Iterator[ScoredFunction]:
        for report in self.files:
            yield from report.functions

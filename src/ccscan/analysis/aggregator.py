"""Aggregator: folds per-file reports into a corpus summary."""

from __future__ import annotations

from typing import Iterable, Optional

from ..config import DEFAULT_THRESHOLD
from ..models import CorpusSummary, FileError, FileReport, ScoredFunction


class Aggregator:
    """Single-pass accumulator over FileReports.

    Count, sum and max are order-independent. The flagged list keeps the
    order in which reports are added, so callers feed reports in discovery
    order.
    """

    def __init__(self, threshold: int = DEFAULT_THRESHOLD) -> None:
        if threshold < 0:
            raise ValueError("threshold must be non-negative")
        self.threshold = threshold
        self._count = 0
        self._total = 0
        self._max: Optional[int] = None
        self._flagged: list[ScoredFunction] = []
        self._errors: list[FileError] = []

    def add(self, report: FileReport) -> None:
        for fn in report.functions:
            self._count += 1
            self._total += fn.score
            if self._max is None or fn.score > self._max:
                self._max = fn.score
            if fn.is_flagged(self.threshold):
                self._flagged.append(fn)

    def add_error(self, error: FileError) -> None:
        self._errors.append(error)

    def summary(self) -> CorpusSummary:
        mean = self._total / self._count if self._count else None
        return CorpusSummary(
            total_functions=self._count,
            threshold=self.threshold,
            mean=mean,
            max=self._max,
            flagged=tuple(self._flagged),
            errors=tuple(self._errors),
        )


def aggregate(
    reports: Iterable[FileReport],
    errors: Iterable[FileError] = (),
    threshold: int = DEFAULT_THRESHOLD,
) -> CorpusSummary:
    """Build a CorpusSummary from reports and file errors."""
    agg = Aggregator(threshold)
    for report in reports:
        agg.add(report)
    for error in errors:
        agg.add_error(error)
    return agg.summary()

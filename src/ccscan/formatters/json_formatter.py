"""JSON formatter for ccscan.

Output is a pure function of the result: keys are emitted in a fixed order
and entries follow discovery then source order, so an unchanged corpus
always serializes to the same bytes.
"""

import json
from typing import Any

from ..models import AnalysisResult, CorpusSummary
from .base import BaseFormatter


def result_to_dict(result: AnalysisResult, show_summary: bool = False) -> dict[str, Any]:
    threshold = result.threshold
    data: dict[str, Any] = {
        "functions": [
            {
                "file": fn.path,
                "function": fn.qualified_name,
                "line": fn.start_line,
                "score": fn.score,
                "flagged": fn.is_flagged(threshold),
            }
            for fn in result.functions()
        ]
    }
    if show_summary:
        data["summary"] = summary_to_dict(result.summary)
    return data


def summary_to_dict(summary: CorpusSummary) -> dict[str, Any]:
    data: dict[str, Any] = {"count": summary.total_functions}
    # mean/max are undefined without functions; omit rather than emit null
    if summary.mean is not None:
        data["mean"] = summary.mean
    if summary.max is not None:
        data["max"] = summary.max
    data["threshold"] = summary.threshold
    data["flagged_count"] = summary.flagged_count
    data["errors"] = [{"file": e.path, "reason": e.reason} for e in summary.errors]
    return data


class JsonFormatter(BaseFormatter):
    """Render results as a single JSON document."""

    def render(self, result: AnalysisResult, show_summary: bool = False) -> None:
        print(self.format(result, show_summary))

    def format(self, result: AnalysisResult, show_summary: bool = False) -> str:
        return json.dumps(result_to_dict(result, show_summary), indent=2)

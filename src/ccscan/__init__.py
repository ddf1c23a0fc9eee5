"""
ccscan - cyclomatic complexity scanner for Python source trees.

Parses files with tree-sitter, scores every function by counting its
decision points, and reports per-function scores plus corpus statistics.
"""

__version__ = "0.1.0"

from .api import analyze, score_source
from .models import (
    AnalysisResult,
    CorpusSummary,
    FileError,
    FileReport,
    FunctionUnit,
    ScoredFunction,
)

__all__ = [
    "analyze",
    "score_source",
    "AnalysisResult",
    "CorpusSummary",
    "FileError",
    "FileReport",
    "FunctionUnit",
    "ScoredFunction",
]

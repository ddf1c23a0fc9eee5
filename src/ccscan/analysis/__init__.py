"""Complexity analysis: function location, scoring and aggregation."""

from .aggregator import Aggregator, aggregate
from .counter import count_complexity
from .engine import AnalysisEngine, score_tree
from .locator import locate_functions

__all__ = [
    "Aggregator",
    "AnalysisEngine",
    "aggregate",
    "count_complexity",
    "locate_functions",
    "score_tree",
]

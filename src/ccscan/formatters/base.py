"""Base formatter interface for ccscan output rendering."""

from abc import ABC, abstractmethod

from ..models import AnalysisResult


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, result: AnalysisResult, show_summary: bool = False) -> None:
        """Write the report to stdout."""

    @abstractmethod
    def format(self, result: AnalysisResult, show_summary: bool = False) -> str:
        """Return formatted string representation of the report."""

"""Rich table formatter for ccscan."""

import io
from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..models import AnalysisResult, CorpusSummary
from .base import BaseFormatter

FLAG_MARKER = "yes"


def build_table(result: AnalysisResult) -> Table:
    threshold = result.threshold
    table = Table(title="Cyclomatic Complexity", title_justify="left")
    table.add_column("File", style="cyan", overflow="fold")
    table.add_column("Function", overflow="fold")
    table.add_column("Line", justify="right")
    table.add_column("Score", justify="right")
    table.add_column("Flagged", justify="center")

    for fn in result.functions():
        flagged = fn.is_flagged(threshold)
        table.add_row(
            Text(fn.path),
            Text(fn.qualified_name),
            str(fn.start_line),
            Text(str(fn.score), style="bold red" if flagged else ""),
            Text(FLAG_MARKER, style="red") if flagged else "",
        )
    return table


class TableFormatter(BaseFormatter):
    """Human-readable table with an optional trailing summary block."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def render(self, result: AnalysisResult, show_summary: bool = False) -> None:
        self._print(self.console, result, show_summary)

    def format(self, result: AnalysisResult, show_summary: bool = False) -> str:
        buffer = io.StringIO()
        console = Console(file=buffer, width=120, color_system=None, force_terminal=False)
        self._print(console, result, show_summary)
        return buffer.getvalue()

    def _print(self, console: Console, result: AnalysisResult, show_summary: bool) -> None:
        summary = result.summary
        if summary.total_functions:
            console.print(build_table(result))
        else:
            console.print("No functions found.")

        if show_summary:
            self._print_summary(console, summary)

        if summary.errors:
            console.print()
            console.print(f"[yellow]Files with errors ({len(summary.errors)}):[/yellow]")
            for error in summary.errors:
                console.print(Text(f"  {error.path}: {error.reason}"))

    def _print_summary(self, console: Console, summary: CorpusSummary) -> None:
        console.print()
        console.print("[bold]Summary:[/bold]")
        console.print(f"Total Functions: {summary.total_functions}")
        if summary.mean is not None and summary.max is not None:
            console.print(f"Mean Complexity: {summary.mean:.2f}")
            console.print(f"Max Complexity: {summary.max}")
        console.print(
            f"Functions above threshold ({summary.threshold}): {summary.flagged_count}"
        )

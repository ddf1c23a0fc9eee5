"""Command-line interface for ccscan"""

from pathlib import Path
from typing import Optional

import click
import typer
from rich.console import Console
from rich.markup import escape

from . import __version__
from .api import analyze
from .config import OUTPUT_FORMATS, load_config
from .exceptions import CcscanError
from .formatters import get_formatter
from .logging_config import get_logger, setup_logging

app = typer.Typer(
    name="ccscan",
    help="ccscan - cyclomatic complexity scanner for Python code",
    add_completion=False,
    rich_markup_mode="rich",
)

err_console = Console(stderr=True)
logger = get_logger(__name__)


def _print_error(label: str, error: Exception) -> None:
    err_console.print(f"[red]{label}:[/red] {escape(str(error))}", highlight=False, soft_wrap=True)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"ccscan {__version__}")
        raise typer.Exit(0)


@app.command()
def scan(
    path: Path = typer.Argument(
        ...,
        help="Directory or Python file to analyze",
        show_default=False,
    ),
    threshold: Optional[int] = typer.Option(
        None,
        "--threshold",
        "-t",
        help="Flag functions scoring above this value [default: 10]",
        min=0,
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: table | json [default: table]",
        click_type=click.Choice(list(OUTPUT_FORMATS)),
    ),
    summary: bool = typer.Option(
        False,
        "--summary",
        "-s",
        help="Append corpus summary statistics",
    ),
    workers: Optional[int] = typer.Option(
        None,
        "-w",
        "--workers",
        help="Parallel workers (default: auto-detect)",
        min=1,
        max=32,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """
    Score every function under PATH by cyclomatic complexity.

    [bold cyan]Examples:[/bold cyan]

      ccscan src/

      ccscan src/ --threshold 15 --summary

      ccscan src/ --output json --summary
    """
    if verbose and quiet:
        raise click.UsageError("--verbose and --quiet are mutually exclusive")

    try:
        settings = load_config(
            config_file=config,
            threshold=threshold,
            output=output,
            summary=True if summary else None,
            workers=workers,
            verbose=True if verbose else None,
            quiet=True if quiet else None,
        )
    except CcscanError as e:
        _print_error("Error", e)
        raise typer.Exit(1)

    setup_logging(settings.verbosity)

    try:
        result = analyze(path, config=settings)
        get_formatter(settings.output).render(result, show_summary=settings.summary)

    except CcscanError as e:
        logger.debug(f"{e.__class__.__name__}: {e}")
        _print_error("Error", e)
        raise typer.Exit(1)

    except KeyboardInterrupt:
        logger.info("Analysis interrupted by user")
        err_console.print("\n[yellow]Analysis interrupted[/yellow]")
        raise typer.Exit(130)

    except Exception as e:
        logger.exception("Unexpected error during analysis")
        _print_error("Unexpected error", e)
        raise typer.Exit(1)


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()

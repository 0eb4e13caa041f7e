"""Check command: run the quality scanner over a directory."""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from . import app
from ._common import console, resolve_config
from ..formatters import RichFormatter
from ..logging_config import setup_logging
from ..scanning import scan


@app.command()
def check(
    path: Path = typer.Argument(
        Path("."),
        help="Directory or component file to scan",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file path (TOML format)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    max_locations: Optional[int] = typer.Option(
        None,
        "--max-locations",
        help="Match locations shown per anti-pattern",
        min=1,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Append log records to this file",
        dir_okay=False,
    ),
):
    """
    Run code quality analysis on component files.

    Exits with code 1 when any component breaches a critical threshold.

    [bold cyan]Examples:[/bold cyan]

      cursor-quality-suite check

      cursor-quality-suite check src/

      cursor-quality-suite check src/ --config quality.toml
    """
    setup_logging(verbose=verbose, quiet=quiet, log_file=str(log_file) if log_file else None)
    settings = resolve_config(config=config, max_locations=max_locations)

    result = scan(path, settings)

    if result.notice:
        console.print(f"[yellow]⚠[/yellow] {escape(result.notice)}")
        raise typer.Exit(0)

    RichFormatter(console=console, config=settings).render(result)
    raise typer.Exit(result.exit_code)

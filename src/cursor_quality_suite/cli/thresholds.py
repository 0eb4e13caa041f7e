"""Thresholds command: show the limits a check would apply."""

from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from . import app
from ._common import console, resolve_config
from ..models import Metric


@app.command()
def thresholds(
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
):
    """Show the active quality check thresholds."""
    settings = resolve_config(config=config)

    table = Table(title="Quality Check Thresholds", show_header=True)
    table.add_column("Metric", min_width=14)
    table.add_column("Warning >", justify="right")
    table.add_column("Critical >", justify="right")

    for metric in Metric:
        limit = settings.thresholds.for_metric(metric)
        table.add_row(metric.label, str(limit.warning), str(limit.critical))

    console.print(table)

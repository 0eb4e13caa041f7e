"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from ..config import ScanConfig, load_config
from ..exceptions import ConfigurationError

console = Console()

# Exit code for bad configuration; 1 is reserved for a failed check.
CONFIG_ERROR_EXIT = 2


def resolve_config(
    config: Optional[Path] = None,
    max_locations: Optional[int] = None,
) -> ScanConfig:
    """Build scan configuration from CLI options, exiting on invalid config."""
    overrides = {}
    if max_locations is not None:
        overrides["max_pattern_locations"] = max_locations
    try:
        return load_config(config_file=config, **overrides)
    except ConfigurationError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(CONFIG_ERROR_EXIT)

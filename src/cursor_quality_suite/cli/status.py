"""Status command: show which command files are installed in a project."""

from pathlib import Path

import typer

from . import app
from ._common import console
from .. import __version__

CURSOR_DIR = ".cursor"
COMMANDS_DIR = "commands"


def installed_commands(project_dir: Path) -> list[str]:
    """Command names (file stems) of the markdown files in ``.cursor/commands``."""
    commands_dir = project_dir / CURSOR_DIR / COMMANDS_DIR
    return sorted(p.stem for p in commands_dir.glob("*.md") if p.is_file())


@app.command()
def status(
    path: Path = typer.Argument(
        Path("."),
        help="Project directory",
        file_okay=False,
        dir_okay=True,
    ),
):
    """Show current installation status."""
    commands_dir = path / CURSOR_DIR / COMMANDS_DIR

    if not commands_dir.is_dir():
        console.print(f"[yellow]⚠[/yellow] Quality Suite not installed (no {CURSOR_DIR}/{COMMANDS_DIR} directory)")
        raise typer.Exit(0)

    commands = installed_commands(path)

    console.print("[bold cyan]QUALITY SUITE STATUS[/bold cyan]")
    console.print()
    console.print(f"[cyan]Version:[/cyan]  {__version__}")
    console.print(f"[cyan]Commands:[/cyan] {len(commands)} installed")
    console.print(f"[cyan]Location:[/cyan] {commands_dir.resolve()}")
    console.print()
    console.print("[bold]Installed Commands:[/bold]")
    for name in commands:
        console.print(f"  - /{name}")

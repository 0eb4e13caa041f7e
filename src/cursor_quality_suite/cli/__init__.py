"""CLI entry point: registers all subcommands."""

from typing import Optional

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="cursor-quality-suite",
    help="Cursor Quality Suite - code quality checks for React component trees",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"cursor-quality-suite v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """Code quality checks for React component trees."""


# Import subcommands to register them
from .check import check as _check  # noqa: F401, E402
from .status import status as _status  # noqa: F401, E402
from .thresholds import thresholds as _thresholds  # noqa: F401, E402

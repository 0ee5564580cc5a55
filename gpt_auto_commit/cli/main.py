"""Main CLI command: generate a commit message and commit straight away."""

import typer

from gpt_auto_commit import __version__
from gpt_auto_commit.cli.utils import execute_commit_flow


def main_command(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show the version and exit",
    ),
) -> None:
    """Quickly generate message and commit automatically."""
    # If a subcommand is invoked, don't run the default behavior
    if ctx.invoked_subcommand is not None:
        return

    if version:
        typer.echo(f"gpt-auto-commit {__version__}")
        raise typer.Exit(0)

    execute_commit_flow(interactive=False)

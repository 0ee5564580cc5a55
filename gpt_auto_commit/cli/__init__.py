"""CLI entry point for gpt-auto-commit.

This module provides the main CLI application that combines all commands
into a single interface.
"""

import typer

from gpt_auto_commit.cli.config import config_command
from gpt_auto_commit.cli.generate import generate_command
from gpt_auto_commit.cli.main import main_command

# Main application
app = typer.Typer(
    name="gpt-auto-commit",
    help="Generate commit messages using ChatGPT",
    add_completion=False,
)

# Add individual commands
app.command("config")(config_command)
app.command("generate")(generate_command)

# Set the main callback for default behavior (includes --version flag)
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "config_command",
    "generate_command",
    "main_command",
]

"""Shared utility functions for CLI commands."""

from typing import Optional

import typer

from gpt_auto_commit import global_config
from gpt_auto_commit.flow import FlowOutcome, run_commit_flow
from gpt_auto_commit.git import CommitError, GitError
from gpt_auto_commit.global_config import GlobalConfigError
from gpt_auto_commit.llm import LLMError, MissingAPIKeyError
from gpt_auto_commit.terminal import InputInterrupted, echo_error


def ensure_config_or_exit() -> None:
    """Create the config file on first run, exiting if that fails."""
    try:
        global_config.ensure_config()
    except GlobalConfigError as e:
        echo_error(f"Error creating config: {e}")
        raise typer.Exit(1)


def execute_commit_flow(interactive: bool) -> Optional[FlowOutcome]:
    """Run the commit flow and turn its failures into exit codes.

    Args:
        interactive: Review the message before committing.

    Returns:
        The FlowOutcome when the flow ends normally.

    Raises:
        typer.Exit: With code 1 on any error, 0 when the user interrupts.
    """
    ensure_config_or_exit()

    try:
        return run_commit_flow(interactive=interactive)
    except InputInterrupted:
        typer.echo()
        raise typer.Exit(0)
    except MissingAPIKeyError as e:
        echo_error(str(e))
        raise typer.Exit(1)
    except CommitError as e:
        echo_error(f"Git Error: {e}")
        raise typer.Exit(1)
    except GitError as e:
        echo_error(f"Git error: {e}")
        raise typer.Exit(1)
    except LLMError as e:
        echo_error(f"Error: {e}")
        raise typer.Exit(1)
    except GlobalConfigError as e:
        echo_error(f"Error: {e}")
        raise typer.Exit(1)

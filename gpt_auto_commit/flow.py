"""Commit flow: collect the staged diff, generate a message, commit.

Runs in quick mode (commit straight away) or interactive mode (review the
message first). Failures are raised as exceptions; the CLI decides how the
process exits.
"""

from enum import Enum
from typing import Callable, Optional

import typer

from gpt_auto_commit.git import collect_staged_diff, commit_changes
from gpt_auto_commit.global_config import ConfigStore
from gpt_auto_commit.llm import generate_commit_message
from gpt_auto_commit.terminal import (
    CommitDecision,
    echo_notice,
    echo_success,
    prompt_for_message,
    read_decision,
)


class FlowOutcome(Enum):
    """How a commit flow ended."""

    NO_CHANGES = "no_changes"
    COMMITTED = "committed"
    CANCELLED = "cancelled"


def review_message(
    message: str,
    read_key: Callable[[], CommitDecision] = read_decision,
    read_message: Callable[[], str] = prompt_for_message,
) -> Optional[str]:
    """Let the user commit, edit or drop the generated message.

    Args:
        message: The generated commit message.
        read_key: Reads the commit/edit/quit decision.
        read_message: Reads a replacement message line.

    Returns:
        The message to commit, or None if the commit was cancelled.
    """
    decision = read_key()

    if decision == CommitDecision.COMMIT:
        return message

    if decision == CommitDecision.EDIT:
        edited = read_message()
        if edited.strip():
            return edited
        echo_notice("Commit cancelled - empty message")
        return None

    echo_notice("Commit cancelled")
    return None


def run_commit_flow(
    interactive: bool = False,
    store: Optional[ConfigStore] = None,
    read_key: Callable[[], CommitDecision] = read_decision,
    read_message: Callable[[], str] = prompt_for_message,
) -> FlowOutcome:
    """Generate a commit message for the staged changes and commit them.

    Args:
        interactive: Ask before committing instead of committing straight away.
        store: The config store to read (defaults to the global one).
        read_key: Reads the commit/edit/quit decision in interactive mode.
        read_message: Reads a replacement message in interactive mode.

    Returns:
        The FlowOutcome.

    Raises:
        GitError: If reading the repository fails.
        CommitError: If git refuses the commit.
        MissingAPIKeyError: If no API key is configured.
        LLMError: If the completion request fails.
        InputInterrupted: If the user interrupts the review prompt.
    """
    diff = collect_staged_diff()

    if not diff:
        echo_notice("No changes detected in the repository.")
        return FlowOutcome.NO_CHANGES

    message = generate_commit_message(diff, store=store)
    typer.echo("Generated commit:")
    echo_success(message)

    if interactive:
        message = review_message(message, read_key=read_key, read_message=read_message)
        if message is None:
            return FlowOutcome.CANCELLED

    commit_changes(message)
    echo_success("✔ Success!")
    return FlowOutcome.COMMITTED

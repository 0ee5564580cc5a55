"""Terminal input and output helpers.

Contains:
- echo_error, echo_notice, echo_success: coloured status lines
- loading_spinner: transient spinner shown while waiting on the API
- CommitDecision, read_decision, InputInterrupted: single-key commit/edit/quit prompt
- prompt_for_message: full-line prompt for an edited message
"""

from contextlib import contextmanager
from enum import Enum
from typing import Callable, Iterator

import typer
from rich.console import Console

DECISION_PROMPT = "Press (c) to commit, (e) to edit, or (q) to quit: "
EDIT_PROMPT = "Enter your modified commit message:"

# Spinner output goes to stderr so stdout only carries the message itself
_console = Console(stderr=True)


def echo_error(message: str) -> None:
    typer.secho(message, fg=typer.colors.RED, err=True)


def echo_notice(message: str) -> None:
    typer.secho(message, fg=typer.colors.YELLOW, err=True)


def echo_success(message: str) -> None:
    typer.secho(message, fg=typer.colors.GREEN)


@contextmanager
def loading_spinner(message: str = "") -> Iterator[None]:
    """Display a spinner while the enclosed block runs.

    The spinner is stopped when the block exits, whether it returns or raises.

    Args:
        message: Text shown next to the spinner.
    """
    with _console.status(message, spinner="arc"):
        yield


class InputInterrupted(Exception):
    """Raised when the user interrupts the review prompt."""

    pass


class CommitDecision(Enum):
    """Answers accepted at the review prompt."""

    COMMIT = "c"
    EDIT = "e"
    QUIT = "q"


def read_decision(
    prompt: str = DECISION_PROMPT,
    getchar: Callable[[], str] = typer.getchar,
) -> CommitDecision:
    """Read single keypresses until one maps to a CommitDecision.

    Matching is case-insensitive and any other key is ignored.

    Args:
        prompt: Text shown before waiting for a key.
        getchar: Reads one character from the terminal.

    Returns:
        The chosen CommitDecision.

    Raises:
        InputInterrupted: On Ctrl-C, Ctrl-D or when input is exhausted.
    """
    typer.secho(prompt, bold=True, nl=False)

    while True:
        try:
            key = getchar()
        except (KeyboardInterrupt, EOFError):
            raise InputInterrupted()

        # Raw control characters when getchar does not translate them
        if key in ("\x03", "\x04") or not key:
            raise InputInterrupted()

        try:
            decision = CommitDecision(key.lower())
        except ValueError:
            continue

        typer.echo(key)
        return decision


def prompt_for_message(prompt: str = EDIT_PROMPT) -> str:
    """Ask for a replacement commit message on a single line.

    Returns:
        The line as typed, or an empty string if nothing was entered.
    """
    typer.echo()
    return typer.prompt(
        typer.style(f"{prompt}\n>", bold=True),
        default="",
        show_default=False,
        prompt_suffix=" ",
    )

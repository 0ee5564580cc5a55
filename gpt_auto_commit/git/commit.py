"""Commit creation.

Contains:
- commit_changes: Commit the staged changes with a given message
"""

import subprocess

from gpt_auto_commit.git.exceptions import CommitError


def commit_changes(message: str) -> str:
    """Commit the staged changes.

    The message is passed to git as a single argument, without a shell, so
    quotes and other special characters are kept as typed.

    Args:
        message: The commit message, used verbatim.

    Returns:
        The stdout of git commit.

    Raises:
        CommitError: If the commit fails (e.g., a hook rejects it).
    """
    try:
        result = subprocess.run(
            ["git", "commit", "-m", message],
            capture_output=True,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError:
        raise CommitError("Git is not installed or not in PATH.")

    if result.returncode != 0:
        stderr = (result.stderr or "").strip()
        raise CommitError(stderr or f"git commit exited with code {result.returncode}")

    return result.stdout

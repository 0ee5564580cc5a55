"""CLI command for reviewing the generated message before committing."""

from gpt_auto_commit.cli.utils import execute_commit_flow


def generate_command() -> None:
    """Generate commit message with interactive options to review."""
    execute_commit_flow(interactive=True)

"""Git diff utilities.

Contains:
- collect_staged_diff: Get the cleaned staged diff, excluding noise files
- clean_diff: Strip header noise from a unified diff
- _should_exclude_file: Check if a file should be excluded based on patterns
- DEFAULT_DIFF_EXCLUDE_PATTERNS: Patterns for files to exclude from the diff
"""

import fnmatch
import re
from pathlib import Path
from typing import Optional

from gpt_auto_commit.git.runner import _run_git_command
from gpt_auto_commit.git.status import RepositoryStatus, get_repository_status
from gpt_auto_commit.terminal import echo_notice


# Files excluded from the staged diff sent to the model.
# These are generated or binary and only inflate the prompt.
DEFAULT_DIFF_EXCLUDE_PATTERNS = [
    # Lockfiles
    "package-lock.json",
    "yarn.lock",
    "pnpm-lock.yaml",
    "poetry.lock",
    "Cargo.lock",
    "Gemfile.lock",
    "composer.lock",
    "go.sum",
    # Minified assets and source maps
    "*.min.js",
    "*.min.css",
    "*.map",
    # Images and fonts
    "*.png",
    "*.jpg",
    "*.jpeg",
    "*.gif",
    "*.ico",
    "*.svg",
    "*.woff",
    "*.woff2",
    "*.ttf",
    "*.eot",
    # Build output and dependencies
    "dist/*",
    "*/dist/*",
    "build/*",
    "*/build/*",
    "node_modules/*",
    "*/node_modules/*",
]

_MODE_CHANGE_RE = re.compile(r"^old mode \d+\nnew mode \d+(\n|$)", re.MULTILINE)
_INDEX_RE = re.compile(r"^index [0-9a-f]+\.\.[0-9a-f]+.*(\n|$)", re.MULTILINE)
_BINARY_RE = re.compile(r"^Binary files .* differ(\n|$)", re.MULTILINE)
_DIFF_HEADER_RE = re.compile(r"^diff --git .*(\n|$)", re.MULTILINE)
_BLANK_RUN_RE = re.compile(r"\n{3,}")


def _should_exclude_file(filename: str, patterns: list[str]) -> bool:
    """Check if a file should be excluded based on patterns.

    Supports glob patterns like *.lock, build/*, etc.

    Args:
        filename: The file path to check.
        patterns: List of patterns to match against.

    Returns:
        True if the file should be excluded.
    """
    for pattern in patterns:
        if filename == pattern:
            return True
        if fnmatch.fnmatch(filename, pattern):
            return True
        # Lockfile names match at any depth
        if fnmatch.fnmatch(Path(filename).name, pattern):
            return True
    return False


def _clean_once(diff: str) -> str:
    diff = _MODE_CHANGE_RE.sub("", diff)
    diff = _INDEX_RE.sub("", diff)
    diff = _BINARY_RE.sub("", diff)
    diff = _DIFF_HEADER_RE.sub("", diff)
    return _BLANK_RUN_RE.sub("\n\n", diff)


def clean_diff(diff: str) -> str:
    """Strip header noise from a unified diff.

    Removes file mode change pairs, blob index lines, "Binary files ... differ"
    notices and "diff --git" lines, then collapses runs of blank lines.
    Passes are repeated until nothing changes, so cleaning an already
    cleaned diff returns it unchanged.

    Args:
        diff: Raw output of git diff.

    Returns:
        The cleaned diff.
    """
    while True:
        cleaned = _clean_once(diff)
        if cleaned == diff:
            return cleaned
        diff = cleaned


def collect_staged_diff(
    status: Optional[RepositoryStatus] = None,
    patterns: Optional[list[str]] = None,
) -> str:
    """Get the cleaned diff of staged, non-excluded files.

    Prints a notice when some changes are left unstaged.

    Args:
        status: Repository status to use (queried from git if not provided).
        patterns: Exclusion patterns (DEFAULT_DIFF_EXCLUDE_PATTERNS if not provided).

    Returns:
        The cleaned staged diff, or an empty string if there is nothing to commit.

    Raises:
        GitError: If a git command fails.
    """
    if status is None:
        status = get_repository_status()
    if patterns is None:
        patterns = DEFAULT_DIFF_EXCLUDE_PATTERNS

    if status.has_unstaged_changes:
        echo_notice("Note: Unstaged changes will be ignored")

    files_to_include = [
        f for f in status.staged
        if not _should_exclude_file(f, patterns)
    ]

    if not files_to_include:
        return ""

    # Status paths are relative to the repo root, pathspecs to the cwd
    pathspecs = [f":(top){f}" for f in files_to_include]
    diff = _run_git_command(
        ["diff", "--cached", "--unified=1", "--no-prefix", "--"] + pathspecs
    )

    return clean_diff(diff)

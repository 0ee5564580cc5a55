"""Git access for gpt-auto-commit.

This package provides the version-control side of the pipeline:
- exceptions: GitError, CommitError
- runner: _run_git_command
- status: RepositoryStatus, parse_porcelain_status, get_repository_status
- diff: collect_staged_diff, clean_diff, _should_exclude_file,
        DEFAULT_DIFF_EXCLUDE_PATTERNS
- commit: commit_changes
"""

# Exceptions
from gpt_auto_commit.git.exceptions import (
    CommitError,
    GitError,
)

# Runner utilities
from gpt_auto_commit.git.runner import _run_git_command

# Status utilities
from gpt_auto_commit.git.status import (
    RepositoryStatus,
    get_repository_status,
    parse_porcelain_status,
)

# Diff utilities
from gpt_auto_commit.git.diff import (
    DEFAULT_DIFF_EXCLUDE_PATTERNS,
    _should_exclude_file,
    clean_diff,
    collect_staged_diff,
)

# Commit
from gpt_auto_commit.git.commit import commit_changes


__all__ = [
    # Exceptions
    "GitError",
    "CommitError",
    # Runner
    "_run_git_command",
    # Status
    "RepositoryStatus",
    "get_repository_status",
    "parse_porcelain_status",
    # Diff
    "collect_staged_diff",
    "clean_diff",
    "_should_exclude_file",
    "DEFAULT_DIFF_EXCLUDE_PATTERNS",
    # Commit
    "commit_changes",
]

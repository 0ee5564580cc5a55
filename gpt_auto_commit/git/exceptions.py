"""Git-related exception classes.

Contains all exception classes for Git operations:
- GitError: Base exception for git-related errors
- CommitError: Raised when git refuses or fails to create the commit
"""


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass


class CommitError(GitError):
    """Raised when 'git commit' fails.

    The message is git's own error output when it produced any.
    """

    pass

"""Git status utilities.

Contains:
- RepositoryStatus: Snapshot of staged vs. all changed files
- parse_porcelain_status: Parse 'git status --porcelain=v1 -z' output
- get_repository_status: Query the current repository
"""

from dataclasses import dataclass, field

from gpt_auto_commit.git.runner import _run_git_command


@dataclass
class RepositoryStatus:
    """Staged and changed files at one point in time.

    Attributes:
        staged: Paths with a change recorded in the index.
        files: Every changed path, including unstaged and untracked ones.
    """

    staged: list[str] = field(default_factory=list)
    files: list[str] = field(default_factory=list)

    @property
    def has_unstaged_changes(self) -> bool:
        """True when something is staged but not every change is."""
        return 0 < len(self.staged) < len(self.files)


def parse_porcelain_status(output: str) -> RepositoryStatus:
    """Parse NUL-separated porcelain v1 status output.

    Each entry is "XY path", where X is the index column and Y the worktree
    column. Renames and copies are followed by an extra entry holding the
    original path, which is skipped.

    Args:
        output: Raw output of 'git status --porcelain=v1 -z'.

    Returns:
        The parsed RepositoryStatus.
    """
    status = RepositoryStatus()
    entries = output.split("\0")

    i = 0
    while i < len(entries):
        entry = entries[i]
        i += 1

        # Skip empty and malformed entries
        if len(entry) < 4:
            continue

        index_col = entry[0]
        path = entry[3:]

        if index_col in ("R", "C"):
            i += 1

        status.files.append(path)
        # Staged when the index column records a change
        if index_col not in (" ", "?", "!"):
            status.staged.append(path)

    return status


def get_repository_status() -> RepositoryStatus:
    """Get the staged and changed files of the current repository.

    Returns:
        The current RepositoryStatus.

    Raises:
        GitError: If git status fails (e.g., not in a repository).
    """
    output = _run_git_command(["status", "--porcelain=v1", "-z"], strip=False)
    return parse_porcelain_status(output)

"""Generate git commit messages from staged changes with ChatGPT."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("gpt-auto-commit")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"

"""Shared test fixtures and configuration."""

import shutil
import subprocess
import tempfile
from pathlib import Path

import pytest

from gpt_auto_commit.global_config import ConfigStore


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def config_dir(temp_dir, mocker):
    """Point the global config directory at a temporary location."""
    mock_dir = temp_dir / ".gpt-auto-commit"
    mocker.patch("gpt_auto_commit.global_config._CONFIG_DIR", mock_dir)
    return mock_dir


@pytest.fixture
def no_env_api_key(monkeypatch):
    """Make sure OPENAI_API_KEY from the environment or a .env file is not used."""
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)


@pytest.fixture
def config_store(config_dir):
    """Config store backed by the temporary config directory."""
    return ConfigStore(config_dir / "config.yaml")


@pytest.fixture
def raw_staged_diff():
    """Sample output of 'git diff --cached --unified=1 --no-prefix'."""
    return """diff --git src/app.ts src/app.ts
index 3b18e51..a9c7f2d 100644
--- src/app.ts
+++ src/app.ts
@@ -10,3 +10,4 @@ export function start() {
   const server = createServer();
+  server.retry(3);
   return server;



diff --git scripts/run.sh scripts/run.sh
old mode 100644
new mode 100755
diff --git assets/logo.bin assets/logo.bin
index 0000000..e69de29
Binary files assets/logo.bin and assets/logo.bin differ
"""


@pytest.fixture
def mock_git_commands(mocker):
    """Mock subprocess.run for git commands."""
    mock_run = mocker.patch("subprocess.run")
    return mock_run


@pytest.fixture
def git_repo(temp_dir, monkeypatch):
    """Create an empty git repository and make it the working directory."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")
    subprocess.run(["git", "init", "-q"], cwd=temp_dir, check=True)
    monkeypatch.chdir(temp_dir)
    return temp_dir


@pytest.fixture
def stage_file(git_repo):
    """Return a helper that writes a file inside git_repo and stages it."""
    def _stage(relative_path: str, content: bytes) -> None:
        path = git_repo / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        subprocess.run(["git", "add", relative_path], cwd=git_repo, check=True)
    return _stage

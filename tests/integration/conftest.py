import shutil
import stat
import subprocess
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

# A stand-in for git: with no arguments it exits like git does after printing
# usage; with arguments it replays canned stdout/stderr files and exit code.
_FAKE_GIT = """\
#!/bin/sh
dir=$(dirname "$0")
if [ $# -eq 0 ]; then
    exit 1
fi
if [ -f "$dir/stdout.txt" ]; then
    cat "$dir/stdout.txt"
fi
if [ -f "$dir/stderr.txt" ]; then
    cat "$dir/stderr.txt" >&2
fi
exit "$(cat "$dir/exit_code.txt" 2>/dev/null || echo 0)"
"""

FakeGitFactory = Callable[..., str]


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        if Path(item.path).is_relative_to(Path(__file__).parent):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def fake_git(tmp_path: Path) -> FakeGitFactory:
    """Return a factory writing a scripted git executable.

    The factory takes the stdout text, stderr text and exit code the script
    should produce and returns the path to the executable.
    """
    if sys.platform == "win32":
        pytest.skip("fake git executable is a POSIX shell script")

    bin_dir = tmp_path / "fake-git"
    bin_dir.mkdir()

    def _create(stdout: str = "", stderr: str = "", exit_code: int = 0) -> str:
        _ = (bin_dir / "stdout.txt").write_text(stdout)
        _ = (bin_dir / "stderr.txt").write_text(stderr)
        _ = (bin_dir / "exit_code.txt").write_text(str(exit_code))
        script = bin_dir / "git"
        _ = script.write_text(_FAKE_GIT)
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP)
        return str(script)

    return _create


@pytest.fixture
def repo_dir(tmp_path: Path) -> Path:
    """Create a directory that looks like a repository root."""
    path = tmp_path / "repo"
    path.mkdir()
    (path / ".git").mkdir()
    return path


def init_git_repo(path: Path) -> None:
    """Initialize a minimal git repository on branch main."""
    for args in (
        ["git", "init"],
        ["git", "symbolic-ref", "HEAD", "refs/heads/main"],
        ["git", "config", "user.email", "test@example.com"],
        ["git", "config", "user.name", "Test User"],
    ):
        _ = subprocess.run(args, cwd=str(path), capture_output=True, check=True)


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Create a real git repository, skipping when git is not installed."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")
    path = tmp_path / "real-repo"
    path.mkdir()
    init_git_repo(path)
    return path

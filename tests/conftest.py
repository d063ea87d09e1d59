"""Shared test fixtures for repostat tests."""

import os
from pathlib import Path

import pytest
from rich.console import Console

# Old-style report: each section has a blank line between its hint text and
# its entries, which is what the section gating expects.
SAMPLE_REPORT = """\
On branch main
Your branch is ahead of 'origin/main' by 3 commits.
  (use "git push" to publish your local commits)

Changes to be committed:
  (use "git restore --staged <file>..." to unstage)

\tnew file:   docs/guide.md
\tmodified:   src/app.py
\tdeleted:    old.txt


Changes not staged for commit:
  (use "git add <file>..." to update what will be committed)

\tmodified:   README.md
\tdeleted:    setup.cfg


Untracked files:
  (use "git add <file>..." to include in what will be committed)

\tnotes.txt
\tscratch/todo.md


"""


@pytest.fixture(autouse=True)
def _clean_repostat_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove REPOSTAT_* variables so the host environment cannot leak in."""
    for key in list(os.environ):
        if key.startswith("REPOSTAT_"):
            monkeypatch.delenv(key)


@pytest.fixture
def console() -> Console:
    return Console(
        width=70,
        force_terminal=True,
        highlight=False,
        color_system=None,
        legacy_windows=False,
    )


@pytest.fixture
def sample_report() -> str:
    return SAMPLE_REPORT


@pytest.fixture
def user_config_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Redirect the user config file into the test's temporary directory."""
    path = tmp_path / "user-config" / "config.toml"
    monkeypatch.setattr(
        "repostat.config._discovery.get_user_config_path", lambda: path
    )
    return path

"""Git status collection and parsing.

This package turns the human-readable ``git status`` report into a
structured RepositoryStatus.

Key Components:
    - RepositoryStatus / ChangeSet: Immutable result records
    - LineBuffer: Reassembles lines from chunked output
    - StatusParser: Line-oriented state machine over the report
    - read_git_status: Runs git and parses its output (async)

Example:
    >>> from repostat.status import parse_status_text
    >>> parse_status_text("On branch main\\n").local_branch_name
    'main'
"""

from ._buffer import LineBuffer
from ._models import ChangeSet, RepositoryStatus, Section
from ._parser import StatusParser, parse_status_text
from ._source import (
    DEFAULT_EXECUTABLE,
    ensure_git_repository,
    get_git_status,
    is_git_installed,
    is_git_repository,
    read_git_status,
)

__all__ = [
    "DEFAULT_EXECUTABLE",
    "ChangeSet",
    "LineBuffer",
    "RepositoryStatus",
    "Section",
    "StatusParser",
    "ensure_git_repository",
    "get_git_status",
    "is_git_installed",
    "is_git_repository",
    "parse_status_text",
    "read_git_status",
]

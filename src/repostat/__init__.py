"""Summarize the git status of a repository."""

from repostat.exceptions import (
    ConfigError,
    GitError,
    NotARepositoryError,
    RepostatError,
    StatusCommandFailedError,
    ToolUnavailableError,
)
from repostat.status import (
    ChangeSet,
    RepositoryStatus,
    get_git_status,
    parse_status_text,
    read_git_status,
)

__all__ = [
    "ChangeSet",
    "ConfigError",
    "GitError",
    "NotARepositoryError",
    "RepositoryStatus",
    "RepostatError",
    "StatusCommandFailedError",
    "ToolUnavailableError",
    "get_git_status",
    "parse_status_text",
    "read_git_status",
]

"""Repository status models.

This module defines the immutable records produced by parsing a git status
report.
"""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


class Section(StrEnum):
    """Labeled blocks of a status report that carry file entries."""

    STAGED = "staged"
    UNSTAGED = "unstaged"
    UNTRACKED = "untracked"


@dataclass(frozen=True, slots=True)
class ChangeSet:
    """File change counts for one side of the index.

    Attributes:
        added: Files newly added in this set.
        deleted: Files removed in this set.
        modified: Files changed in this set.
    """

    added: int = 0
    deleted: int = 0
    modified: int = 0

    @property
    def total(self) -> int:
        """Return the number of changed files, computed on every access."""
        return self.added + self.deleted + self.modified

    def to_dict(self) -> dict[str, int]:
        """Convert to a plain dictionary, including the derived total."""
        return {
            "added": self.added,
            "deleted": self.deleted,
            "modified": self.modified,
            "total": self.total,
        }


@dataclass(frozen=True, slots=True)
class RepositoryStatus:
    """Structured summary of a git status report.

    A default-constructed instance is the empty status every parse starts from.

    Attributes:
        local_branch_name: Current local branch name.
        remote_branch_name: Upstream tracking branch name.
        local_new_commits: Commits present locally but not upstream.
        remote_new_commits: Commits present upstream but not locally.
        staged_changes: Changes recorded in the index.
        unstaged_changes: Working tree changes plus untracked files.
    """

    local_branch_name: str = ""
    remote_branch_name: str = ""
    local_new_commits: int = 0
    remote_new_commits: int = 0
    staged_changes: ChangeSet = field(default_factory=ChangeSet)
    unstaged_changes: ChangeSet = field(default_factory=ChangeSet)

    @property
    def is_clean(self) -> bool:
        """Return True when neither change set has any entries."""
        return self.staged_changes.total == 0 and self.unstaged_changes.total == 0

    @property
    def has_upstream(self) -> bool:
        """Return True when a tracking branch was reported."""
        return bool(self.remote_branch_name)

    def to_dict(self) -> dict[str, Any]:  # pyright: ignore[reportExplicitAny]
        """Convert to a plain dictionary suitable for JSON or YAML output."""
        return {
            "local_branch_name": self.local_branch_name,
            "remote_branch_name": self.remote_branch_name,
            "local_new_commits": self.local_new_commits,
            "remote_new_commits": self.remote_new_commits,
            "staged_changes": self.staged_changes.to_dict(),
            "unstaged_changes": self.unstaged_changes.to_dict(),
        }

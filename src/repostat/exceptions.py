"""repostat exceptions."""

from pathlib import Path  # noqa: TC003 - needed at runtime for signatures
from typing import Any


class RepostatError(Exception):
    """Base exception for repostat errors."""


# =============================================================================
# Git Exceptions
# =============================================================================


class GitError(RepostatError):
    """Base exception for failures talking to git."""


class ToolUnavailableError(GitError):
    """Raised when the git executable cannot be spawned at all.

    Attributes:
        executable: The executable that failed to start.
        cause: The underlying OS error, if any.
    """

    def __init__(
        self,
        message: str,
        *,
        executable: str,
        cause: Exception | None = None,
    ) -> None:
        """Initialize with error message and executable context."""
        super().__init__(message)
        self.executable: str = executable
        self.cause: Exception | None = cause


class NotARepositoryError(GitError):
    """Raised when a directory has no git metadata directory.

    Attributes:
        path: The directory that was checked.
    """

    def __init__(self, message: str, *, path: Path) -> None:
        """Initialize with error message and directory context."""
        super().__init__(message)
        self.path: Path = path


class StatusCommandFailedError(GitError):
    """Raised when the status command wrote anything to its error stream.

    Attributes:
        diagnostics: Everything received on stderr, decoded as UTF-8. Bytes
            that are not valid UTF-8 become U+FFFD replacement characters;
            all other text is kept verbatim.
    """

    def __init__(self, diagnostics: str) -> None:
        """Initialize with the diagnostic text as the message."""
        super().__init__(diagnostics)
        self.diagnostics: str = diagnostics


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigError(RepostatError):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when configuration cannot be loaded or parsed."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize with error message and optional location context."""
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column


class ConfigValidationError(ConfigError):
    """Raised when configuration fails validation."""

    def __init__(
        self,
        message: str,
        *,
        key: str,
        value: Any,  # pyright: ignore[reportAny,reportExplicitAny]
        expected: str,
        source: str | None = None,
    ) -> None:
        """Initialize with error message and validation context."""
        super().__init__(message)
        self.key: str = key
        self.value: Any = value  # pyright: ignore[reportExplicitAny]
        self.expected: str = expected
        self.source: str | None = source

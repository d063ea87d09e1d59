"""Git subprocess integration.

This module spawns git, streams the status report into a StatusParser and
surfaces anything git writes to stderr as a failure.
"""

import subprocess
from functools import partial
from pathlib import Path
from typing import TYPE_CHECKING, Final

import anyio
from anyio.streams.text import TextReceiveStream

from repostat.exceptions import (
    NotARepositoryError,
    StatusCommandFailedError,
    ToolUnavailableError,
)
from repostat.status._models import RepositoryStatus  # noqa: TC001
from repostat.status._parser import StatusParser

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

DEFAULT_EXECUTABLE: Final = "git"

# Metadata directory (or gitdir pointer file for worktrees) marking a repo root
GIT_METADATA_DIR: Final = ".git"

STATUS_ARGS: Final = ("status", "-uall")


def is_git_repository(path: Path | str) -> bool:
    """Check whether a directory is the root of a git repository.

    Args:
        path: Directory to test.

    Returns:
        True if the directory contains a ``.git`` entry.
    """
    return (Path(path) / GIT_METADATA_DIR).exists()


def ensure_git_repository(path: Path | str) -> Path:
    """Return the directory as a Path if it is a repository root.

    Raises:
        NotARepositoryError: If the directory has no ``.git`` entry.
    """
    directory = Path(path)
    if not is_git_repository(directory):
        msg = f"Not a git repository: {directory}"
        raise NotARepositoryError(msg, path=directory)
    return directory


async def is_git_installed(executable: str = DEFAULT_EXECUTABLE) -> bool:
    """Check whether git can be spawned.

    Runs the executable with no arguments. Any exit code counts as installed;
    only a failure to start the process reports False.

    Args:
        executable: Name or path of the git executable.

    Returns:
        True if the process could be spawned and ran to completion.
    """
    try:
        _ = await anyio.run_process(
            [executable],
            check=False,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError:
        return False
    return True


async def _collect_stdout(stream: TextReceiveStream, parser: StatusParser) -> None:
    try:
        async for chunk in stream:
            parser.feed(chunk)
    except anyio.ClosedResourceError:
        # Stream closed, which is expected on process exit
        pass


async def _collect_stderr(stream: TextReceiveStream, diagnostics: list[str]) -> None:
    try:
        async for chunk in stream:
            diagnostics.append(chunk)
    except anyio.ClosedResourceError:
        pass


async def read_git_status(
    path: Path | str,
    *,
    executable: str = DEFAULT_EXECUTABLE,
    logger: "FilteringBoundLogger | None" = None,
) -> RepositoryStatus:
    """Run ``git status -uall`` in a directory and parse its report.

    Stdout is parsed as it arrives; stderr is collected concurrently. The
    command is attempted exactly once and no timeout is applied.

    Args:
        path: Working directory to run git in.
        executable: Name or path of the git executable.
        logger: Optional structured logger.

    Returns:
        The parsed repository status.

    Raises:
        ToolUnavailableError: If git cannot be spawned.
        StatusCommandFailedError: If git wrote anything to stderr. The
            partially parsed status is discarded. Undecodable stderr bytes
            are replaced with U+FFFD.
    """
    command = [executable, *STATUS_ARGS]
    parser = StatusParser(logger=logger)
    diagnostics: list[str] = []

    if logger is not None:
        logger.info("git_status_started", command=command, cwd=str(path))

    try:
        process = await anyio.open_process(
            command,
            cwd=str(path),
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
    except OSError as e:
        msg = f"Failed to run '{executable}': {e}"
        if logger is not None:
            logger.error("git_spawn_failed", executable=executable, error=str(e))
        raise ToolUnavailableError(msg, executable=executable, cause=e) from e

    async with process:
        async with anyio.create_task_group() as tg:
            if process.stdout is not None:
                stdout_stream = TextReceiveStream(process.stdout, errors="replace")
                tg.start_soon(_collect_stdout, stdout_stream, parser)
            if process.stderr is not None:
                stderr_stream = TextReceiveStream(process.stderr, errors="replace")
                tg.start_soon(_collect_stderr, stderr_stream, diagnostics)
            exit_code = await process.wait()

    if diagnostics:
        error_output = "".join(diagnostics)
        if logger is not None:
            logger.error("git_status_failed", exit_code=exit_code, stderr=error_output)
        raise StatusCommandFailedError(error_output)

    status = parser.finish()
    if logger is not None:
        if exit_code != 0:
            logger.warning("git_status_nonzero_exit", exit_code=exit_code)
        logger.info(
            "git_status_parsed",
            branch=status.local_branch_name,
            staged=status.staged_changes.total,
            unstaged=status.unstaged_changes.total,
        )
    return status


def get_git_status(
    path: Path | str,
    *,
    executable: str = DEFAULT_EXECUTABLE,
    logger: "FilteringBoundLogger | None" = None,
) -> RepositoryStatus:
    """Synchronous wrapper around :func:`read_git_status`.

    Args:
        path: Working directory to run git in.
        executable: Name or path of the git executable.
        logger: Optional structured logger.

    Returns:
        The parsed repository status.

    Raises:
        ToolUnavailableError: If git cannot be spawned.
        StatusCommandFailedError: If git wrote anything to stderr.
    """
    return anyio.run(
        partial(read_git_status, path, executable=executable, logger=logger)
    )

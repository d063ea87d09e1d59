"""The command-line interface for repostat."""

import sys
from pathlib import Path

import anyio
from cyclopts import App
from rich.console import Console

from repostat.config import safe_load_config
from repostat.exceptions import (
    NotARepositoryError,
    StatusCommandFailedError,
    ToolUnavailableError,
)
from repostat.status import ensure_git_repository, get_git_status, is_git_installed
from repostat.utils import create_logger

from ._render import render_status
from ._shared import ExitCode, exit_with_error

_APP_HELP = "Summarize the git status of the current repository."


def create_app(
    console: Console | None = None,
    error_console: Console | None = None,
    *,
    exit_on_error: bool = True,
) -> App:
    if console is None:
        console = Console()
    if error_console is None:
        error_console = Console(stderr=True)
    app = App(
        name="repostat",
        help=_APP_HELP,
        help_on_error=True,
        console=console,
        error_console=error_console,
        exit_on_error=exit_on_error,
    )

    @app.default
    def _status() -> None:  # pyright: ignore[reportUnusedFunction]
        """Print branch, tracking and change counts for the working directory."""
        console.print(
            f"args {sys.argv!r}", markup=False, highlight=False, soft_wrap=True
        )

        cwd = Path.cwd()
        config, config_error = safe_load_config(project_root=cwd)
        logger = create_logger(
            level=config.logging.level.value,
            log_format=config.logging.format.value,  # type: ignore[arg-type]
            log_file=config.logging.file,
            command="status",
        )
        if config_error is not None:
            logger.warning("config_fallback", error=config_error)

        executable = config.git.executable
        if not anyio.run(is_git_installed, executable):
            exit_with_error(
                "Could not run git.  Is it installed?",
                ExitCode.TOOL_UNAVAILABLE,
                console=error_console,
            )

        try:
            repo_root = ensure_git_repository(cwd)
        except NotARepositoryError as e:
            logger.info("not_a_repository", path=str(e.path))
            exit_with_error(
                "Must be run inside of a git repository.",
                ExitCode.NOT_A_REPOSITORY,
                console=error_console,
            )

        try:
            status = get_git_status(repo_root, executable=executable, logger=logger)
        except ToolUnavailableError:
            exit_with_error(
                "Could not run git.  Is it installed?",
                ExitCode.TOOL_UNAVAILABLE,
                console=error_console,
            )
        except StatusCommandFailedError as e:
            exit_with_error(
                e.diagnostics, ExitCode.STATUS_FAILED, console=error_console
            )

        render_status(status, console, config.output.format)

    return app


app = create_app()


def main() -> None:
    """Default entrypoint for the `repostat` CLI."""
    app = create_app()
    app()


if __name__ == "__main__":
    main()

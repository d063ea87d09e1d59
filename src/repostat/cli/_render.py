"""Rendering of a repository status for the terminal."""

from rich.console import Console  # noqa: TC002 - needed at runtime for signatures
from rich.markup import escape
from rich.table import Table

from repostat.config import OutputFormat
from repostat.status import ChangeSet, RepositoryStatus

from ._shared import format_json, format_yaml


def _add_change_rows(table: Table, title: str, changes: ChangeSet) -> None:
    table.add_row(f"[bold cyan]{title}[/bold cyan]", "")
    table.add_row("  Added", f"[green]{changes.added:,}[/green]")
    table.add_row("  Modified", f"[yellow]{changes.modified:,}[/yellow]")
    table.add_row("  Deleted", f"[red]{changes.deleted:,}[/red]")
    table.add_row("  Total", f"{changes.total:,}")


def _tracking_summary(status: RepositoryStatus) -> str:
    if not status.has_upstream:
        return "[dim]no upstream[/dim]"
    return (
        f"{escape(status.remote_branch_name)} "
        f"(ahead {status.local_new_commits:,}, behind {status.remote_new_commits:,})"
    )


def render_status_table(status: RepositoryStatus, console: Console) -> None:
    """Print a repository status as a two-column table.

    Args:
        status: Parsed repository status.
        console: Rich console for output.
    """
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Category", width=22)
    table.add_column("Value", justify="right")

    branch = escape(status.local_branch_name) or "[dim]detached[/dim]"
    table.add_row("Branch", branch)
    table.add_row("Tracking", _tracking_summary(status))
    table.add_row("", "")

    _add_change_rows(table, "Staged", status.staged_changes)
    table.add_row("", "")
    _add_change_rows(table, "Unstaged", status.unstaged_changes)

    console.print(table)
    if status.is_clean:
        console.print("[green]Working tree clean[/green]")


def render_status(
    status: RepositoryStatus,
    console: Console,
    output_format: OutputFormat = OutputFormat.TEXT,
) -> None:
    """Print a repository status in the requested format.

    Args:
        status: Parsed repository status.
        console: Rich console for output.
        output_format: TEXT for a table, JSON or YAML for machine output.
    """
    if output_format is OutputFormat.TEXT:
        render_status_table(status, console)
        return

    data = status.to_dict()
    if output_format is OutputFormat.JSON:
        rendered = format_json(data)
    else:
        rendered = format_yaml(data)
    console.print(rendered.rstrip("\n"), markup=False, highlight=False, soft_wrap=True)

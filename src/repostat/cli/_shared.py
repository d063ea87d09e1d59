# pyright: reportExplicitAny=false
"""Shared CLI utilities.

This module provides common utilities used by the repostat CLI:
- Exit codes, re-exported from repostat.enums
- Generic output formatters (JSON, YAML)
- Console utilities for error handling
"""

from typing import Any, Never

from rich.console import Console
from rich.markup import escape

from repostat.enums import ExitCode

# Type alias for formattable data - uses Any to match library signatures
FormattableData = dict[str, Any]

__all__ = [
    "ExitCode",
    "FormattableData",
    "exit_with_error",
    "format_json",
    "format_yaml",
    "get_error_console",
]


def format_json(data: FormattableData, *, indent: bool = True) -> str:
    """Format data as JSON.

    Args:
        data: Dictionary to format as JSON.
        indent: Whether to pretty-print with indentation.

    Returns:
        JSON-formatted string representation.
    """
    import orjson

    options = orjson.OPT_INDENT_2 if indent else 0
    return orjson.dumps(data, option=options).decode("utf-8")


def format_yaml(data: FormattableData) -> str:
    """Format data as YAML.

    Args:
        data: Dictionary to format as YAML.

    Returns:
        YAML-formatted string representation.
    """
    import yaml

    return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)


def get_error_console() -> Console:
    """Get a Rich console configured for error output to stderr."""
    return Console(stderr=True)


def exit_with_error(
    message: str,
    code: ExitCode,
    *,
    console: Console | None = None,
) -> Never:
    """Print an error message and exit with the specified code.

    The message is printed literally; Rich markup inside it is escaped.

    Args:
        message: The error message to display.
        code: The exit code to use.
        console: Optional Rich console for output. If not provided,
            a new stderr console will be created.

    Raises:
        SystemExit: Always raised with the specified exit code.
    """
    if console is None:
        console = get_error_console()

    console.print(f"[red]Error:[/red] {escape(message)}")
    raise SystemExit(code)

"""The repostat command-line interface."""

from ._app import app, create_app, main
from ._render import render_status, render_status_table
from ._shared import (
    ExitCode,
    FormattableData,
    exit_with_error,
    format_json,
    format_yaml,
    get_error_console,
)

__all__ = [
    "ExitCode",
    "FormattableData",
    "app",
    "create_app",
    "exit_with_error",
    "format_json",
    "format_yaml",
    "get_error_console",
    "main",
    "render_status",
    "render_status_table",
]

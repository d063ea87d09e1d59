"""Enumeration types for repostat."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for the repostat CLI."""

    SUCCESS = 0
    TOOL_UNAVAILABLE = 1
    NOT_A_REPOSITORY = 2
    STATUS_FAILED = 3
    CONFIG_ERROR = 4

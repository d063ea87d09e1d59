"""Default configuration values.

DEFAULT_CONFIG is a plain dict so it can be fed straight into deep_merge,
which copies rather than mutates its inputs.
"""

from typing import Any

DEFAULT_CONFIG: dict[str, Any] = {  # pyright: ignore[reportExplicitAny]
    "logging": {
        "level": "warning",
        "format": "text",
        "file": "",
    },
    "git": {
        "executable": "git",
    },
    "output": {
        "format": "text",
    },
}

# Prefix for environment variable overrides (REPOSTAT_LOGGING__LEVEL=debug)
ENV_PREFIX = "REPOSTAT_"

PROJECT_CONFIG_FILENAME = ".repostat.toml"

# Keys ignored in the project file; only the user file and environment set them
USER_ONLY_KEYS: tuple[str, ...] = ("git.executable", "logging.file")

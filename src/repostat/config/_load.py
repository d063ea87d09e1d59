import os
import sys
from pathlib import Path  # noqa: TC003 - needed at runtime for signatures

from repostat.enums import ExitCode
from repostat.exceptions import ConfigError

from ._models import Config


def safe_load_config(
    *,
    project_root: Path | None = None,
) -> tuple[Config, str | None]:
    """Load configuration with error handling.

    Behaviour depends on the REPOSTAT_STRICT_CONFIG environment variable:
    - If unset or "0": warn to stderr and fall back to the defaults
    - If "1": fail fast with ExitCode.CONFIG_ERROR

    Args:
        project_root: Directory holding the project config file.

    Returns:
        Tuple of (Config, error_message). On success, error_message is None.
    """
    strict_mode = os.environ.get("REPOSTAT_STRICT_CONFIG", "0") == "1"

    try:
        config = Config.load(project_root=project_root)
    except (ConfigError, OSError) as e:
        error_msg = f"Failed to load config: {e}"
        if strict_mode:
            print(f"Error: {error_msg}", file=sys.stderr)  # noqa: T201
            sys.exit(ExitCode.CONFIG_ERROR)
        print(f"Warning: {error_msg}", file=sys.stderr)  # noqa: T201
        return Config.from_dict({}), error_msg
    else:
        return config, None

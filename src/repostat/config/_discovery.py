"""Config file path discovery.

This module locates the user and project configuration files and lists
every source in precedence order.
"""

from pathlib import Path

import platformdirs

from ._defaults import DEFAULT_CONFIG, PROJECT_CONFIG_FILENAME
from ._models import ConfigSource, ConfigSourceName


def get_user_config_path() -> Path:
    r"""Get platform-specific user config file path.

    - Linux: ``~/.config/repostat/config.toml``
    - macOS: ``~/Library/Application Support/repostat/config.toml``
    - Windows: ``%APPDATA%\repostat\config.toml``

    The path is returned whether or not the file exists.
    """
    return platformdirs.user_config_path("repostat") / "config.toml"


def get_project_config_path(project_root: Path | None = None) -> Path:
    """Get the project config file path for a directory.

    Args:
        project_root: Directory to look in. Defaults to the current directory.

    Returns:
        Path to ``.repostat.toml`` in that directory.
    """
    return (project_root or Path.cwd()) / PROJECT_CONFIG_FILENAME


def _file_exists(path: Path) -> bool:
    """Check if a file exists, treating permission errors as absent."""
    try:
        return path.is_file()
    except OSError:
        return False


def discover_sources(
    project_root: Path | None = None,
    *,
    include_env: bool = True,
) -> list[ConfigSource]:
    """Discover all configuration sources, highest precedence first.

    File sources are listed even when the file is missing, with
    ``exists=False``. Values are filled in by Config.load(), except for the
    default source which carries DEFAULT_CONFIG.

    Args:
        project_root: Directory holding the project config file.
        include_env: Include environment variables as a source.

    Returns:
        Sources ordered env, project, user, default.
    """
    sources: list[ConfigSource] = []

    if include_env:
        sources.append(
            ConfigSource(name=ConfigSourceName.ENV, path=None, exists=True, values={})
        )

    project_path = get_project_config_path(project_root)
    sources.append(
        ConfigSource(
            name=ConfigSourceName.PROJECT,
            path=project_path,
            exists=_file_exists(project_path),
            values={},
        )
    )

    user_path = get_user_config_path()
    sources.append(
        ConfigSource(
            name=ConfigSourceName.USER,
            path=user_path,
            exists=_file_exists(user_path),
            values={},
        )
    )

    sources.append(
        ConfigSource(
            name=ConfigSourceName.DEFAULT,
            path=None,
            exists=True,
            values=DEFAULT_CONFIG,
        )
    )

    return sources

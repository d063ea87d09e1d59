"""repostat configuration.

Layered configuration: built-in defaults, the user config file, the
project's ``.repostat.toml`` and ``REPOSTAT_*`` environment variables,
merged in that order and validated with Pydantic.

Example:
    >>> from repostat.config import Config
    >>> config = Config.load()
    >>> config.git.executable
    'git'
"""

from repostat.exceptions import ConfigError, ConfigLoadError, ConfigValidationError

from ._defaults import (
    DEFAULT_CONFIG,
    ENV_PREFIX,
    PROJECT_CONFIG_FILENAME,
    USER_ONLY_KEYS,
)
from ._discovery import discover_sources, get_project_config_path, get_user_config_path
from ._load import safe_load_config
from ._loader import (
    deep_merge,
    parse_env_vars,
    parse_string_value,
    read_toml_file,
    remove_nested_key,
    set_nested_key,
)
from ._models import (
    Config,
    ConfigSource,
    ConfigSourceName,
    GitConfig,
    LogFormat,
    LoggingConfig,
    LogLevel,
    OutputConfig,
    OutputFormat,
)

__all__ = [
    "DEFAULT_CONFIG",
    "ENV_PREFIX",
    "PROJECT_CONFIG_FILENAME",
    "USER_ONLY_KEYS",
    "Config",
    "ConfigError",
    "ConfigLoadError",
    "ConfigSource",
    "ConfigSourceName",
    "ConfigValidationError",
    "GitConfig",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "OutputConfig",
    "OutputFormat",
    "deep_merge",
    "discover_sources",
    "get_project_config_path",
    "get_user_config_path",
    "parse_env_vars",
    "parse_string_value",
    "read_toml_file",
    "remove_nested_key",
    "safe_load_config",
    "set_nested_key",
]

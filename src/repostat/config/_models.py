# pyright: reportExplicitAny=false, reportAny=false
"""Configuration models.

This module provides the Pydantic models for each configuration section and
the Config container that merges every source into one validated object.
"""

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path  # noqa: TC003 - needed at runtime for dataclass fields
from typing import Any, ClassVar, Never, Self

from pydantic import BaseModel, ConfigDict, PrivateAttr, ValidationError

from repostat.config._defaults import DEFAULT_CONFIG, USER_ONLY_KEYS
from repostat.config._loader import (
    copy_value,
    deep_merge,
    parse_env_vars,
    read_toml_file,
    remove_nested_key,
)
from repostat.exceptions import ConfigValidationError


class LogLevel(StrEnum):
    """Log level threshold values, most verbose first."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class LogFormat(StrEnum):
    """Log output format values."""

    JSON = "json"
    TEXT = "text"


class OutputFormat(StrEnum):
    """Formats the CLI can render a repository status in."""

    TEXT = "text"
    JSON = "json"
    YAML = "yaml"


class ConfigSourceName(StrEnum):
    """Configuration source names, highest precedence first."""

    ENV = "env"
    PROJECT = "project"
    USER = "user"
    DEFAULT = "default"


@dataclass(frozen=True, slots=True)
class ConfigSource:
    """Represents a configuration source.

    Attributes:
        name: The source type identifier.
        path: Path to the config file, or None for ENV and DEFAULT.
        exists: Whether the source exists (file exists, or values are present).
        values: Configuration values from this source.
    """

    name: ConfigSourceName
    path: Path | None
    exists: bool
    values: dict[str, Any]


class LoggingConfig(BaseModel):
    """Logging configuration section.

    Attributes:
        level: Log level threshold.
        format: Log output format.
        file: Path to log file; empty logs to stderr.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    level: LogLevel = LogLevel.WARNING
    format: LogFormat = LogFormat.TEXT
    file: str = ""


class GitConfig(BaseModel):
    """Git invocation settings.

    Attributes:
        executable: Name or path of the git executable.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    executable: str = "git"


class OutputConfig(BaseModel):
    """CLI output settings.

    Attributes:
        format: How the repository status is rendered.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    format: OutputFormat = OutputFormat.TEXT


def _raise_validation_error(error: ValidationError) -> Never:
    """Convert the first pydantic error into a ConfigValidationError."""
    detail = error.errors()[0]
    key = ".".join(str(part) for part in detail["loc"])
    msg = f"Invalid configuration value for '{key}': {detail['msg']}"
    raise ConfigValidationError(
        msg,
        key=key,
        value=detail.get("input"),
        expected=detail["msg"],
    ) from error


class Config(BaseModel):
    """Validated, immutable configuration.

    Use the factory methods rather than the constructor: from_dict() for
    in-memory values and load() to merge every discovered source.

    Example:
        >>> config = Config.from_dict({"output": {"format": "json"}})
        >>> config.output.format
        <OutputFormat.JSON: 'json'>
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    logging: LoggingConfig = LoggingConfig()
    git: GitConfig = GitConfig()
    output: OutputConfig = OutputConfig()

    _sources: tuple[ConfigSource, ...] = PrivateAttr(default=())

    @classmethod
    def _validate_merged(
        cls,
        merged: dict[str, Any],
        sources: tuple[ConfigSource, ...],
    ) -> Self:
        try:
            config = cls.model_validate(merged)
        except ValidationError as e:
            _raise_validation_error(e)
        config._sources = sources
        return config

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create configuration from a dictionary merged over the defaults.

        Raises:
            ConfigValidationError: If a value fails validation.
        """
        return cls._validate_merged(deep_merge(DEFAULT_CONFIG, data), ())

    @classmethod
    def load(
        cls,
        *,
        project_root: Path | None = None,
        include_env: bool = True,
    ) -> Self:
        """Load merged configuration from all sources.

        Sources merge from lowest to highest precedence:
        defaults -> user -> project -> env.
        The project file cannot set git.executable or logging.file; those keys
        are dropped from it before merging.

        Args:
            project_root: Directory holding the project config file. Defaults
                to the current working directory.
            include_env: Include REPOSTAT_* environment variables.

        Returns:
            Merged configuration object.

        Raises:
            ConfigLoadError: If a config file cannot be parsed.
            ConfigValidationError: If the merged config fails validation.
        """
        from repostat.config._discovery import discover_sources  # noqa: PLC0415

        merged: dict[str, Any] = {}
        loaded_sources: list[ConfigSource] = []

        for source in reversed(discover_sources(project_root, include_env=include_env)):
            values: dict[str, Any] = {}
            if source.name == ConfigSourceName.DEFAULT:
                values = source.values
            elif source.name == ConfigSourceName.ENV:
                values = parse_env_vars()
            elif source.path is not None and source.exists:
                values = read_toml_file(source.path)
                if source.name == ConfigSourceName.PROJECT:
                    for key_path in USER_ONLY_KEYS:
                        remove_nested_key(values, key_path)

            loaded_sources.append(
                ConfigSource(
                    name=source.name,
                    path=source.path,
                    exists=source.exists,
                    values=values,
                )
            )
            if values:
                merged = deep_merge(merged, values)

        return cls._validate_merged(merged, tuple(reversed(loaded_sources)))

    @property
    def sources(self) -> list[ConfigSource]:
        """Return the sources that contributed to this configuration, highest first."""
        return list(self._sources)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a plain dictionary."""
        return copy_value(self.model_dump(mode="json"))

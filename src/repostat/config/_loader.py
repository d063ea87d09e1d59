# pyright: reportAny=false, reportUnknownVariableType=false, reportUnknownArgumentType=false
"""TOML configuration file loading and merging."""

import json
import os
import re
import tomllib
from pathlib import Path  # noqa: TC003 - needed at runtime for signatures
from typing import Any

from repostat.config._defaults import ENV_PREFIX
from repostat.exceptions import ConfigLoadError

# tomllib appends "(at line N, column M)" to its messages before Python 3.14
_TOML_LOCATION_RE = re.compile(r"\(at line (\d+), column (\d+)\)")


def _toml_error_location(
    error: tomllib.TOMLDecodeError,
) -> tuple[int | None, int | None]:
    line: int | None = getattr(error, "lineno", None)
    column: int | None = getattr(error, "colno", None)
    if line is None and (match := _TOML_LOCATION_RE.search(str(error))):
        line, column = int(match.group(1)), int(match.group(2))
    return line, column


def read_toml_file(path: Path) -> dict[str, Any]:  # pyright: ignore[reportExplicitAny]
    """Read and parse a TOML file.

    Args:
        path: Path to the TOML file.

    Returns:
        Parsed TOML content as dictionary.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigLoadError: If the file cannot be parsed.
    """
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Failed to parse TOML file {path}: {e}"
        line, column = _toml_error_location(e)
        raise ConfigLoadError(msg, path=path, line=line, column=column) from e


def copy_value(value: Any) -> Any:  # pyright: ignore[reportExplicitAny]
    """Deep copy nested dicts and lists; other values are returned as-is."""
    if isinstance(value, dict):
        return {k: copy_value(v) for k, v in value.items()}
    if isinstance(value, list):
        return [copy_value(item) for item in value]
    return value


def deep_merge(
    base: dict[str, Any],  # pyright: ignore[reportExplicitAny]
    override: dict[str, Any],  # pyright: ignore[reportExplicitAny]
) -> dict[str, Any]:  # pyright: ignore[reportExplicitAny]
    """Deep merge two configuration dictionaries.

    Neither input is modified. Nested dictionaries merge recursively; any
    other value in `override` replaces the one in `base`.

    Args:
        base: Base configuration (lower precedence).
        override: Override configuration (higher precedence).

    Returns:
        Merged configuration dictionary.
    """
    result = {key: copy_value(value) for key, value in base.items()}

    for key, override_val in override.items():
        base_val = result.get(key)
        if isinstance(base_val, dict) and isinstance(override_val, dict):
            result[key] = deep_merge(base_val, override_val)
        else:
            result[key] = copy_value(override_val)

    return result


def parse_string_value(value: str) -> Any:  # pyright: ignore[reportExplicitAny]
    """Parse a string value with automatic type inference.

    Precedence: boolean (true/false), integer, float (must contain a decimal
    point), JSON array/object, then the string itself.

    Examples:
        >>> parse_string_value("true")
        True
        >>> parse_string_value("42")
        42
        >>> parse_string_value("debug")
        'debug'
    """
    lower_value = value.lower()
    if lower_value in ("true", "false"):
        return lower_value == "true"

    if "." not in value:
        try:
            return int(value)
        except ValueError:
            pass
    else:
        try:
            return float(value)
        except ValueError:
            pass

    if (value.startswith("[") and value.endswith("]")) or (
        value.startswith("{") and value.endswith("}")
    ):
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            pass

    return value


def set_nested_key(
    d: dict[str, Any],  # pyright: ignore[reportExplicitAny]
    key_path: str,
    value: Any,  # pyright: ignore[reportExplicitAny]
) -> None:
    """Set a value at a dotted key path, creating intermediate dicts.

    Example:
        >>> d = {}
        >>> set_nested_key(d, "logging.level", "debug")
        >>> d
        {'logging': {'level': 'debug'}}
    """
    parts = key_path.split(".")
    current = d

    for part in parts[:-1]:
        if not isinstance(current.get(part), dict):
            current[part] = {}
        current = current[part]

    current[parts[-1]] = value


def remove_nested_key(
    d: dict[str, Any],  # pyright: ignore[reportExplicitAny]
    key_path: str,
) -> None:
    """Remove the value at a dotted key path if present.

    Tables left empty by the removal are kept.
    """
    *parents, last = key_path.split(".")
    current = d

    for part in parents:
        child = current.get(part)
        if not isinstance(child, dict):
            return
        current = child

    _ = current.pop(last, None)


def parse_env_vars(
    prefix: str = ENV_PREFIX,
) -> dict[str, Any]:  # pyright: ignore[reportExplicitAny]
    """Parse environment variables into a nested config dictionary.

    ``REPOSTAT_LOGGING__LEVEL=debug`` becomes ``{"logging": {"level": "debug"}}``.
    Double underscores separate nesting levels and keys are lowercased.

    Args:
        prefix: Environment variable prefix.

    Returns:
        Dictionary of parsed config values.
    """
    result: dict[str, Any] = {}  # pyright: ignore[reportExplicitAny]

    for key, value in os.environ.items():
        if not key.startswith(prefix):
            continue

        config_key = key[len(prefix) :]
        if not config_key:
            continue

        config_path = config_key.replace("__", ".").lower()
        set_nested_key(result, config_path, parse_string_value(value))

    return result

"""
Project configuration for tokensmith.

Settings come from ``tokensmith.toml`` or a ``[tool.tokensmith]`` table in
``pyproject.toml``. Examples:

    # tokensmith.toml
    input = "design-tokens.json"
    format = "scss"
    output_dir = "src/styles/tokens"
"""

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .errors import ConfigError, ErrorContext
from .ir import OutputFormat

CONFIG_FILE = "tokensmith.toml"
PYPROJECT_FILE = "pyproject.toml"

DEFAULT_FORMAT = OutputFormat.TAILWIND
DEFAULT_OUTPUT_DIR = "tokens"


@dataclass
class TokensmithConfig:
    """Resolved configuration; relative paths are resolved against ``root``."""

    root: Path
    format: OutputFormat = DEFAULT_FORMAT
    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)
    input: Path | None = None
    source: Path | None = None  # file the settings were read from, if any


def find_config(start: Path) -> Path | None:
    """Return the config file in ``start``: tokensmith.toml, else a pyproject with our table."""
    candidate = start / CONFIG_FILE
    if candidate.exists():
        return candidate

    pyproject = start / PYPROJECT_FILE
    if pyproject.exists():
        try:
            data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError:
            return None
        if "tokensmith" in data.get("tool", {}):
            return pyproject
    return None


def _read_table(path: Path) -> dict[str, Any]:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML: {e}", ErrorContext(file=path)) from e
    except OSError as e:
        raise ConfigError(f"Could not read config: {e}", ErrorContext(file=path)) from e

    if path.name == PYPROJECT_FILE:
        table = data.get("tool", {}).get("tokensmith", {})
    else:
        table = data
    if not isinstance(table, dict):
        raise ConfigError("tokensmith settings must be a table", ErrorContext(file=path))
    return table


def _require_str(table: dict[str, Any], key: str, path: Path) -> str | None:
    value = table.get(key)
    if value is not None and not isinstance(value, str):
        raise ConfigError(f"'{key}' must be a string", ErrorContext(file=path))
    return value


def load_config(path: Path) -> TokensmithConfig:
    """
    Load settings from a config file.

    Args:
        path: tokensmith.toml or pyproject.toml

    Returns:
        TokensmithConfig with paths resolved relative to the file's directory.

    Raises:
        ConfigError: If the file or any value is invalid.
    """
    table = _read_table(path)
    root = path.parent
    config = TokensmithConfig(root=root, output_dir=root / DEFAULT_OUTPUT_DIR, source=path)

    fmt = _require_str(table, "format", path)
    if fmt is not None:
        try:
            config.format = OutputFormat(fmt)
        except ValueError:
            choices = ", ".join(f.value for f in OutputFormat)
            raise ConfigError(
                f"Unknown format '{fmt}' (expected one of: {choices})", ErrorContext(file=path)
            ) from None

    output_dir = _require_str(table, "output_dir", path)
    if output_dir is not None:
        config.output_dir = root / output_dir

    input_path = _require_str(table, "input", path)
    if input_path is not None:
        config.input = root / input_path

    return config


def resolve_config(explicit: Path | None = None, start: Path | None = None) -> TokensmithConfig:
    """Load ``explicit`` if given, else discover a config in ``start``, else use defaults."""
    if explicit is not None:
        if not explicit.exists():
            raise ConfigError(f"Config file not found: {explicit}")
        return load_config(explicit)

    start = start or Path.cwd()
    found = find_config(start)
    if found is None:
        return TokensmithConfig(root=start, output_dir=start / DEFAULT_OUTPUT_DIR)
    return load_config(found)

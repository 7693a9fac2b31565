"""Scan configuration loaded from YAML files and the environment."""

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml

from .discovery import DEFAULT_EXTENSIONS, normalize_extension


DEFAULT_ENV_VAR = "INCLUDE"
DEFAULT_INDENT = "| "


class ConfigError(Exception):
    """Raised when a configuration file cannot be loaded or is invalid."""


@dataclass
class ScanConfig:
    """Settings that control which files are scanned and how includes resolve."""

    search_paths: List[str] = field(default_factory=list)
    extensions: List[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    env_var: str = DEFAULT_ENV_VAR
    use_env: bool = True
    recursive: bool = False
    indent: str = DEFAULT_INDENT

    def __post_init__(self):
        self.extensions = [normalize_extension(ext) for ext in self.extensions if ext]


_FIELD_TYPES = {
    "search_paths": list,
    "extensions": list,
    "env_var": str,
    "use_env": bool,
    "recursive": bool,
    "indent": str,
}


def config_from_dict(data: Mapping[str, Any]) -> ScanConfig:
    """
    Build a ScanConfig from a parsed mapping.

    Raises:
        ConfigError: On unknown keys or values of the wrong type.
    """
    known = {f.name for f in fields(ScanConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {', '.join(map(str, unknown))}")

    values: Dict[str, Any] = {}
    for key, value in data.items():
        expected = _FIELD_TYPES[key]
        if not isinstance(value, expected):
            raise ConfigError(
                f"'{key}' must be of type {expected.__name__}, got {type(value).__name__}"
            )
        if expected is list and not all(isinstance(item, str) for item in value):
            raise ConfigError(f"'{key}' must be a list of strings")
        values[key] = value

    return ScanConfig(**values)


def load_config(path: Path) -> ScanConfig:
    """
    Load a YAML configuration file.

    An empty file yields the default configuration. Relative entries in
    `search_paths` are taken relative to the configuration file.

    Raises:
        ConfigError: If the file cannot be read or parsed, or is invalid.
    """
    try:
        content = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read configuration file '{path}': {e}") from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in '{path}': {e}") from e

    if data is None:
        return ScanConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration file '{path}' must contain a mapping")

    config = config_from_dict(data)
    base = Path(path).resolve().parent
    config.search_paths = [
        p if not p or os.path.isabs(p) else str(base / p) for p in config.search_paths
    ]
    return config


def env_search_paths(env_var: str, environ: Optional[Mapping[str, str]] = None) -> List[str]:
    """
    Return the search paths listed in an environment variable.

    Entries are separated by os.pathsep; empty entries are dropped.
    """
    if environ is None:
        environ = os.environ
    value = environ.get(env_var, "")
    return [entry for entry in value.split(os.pathsep) if entry]

"""declang Configuration — project-level .declangrc.yml support.

Loads configuration from .declangrc.yml (or .declangrc.yaml, .declangrc.json)
found by walking up from the working directory. Allows projects to configure:
  - The target keywords for mutable and immutable bindings
  - Whether the `as` marker is verified
  - Output format and log level of the CLI

Example .declangrc.yml:
    mutable_keyword: let
    immutable_keyword: const
    strict: true
    format: text
    log_level: WARNING
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

import yaml

from declang.errors import config_error, ConfigError
from declang.transformer import SOURCE_KEYWORDS

FORMATS = ("text", "json")


@dataclass
class DeclangConfig:
    """Project-level declang configuration."""
    mutable_keyword: str = "let"
    immutable_keyword: str = "const"
    # Reject declarators whose second token is not the `as` marker
    strict: bool = True
    # Output: "text" or "json"
    format: str = "text"
    log_level: str = "WARNING"


# ---------------------------------------------------------------------------
# Config file names (in priority order)
# ---------------------------------------------------------------------------

_CONFIG_FILES = [
    ".declangrc.yml",
    ".declangrc.yaml",
    ".declangrc.json",
    "declang.config.yml",
    "declang.config.json",
]


def find_config(start_dir: str = ".") -> Optional[str]:
    """Find the nearest config file by walking up from start_dir."""
    current = os.path.abspath(start_dir)
    while True:
        for name in _CONFIG_FILES:
            path = os.path.join(current, name)
            if os.path.isfile(path):
                return path
        parent = os.path.dirname(current)
        if parent == current:
            break
        current = parent
    return None


def load_config(path: Optional[str] = None, start_dir: str = ".") -> DeclangConfig:
    """Load configuration from a file.

    If no path is given, searches for a config file starting from start_dir.
    If no config file is found, returns defaults.
    """
    if path is None:
        path = find_config(start_dir)

    if path is None:
        return DeclangConfig()

    try:
        with open(path, "r") as f:
            content = f.read()
    except OSError as e:
        raise ConfigError(config_error(f"Cannot read config file: {e}", path))

    try:
        if path.endswith(".json"):
            data = json.loads(content)
        else:
            data = yaml.safe_load(content)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigError(config_error(f"Malformed config file: {e}", path))

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(config_error("Config file must contain a mapping", path))

    return _dict_to_config(data, path)


def _dict_to_config(data: Dict[str, Any], path: Optional[str] = None) -> DeclangConfig:
    """Convert a parsed dict to DeclangConfig."""
    config = DeclangConfig()

    if "mutable_keyword" in data:
        config.mutable_keyword = str(data["mutable_keyword"])
    if "immutable_keyword" in data:
        config.immutable_keyword = str(data["immutable_keyword"])
    if "strict" in data:
        config.strict = bool(data["strict"])
    if "format" in data:
        config.format = str(data["format"])
    if "log_level" in data:
        config.log_level = str(data["log_level"]).upper()

    validate_config(config, path)
    return config


def validate_config(config: DeclangConfig, path: Optional[str] = None) -> None:
    if not config.mutable_keyword or not config.immutable_keyword:
        raise ConfigError(config_error("Binding keywords must not be empty", path))
    if config.mutable_keyword == config.immutable_keyword:
        raise ConfigError(config_error(
            f"Mutable and immutable keywords are both '{config.mutable_keyword}'", path,
        ))
    for keyword in (config.mutable_keyword, config.immutable_keyword):
        if keyword in SOURCE_KEYWORDS:
            raise ConfigError(config_error(
                f"Target keyword '{keyword}' is also a source keyword", path,
            ))
    if config.format not in FORMATS:
        raise ConfigError(config_error(
            f"Unknown format '{config.format}', expected one of {', '.join(FORMATS)}", path,
        ))
    if not isinstance(logging.getLevelName(config.log_level), int):
        raise ConfigError(config_error(f"Unknown log level '{config.log_level}'", path))

import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Mapping

import yaml

from .defaults import CONFIG_FILENAMES, default_gate
from .types import ConfigError, GateConfig, UnsupportedConfigFormatError

logger = logging.getLogger(__name__)

_PARSERS = {
    ".yml": ("YAML", yaml.safe_load, yaml.YAMLError),
    ".yaml": ("YAML", yaml.safe_load, yaml.YAMLError),
    ".toml": ("TOML", tomllib.loads, tomllib.TOMLDecodeError),
    ".json": ("JSON", json.loads, json.JSONDecodeError),
}


def load_gate(path: str | Path) -> GateConfig:
    config_path = Path(path).expanduser().resolve()

    if not config_path.is_file():
        raise ConfigError(f"Config file not found: {config_path}")

    if config_path.suffix not in _PARSERS:
        raise UnsupportedConfigFormatError(
            f"{config_path}: expected a .yml, .yaml, .toml or .json file"
        )
    fmt, parse, parse_error = _PARSERS[config_path.suffix]

    try:
        text = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"{config_path}: cannot read config") from exc

    try:
        raw: Any = parse(text)
    except parse_error as exc:
        raise ConfigError(f"{config_path}: invalid {fmt}") from exc

    if not isinstance(raw, Mapping):
        raise ConfigError(f"{config_path}: top-level {fmt} value must be a table")

    return GateConfig.from_mapping(raw)


def find_config(start: str | Path | None = None) -> Path | None:
    base = Path(start) if start is not None else Path.cwd()
    for name in CONFIG_FILENAMES:
        candidate = base / name
        if candidate.is_file():
            return candidate
    return None


def resolve_gate(
    path: str | Path | None = None, start: str | Path | None = None
) -> GateConfig:
    """Explicit path first, then a config file in ``start``, then the defaults."""
    if path is not None:
        logger.debug("loading config from %s", path)
        return load_gate(path)

    found = find_config(start)
    if found is not None:
        logger.debug("discovered config at %s", found)
        return load_gate(found)

    logger.debug("no config file found, using default checks")
    return default_gate()

"""
YAML settings loader for the evolution demo.
Provides cached, dot-path access to base.yaml settings.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from core.exceptions import ConfigParseError, MissingConfigError


_settings_cache: Optional[Dict[str, Any]] = None


def get_config_path() -> Path:
    """Return path to base.yaml config file."""
    # Check environment variable first, then default to project config
    env_path = os.getenv("LEFTRIGHT_CONFIG_PATH")
    if env_path:
        return Path(env_path)
    # Default: relative to this module
    return Path(__file__).parent / "base.yaml"


def read_yaml(path: str | Path) -> Dict[str, Any]:
    """Parse a YAML mapping from an explicit path."""
    path = Path(path)
    if not path.exists():
        raise MissingConfigError("Config file not found", context={"path": str(path)})
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigParseError(
                "Config file is not valid YAML", context={"path": str(path)}, cause=e,
            ) from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigParseError(
            "Config file must contain a mapping",
            context={"path": str(path), "type": type(data).__name__},
        )
    return data


def load_settings(force_reload: bool = False) -> Dict[str, Any]:
    """Load and cache settings from base.yaml."""
    global _settings_cache
    if _settings_cache is not None and not force_reload:
        return _settings_cache

    config_path = get_config_path()
    if not config_path.exists():
        _settings_cache = {}
        return _settings_cache

    _settings_cache = read_yaml(config_path)
    return _settings_cache


def get_setting(path: str, default: Any = None) -> Any:
    """
    Get a nested setting by dot-notation path.
    Example: get_setting("evolution.population_size", 10)
    """
    settings = load_settings()
    keys = path.split(".")
    value = settings
    for key in keys:
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default
    return value


"""YAML configuration loader with environment variable overrides.

Configuration is loaded in layers (later layers override earlier):

  1. config/config.yaml  — static defaults checked into the repo
  2. .env file           — local developer overrides (not committed)
  3. Environment vars    — set at deploy time

``load_config()`` reads the YAML file first, then deep-merges the
environment-backed :class:`Settings` values on top:

    base      = {"store": {"backend": "memory", "max_size": 10000}}
    overrides = {"store": {"max_size": 500}}
    result    = {"store": {"backend": "memory", "max_size": 500}}
"""

from pathlib import Path

import yaml

from src.config.settings import Settings


def load_config(path: str = "config/config.yaml", settings: Settings | None = None) -> dict:
    """Load YAML config and merge with environment-based Settings.

    Args:
        path: Path to the YAML configuration file.  A missing file yields
            an empty base.
        settings: Settings to merge; read from the environment when omitted.

    Returns:
        Fully resolved configuration dictionary.
    """
    config_path = Path(path)
    if config_path.exists():
        with open(config_path) as f:
            yaml_config = yaml.safe_load(f) or {}
    else:
        yaml_config = {}

    if settings is None:
        settings = Settings()
    env_overrides = {
        "app": {
            "env": settings.app_env,
        },
        "cache": {
            "namespace": settings.cache_namespace,
        },
        "store": {
            "max_size": settings.store_max_size,
        },
        "logging": {
            "level": settings.log_level,
        },
    }

    _deep_merge(yaml_config, env_overrides)
    return yaml_config


def _deep_merge(base: dict, overrides: dict) -> None:
    """Recursively merge overrides into base dict, mutating base in place."""
    for key, value in overrides.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value

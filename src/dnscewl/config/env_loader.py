"""Configuration file loading."""

from pathlib import Path
from typing import Any

import yaml

from dnscewl.modules.permute.errors import ConfigurationError


def get_global_config_path() -> Path:
    """Return the path of the global ~/.dnscewl/config.yml file."""
    return Path.home() / ".dnscewl" / "config.yml"


def load_global_config() -> dict[str, Any]:
    """Load global configuration from ~/.dnscewl/config.yml.

    Raises :class:`ConfigurationError` if the file cannot be read, is not valid
    YAML, or does not hold a mapping.
    """
    config_path = get_global_config_path()
    if not config_path.exists():
        return {}
    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Can not read {config_path}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"{config_path} must contain a mapping of settings")
    return data

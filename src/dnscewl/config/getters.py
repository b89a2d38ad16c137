"""Configuration getter functions."""

import os
from typing import Any

from dnscewl.modules.permute.errors import ConfigurationError

from .env_loader import load_global_config

ENV_PREFIX = "DNSCEWL_"

_TRUE_VALUES = ("1", "true", "yes", "on")


def _file_key(key: str) -> str:
    """Map an environment key (``DNSCEWL_LEVEL``) to its config file key (``level``)."""
    return key.removeprefix(ENV_PREFIX).lower()


def get_config(key: str, default: Any = None) -> Any:
    """
    Get configuration value with priority:
    1. Environment variable
    2. Global config file
    3. Default value

    Args:
        key: Environment variable name, e.g. ``DNSCEWL_LEVEL``
        default: Default value if not found

    Returns:
        Configuration value or default
    """
    # 1. Check environment variable
    env_value = os.environ.get(key)
    if env_value:
        return env_value

    # 2. Check global config
    global_config = load_global_config()
    file_key = _file_key(key)
    if file_key in global_config:
        return global_config[file_key]

    # 3. Return default
    return default


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE_VALUES


def get_level() -> int:
    """Get the default output level (0, 1 or 2)."""
    value = get_config("DNSCEWL_LEVEL", default=0)
    try:
        level = int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"{value} is not a valid level") from exc
    if level not in (0, 1, 2):
        raise ConfigurationError(f"{value} is not a valid level")
    return level


def get_verbose() -> bool:
    """Get whether debug logging is on by default."""
    return _as_bool(get_config("DNSCEWL_VERBOSE", default=False))


def get_no_color() -> bool:
    """Get whether console colours are stripped by default."""
    return _as_bool(get_config("DNSCEWL_NO_COLOR", default=False))

"""
Configuration management for dnscewl.

Supports multiple configuration sources in order of priority:
1. Environment variables (highest priority)
2. Global config file (~/.dnscewl/config.yml)
3. Default values (lowest priority)
"""

from .env_loader import get_global_config_path, load_global_config
from .getters import get_config, get_level, get_no_color, get_verbose

__all__ = [
    # env_loader
    "get_global_config_path",
    "load_global_config",
    # getters
    "get_config",
    "get_level",
    "get_no_color",
    "get_verbose",
]

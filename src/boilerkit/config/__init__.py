"""User configuration."""

from boilerkit.config.loader import (
    get_home_config_path,
    get_local_config_path,
    load_config,
    load_yaml_config,
)
from boilerkit.config.schema import DEFAULT_CONFIG, BoilerkitConfig

__all__ = [
    "DEFAULT_CONFIG",
    "BoilerkitConfig",
    "get_home_config_path",
    "get_local_config_path",
    "load_config",
    "load_yaml_config",
]

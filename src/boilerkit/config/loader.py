"""Configuration file loading and merging."""

import logging
from pathlib import Path

import yaml

from boilerkit.config.schema import DEFAULT_CONFIG, BoilerkitConfig

logger = logging.getLogger(__name__)

CONFIG_DIRNAME = ".boilerkit"
CONFIG_FILENAME = "config.yaml"


def get_home_config_path() -> Path:
    """Get path to global config: ~/.boilerkit/config.yaml."""
    return Path.home() / CONFIG_DIRNAME / CONFIG_FILENAME


def get_local_config_path() -> Path:
    """Get path to local config: ./.boilerkit/config.yaml."""
    return Path.cwd() / CONFIG_DIRNAME / CONFIG_FILENAME


def load_yaml_config(path: Path) -> dict[str, object] | None:
    """Load a YAML config file, return None if not found or empty."""
    if not path.exists():
        return None
    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
            if data is None:
                return None
            if not isinstance(data, dict):
                logger.warning("Ignoring %s: expected a mapping", path)
                return None
            result: dict[str, object] = data
            return result
    except yaml.YAMLError:
        logger.warning("Ignoring %s: invalid YAML", path, exc_info=True)
        return None


def load_config() -> BoilerkitConfig:
    """Load merged configuration.

    Precedence (lowest to highest):
    1. Built-in defaults
    2. Global config (~/.boilerkit/config.yaml)
    3. Local config (./.boilerkit/config.yaml)
    """
    config = DEFAULT_CONFIG

    home_data = load_yaml_config(get_home_config_path())
    if home_data:
        config = config.merge(BoilerkitConfig.from_dict(home_data))

    local_data = load_yaml_config(get_local_config_path())
    if local_data:
        config = config.merge(BoilerkitConfig.from_dict(local_data))

    return config

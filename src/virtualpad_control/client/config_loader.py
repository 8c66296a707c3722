"""
Configuration Loader.

Responsible for reading the config.yaml file that tells the client where
the admin tool lives and how long a command may take, and for rejecting
values the CommandInvoker could not use.
"""
import yaml
import logging
from pathlib import Path
from typing import Dict, Any, Union

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"


class ConfigError(ValueError):
    """The configuration file parsed, but holds unusable values."""


def validate_config(config: Any) -> Dict[str, Any]:
    """
    Checks the keys the client understands:
    - admin_tool: a non-empty string, or a non-empty list of strings
    - timeout: a positive number of seconds, or null for no timeout
    - log_level: a logging level name
    Unknown keys are left alone.
    """
    if not isinstance(config, dict):
        raise ConfigError(f"Top level must be a mapping, got {type(config).__name__}")

    if 'admin_tool' in config:
        tool = config['admin_tool']
        if isinstance(tool, str):
            valid = bool(tool.strip())
        else:
            valid = isinstance(tool, list) and bool(tool) and all(isinstance(word, str) and word for word in tool)
        if not valid:
            raise ConfigError(f"admin_tool must be a command string or a list of words, got {tool!r}")

    timeout = config.get('timeout')
    if timeout is not None:
        # bool is an int subclass; `timeout: yes` is a typo, not one second.
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            raise ConfigError(f"timeout must be a positive number of seconds or null, got {timeout!r}")

    level = config.get('log_level')
    if level is not None and not isinstance(logging.getLevelName(str(level).upper()), int):
        raise ConfigError(f"Unknown log_level {level!r}")

    return config


def load_config(config_path: Union[str, Path] = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    """
    Loads and validates the YAML configuration file. A missing file means "all defaults".
    """
    path = Path(config_path)
    if not path.exists():
        logger.warning(f"Config file not found at {path}. Using defaults.")
        return {}

    with open(path, 'r') as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"Failed to parse config file {path}: {e}")
            raise

    try:
        config = validate_config(raw or {})
    except ConfigError as e:
        logger.error(f"Invalid config file {path}: {e}")
        raise

    logger.info(f"Loaded configuration from {path}: admin_tool={config.get('admin_tool', '<default>')!r}")
    return config

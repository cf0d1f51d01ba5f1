import copy
import logging
import os
import yaml

from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from .exceptions import ConfigurationError

CONFIG_ENV_VAR = "ZONEDITOR_CONFIG"
USER_CONFIG_PATH: Path = Path.home() / '.zoneditor' / 'config.yaml'

THIRD_PARTY_LOGGERS = [
    'asyncio',
    'markdown_it',
    'textual',
]


def default_config_path() -> str:
    return os.path.join(os.path.dirname(os.path.dirname(__file__)), 'config.yaml')


def _read_yaml(path) -> Dict[str, Any]:
    try:
        with open(path, 'r', encoding='utf-8') as file:
            data = yaml.safe_load(file) or {}
    except OSError as e:
        raise ConfigurationError(f"Cannot read configuration file '{path}'") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in configuration file '{path}'") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file '{path}' must contain a mapping")
    return data


def merge_config(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Deep-merge ``override`` into a copy of ``base``."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(path: Optional[str] = None) -> dict:
    """
    Load the packaged configuration and merge the user configuration over it.

    The user file is ``path`` when given, else the file named by the
    ``ZONEDITOR_CONFIG`` environment variable (a ``.env`` file is honoured),
    else ``~/.zoneditor/config.yaml`` when it exists.

    Raises:
        ConfigurationError: If a configuration file cannot be read or parsed.
    """
    load_dotenv()
    config = _read_yaml(default_config_path())

    user_path = path or os.environ.get(CONFIG_ENV_VAR)
    if user_path:
        config = merge_config(config, _read_yaml(os.path.expanduser(user_path)))
    elif USER_CONFIG_PATH.exists():
        config = merge_config(config, _read_yaml(USER_CONFIG_PATH))

    return config


def configure_logging(config: dict) -> logging.Logger:
    """Configure the package logger from the ``logging`` section."""
    logging_config = config.get('logging', {})
    level_name = str(logging_config.get('level', 'WARNING')).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown log level '{level_name}'")

    logger = logging.getLogger('zoneditor')
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    log_file = logging_config.get('file')
    if log_file:
        handler = logging.FileHandler(os.path.expanduser(log_file))
    else:
        handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    # Suppress logging from third-party libraries
    for lib_logger in THIRD_PARTY_LOGGERS:
        logging.getLogger(lib_logger).setLevel(logging.ERROR)

    return logger

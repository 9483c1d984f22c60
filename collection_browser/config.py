"""
Configuration settings for the Collection Browser
"""

import copy
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

from collection_browser.errors import ConfigError

logger = logging.getLogger(__name__)


DEFAULT_CONFIG = {
    "api": {
        "source": "artic",
        "base_url": "https://api.artic.edu/api/v1/artworks",
        "fields": "id,title,place_of_origin,artist_display,inscriptions,date_start,date_end",
        "timeout": 30,
        "impersonate": "chrome110",
        "cancel_superseded": False,
    },
    "ui": {
        "page_size": 12,
        "page_size_options": [6, 12, 24, 48, 100],
        "truncate": 60,
    },
    "logging": {
        "level": "INFO",
        "file": "logs/collection_browser.log",
    },
}

CONFIG_FILE = os.path.expanduser("~/.collection_browser_config.json")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _merge(config: Dict[str, Any], overrides: Dict[str, Any]) -> None:
    """Overlay `overrides` onto `config` one section at a time."""
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(config.get(key), dict):
            config[key].update(value)
        else:
            config[key] = value


def _positive_int(name: str, raw: Any) -> int:
    if isinstance(raw, bool):
        raise ConfigError(f"{name} must be an integer, got {raw!r}")
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise ConfigError(f"{name} must be an integer, got {raw!r}")
    if value < 1:
        raise ConfigError(f"{name} must be >= 1, got {value}")
    return value


def load_config(config_file: str = CONFIG_FILE) -> Dict[str, Any]:
    """
    Load configuration from file or environment variables

    Raises:
        ConfigError: if the file or an environment override sets an invalid page size
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    # Check for config file
    if os.path.exists(config_file):
        try:
            with open(config_file, "r", encoding="utf-8") as f:
                _merge(config, json.load(f))
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Error loading config file {config_file}: {e}")
        config["ui"]["page_size"] = _positive_int(
            f"ui.page_size in {config_file}", config["ui"]["page_size"]
        )

    # Override with environment variables
    if os.environ.get("COLLECTION_BROWSER_API_URL"):
        config["api"]["base_url"] = os.environ["COLLECTION_BROWSER_API_URL"]

    if os.environ.get("COLLECTION_BROWSER_SOURCE"):
        config["api"]["source"] = os.environ["COLLECTION_BROWSER_SOURCE"]

    if os.environ.get("COLLECTION_BROWSER_PAGE_SIZE"):
        config["ui"]["page_size"] = _positive_int(
            "COLLECTION_BROWSER_PAGE_SIZE", os.environ["COLLECTION_BROWSER_PAGE_SIZE"]
        )

    if os.environ.get("COLLECTION_BROWSER_LOG_LEVEL"):
        config["logging"]["level"] = os.environ["COLLECTION_BROWSER_LOG_LEVEL"]

    return config


def save_config(config: Dict[str, Any], config_file: str = CONFIG_FILE) -> bool:
    """
    Save configuration to file
    """
    try:
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump(config, f, indent=2)
        return True
    except OSError as e:
        logger.error(f"Error saving config file: {e}")
        return False


def setup_logging(level: str = "INFO", log_file: str | Path = DEFAULT_CONFIG["logging"]["file"]) -> None:
    """
    Send all logging to a file. The terminal is owned by the TUI, so no
    console handler is installed.
    """
    numeric_level = getattr(logging, str(level).upper(), logging.INFO)
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
    logging.basicConfig(
        level=numeric_level,
        format=LOG_FORMAT,
        handlers=[logging.FileHandler(log_path, encoding="utf-8")],
    )
    logger.info(f"Logging configured. Level: {level}. File: {log_path}")

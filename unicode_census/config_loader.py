"""Shared helpers for loading census configuration files."""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Optional


logger = logging.getLogger(__name__)

__all__ = ["CONFIG_KEYS", "load_config", "select_value"]

CONFIG_KEYS = ("by_extension", "skip_traversal_errors", "log_level")
BOOLEAN_KEYS = ("by_extension", "skip_traversal_errors")


def load_config(path: Optional[str]) -> Dict[str, Any]:
    """Load census configuration from *path*.

    When *path* is falsy or does not exist, an empty configuration dictionary is
    returned so that callers can rely on default values.
    """

    if not path:
        logger.info("No configuration file specified; using defaults")
        return {}
    if not os.path.exists(path):
        logger.info("Configuration file '%s' not found; using defaults", path)
        return {}
    logger.info("Loading configuration from %s", path)
    with open(path, "r", encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, dict):
        raise ValueError("Configuration file must contain a JSON object")
    for key in BOOLEAN_KEYS:
        if key in data and not isinstance(data[key], bool):
            raise ValueError(f"Configuration value '{key}' must be true or false")
    if "log_level" in data and not isinstance(data["log_level"], str):
        raise ValueError("Configuration value 'log_level' must be a string")
    unknown = sorted(set(data) - set(CONFIG_KEYS))
    if unknown:
        logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
    return data


def select_value(
    cli_value: Optional[Any],
    config: Optional[Dict[str, Any]],
    key: str,
    default: Optional[Any] = None,
) -> Optional[Any]:
    """Resolve configuration precedence: CLI, then config file, then *default*."""

    if cli_value is not None:
        return cli_value
    if config and key in config:
        return config[key]
    return default

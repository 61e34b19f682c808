from __future__ import annotations

"""
Configuration Domain Management.

Dict-based run configuration. Values come from the built-in defaults, an
optional JSON config file, and finally command-line overrides.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE_NAME = "bundlesizer.json"
DEFAULT_MANIFEST_PATH = os.path.join(".", "data", "vite", "manifest.json")
DEFAULT_ENTRY_PREFIX = "src/"
DEFAULT_COMPRESSION = "brotli"

# Accepted quality range and default per compression algorithm
COMPRESSION_LEVELS: Dict[str, Dict[str, int]] = {
    "brotli": {"min": 0, "max": 11, "default": 11},
    "gzip": {"min": 1, "max": 9, "default": 9},
}

CONFIG_KEYS = (
    "manifest_path", "entry_prefix", "report_all", "compression",
    "quality", "size_base", "json_output",
)


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default run configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Input
        "manifest_path": DEFAULT_MANIFEST_PATH,

        # Selection
        "entry_prefix": DEFAULT_ENTRY_PREFIX,
        "report_all": False,

        # Compression estimate
        "compression": DEFAULT_COMPRESSION,
        "quality": None,  # resolved per algorithm

        # Rendering
        "size_base": 10,
        "json_output": False,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the configuration file and merge it over the defaults.

    When no path is given, 'bundlesizer.json' in the working directory is used
    if it exists. An explicitly requested file that cannot be loaded is an
    error; the implicit one is skipped with a warning.

    Args:
        path: Optional explicit config file path.

    Returns:
        Dict[str, Any]: Defaults updated with the known keys of the file.
    """
    config = get_default_config()

    explicit = path is not None
    target = path if explicit else os.path.join(os.getcwd(), CONFIG_FILE_NAME)

    if not os.path.exists(target):
        if explicit:
            raise FileNotFoundError(f"Config file not found: {target}")
        logger.debug("No config file found. Using defaults.")
        return config

    try:
        with open(target, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        if explicit:
            raise
        logger.warning(f"Ignoring unreadable config file {target}: {e}")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Config file {target} is not a JSON object. Using defaults.")
        return config

    for key, value in data.items():
        if key in CONFIG_KEYS:
            config[key] = value
        else:
            logger.warning(f"Unknown config key '{key}' in {target} ignored.")

    logger.debug(f"Configuration loaded from {target}")
    return config

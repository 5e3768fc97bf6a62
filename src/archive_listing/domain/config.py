from __future__ import annotations

"""
Configuration Domain Management.

Provides the default runtime configuration for a listing session and
loads user overrides from an optional JSON file in the user data
directory. Listing data itself is never persisted.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from archive_listing.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE_NAME = "config.json"
DEFAULT_REGION = "us-west-2"
DEFAULT_RECENT_DAYS = 7
DEFAULT_LARGE_LISTING_THRESHOLD = 10000
DEFAULT_REQUEST_TIMEOUT = 30.0

# Hostnames with a dedicated page title
DEFAULT_TITLES: Dict[str, str] = {
    "archive.openswitch.net": "OPX Archive Listing",
    "deb.openswitch.net": "OPX Debian Package Listing",
}


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration (Session State).

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Storage target
        "bucket": "",
        "region": DEFAULT_REGION,

        # Views
        "recent_days": DEFAULT_RECENT_DAYS,
        "large_listing_threshold": DEFAULT_LARGE_LISTING_THRESHOLD,
        "titles": dict(DEFAULT_TITLES),

        # Network
        "request_timeout": DEFAULT_REQUEST_TIMEOUT,
    }


def get_config_path() -> str:
    """Resolve the default location of the persistent configuration file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the configuration file and merge it over the defaults.

    A missing file yields the defaults. An unreadable or malformed file is
    logged and ignored so that a broken preference file never blocks a
    listing.

    Args:
        path: Explicit configuration file. Defaults to the user data directory.

    Returns:
        Dict[str, Any]: Merged configuration (not yet validated).
    """
    config = get_default_config()
    config_path = path or get_config_path()

    if not os.path.exists(config_path):
        logger.debug(f"Config file not found at {config_path}. Using defaults.")
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config from {config_path}: {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file (root is not an object). Using defaults.")
        return config

    # Title overrides extend the built-in mapping instead of replacing it
    titles = data.pop("titles", None)
    config.update(data)
    if isinstance(titles, dict):
        config["titles"].update(titles)
    elif titles is not None:
        config["titles"] = titles

    return config

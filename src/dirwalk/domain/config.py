from __future__ import annotations

"""
Configuration Domain Management.

Provides the default session configuration for a walk and loading of
optional JSON configuration files. The dictionary produced here is the
single source consumed by the validator and the walk service.
"""

import json
import logging
import os
from typing import Any, Dict

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
APP_NAME = "dirwalk"
APP_VERSION = "1.0.0"
DEFAULT_START_PATH = "."

CONFIG_KEYS = (
    "start_path",
    "show_links",
    "show_dirs",
    "show_files",
    "sort_output",
    "collation_locale",
)


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    No type filter is active and output is streamed in traversal order.
    An empty collation locale means "inherit from the environment".

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "start_path": DEFAULT_START_PATH,

        # Type filters
        "show_links": False,
        "show_dirs": False,
        "show_files": False,

        # Presentation
        "sort_output": False,
        "collation_locale": "",
    }


def load_config_file(path: str) -> Dict[str, Any]:
    """
    Load a configuration dictionary from a JSON file.

    Only known keys are kept; anything else is dropped with a warning.

    Args:
        path: Path to the JSON document.

    Returns:
        Dict[str, Any]: Known configuration keys found in the file.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the content is not a JSON object.
    """
    with open(os.path.expanduser(path), "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Configuration file '{path}' must contain a JSON object.")

    known = {k: v for k, v in data.items() if k in CONFIG_KEYS}
    unknown = sorted(set(data) - set(known))
    if unknown:
        logger.warning(f"Ignoring unknown configuration keys in '{path}': {', '.join(unknown)}")

    logger.debug(f"Configuration loaded from {path}")
    return known

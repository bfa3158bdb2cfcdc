from __future__ import annotations

"""
Configuration Validation Service.

Gatekeeper between untrusted configuration sources (CLI, JSON files) and the
walk service. Coerces types, fills missing keys with domain defaults and
reports every correction as a warning.
"""

import logging
from typing import Any, Dict, List, Tuple

from dirwalk.domain.config import get_default_config

logger = logging.getLogger(__name__)

_STRING_FIELDS = ("start_path", "collation_locale")
_BOOL_FIELDS = ("show_links", "show_dirs", "show_files", "sort_output")


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a configuration dictionary.

    Args:
        config: Raw configuration data.
        strict: If True, raise TypeError on mismatches instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
                                          the list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in config.items() if k in defaults})

    for key in _STRING_FIELDS:
        value = merged[key]
        if value is None:
            merged[key] = defaults[key]
        elif not isinstance(value, str):
            _reject(key, value, "str", strict, warnings)
            merged[key] = str(value)

    if not merged["start_path"]:
        warnings.append("Empty start_path, using default.")
        merged["start_path"] = defaults["start_path"]

    for key in _BOOL_FIELDS:
        value = merged[key]
        if not isinstance(value, bool):
            _reject(key, value, "bool", strict, warnings)
            merged[key] = _to_bool(value, defaults[key])

    return merged, warnings

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _reject(key: str, value: Any, expected: str, strict: bool, warnings: List[str]) -> None:
    msg = f"Invalid type for '{key}': expected {expected}, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Coerced.")


def _to_bool(value: Any, default: bool) -> bool:
    """Coerce common truthy/falsy spellings into a boolean."""
    if value is None:
        return default
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("1", "true", "yes", "on"):
            return True
        if lowered in ("0", "false", "no", "off", ""):
            return False
        return default
    return bool(value)

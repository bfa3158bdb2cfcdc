from __future__ import annotations

"""
Locale-Aware Path Ordering.

Resolves the collation used by the sorted output mode. The locale is set
once at startup; when it cannot be resolved the bytewise order of the raw
filesystem names is used instead.
"""

import locale
import logging
import os
from dataclasses import dataclass
from typing import Any, Callable, List, Tuple

logger = logging.getLogger(__name__)

BYTEWISE = "bytewise"


@dataclass(frozen=True)
class Collation:
    """
    Sort key provider for path strings.

    Attributes:
        name: Locale name in effect, or BYTEWISE for the fallback.
        transform: Primary key function applied to each path.
    """
    name: str
    transform: Callable[[str], Any]

    def key(self, path: str) -> Tuple[Any, bytes]:
        """Collation key, ties broken by raw bytes."""
        return self.transform(path), os.fsencode(path)

    def sort(self, paths: List[str]) -> None:
        """Sort a list of paths in place."""
        paths.sort(key=self.key)


def bytewise_collation() -> Collation:
    """Return the deterministic raw-byte ordering."""
    return Collation(name=BYTEWISE, transform=os.fsencode)


def resolve_collation(locale_name: str = "") -> Collation:
    """
    Set LC_COLLATE and build the matching collation.

    Args:
        locale_name: Explicit locale, or "" to inherit from the environment.

    Returns:
        Collation: strxfrm-based collation, or the bytewise fallback if the
                   locale cannot be resolved.
    """
    try:
        active = locale.setlocale(locale.LC_COLLATE, locale_name)
    except locale.Error as e:
        logger.warning(
            f"Failed to set collation locale '{locale_name or 'environment'}' ({e}); "
            f"sorting by raw bytes."
        )
        return bytewise_collation()

    logger.debug(f"Collation locale resolved: {active}")
    return Collation(name=active, transform=locale.strxfrm)

from __future__ import annotations

"""
Entry Classification Engine.

Maps raw lstat metadata to an EntryKind and decides whether a kind passes
the active type filter. Both functions are pure.
"""

import os
import stat
from typing import Optional

from dirwalk.domain.walk_models import EntryKind, FilterConfig

_DIRECTORY_KINDS = (EntryKind.DIRECTORY, EntryKind.UNREADABLE_DIRECTORY)


def classify_mode(st_mode: int) -> EntryKind:
    """
    Derive the entry kind from a non-dereferenced st_mode.

    Args:
        st_mode: Mode bits as returned by lstat.

    Returns:
        EntryKind: DIRECTORY, REGULAR_FILE, SYMBOLIC_LINK or OTHER.
    """
    if stat.S_ISLNK(st_mode):
        return EntryKind.SYMBOLIC_LINK
    if stat.S_ISDIR(st_mode):
        return EntryKind.DIRECTORY
    if stat.S_ISREG(st_mode):
        return EntryKind.REGULAR_FILE
    return EntryKind.OTHER


def classify(metadata: Optional[os.stat_result]) -> EntryKind:
    """Classify an entry, returning UNKNOWN when its metadata is missing."""
    if metadata is None:
        return EntryKind.UNKNOWN
    return classify_mode(metadata.st_mode)


def matches(kind: EntryKind, config: FilterConfig) -> bool:
    """
    Decide whether an entry of the given kind passes the filter.

    Without an explicit filter every classified kind matches, including
    sockets, FIFOs and devices. With a filter only the requested link,
    directory and regular file kinds match.

    Args:
        kind: Classified entry kind.
        config: Filter configuration (resolved or not).

    Returns:
        bool: True if the entry must be emitted.
    """
    if kind is EntryKind.UNKNOWN:
        return False

    if not config.filter_active:
        return True

    if kind is EntryKind.SYMBOLIC_LINK:
        return config.want_links
    if kind in _DIRECTORY_KINDS:
        return config.want_dirs
    if kind is EntryKind.REGULAR_FILE:
        return config.want_files
    return False

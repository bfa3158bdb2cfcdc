from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Thin wrappers over the 'os' module used by the traversal engine: start path
normalization, separator-exact path joining, non-following metadata lookup
and scoped directory enumeration.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

_SEPARATORS = os.sep + (os.altsep or "")
_PSEUDO_ENTRIES = (".", "..")

# -----------------------------------------------------------------------------
# PATH CONSTRUCTION API
# -----------------------------------------------------------------------------

def normalize_start_path(path: Optional[str], fallback: str = ".") -> str:
    """
    Normalize the start path spelling used as prefix for every emitted path.

    Strips trailing separators so children can be joined with exactly one
    separator. A path consisting only of separators (the filesystem root)
    collapses to a single separator. The path is never made absolute.

    Args:
        path: Raw start path.
        fallback: Path used when the input is empty.

    Returns:
        str: Normalized start path.
    """
    p = path if path else fallback
    drive, rest = os.path.splitdrive(p)
    stripped = rest.rstrip(_SEPARATORS)
    if not stripped and rest:
        return drive + os.sep
    return drive + stripped


def join_path(parent: str, name: str) -> str:
    """
    Join a directory path and a child name with exactly one separator.

    Args:
        parent: Normalized directory path.
        name: Child entry name.

    Returns:
        str: The child path.
    """
    if parent.endswith(tuple(_SEPARATORS)):
        return parent + name
    return parent + os.sep + name

# -----------------------------------------------------------------------------
# METADATA AND ENUMERATION API
# -----------------------------------------------------------------------------

def read_metadata(path: str) -> os.stat_result:
    """
    Obtain the entry's own metadata without following a final symlink.

    Raises:
        OSError: If the entry cannot be stat'ed.
    """
    return os.lstat(path)


@dataclass
class DirectoryListing:
    """
    Names read from one directory.

    Attributes:
        names: Child names in enumeration order.
        opened: False if the directory could not be opened at all.
        error: The failure that stopped enumeration, if any.
    """
    names: List[str] = field(default_factory=list)
    opened: bool = True
    error: Optional[OSError] = None


def list_directory(path: str) -> DirectoryListing:
    """
    Enumerate a directory's children in platform order.

    The handle is closed before returning, whether the enumeration completed
    or stopped on an error. Names read before a mid-listing failure are kept.

    Args:
        path: Directory to enumerate.

    Returns:
        DirectoryListing: Names read and the failure, if any.
    """
    try:
        it = os.scandir(path)
    except OSError as e:
        return DirectoryListing(opened=False, error=e)

    listing = DirectoryListing()
    with it:
        try:
            for entry in it:
                if entry.name in _PSEUDO_ENTRIES:
                    continue
                listing.names.append(entry.name)
        except OSError as e:
            listing.error = e
    return listing

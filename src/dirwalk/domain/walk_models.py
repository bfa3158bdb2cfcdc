from __future__ import annotations

"""
Walk Domain Data Models.

Defines the filter configuration, entry classification variants and the
result objects exchanged between the traversal engine and the interface
layer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

# -----------------------------------------------------------------------------
# CLASSIFICATION
# -----------------------------------------------------------------------------

class EntryKind(Enum):
    """
    Kind of a filesystem entry, derived from its own (lstat) metadata.

    UNKNOWN is the "do not classify" sentinel for entries whose metadata
    could not be read; it never matches any filter.
    """
    DIRECTORY = "directory"
    REGULAR_FILE = "file"
    SYMBOLIC_LINK = "link"
    UNREADABLE_DIRECTORY = "unreadable_directory"
    OTHER = "other"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class FilterConfig:
    """
    Type filter applied to every visited entry.

    Attributes:
        want_links: Emit symbolic links.
        want_dirs: Emit directories (readable or not).
        want_files: Emit regular files.
        filter_active: True if any of the three was explicitly requested.
    """
    want_links: bool = False
    want_dirs: bool = False
    want_files: bool = False
    filter_active: bool = False

    @classmethod
    def from_flags(cls, links: bool = False, dirs: bool = False, files: bool = False) -> "FilterConfig":
        """Build a config whose activation is derived from the requested flags."""
        return cls(
            want_links=bool(links),
            want_dirs=bool(dirs),
            want_files=bool(files),
            filter_active=bool(links or dirs or files),
        )

    def resolved(self) -> "FilterConfig":
        """
        Apply the default-all-types policy.

        Returns:
            FilterConfig: self if a filter is active, otherwise a copy with
                          every type enabled.
        """
        if self.filter_active:
            return self
        return FilterConfig(want_links=True, want_dirs=True, want_files=True, filter_active=False)

# -----------------------------------------------------------------------------
# RESULTS
# -----------------------------------------------------------------------------

ISSUE_METADATA = "metadata"
ISSUE_ENUMERATION = "enumeration"


@dataclass(frozen=True)
class WalkIssue:
    """
    A non-fatal failure isolated to one entry or subtree.

    Attributes:
        category: ISSUE_METADATA or ISSUE_ENUMERATION.
        path: Path of the affected entry.
        message: Human readable OS error description.
    """
    category: str
    path: str
    message: str


@dataclass(frozen=True)
class WalkResult:
    """
    Outcome of a single walk invocation.

    Attributes:
        ok: False if a fatal error stopped the walk.
        error: Description of the fatal error, empty on success.
        start_path: Normalized start path used as prefix for every output line.
        visited: Number of entries whose metadata was read.
        emitted: Number of paths handed to the sink.
        issues: Non-fatal failures collected during the walk.
        sorted_output: Whether the collecting sink was used.
        broken_pipe: True if output stopped because the reader went away.
    """
    ok: bool
    error: str
    start_path: str
    visited: int = 0
    emitted: int = 0
    issues: List[WalkIssue] = field(default_factory=list)
    sorted_output: bool = False
    broken_pipe: bool = False

    @property
    def partial(self) -> bool:
        """True when the walk completed but some entries were skipped."""
        return self.ok and bool(self.issues)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_success_result(
        start_path: str,
        visited: int,
        emitted: int,
        issues: List[WalkIssue],
        sorted_output: bool = False,
) -> WalkResult:
    """Create a completed walk result."""
    return WalkResult(
        ok=True,
        error="",
        start_path=start_path,
        visited=visited,
        emitted=emitted,
        issues=list(issues),
        sorted_output=sorted_output,
    )


def create_error_result(
        error: str,
        start_path: str,
        visited: int = 0,
        emitted: int = 0,
        issues: Optional[List[WalkIssue]] = None,
        sorted_output: bool = False,
        broken_pipe: bool = False,
) -> WalkResult:
    """
    Create a failed walk result.

    Args:
        error: Detailed error description.
        start_path: The normalized start path.
        visited: Entries visited before the failure.
        emitted: Paths emitted before the failure.
        issues: Non-fatal issues gathered before the failure.
        sorted_output: Whether the collecting sink was in use.
        broken_pipe: Whether the failure was a closed output pipe.

    Returns:
        WalkResult: Result flagged as not ok.
    """
    return WalkResult(
        ok=False,
        error=error,
        start_path=start_path,
        visited=visited,
        emitted=emitted,
        issues=list(issues or []),
        sorted_output=sorted_output,
        broken_pipe=broken_pipe,
    )

from __future__ import annotations

"""
Directory Walk Engine.

Performs the physical, depth-first, pre-order traversal of a directory
tree. Each visited entry is classified from its own metadata and matching
paths are handed to the output sink. Symbolic links are reported but never
followed. Failures on a single entry or subdirectory are recorded and the
walk continues; only output failures and an unreadable start path stop it.
"""

import logging
import os
from typing import List, Optional, Tuple

from dirwalk.core.walk.classifier import classify, matches
from dirwalk.core.walk.sinks import OutputSink
from dirwalk.domain.errors import OutputError, StartPathError
from dirwalk.domain.walk_models import (
    ISSUE_ENUMERATION,
    ISSUE_METADATA,
    EntryKind,
    FilterConfig,
    WalkIssue,
    WalkResult,
    create_error_result,
    create_success_result,
)
from dirwalk.infra.fs import join_path, list_directory, normalize_start_path, read_metadata

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def walk(path: str, config: FilterConfig, sink: OutputSink) -> WalkResult:
    """
    Walk the tree rooted at path and emit every matching entry.

    The start path is a candidate for emission like any descendant. The
    descent uses an explicit stack: children are pushed in reverse so they
    are visited in enumeration order, each subtree completing before its
    next sibling.

    Args:
        path: Start path, relative or absolute.
        config: Type filter. The default-all policy is applied once here.
        sink: Destination for matched paths.

    Returns:
        WalkResult: ok unless the start path could not be stat'ed or the
                    sink failed.
    """
    start = normalize_start_path(path)
    active = config.resolved()
    issues: List[WalkIssue] = []
    visited = 0
    emitted = 0

    logger.info(f"Walking '{start}' (filter={_describe_filter(active)})")

    try:
        root_meta = _stat_start(start)
    except StartPathError as e:
        logger.error(f"cannot access {e}")
        return create_error_result(str(e), start, sorted_output=sink.collecting)

    stack: List[str] = [start]
    pending_meta: Optional[os.stat_result] = root_meta

    while stack:
        current = stack.pop()

        # Metadata of the start path was already read
        if pending_meta is not None:
            meta, pending_meta = pending_meta, None
        else:
            meta = _stat_entry(current, issues)
            if meta is None:
                continue
        visited += 1

        kind = classify(meta)
        children: List[str] = []
        if kind is EntryKind.DIRECTORY:
            kind, children = _enumerate(current, issues)

        if matches(kind, active):
            try:
                sink.emit(current)
            except OutputError as e:
                _log_output_failure(e)
                return create_error_result(
                    str(e), start, visited, emitted, issues,
                    sorted_output=sink.collecting, broken_pipe=e.broken_pipe,
                )
            emitted += 1

        for name in reversed(children):
            stack.append(join_path(current, name))

    logger.info(f"Walk finished: {visited} visited, {emitted} matched, {len(issues)} skipped")
    return create_success_result(start, visited, emitted, issues, sorted_output=sink.collecting)

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _stat_start(start: str) -> os.stat_result:
    try:
        return read_metadata(start)
    except OSError as e:
        raise StartPathError(start, e) from e


def _stat_entry(path: str, issues: List[WalkIssue]) -> Optional[os.stat_result]:
    """Read an entry's metadata, recording a non-fatal issue on failure."""
    try:
        return read_metadata(path)
    except OSError as e:
        reason = e.strerror or str(e)
        logger.warning(f"cannot access '{path}': {reason}")
        issues.append(WalkIssue(ISSUE_METADATA, path, reason))
        return None


def _enumerate(path: str, issues: List[WalkIssue]) -> Tuple[EntryKind, List[str]]:
    """
    List a directory's children.

    Returns:
        Tuple of the refined kind (UNREADABLE_DIRECTORY if the directory
        could not be opened) and the child names read.
    """
    listing = list_directory(path)
    if listing.error is None:
        return EntryKind.DIRECTORY, listing.names

    reason = listing.error.strerror or str(listing.error)
    issues.append(WalkIssue(ISSUE_ENUMERATION, path, reason))

    if not listing.opened:
        logger.warning(f"cannot open directory '{path}': {reason}")
        return EntryKind.UNREADABLE_DIRECTORY, []

    logger.warning(f"cannot read directory '{path}': {reason}")
    return EntryKind.DIRECTORY, listing.names


def _log_output_failure(error: OutputError) -> None:
    if error.broken_pipe:
        logger.debug("Output consumer closed the pipe; stopping walk.")
    else:
        logger.error(f"write error: {error}")


def _describe_filter(config: FilterConfig) -> str:
    if not config.filter_active:
        return "all"
    kinds = [
        name for name, wanted in (
            ("links", config.want_links),
            ("dirs", config.want_dirs),
            ("files", config.want_files),
        ) if wanted
    ]
    return ",".join(kinds)

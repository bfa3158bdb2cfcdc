from __future__ import annotations

"""
Unit tests for the Entry Classification Engine.

Verifies:
1. Mode bits map to the right EntryKind without following links.
2. The default (no filter) policy accepts every classified kind.
3. Explicit filters accept only the requested kinds and drop 'other' kinds.
"""

import os
import stat
from pathlib import Path

import pytest

from dirwalk.core.walk.classifier import classify, classify_mode, matches
from dirwalk.domain.walk_models import EntryKind, FilterConfig

ALL_KINDS = [
    EntryKind.DIRECTORY,
    EntryKind.REGULAR_FILE,
    EntryKind.SYMBOLIC_LINK,
    EntryKind.UNREADABLE_DIRECTORY,
    EntryKind.OTHER,
]


@pytest.mark.parametrize("mode, expected", [
    (stat.S_IFDIR | 0o755, EntryKind.DIRECTORY),
    (stat.S_IFREG | 0o644, EntryKind.REGULAR_FILE),
    (stat.S_IFLNK | 0o777, EntryKind.SYMBOLIC_LINK),
    (stat.S_IFIFO | 0o600, EntryKind.OTHER),
    (stat.S_IFSOCK | 0o600, EntryKind.OTHER),
    (stat.S_IFCHR | 0o600, EntryKind.OTHER),
])
def test_classify_mode_kinds(mode: int, expected: EntryKind) -> None:
    """TC-01: Verify every file type bit pattern maps to its kind."""
    assert classify_mode(mode) is expected


def test_classify_missing_metadata_is_unknown() -> None:
    """TC-02: Verify entries without metadata get the sentinel kind."""
    assert classify(None) is EntryKind.UNKNOWN


def test_classify_symlink_to_directory_is_link(sample_tree: Path) -> None:
    """TC-03: Verify a link to a directory is classified as a link."""
    assert classify(os.lstat(sample_tree / "d")) is EntryKind.SYMBOLIC_LINK
    assert classify(os.lstat(sample_tree / "c")) is EntryKind.DIRECTORY


def test_default_policy_matches_everything_but_unknown() -> None:
    """TC-04: Verify no-filter config lists all kinds including 'other'."""
    config = FilterConfig()
    for kind in ALL_KINDS:
        assert matches(kind, config), kind
    assert not matches(EntryKind.UNKNOWN, config)


def test_resolved_default_policy_still_matches_other() -> None:
    """TC-05: Verify resolution keeps the filter inactive, so sockets stay listed."""
    config = FilterConfig().resolved()
    assert config.want_links and config.want_dirs and config.want_files
    assert matches(EntryKind.OTHER, config)


@pytest.mark.parametrize("flags, accepted", [
    ({"links": True}, {EntryKind.SYMBOLIC_LINK}),
    ({"dirs": True}, {EntryKind.DIRECTORY, EntryKind.UNREADABLE_DIRECTORY}),
    ({"files": True}, {EntryKind.REGULAR_FILE}),
    ({"links": True, "files": True}, {EntryKind.SYMBOLIC_LINK, EntryKind.REGULAR_FILE}),
])
def test_explicit_filters(flags: dict, accepted: set) -> None:
    """TC-06: Verify explicit filters accept exactly the requested kinds."""
    config = FilterConfig.from_flags(**flags)
    assert config.filter_active

    for kind in ALL_KINDS + [EntryKind.UNKNOWN]:
        assert matches(kind, config) is (kind in accepted), kind


def test_all_three_filters_exclude_other_kinds() -> None:
    """TC-07: Verify requesting every type still drops FIFOs, sockets and devices."""
    config = FilterConfig.from_flags(links=True, dirs=True, files=True)
    assert not matches(EntryKind.OTHER, config)
    assert matches(EntryKind.REGULAR_FILE, config)

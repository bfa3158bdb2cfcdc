from __future__ import annotations

"""
Integration tests for the FileSystem Infrastructure Layer.

Verifies start path normalization, separator-exact joining, non-following
metadata and directory enumeration against a real temporary tree.
"""

import os
import stat
from pathlib import Path

import pytest

from dirwalk.infra.fs import join_path, list_directory, normalize_start_path, read_metadata


@pytest.mark.parametrize("raw, expected", [
    ("a", "a"),
    ("a/", "a"),
    ("a///", "a"),
    ("./", "."),
    ("/", "/"),
    ("///", "/"),
    ("/tmp/x/", "/tmp/x"),
    ("", "."),
])
def test_normalize_start_path(raw: str, expected: str) -> None:
    """TC-01: Verify trailing separators are stripped but the root survives."""
    assert normalize_start_path(raw) == expected


@pytest.mark.parametrize("parent, name, expected", [
    ("a", "b", "a/b"),
    ("/", "etc", "/etc"),
    (".", "x", "./x"),
])
def test_join_path_single_separator(parent: str, name: str, expected: str) -> None:
    """TC-02: Verify exactly one separator is inserted."""
    assert join_path(parent, name) == expected


def test_read_metadata_does_not_follow_links(sample_tree: Path) -> None:
    """TC-03: Verify lstat semantics for links to directories."""
    assert stat.S_ISLNK(read_metadata(str(sample_tree / "d")).st_mode)


def test_read_metadata_missing(tmp_path: Path) -> None:
    """TC-04: Verify a missing entry raises OSError."""
    with pytest.raises(FileNotFoundError):
        read_metadata(str(tmp_path / "ghost"))


def test_list_directory_names(sample_tree: Path) -> None:
    """TC-05: Verify every child is listed without pseudo entries."""
    listing = list_directory(str(sample_tree))

    assert listing.opened and listing.error is None
    assert sorted(listing.names) == ["b.txt", "c", "d"]


def test_list_directory_not_a_directory(sample_tree: Path) -> None:
    """TC-06: Verify opening a file reports an unopened listing."""
    listing = list_directory(str(sample_tree / "b.txt"))

    assert not listing.opened
    assert isinstance(listing.error, NotADirectoryError)
    assert listing.names == []


def test_list_directory_closes_handle(sample_tree: Path, monkeypatch) -> None:
    """TC-07: Verify the scandir iterator is closed after a mid-listing error."""
    closed = []

    class _Iter:
        def __init__(self, real):
            self._real = real
            self._count = 0

        def __iter__(self):
            return self

        def __next__(self):
            if self._count == 1:
                raise OSError(5, "Input/output error")
            self._count += 1
            return next(self._real)

        def __enter__(self):
            return self

        def __exit__(self, *exc):
            closed.append(True)
            self._real.close()

    real_scandir = os.scandir
    monkeypatch.setattr(os, "scandir", lambda p: _Iter(real_scandir(p)))

    listing = list_directory(str(sample_tree))

    assert listing.opened
    assert len(listing.names) == 1
    assert listing.error is not None and listing.error.errno == 5
    assert closed == [True]

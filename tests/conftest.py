from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared directory tree fixtures and output helpers used by the walk tests.
3. Isolation of the logging subsystem and the collation locale.
"""

import io
import locale
import logging
import os
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from dirwalk.infra.logging import shutdown_logging  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def mock_config_dict() -> Dict[str, Any]:
    """
    Return a valid, complete walk configuration dictionary.

    Mirrors the keys produced by 'dirwalk.domain.config.get_default_config'.
    """
    return {
        "start_path": ".",
        "show_links": False,
        "show_dirs": False,
        "show_files": False,
        "sort_output": False,
        "collation_locale": "",
    }


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    Create the reference tree.

    Structure:
    /a
      b.txt
      /c        (empty)
      d -> c    (symlink)
    """
    root = tmp_path / "a"
    root.mkdir()
    (root / "b.txt").write_text("b", encoding="utf-8")
    (root / "c").mkdir()
    os.symlink("c", root / "d")
    return root


@pytest.fixture
def nested_tree(tmp_path: Path) -> Path:
    """
    Create a deeper tree with mixed entry types.

    Structure:
    /proj
      README.md
      /src
        main.py
        /pkg
          mod.py
        link_to_pkg -> pkg
      /docs
        guide.md
      dangling -> missing
    """
    root = tmp_path / "proj"
    (root / "src" / "pkg").mkdir(parents=True)
    (root / "docs").mkdir()
    (root / "README.md").write_text("# proj", encoding="utf-8")
    (root / "src" / "main.py").write_text("print()", encoding="utf-8")
    (root / "src" / "pkg" / "mod.py").write_text("x = 1", encoding="utf-8")
    (root / "docs" / "guide.md").write_text("guide", encoding="utf-8")
    os.symlink("pkg", root / "src" / "link_to_pkg")
    os.symlink("missing", root / "dangling")
    return root


@pytest.fixture
def read_lines() -> Callable[[io.BytesIO], List[str]]:
    """Return a decoder turning sink output into a list of paths."""
    def _read(stream: io.BytesIO) -> List[str]:
        return [os.fsdecode(line) for line in stream.getvalue().splitlines()]
    return _read


@pytest.fixture
def out_stream() -> io.BytesIO:
    """In-memory binary stream standing in for stdout."""
    return io.BytesIO()


@pytest.fixture(autouse=True)
def reset_logging() -> Any:
    """Tear down any logging handlers installed by the code under test."""
    yield
    shutdown_logging()
    logging.getLogger().setLevel(logging.WARNING)


@pytest.fixture
def restore_collate_locale() -> Any:
    """Restore LC_COLLATE after tests that change it."""
    saved = locale.setlocale(locale.LC_COLLATE)
    yield
    locale.setlocale(locale.LC_COLLATE, saved)

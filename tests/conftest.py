from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for configuration dictionaries and on-disk tree scans.
"""

import os
import sys
from pathlib import Path
from typing import Any, Callable, Dict, Set

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def mock_config_dict(tmp_path: Path) -> Dict[str, Any]:
    """
    Return a complete configuration dictionary targeting a temp directory.

    Returns:
        Dict[str, Any]: A sample configuration dictionary.
    """
    return {
        "target_dir": str(tmp_path / "out"),
        "dry_run": False,
        "encoding": "utf-8",
        "log_file": "",
    }


@pytest.fixture
def scan_tree() -> Callable[[Path], Set[str]]:
    """
    Return a helper listing everything below a root as relative POSIX paths.

    Directories carry a trailing '/', files do not.
    """
    def _scan(root: Path) -> Set[str]:
        found: Set[str] = set()
        for path in root.rglob("*"):
            rel = path.relative_to(root).as_posix()
            found.add(rel + "/" if path.is_dir() else rel)
        return found

    return _scan

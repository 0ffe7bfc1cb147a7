from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform path resolution and the two creation primitives used
by the structure builder: recursive directory creation and zero-length file
creation. Writers wrap those primitives so the builder can run against the
real disk or against an in-memory recorder (dry run).
"""

import os
from typing import List, Optional

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "TreeScaffold"
UNIX_APP_DIR_NAME = ".treescaffold"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/TreeScaffold
    - Linux/Mac: ~/.treescaffold

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        home = os.path.expanduser("~")
        path = os.path.join(home, UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)

# -----------------------------------------------------------------------------
# CREATION PRIMITIVES
# -----------------------------------------------------------------------------

def mkdir_all(path: str) -> None:
    """
    Create a directory and every missing parent.

    Succeeds silently when the directory already exists.

    Raises:
        OSError: If the directory cannot be created.
    """
    os.makedirs(path, exist_ok=True)


def create_empty_file(path: str) -> None:
    """
    Create or truncate a zero-length file, creating parent directories first.

    Raises:
        OSError: If the parent directory or the file cannot be created.
    """
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8"):
        pass

# -----------------------------------------------------------------------------
# WRITERS
# -----------------------------------------------------------------------------

class FileSystemWriter:
    """
    Applies creation operations to the real filesystem under a root directory.

    Attributes:
        root: Absolute directory every relative path is resolved against.
    """

    def __init__(self, root: str):
        self.root = os.path.abspath(root)

    def resolve(self, relative: str) -> str:
        return os.path.join(self.root, relative)

    def make_dir(self, relative: str) -> str:
        full = self.resolve(relative)
        mkdir_all(full)
        return full

    def make_file(self, relative: str) -> str:
        full = self.resolve(relative)
        create_empty_file(full)
        return full


class DryRunWriter(FileSystemWriter):
    """
    Records creation operations without touching the disk.

    Attributes:
        operations: Ordered list of ("dir" | "file", absolute_path) tuples.
    """

    def __init__(self, root: str):
        super().__init__(root)
        self.operations: List[tuple[str, str]] = []

    def make_dir(self, relative: str) -> str:
        full = self.resolve(relative)
        self.operations.append(("dir", full))
        return full

    def make_file(self, relative: str) -> str:
        full = self.resolve(relative)
        self.operations.append(("file", full))
        return full

from __future__ import annotations

"""
Domain Error Taxonomy.

Every fatal condition of a scaffold run derives from TreeScaffoldError so the
interface layer can map failures to exit codes with a single handler.
A line that cannot be parsed is not an error: the parser returns None.
"""


class TreeScaffoldError(Exception):
    """Base class for all fatal scaffold errors."""


class InputSourceError(TreeScaffoldError):
    """The tree text could not be acquired (unreadable file, bad clipboard)."""


class NoStructuralContentError(TreeScaffoldError):
    """The source was read, but none of its lines describe an entry."""

    def __init__(self, total_lines: int):
        self.total_lines = total_lines
        super().__init__(
            f"No structural lines found in input ({total_lines} lines read)."
        )


class StructureBuildError(TreeScaffoldError):
    """
    A filesystem creation call failed while building the structure.

    Attributes:
        path: The path whose creation failed.
        cause: The underlying OSError.
    """

    def __init__(self, path: str, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to create '{path}': {cause}")

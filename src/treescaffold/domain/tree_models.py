from __future__ import annotations

"""
Tree Notation Data Models.

Types exchanged between the line parser and the structure builder.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class Notation(str, Enum):
    """Which tree notation a line is written in."""
    GLYPH = "glyph"
    ASCII = "ascii"
    INDENT = "indent"


@dataclass(frozen=True)
class ParsedEntry:
    """
    One structural line of tree notation.

    Connector notations and indentation count levels differently. In
    indentation notation a direct child of the root is indented once
    (level 1). In glyph and ASCII notation the same child has no
    continuation group before its connector (level 0), because the
    connector itself stands for the last level.

    Attributes:
        indent_level: Indentation units (INDENT) or continuation groups in
            front of the connector (GLYPH, ASCII).
        name: Validated file or directory name, without trailing separator.
        is_directory: True when the name was written with a trailing "/".
        notation: Notation the line was written in.
    """
    indent_level: int
    name: str
    is_directory: bool
    notation: Notation = Notation.INDENT

    @property
    def depth(self) -> int:
        """Nesting depth below the root entry (root children are at 1)."""
        if self.notation is not Notation.INDENT:
            return self.indent_level + 1
        return self.indent_level


@dataclass
class BuildReport:
    """
    Paths created by a single structure build, in creation order.
    """
    created_dirs: List[str] = field(default_factory=list)
    created_files: List[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.created_dirs) + len(self.created_files)

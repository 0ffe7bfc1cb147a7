from __future__ import annotations

"""
Domain Constants.

Centralizes the fixed vocabulary of tree notation (connector glyphs and
continuation groups), the indentation unit, and the filename legality
rules shared by every notation.
"""

from typing import FrozenSet, Tuple

# -----------------------------------------------------------------------------
# TREE NOTATION
# -----------------------------------------------------------------------------

INDENT_WIDTH = 4

BOX_GLYPHS: FrozenSet[str] = frozenset("├└│─")

# Connector markers introducing an entry, box-drawing and `tree --charset=ascii`.
# The trailing space is optional when parsing.
CONNECTORS: Tuple[str, ...] = ("├── ", "└── ", "|-- ", "`-- ")

# Groups that each stand for one ancestor level
CONTINUATION_GROUPS: Tuple[str, ...] = ("│   ", "|   ", " " * INDENT_WIDTH, "\t")

COMMENT_MARKER = "#"
DIR_SUFFIX = "/"

# -----------------------------------------------------------------------------
# FILENAME LEGALITY
# -----------------------------------------------------------------------------

MAX_NAME_LENGTH = 255

RESERVED_NAMES: FrozenSet[str] = frozenset(
    ["CON", "PRN", "AUX", "NUL"]
    + [f"COM{i}" for i in range(1, 10)]
    + [f"LPT{i}" for i in range(1, 10)]
)

ILLEGAL_NAME_CHARS = '<>:"/\\|?*'

from __future__ import annotations

"""
Tree Notation Line Parser.

Turns one raw line of a directory tree description into a ParsedEntry.
Three notations are understood, selected per line:

- glyph notation, as printed by ``tree``::

      app/
      ├── src/
      │   └── main.go
      └── README.md

- ASCII notation, as printed by ``tree --charset=ascii``::

      app/
      |-- src/
      |   `-- main.go
      `-- README.md

- indentation notation, where nesting is expressed by leading whitespace
  only (four spaces or one tab per level)::

      app/
          src/
              main.go
          README.md

Lines that carry no entry (blank, comment-only, illegal name) yield None.
The parser never raises and keeps no state between calls.
"""

import logging
import re
from typing import Iterable, List, Optional, Tuple

from treescaffold.core.parsing.name_validator import is_valid_name
from treescaffold.domain.constants import (
    BOX_GLYPHS,
    COMMENT_MARKER,
    CONNECTORS,
    CONTINUATION_GROUPS,
    DIR_SUFFIX,
)
from treescaffold.domain.tree_models import Notation, ParsedEntry

logger = logging.getLogger(__name__)

# Connectors without their trailing space so that "├──name" is tolerated
_CONNECTOR_RE = re.compile("|".join(re.escape(c.rstrip()) for c in CONNECTORS))

_ASCII_CONNECTORS = [c.rstrip() for c in CONNECTORS if not BOX_GLYPHS & set(c)]

# An ASCII connector only counts when nothing but ancestor groups precede it
_ASCII_LINE_RE = re.compile(
    r"^[|\s]*(?:" + "|".join(re.escape(c) for c in _ASCII_CONNECTORS) + ")"
)

# One ancestor level in front of a connector. "│" and "|" may be followed by
# up to three spaces or non-breaking spaces (as emitted by some tree renderers).
_ANCESTOR_GROUP_RE = re.compile(r"[│|][ \u00a0]{0,3}| {4}|\t")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def detect_notation(line: str) -> Notation:
    """
    Classify a line as GLYPH (any box-drawing glyph), ASCII (starts with
    "|" ancestor groups and a "|--" or "`--" connector) or INDENT.
    """
    if any(c in BOX_GLYPHS for c in line):
        return Notation.GLYPH
    if _ASCII_LINE_RE.match(line):
        return Notation.ASCII
    return Notation.INDENT


def parse_line(line: str) -> Optional[ParsedEntry]:
    """
    Parse a single line of tree notation.

    Args:
        line: Raw input line, with or without its line terminator.

    Returns:
        Optional[ParsedEntry]: The entry, or None if the line is not structural.
    """
    content = _strip_comment(line).rstrip()
    if not content:
        return None

    notation = detect_notation(content)
    if notation is Notation.INDENT:
        parsed = _split_indent_line(content)
    else:
        parsed = _split_connector_line(content)

    if parsed is None:
        return None

    indent_level, raw_name = parsed
    is_directory = raw_name.endswith(DIR_SUFFIX)
    if is_directory:
        raw_name = raw_name[:-len(DIR_SUFFIX)]

    name = raw_name.strip()
    if not name or not is_valid_name(name):
        logger.debug(f"Skipping line with unusable name: {line.rstrip()!r}")
        return None

    return ParsedEntry(
        indent_level=indent_level,
        name=name,
        is_directory=is_directory,
        notation=notation,
    )


def parse_lines(lines: Iterable[str]) -> List[ParsedEntry]:
    """
    Parse a sequence of lines, dropping the non-structural ones.

    Args:
        lines: Raw lines in document order.

    Returns:
        List[ParsedEntry]: Entries in the same order as their source lines.
    """
    entries: List[ParsedEntry] = []
    for line in lines:
        entry = parse_line(line)
        if entry is not None:
            entries.append(entry)
    return entries

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _strip_comment(line: str) -> str:
    return line.split(COMMENT_MARKER, 1)[0]


def _split_connector_line(content: str) -> Optional[Tuple[int, str]]:
    """Locate the connector; everything before it is ancestor groups."""
    match = _CONNECTOR_RE.search(content)
    if match is None:
        # Continuation-only line such as a lone "│"
        return None

    indent_level = _count_ancestor_groups(content[:match.start()])
    raw_name = content[match.end():].lstrip("─-").strip()
    return indent_level, raw_name


def _count_ancestor_groups(prefix: str) -> int:
    """
    Count ancestor groups in order from the start of a connector prefix.

    Spaces that do not complete a group (a block indented by two spaces, or
    "│  " shortened by a renderer) are stepped over. Any other character ends
    the count, and whatever follows it is ignored.
    """
    level = 0
    pos = 0
    while pos < len(prefix):
        match = _ANCESTOR_GROUP_RE.match(prefix, pos)
        if match:
            level += 1
            pos = match.end()
        elif prefix[pos] in " \u00a0":
            pos += 1
        else:
            logger.debug(f"Ignoring stray text before connector: {prefix[pos:]!r}")
            break
    return level


def _split_indent_line(content: str) -> Optional[Tuple[int, str]]:
    """Count leading indentation units; the name is the last token."""
    tokens = content.split()
    if not tokens:
        return None
    return _count_leading_units(content), tokens[-1]


def _count_leading_units(content: str) -> int:
    """
    Count whole indentation units at the start of the line.

    Scanning stops at the first position where no unit matches, so a
    partial run of fewer than four spaces contributes nothing.
    """
    level = 0
    pos = 0
    while True:
        for group in CONTINUATION_GROUPS:
            if content.startswith(group, pos):
                level += 1
                pos += len(group)
                break
        else:
            return level

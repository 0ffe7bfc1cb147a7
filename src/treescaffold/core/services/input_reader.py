from __future__ import annotations

"""
Input Acquisition Service.

Produces the raw tree text, either from a file given on the command line or,
when no file is given, from the system clipboard. Clipboard content is only
accepted when it visually resembles a tree, so that an unrelated clipboard
(a URL, a sentence) never reaches the builder.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

import pyperclip

from treescaffold.core.parsing.line_parser import detect_notation
from treescaffold.domain.constants import BOX_GLYPHS
from treescaffold.domain.errors import InputSourceError
from treescaffold.domain.tree_models import Notation

logger = logging.getLogger(__name__)

SOURCE_FILE = "file"
SOURCE_CLIPBOARD = "clipboard"
SOURCE_TEXT = "text"


@dataclass(frozen=True)
class InputPayload:
    """
    Raw tree text split into lines.

    Attributes:
        lines: Input lines in document order, without terminators.
        source: One of "file", "clipboard" or "text".
        origin: File path for file input, empty otherwise.
    """
    lines: List[str]
    source: str
    origin: str = ""


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def read_input(path: Optional[str] = None, encoding: str = "utf-8") -> InputPayload:
    """
    Acquire the tree text from ``path`` or, if None, from the clipboard.

    Raises:
        InputSourceError: If the file is unreadable, or the clipboard is
            unavailable, empty, or does not look like a tree.
    """
    if path:
        return read_file(path, encoding=encoding)
    return read_clipboard()


def read_file(path: str, encoding: str = "utf-8") -> InputPayload:
    """Read a whole tree description file."""
    try:
        with open(path, "r", encoding=encoding) as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InputSourceError(f"Cannot read '{path}': {e}") from e

    logger.debug(f"Read {len(content)} characters from {path}")
    return InputPayload(lines=split_lines(content), source=SOURCE_FILE, origin=path)


def read_clipboard() -> InputPayload:
    """Read tree text from the system clipboard."""
    try:
        content = pyperclip.paste()
    except pyperclip.PyperclipException as e:
        raise InputSourceError(f"Clipboard is not available: {e}") from e

    if not content or not content.strip():
        raise InputSourceError("Clipboard is empty.")

    if not looks_like_tree(content):
        raise InputSourceError(
            "Clipboard content does not look like a directory tree."
        )

    return InputPayload(lines=split_lines(content), source=SOURCE_CLIPBOARD)


def from_text(text: str) -> InputPayload:
    """Wrap in-memory text, e.g. for programmatic use."""
    return InputPayload(lines=split_lines(text), source=SOURCE_TEXT)


def looks_like_tree(text: str) -> bool:
    """
    Heuristic check that text is tree notation.

    True when the text spans several lines and contains box-drawing glyphs
    or an ASCII connector line ("|-- ", "`-- "), or when at least two lines
    start with indentation.
    """
    if "\n" in text:
        if any(c in BOX_GLYPHS for c in text):
            return True
        if any(detect_notation(line) is Notation.ASCII for line in text.splitlines()):
            return True

    indented = 0
    for line in text.splitlines():
        if line.strip() and line[:1] in (" ", "\t"):
            indented += 1
            if indented >= 2:
                return True
    return False


def split_lines(content: str) -> List[str]:
    """Split text on any line terminator, dropping a leading BOM."""
    return content.lstrip("\ufeff").splitlines()

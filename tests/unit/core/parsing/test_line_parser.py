from __future__ import annotations

"""
Unit tests for the Tree Notation Line Parser.

Verifies:
1. Indentation notation: unit counting, partial units, last-token names.
2. Glyph and ASCII notation: continuation groups, names with spaces, bare
   connector lines, prefix scanning.
3. Comment stripping and non-structural lines.
4. Directory detection and name validation.
"""

import pytest

from treescaffold.core.parsing.line_parser import detect_notation, parse_line, parse_lines
from treescaffold.domain.tree_models import Notation, ParsedEntry

# -----------------------------------------------------------------------------
# INDENTATION NOTATION
# -----------------------------------------------------------------------------

@pytest.mark.parametrize(
    "line, level",
    [
        ("root/", 0),
        ("    sub/", 1),
        ("        file.txt", 2),
        ("  two_spaces.txt", 0),
        ("      six_spaces.txt", 1),
        ("\tone_tab.txt", 1),
        ("\t\ttwo_tabs.txt", 2),
        ("\t    tab_then_spaces.txt", 2),
    ],
)
def test_indent_level_counts_whole_units(line: str, level: int) -> None:
    """Each 4-space run or tab is one level; partial runs count zero."""
    entry = parse_line(line)
    assert entry is not None
    assert entry.indent_level == level
    assert entry.notation is Notation.INDENT


def test_indent_directory_and_file_detection() -> None:
    assert parse_line("    sub/") == ParsedEntry(1, "sub", True, Notation.INDENT)
    assert parse_line("    main.py") == ParsedEntry(1, "main.py", False, Notation.INDENT)


def test_indent_name_is_last_token() -> None:
    """Names with internal spaces are not supported without glyphs."""
    entry = parse_line("    my file.txt")
    assert entry is not None
    assert entry.name == "file.txt"


def test_line_terminators_are_ignored() -> None:
    entry = parse_line("    notes.md\r\n")
    assert entry == ParsedEntry(1, "notes.md", False, Notation.INDENT)

# -----------------------------------------------------------------------------
# GLYPH NOTATION
# -----------------------------------------------------------------------------

@pytest.mark.parametrize(
    "line, level",
    [
        ("├── src/", 0),
        ("└── README.md", 0),
        ("│   └── main.go", 1),
        ("│   │   ├── deep.txt", 2),
        ("    └── spaced.txt", 1),
        ("│       └── mixed.txt", 2),
        ("\t└── tabbed.txt", 1),
    ],
)
def test_glyph_level_counts_continuation_groups(line: str, level: int) -> None:
    entry = parse_line(line)
    assert entry is not None
    assert entry.indent_level == level
    assert entry.notation is Notation.GLYPH


def test_glyph_depth_includes_connector() -> None:
    """A connector at level 0 is a direct child of the root (depth 1)."""
    assert parse_line("├── src/").depth == 1
    assert parse_line("│   └── main.go").depth == 2
    assert parse_line("    src/").depth == 1


def test_glyph_name_keeps_internal_spaces() -> None:
    entry = parse_line("├── my notes.txt")
    assert entry is not None
    assert entry.name == "my notes.txt"


def test_glyph_connector_without_space() -> None:
    entry = parse_line("└──tight.txt")
    assert entry == ParsedEntry(0, "tight.txt", False, Notation.GLYPH)


@pytest.mark.parametrize("line", ["│", "│   │", "└──", "├── /", "──────"])
def test_glyph_lines_without_entry_are_not_structural(line: str) -> None:
    assert parse_line(line) is None

# -----------------------------------------------------------------------------
# ASCII NOTATION
# -----------------------------------------------------------------------------

@pytest.mark.parametrize(
    "line, level, name",
    [
        ("|-- src/", 0, "src"),
        ("`-- README.md", 0, "README.md"),
        ("|   `-- main.go", 1, "main.go"),
        ("|   |-- deep.txt", 1, "deep.txt"),
        ("|   |   `-- deeper.txt", 2, "deeper.txt"),
        ("    `-- after_last.txt", 1, "after_last.txt"),
    ],
)
def test_ascii_level_counts_continuation_groups(line: str, level: int, name: str) -> None:
    entry = parse_line(line)
    assert entry is not None
    assert entry.notation is Notation.ASCII
    assert entry.indent_level == level
    assert entry.name == name


def test_ascii_depth_includes_connector() -> None:
    """A "|--" under one "|" group sits two levels below the root, like "├──"."""
    assert parse_line("|   |-- deep.txt").depth == 2
    assert parse_line("|   |-- deep.txt").depth == parse_line("│   ├── deep.txt").depth


def test_ascii_name_keeps_internal_spaces_and_dashes() -> None:
    assert parse_line("|-- my notes.txt").name == "my notes.txt"
    assert parse_line("`-- a--b.txt").name == "a--b.txt"


@pytest.mark.parametrize("line", ["|", "|   |", "`--", "|-- /"])
def test_ascii_lines_without_entry_are_not_structural(line: str) -> None:
    assert parse_line(line) is None


def test_backtick_inside_indented_name_is_not_a_connector() -> None:
    entry = parse_line("    notes`--draft.txt")
    assert entry == ParsedEntry(1, "notes`--draft.txt", False, Notation.INDENT)

# -----------------------------------------------------------------------------
# CONNECTOR PREFIX SCANNING
# -----------------------------------------------------------------------------

@pytest.mark.parametrize(
    "line, level",
    [
        ("  ├── indented_block.txt", 0),
        ("  │   └── indented_block_child.txt", 1),
        ("│  └── short_group.txt", 1),
        ("│\u00a0\u00a0 └── nbsp_group.txt", 1),
    ],
)
def test_partial_space_runs_before_connector_count_zero(line: str, level: int) -> None:
    """Spaces that do not complete a group are stepped over, not counted."""
    assert parse_line(line).indent_level == level


def test_stray_text_before_connector_ends_the_count() -> None:
    """Groups are counted from the start; the first foreign character stops counting."""
    entry = parse_line("│   x │   ├── odd.txt")
    assert entry is not None
    assert entry.name == "odd.txt"
    assert entry.indent_level == 1

# -----------------------------------------------------------------------------
# COMMENTS AND NON-STRUCTURAL LINES
# -----------------------------------------------------------------------------

@pytest.mark.parametrize("line", ["", "   ", "\t", "# just a comment", "    # indented comment"])
def test_blank_and_comment_lines(line: str) -> None:
    assert parse_line(line) is None


def test_trailing_comment_is_stripped() -> None:
    assert parse_line("main.py  # entry point") == ParsedEntry(0, "main.py", False)
    assert parse_line("├── src/ # sources") == ParsedEntry(0, "src", True, Notation.GLYPH)


@pytest.mark.parametrize("line", ["CON", "├── nul.txt", "    a:b.txt", "├── what?", "trailing."])
def test_invalid_names_are_not_structural(line: str) -> None:
    assert parse_line(line) is None


def test_parse_is_pure() -> None:
    line = "│   ├── pkg/"
    assert parse_line(line) == parse_line(line)


def test_detect_notation() -> None:
    assert detect_notation("├── a") is Notation.GLYPH
    assert detect_notation("│") is Notation.GLYPH
    assert detect_notation("|-- a") is Notation.ASCII
    assert detect_notation("`-- a") is Notation.ASCII
    assert detect_notation("    a") is Notation.INDENT
    assert detect_notation("a`--b") is Notation.INDENT

# -----------------------------------------------------------------------------
# BATCH PARSING
# -----------------------------------------------------------------------------

def test_parse_lines_drops_noise_and_keeps_order() -> None:
    lines = [
        "# project layout",
        "app/",
        "├── src/",
        "│",
        "│   └── main.go",
        "",
        "└── README.md",
    ]
    entries = parse_lines(lines)
    assert [e.name for e in entries] == ["app", "src", "main.go", "README.md"]
    assert [e.depth for e in entries] == [0, 1, 2, 1]

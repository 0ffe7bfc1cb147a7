"""Create directory/file hierarchies from textual tree descriptions."""

__version__ = "0.1.0"

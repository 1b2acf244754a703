"""Bracket notation writer."""

from bracketmark.format.writer import escape_text, format_node, format_nodes

__all__ = [
    "escape_text",
    "format_node",
    "format_nodes",
]

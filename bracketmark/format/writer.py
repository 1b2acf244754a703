"""Write node trees back to bracket notation."""

from __future__ import annotations

from collections.abc import Iterable

from bracketmark.ast import Node, Sequence, Text
from bracketmark.parser.grammar import CONTROL_CHARACTERS, ESCAPE, TERMINATOR


def escape_text(content: str) -> str:
    """Prefix every control character in `content` with `\\`."""
    return "".join(ESCAPE + ch if ch in CONTROL_CHARACTERS else ch for ch in content)


def format_node(node: Node) -> str:
    if isinstance(node, Text):
        if not node.content and not node.ended_explicitly:
            raise ValueError("Empty text must end explicitly to be representable")
        return escape_text(node.content) + (TERMINATOR if node.ended_explicitly else "")
    return "[" + format_nodes(node.contents) + "]"


def format_nodes(nodes: Sequence | Iterable[Node]) -> str:
    """Concatenate nodes so that parsing the result yields the same nodes."""
    parts: list[str] = []
    previous: Node | None = None
    for node in nodes:
        if isinstance(previous, Text) and not previous.ended_explicitly and isinstance(node, Text):
            raise ValueError("Implicitly ended text cannot be followed by another text node")
        parts.append(format_node(node))
        previous = node
    return "".join(parts)

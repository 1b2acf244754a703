"""Human-readable tree dumps."""

from bracketmark.ast.model import Node, Sequence, Text


def dump_tree(node: Node) -> str:
    """Render one node per line, children indented by two spaces.

    Text nodes closed by `|` are suffixed with ` |`.
    """
    lines: list[str] = []

    def walk(current: Node, depth: int) -> None:
        indent = "  " * depth
        if isinstance(current, Text):
            marker = " |" if current.ended_explicitly else ""
            lines.append(f"{indent}Text {current.content!r}{marker}")
            return
        suffix = " (empty)" if current.is_empty else ""
        lines.append(f"{indent}Sequence{suffix}")
        for child in current.contents:
            walk(child, depth + 1)

    walk(node, 0)
    return "\n".join(lines)


def dump_sequence(sequence: Sequence) -> str:
    """Dump the children of a top-level sequence without the root line."""
    return "\n".join(dump_tree(child) for child in sequence.contents)

"""Node tree model."""

from bracketmark.ast.dump import dump_sequence, dump_tree
from bracketmark.ast.model import Node, Sequence, Text

__all__ = [
    "Node",
    "Sequence",
    "Text",
    "dump_sequence",
    "dump_tree",
]

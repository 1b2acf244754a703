"""Parser for wiki-bracket style notation built from `[`, `]`, `|` and `\\`."""

from bracketmark.ast import Node, Sequence, Text, dump_tree
from bracketmark.diagnostics import Diagnostic
from bracketmark.format import escape_text, format_node, format_nodes
from bracketmark.parser import (
    BracketParseResult,
    EscapeAtTheEndOfInput,
    NestingTooDeep,
    NodeParse,
    ParserOptions,
    ParsingError,
    UnclosedBracket,
    UnexpectedClosingBracket,
    UnknownCharacterEscaped,
    parse_one_node,
    parse_result,
    parse_sequential_nodes,
)
from bracketmark.text import Position

__all__ = [
    "BracketParseResult",
    "Diagnostic",
    "EscapeAtTheEndOfInput",
    "NestingTooDeep",
    "Node",
    "NodeParse",
    "ParserOptions",
    "ParsingError",
    "Position",
    "Sequence",
    "Text",
    "UnclosedBracket",
    "UnexpectedClosingBracket",
    "UnknownCharacterEscaped",
    "dump_tree",
    "escape_text",
    "format_node",
    "format_nodes",
    "parse_one_node",
    "parse_result",
    "parse_sequential_nodes",
]

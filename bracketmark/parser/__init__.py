"""Parser infrastructure (cursor + combinators + bracket grammar)."""

from bracketmark.parser.bracket import NodeParse, parse_one_node, parse_result, parse_sequential_nodes
from bracketmark.parser.combinators import Step, and_then, any_char, char, many, map_matched, or_else, satisfy
from bracketmark.parser.cursor import Cursor
from bracketmark.parser.errors import (
    EscapeAtTheEndOfInput,
    NestingTooDeep,
    ParsingError,
    UnclosedBracket,
    UnexpectedClosingBracket,
    UnknownCharacterEscaped,
)
from bracketmark.parser.grammar import (
    CONTROL_CHARACTERS,
    ParseContext,
    TextChar,
    parse_bracketed,
    parse_node,
    parse_sequence,
    parse_text,
    parse_text_character,
)
from bracketmark.parser.options import DEFAULT_MAX_NESTING_DEPTH, MAX_SUPPORTED_NESTING_DEPTH, ParserOptions
from bracketmark.parser.outcome import NO_MATCH, Fatal, Matched, NoMatch, Outcome
from bracketmark.parser.result import BracketParseResult

__all__ = [
    "CONTROL_CHARACTERS",
    "DEFAULT_MAX_NESTING_DEPTH",
    "MAX_SUPPORTED_NESTING_DEPTH",
    "NO_MATCH",
    "BracketParseResult",
    "Cursor",
    "EscapeAtTheEndOfInput",
    "Fatal",
    "Matched",
    "NestingTooDeep",
    "NoMatch",
    "NodeParse",
    "Outcome",
    "ParseContext",
    "ParserOptions",
    "ParsingError",
    "Step",
    "TextChar",
    "UnclosedBracket",
    "UnexpectedClosingBracket",
    "UnknownCharacterEscaped",
    "and_then",
    "any_char",
    "char",
    "many",
    "map_matched",
    "or_else",
    "parse_bracketed",
    "parse_node",
    "parse_one_node",
    "parse_result",
    "parse_sequence",
    "parse_sequential_nodes",
    "parse_text",
    "parse_text_character",
    "satisfy",
]

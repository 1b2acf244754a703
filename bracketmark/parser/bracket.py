"""High-level parse entrypoints for bracket notation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from bracketmark.ast import Node, Sequence
from bracketmark.parser.cursor import Cursor
from bracketmark.parser.errors import ParsingError, UnexpectedClosingBracket
from bracketmark.parser.grammar import ParseContext, parse_node, parse_sequence
from bracketmark.parser.options import ParserOptions
from bracketmark.parser.outcome import Fatal, NoMatch
from bracketmark.text import Position

if TYPE_CHECKING:
    from bracketmark.parser.result import BracketParseResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class NodeParse:
    """One parsed node plus the unconsumed input that follows it."""

    node: Node
    rest: str
    position: Position


def parse_one_node(text: str, options: ParserOptions | None = None) -> NodeParse | None:
    """Parse a single node from the start of `text`.

    Returns `None` for empty input. Raises `ParsingError` on malformed input,
    including `UnexpectedClosingBracket` when `text` starts with `]`.
    """
    context = ParseContext.from_options(ParserOptions.resolve(options))
    cursor = Cursor.start(text)
    outcome = parse_node(cursor, context)

    if isinstance(outcome, Fatal):
        _log_error(outcome.error)
        raise outcome.error
    if isinstance(outcome, NoMatch):
        if cursor.is_eof:
            return None
        error = UnexpectedClosingBracket(cursor.position)
        _log_error(error)
        raise error

    rest = outcome.cursor
    return NodeParse(node=outcome.value, rest=rest.rest, position=rest.position)


def parse_sequential_nodes(text: str, options: ParserOptions | None = None) -> Sequence:
    """Parse the whole of `text` into a top-level sequence.

    Raises `ParsingError` on malformed input; never returns a partial tree.
    """
    context = ParseContext.from_options(ParserOptions.resolve(options))
    outcome = parse_sequence(Cursor.start(text), context)

    if isinstance(outcome, Fatal):
        _log_error(outcome.error)
        raise outcome.error
    if isinstance(outcome, NoMatch):
        raise RuntimeError("Sequence parser must not report NoMatch")

    # Anything left over starts with a `]` the sequence could not consume.
    if not outcome.cursor.is_eof:
        error = UnexpectedClosingBracket(outcome.cursor.position)
        _log_error(error)
        raise error

    sequence = Sequence(tuple(outcome.value))
    logger.debug("parsed %d top-level nodes from %d characters", len(sequence), len(text))
    return sequence


def parse_result(text: str, options: ParserOptions | None = None) -> BracketParseResult:
    """Parse `text` into a carrier that reports errors as diagnostics instead of raising."""
    from bracketmark.parser.result import BracketParseResult

    resolved_options = ParserOptions.resolve(options)
    try:
        sequence = parse_sequential_nodes(text, resolved_options)
    except ParsingError as error:
        return BracketParseResult(source_text=text, options=resolved_options, error=error)
    return BracketParseResult(source_text=text, options=resolved_options, sequence=sequence)


def _log_error(error: ParsingError) -> None:
    logger.debug("reporting %s at %s", error.code, error.position)

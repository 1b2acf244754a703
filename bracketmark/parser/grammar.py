"""Bracket notation grammar.

    sequence   := node*
    node       := text_node | '[' ( ']' | sequence ']' )
    text_node  := text_char+
    text_char  := '\\' ( '\\' | '|' | '[' | ']' ) | '|' | <any other codepoint>

A `|` closes the text node it ends and is not part of its content.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Final

from bracketmark.ast import Node, Sequence, Text
from bracketmark.parser.combinators import and_then, char, many, map_matched, or_else, satisfy
from bracketmark.parser.cursor import Cursor
from bracketmark.parser.errors import (
    EscapeAtTheEndOfInput,
    NestingTooDeep,
    UnclosedBracket,
    UnknownCharacterEscaped,
)
from bracketmark.parser.options import ParserOptions
from bracketmark.parser.outcome import NO_MATCH, Fatal, Matched, NoMatch, Outcome

ESCAPE: Final[str] = "\\"
TERMINATOR: Final[str] = "|"
OPENING_BRACKET: Final[str] = "["
CLOSING_BRACKET: Final[str] = "]"

CONTROL_CHARACTERS: Final[frozenset[str]] = frozenset({ESCAPE, TERMINATOR, OPENING_BRACKET, CLOSING_BRACKET})


@dataclass(frozen=True, slots=True)
class ParseContext:
    """Depth bookkeeping threaded through the recursive rules."""

    max_nesting_depth: int
    current_depth: int = 0

    @staticmethod
    def from_options(options: ParserOptions) -> ParseContext:
        return ParseContext(max_nesting_depth=options.max_nesting_depth)

    def is_depth_exceeded(self) -> bool:
        return self.current_depth >= self.max_nesting_depth

    def enter_bracket(self) -> ParseContext:
        return ParseContext(
            max_nesting_depth=self.max_nesting_depth,
            current_depth=self.current_depth + 1,
        )


@dataclass(frozen=True, slots=True)
class TextChar:
    """One scanned unit of text: a literal codepoint, or the `|` terminator."""

    char: str
    is_terminator: bool = False


TERMINATOR_CHAR: Final[TextChar] = TextChar(TERMINATOR, is_terminator=True)


# =============================================================================
# Text
# =============================================================================


def _escaped_literal(_escape: str, cursor: Cursor) -> Outcome[TextChar]:
    ch = cursor.current
    if ch is None:
        return Fatal(EscapeAtTheEndOfInput(cursor.position))
    if ch not in CONTROL_CHARACTERS:
        return Fatal(UnknownCharacterEscaped(cursor.position, ch))
    return Matched(TextChar(ch), cursor.advance())


_terminator = map_matched(char(TERMINATOR), lambda _: TERMINATOR_CHAR)
_escape_sequence = and_then(char(ESCAPE), _escaped_literal)
_plain_character = map_matched(satisfy(lambda ch: ch not in CONTROL_CHARACTERS), TextChar)

parse_text_character = or_else(or_else(_terminator, _escape_sequence), _plain_character)
"""Scan one text unit. `[`, `]` and end of input do not match."""


def parse_text(cursor: Cursor) -> Outcome[Text]:
    """Consume a maximal text run.

    Stops before `[`, `]` or end of input, or right after a `|`. An empty run
    only matches when it is closed by `|`.
    """
    buffer: list[str] = []
    while True:
        outcome = parse_text_character(cursor)
        if isinstance(outcome, NoMatch):
            if not buffer:
                return NO_MATCH
            return Matched(Text("".join(buffer), ended_explicitly=False), cursor)
        if isinstance(outcome, Fatal):
            return outcome
        if outcome.value.is_terminator:
            return Matched(Text("".join(buffer), ended_explicitly=True), outcome.cursor)
        buffer.append(outcome.value.char)
        cursor = outcome.cursor


# =============================================================================
# Sequences
# =============================================================================

_opening_bracket = char(OPENING_BRACKET)
_closing_bracket = char(CLOSING_BRACKET)


def parse_sequence(cursor: Cursor, context: ParseContext) -> Outcome[list[Node]]:
    """Collect nodes until none matches. Never `NoMatch` itself."""
    return many(partial(parse_node, context=context))(cursor)


def parse_bracketed(cursor: Cursor, context: ParseContext) -> Outcome[Sequence]:
    """Parse `[ ... ]`. Errors are reported at the opening bracket."""

    def close(nodes: list[Node], after_nodes: Cursor) -> Outcome[Sequence]:
        closed = _closing_bracket(after_nodes)
        if isinstance(closed, Matched):
            return Matched(Sequence(tuple(nodes)), closed.cursor)
        return Fatal(UnclosedBracket(cursor.position))

    def contents(_bracket: str, after_open: Cursor) -> Outcome[Sequence]:
        if context.is_depth_exceeded():
            return Fatal(NestingTooDeep(cursor.position, context.max_nesting_depth))
        empty = map_matched(_closing_bracket, lambda _: Sequence())
        nested = and_then(partial(parse_sequence, context=context.enter_bracket()), close)
        return or_else(empty, nested)(after_open)

    return and_then(_opening_bracket, contents)(cursor)


def parse_node(cursor: Cursor, context: ParseContext) -> Outcome[Node]:
    """Text first, then a bracketed sequence. Anything else is `NoMatch`."""
    return or_else(parse_text, partial(parse_bracketed, context=context))(cursor)

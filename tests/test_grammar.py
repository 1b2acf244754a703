import pytest

from bracketmark import Sequence, Text
from bracketmark.parser import (
    NO_MATCH,
    Cursor,
    EscapeAtTheEndOfInput,
    Fatal,
    Matched,
    NestingTooDeep,
    ParseContext,
    TextChar,
    UnclosedBracket,
    UnknownCharacterEscaped,
    parse_node,
    parse_sequence,
    parse_text,
    parse_text_character,
)
from bracketmark.text import Position

CONTEXT = ParseContext(max_nesting_depth=64)


def scan(source: str):
    return parse_text_character(Cursor.start(source))


def test_scanner_reads_ordinary_codepoint() -> None:
    outcome = scan("ab")

    assert isinstance(outcome, Matched)
    assert outcome.value == TextChar("a")
    assert outcome.cursor.rest == "b"


def test_scanner_tags_terminator() -> None:
    outcome = scan("|x")

    assert isinstance(outcome, Matched)
    assert outcome.value.is_terminator
    assert outcome.cursor.rest == "x"


@pytest.mark.parametrize("control", ["\\", "|", "[", "]"])
def test_scanner_resolves_escaped_control_characters(control: str) -> None:
    outcome = scan("\\" + control)

    assert isinstance(outcome, Matched)
    assert outcome.value == TextChar(control)
    assert not outcome.value.is_terminator
    assert outcome.cursor.is_eof


@pytest.mark.parametrize("source", ["[", "]", "", "]tail"])
def test_scanner_does_not_match_brackets_or_end_of_input(source: str) -> None:
    assert scan(source) is NO_MATCH


def test_scanner_escape_at_end_of_input_is_fatal() -> None:
    outcome = scan("\\")

    assert outcome == Fatal(EscapeAtTheEndOfInput(Position(1, 2)))


def test_scanner_unknown_escape_points_at_escaped_codepoint() -> None:
    outcome = scan("\\n")

    assert isinstance(outcome, Fatal)
    assert isinstance(outcome.error, UnknownCharacterEscaped)
    assert outcome.error.position == Position(1, 2)
    assert outcome.error.character == "n"


def test_text_stops_before_bracket_without_consuming_it() -> None:
    outcome = parse_text(Cursor.start("abc[d]"))

    assert isinstance(outcome, Matched)
    assert outcome.value == Text("abc", ended_explicitly=False)
    assert outcome.cursor.rest == "[d]"


def test_text_consumes_terminator() -> None:
    outcome = parse_text(Cursor.start("abc|def"))

    assert isinstance(outcome, Matched)
    assert outcome.value == Text("abc", ended_explicitly=True)
    assert outcome.cursor.rest == "def"


def test_text_terminator_alone_yields_empty_text() -> None:
    outcome = parse_text(Cursor.start("|"))

    assert isinstance(outcome, Matched)
    assert outcome.value == Text("", ended_explicitly=True)


@pytest.mark.parametrize("source", ["", "[", "]"])
def test_text_without_characters_does_not_match(source: str) -> None:
    assert parse_text(Cursor.start(source)) is NO_MATCH


def test_text_discards_buffer_on_fatal() -> None:
    outcome = parse_text(Cursor.start("abc\\"))

    assert outcome == Fatal(EscapeAtTheEndOfInput(Position(1, 5)))


def test_node_prefers_text() -> None:
    outcome = parse_node(Cursor.start("a[b]"), CONTEXT)

    assert isinstance(outcome, Matched)
    assert outcome.value == Text("a")


def test_node_parses_empty_brackets() -> None:
    outcome = parse_node(Cursor.start("[]rest"), CONTEXT)

    assert isinstance(outcome, Matched)
    assert outcome.value == Sequence()
    assert outcome.cursor.rest == "rest"


def test_node_does_not_match_closing_bracket() -> None:
    assert parse_node(Cursor.start("]"), CONTEXT) is NO_MATCH
    assert parse_node(Cursor.start(""), CONTEXT) is NO_MATCH


def test_node_reports_unclosed_bracket_at_opening_bracket() -> None:
    cursor = Cursor.start("x[ab").advance()

    outcome = parse_node(cursor, CONTEXT)

    assert outcome == Fatal(UnclosedBracket(Position(1, 2)))


def test_sequence_stops_at_closing_bracket() -> None:
    outcome = parse_sequence(Cursor.start("a|b]c"), CONTEXT)

    assert isinstance(outcome, Matched)
    assert outcome.value == [Text("a", True), Text("b")]
    assert outcome.cursor.rest == "]c"


def test_sequence_propagates_fatal_from_nested_element() -> None:
    outcome = parse_sequence(Cursor.start("a[b[c\\z]]"), CONTEXT)

    assert isinstance(outcome, Fatal)
    assert isinstance(outcome.error, UnknownCharacterEscaped)
    assert outcome.error.position == Position(1, 7)


def test_depth_limit_is_checked_at_each_opening_bracket() -> None:
    shallow = ParseContext(max_nesting_depth=2)

    ok = parse_sequence(Cursor.start("[[]]"), shallow)
    too_deep = parse_sequence(Cursor.start("[[[]]]"), shallow)

    assert isinstance(ok, Matched)
    assert too_deep == Fatal(NestingTooDeep(Position(1, 3), 2))


def test_parse_context_enter_bracket_is_a_new_value() -> None:
    inner = CONTEXT.enter_bracket()

    assert CONTEXT.current_depth == 0
    assert inner.current_depth == 1
    assert inner.max_nesting_depth == CONTEXT.max_nesting_depth

"""Property-based checks over generated bracket notation."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from bracketmark import (
    Position,
    Sequence,
    Text,
    UnknownCharacterEscaped,
    format_nodes,
    parse_result,
    parse_sequential_nodes,
)
from bracketmark.parser import CONTROL_CHARACTERS

_PLAIN_TEXT = st.text(alphabet=st.characters(exclude_characters="[]|\\"), min_size=1)
_ESCAPES = st.sampled_from(["\\\\", "\\|", "\\[", "\\]"])
_FRAGMENTS = st.one_of(_PLAIN_TEXT, _ESCAPES, st.just("|"))

_SOURCES = st.recursive(
    _FRAGMENTS,
    lambda children: st.lists(children, max_size=4).map(lambda parts: "[" + "".join(parts) + "]"),
    max_leaves=20,
)
_DOCUMENTS = st.lists(_SOURCES, max_size=6).map("".join)


@given(source=_PLAIN_TEXT)
def test_text_without_control_characters_is_one_text_node(source: str) -> None:
    assert parse_sequential_nodes(source) == Sequence((Text(source, ended_explicitly=False),))


@given(source=_DOCUMENTS)
def test_well_formed_documents_parse_without_errors(source: str) -> None:
    assert parse_result(source).has_errors is False


@given(source=_DOCUMENTS)
def test_format_inverts_parse(source: str) -> None:
    assert format_nodes(parse_sequential_nodes(source)) == source


@given(source=_DOCUMENTS)
def test_every_opening_bracket_is_a_sequence_or_literal(source: str) -> None:
    stack = [parse_sequential_nodes(source)]
    sequences = 0
    literal_brackets = 0
    while stack:
        for node in stack.pop():
            if isinstance(node, Sequence):
                sequences += 1
                stack.append(node)
            else:
                literal_brackets += node.content.count("[")
    assert sequences + literal_brackets == source.count("[")


@given(content=st.text(min_size=1))
def test_escaped_text_parses_back_to_content(content: str) -> None:
    escaped = "".join("\\" + ch if ch in CONTROL_CHARACTERS else ch for ch in content)

    assert parse_sequential_nodes("[" + escaped + "]") == Sequence((Sequence((Text(content),)),))


@given(prefix=st.text(alphabet=st.characters(exclude_characters="[]|\\")))
def test_error_rows_advance_after_newline(prefix: str) -> None:
    result = parse_result(prefix + "\n\\q")

    assert isinstance(result.error, UnknownCharacterEscaped)
    assert result.error.position == Position(prefix.count("\n") + 2, 2)

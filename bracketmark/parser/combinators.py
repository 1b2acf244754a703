"""Generic parsing combinators over `Cursor` -> `Outcome` steps.

Only `NoMatch` is ever backtracked over. `Fatal` passes through every
combinator untouched, so a syntax error found deep in an alternative aborts
the whole parse instead of letting a sibling alternative run.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from bracketmark.parser.cursor import Cursor
from bracketmark.parser.outcome import NO_MATCH, Matched, NoMatch, Outcome

T = TypeVar("T")
U = TypeVar("U")

Step = Callable[[Cursor], Outcome[T]]


def and_then(step: Step[T], continuation: Callable[[T, Cursor], Outcome[U]]) -> Step[U]:
    """Run `step`, then feed its value and cursor to `continuation`."""

    def run(cursor: Cursor) -> Outcome[U]:
        outcome = step(cursor)
        if isinstance(outcome, Matched):
            return continuation(outcome.value, outcome.cursor)
        return outcome

    return run


def or_else(step: Step[T], alternative: Step[U]) -> Step[T | U]:
    """Run `step`; on `NoMatch` run `alternative` from the same cursor."""

    def run(cursor: Cursor) -> Outcome[T | U]:
        outcome = step(cursor)
        if isinstance(outcome, NoMatch):
            return alternative(cursor)
        return outcome

    return run


def map_matched(step: Step[T], f: Callable[[T], U]) -> Step[U]:
    def run(cursor: Cursor) -> Outcome[U]:
        outcome = step(cursor)
        if isinstance(outcome, Matched):
            return Matched(f(outcome.value), outcome.cursor)
        return outcome

    return run


def many(step: Step[T]) -> Step[list[T]]:
    """Apply `step` until it stops matching. Zero matches is still a match."""

    def run(cursor: Cursor) -> Outcome[list[T]]:
        values: list[T] = []
        while True:
            outcome = step(cursor)
            if isinstance(outcome, NoMatch):
                return Matched(values, cursor)
            if not isinstance(outcome, Matched):
                return outcome
            if outcome.cursor.offset == cursor.offset:
                raise RuntimeError(f"Repeated step stopped making progress at {cursor.position}")
            values.append(outcome.value)
            cursor = outcome.cursor

    return run


def satisfy(predicate: Callable[[str], bool]) -> Step[str]:
    """Consume one codepoint accepted by `predicate`."""

    def run(cursor: Cursor) -> Outcome[str]:
        ch = cursor.current
        if ch is None or not predicate(ch):
            return NO_MATCH
        return Matched(ch, cursor.advance())

    return run


def char(expected: str) -> Step[str]:
    if len(expected) != 1:
        raise ValueError("char() matches exactly one codepoint")
    return satisfy(lambda ch: ch == expected)


def any_char(cursor: Cursor) -> Outcome[str]:
    ch = cursor.current
    if ch is None:
        return NO_MATCH
    return Matched(ch, cursor.advance())

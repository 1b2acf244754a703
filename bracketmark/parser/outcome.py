"""Tri-state parse outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, Generic, TypeVar

from bracketmark.parser.cursor import Cursor

if TYPE_CHECKING:
    from bracketmark.parser.errors import ParsingError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Matched(Generic[T]):
    """Step succeeded with `value`; parsing continues from `cursor`."""

    value: T
    cursor: Cursor


@dataclass(frozen=True, slots=True)
class NoMatch:
    """Step does not apply here. Callers may backtrack and try an alternative."""


@dataclass(frozen=True, slots=True)
class Fatal:
    """Input is malformed. Aborts the whole parse, never backtracked over."""

    error: ParsingError


NO_MATCH: Final[NoMatch] = NoMatch()

Outcome = Matched[T] | NoMatch | Fatal

"""Immutable input cursor."""

from dataclasses import dataclass

from bracketmark.text import START, Position


@dataclass(frozen=True, slots=True)
class Cursor:
    """Remaining input paired with the position of its first codepoint.

    Consuming never mutates a cursor; `advance` returns a new one.
    """

    source: str
    offset: int = 0
    position: Position = START

    def __post_init__(self):
        if not 0 <= self.offset <= len(self.source):
            raise ValueError("Cursor offset out of bounds")

    @staticmethod
    def start(text: str) -> "Cursor":
        return Cursor(text, 0, START)

    @property
    def rest(self) -> str:
        return self.source[self.offset :]

    @property
    def is_eof(self) -> bool:
        return self.offset >= len(self.source)

    @property
    def current(self) -> str | None:
        if self.is_eof:
            return None
        return self.source[self.offset]

    def advance(self) -> "Cursor":
        if self.is_eof:
            raise ValueError("Cannot advance past the end of input")
        ch = self.source[self.offset]
        return Cursor(self.source, self.offset + 1, self.position.advance(ch))

    def __repr__(self) -> str:
        return f"Cursor(rest={self.rest!r}, position={self.position!r})"

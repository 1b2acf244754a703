from dataclasses import dataclass
from typing import Final

NEWLINE: Final[str] = "\n"


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """
    One-based (row, column) location in source text.

    Invariant:
    - 1 <= row, 1 <= column

    Columns count codepoints, not bytes. Only `\\n` starts a new row.
    """

    row: int = 1
    column: int = 1

    def __post_init__(self):
        if self.row < 1 or self.column < 1:
            raise ValueError("Position row and column start at 1")

    @staticmethod
    def start() -> "Position":
        """Position of the first codepoint of any input."""
        return START

    def advance(self, ch: str) -> "Position":
        """Position after consuming `ch`."""
        if ch == NEWLINE:
            return Position(self.row + 1, 1)
        return Position(self.row, self.column + 1)

    def advance_over(self, text: str) -> "Position":
        """Position after consuming every codepoint of `text`."""
        position = self
        for ch in text:
            position = position.advance(ch)
        return position

    def as_tuple(self) -> tuple[int, int]:
        return (self.row, self.column)

    def __str__(self) -> str:
        return f"line {self.row}, column {self.column}"

    def __repr__(self) -> str:
        return f"Position({self.row}, {self.column})"


START: Final[Position] = Position(1, 1)
"""Position of the first codepoint."""

"""Errors surfaced by the public parsing entrypoints."""

from typing import ClassVar

from bracketmark.diagnostics import (
    PARSER_ESCAPE_AT_END_OF_INPUT,
    PARSER_NESTING_TOO_DEEP,
    PARSER_UNCLOSED_BRACKET,
    PARSER_UNEXPECTED_CLOSING_BRACKET,
    PARSER_UNKNOWN_CHARACTER_ESCAPED,
    Diagnostic,
    DiagnosticSpec,
)
from bracketmark.text import Position


class ParsingError(Exception):
    """Base class for fatal syntax errors. Each subclass binds one diagnostic spec."""

    spec: ClassVar[DiagnosticSpec]

    def __init__(self, position: Position) -> None:
        self.position = position
        super().__init__(f"{self.message} ({position})")

    @property
    def code(self) -> str:
        return self.spec.code

    @property
    def message(self) -> str:
        return self.spec.message

    def to_diagnostic(self) -> Diagnostic:
        spec = self.spec
        return Diagnostic(
            code=spec.code,
            message=self.message,
            position=self.position,
            severity=spec.severity,
            hint=spec.hint,
            category=spec.category,
        )

    def __reduce__(self):
        return type(self), (self.position,)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.args == other.args and self.position == other.position

    def __hash__(self) -> int:
        return hash((type(self), self.position))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(position={self.position!r})"


class EscapeAtTheEndOfInput(ParsingError):
    """`\\` is the last codepoint. Position is the end of input."""

    spec = PARSER_ESCAPE_AT_END_OF_INPUT


class UnknownCharacterEscaped(ParsingError):
    """`\\` followed by something other than a control character."""

    spec = PARSER_UNKNOWN_CHARACTER_ESCAPED

    def __init__(self, position: Position, character: str) -> None:
        self.character = character
        super().__init__(position)

    @property
    def message(self) -> str:
        return f"{self.spec.message} Got `\\{self.character}`."

    def __reduce__(self):
        return type(self), (self.position, self.character)

    def __repr__(self) -> str:
        return f"UnknownCharacterEscaped(position={self.position!r}, character={self.character!r})"


class UnclosedBracket(ParsingError):
    """Position is the opening `[`."""

    spec = PARSER_UNCLOSED_BRACKET


class UnexpectedClosingBracket(ParsingError):
    spec = PARSER_UNEXPECTED_CLOSING_BRACKET


class NestingTooDeep(ParsingError):
    """Position is the `[` that would exceed `max_depth`."""

    spec = PARSER_NESTING_TOO_DEEP

    def __init__(self, position: Position, max_depth: int) -> None:
        self.max_depth = max_depth
        super().__init__(position)

    @property
    def message(self) -> str:
        return f"{self.spec.message} The limit is {self.max_depth}."

    def __reduce__(self):
        return type(self), (self.position, self.max_depth)

    def __repr__(self) -> str:
        return f"NestingTooDeep(position={self.position!r}, max_depth={self.max_depth})"

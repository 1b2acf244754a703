"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Literal

from bracketmark.text import Position

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the parser."""

    code: str
    message: str
    position: Position
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None

    def render(self) -> str:
        line = f"{self.severity.upper()} {self.code} at {self.position}: {self.message}"
        if self.hint is not None:
            line += f"\n  hint: {self.hint}"
        return line

"""Parse carrier for callers that prefer diagnostics over exceptions."""

from __future__ import annotations

from dataclasses import dataclass, field

from bracketmark.ast import Sequence
from bracketmark.diagnostics import Diagnostic, has_errors
from bracketmark.parser.errors import ParsingError
from bracketmark.parser.options import ParserOptions


@dataclass(slots=True)
class BracketParseResult:
    """Outcome of parsing one input: either a full tree or exactly one error."""

    source_text: str
    options: ParserOptions
    sequence: Sequence | None = None
    error: ParsingError | None = None
    _diagnostics: list[Diagnostic] | None = field(default=None, init=False, repr=False)

    def __post_init__(self):
        if (self.sequence is None) == (self.error is None):
            raise ValueError("Pass exactly one of sequence or error")

    @property
    def diagnostics(self) -> list[Diagnostic]:
        if self._diagnostics is None:
            self._diagnostics = [] if self.error is None else [self.error.to_diagnostic()]
        return self._diagnostics

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    def unwrap(self) -> Sequence:
        """Return the parsed tree or raise the parse error."""
        if self.error is not None:
            raise self.error
        if self.sequence is None:
            raise RuntimeError("Parse result holds neither a tree nor an error")
        return self.sequence

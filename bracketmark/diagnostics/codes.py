"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


PARSER_ESCAPE_AT_END_OF_INPUT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_ESCAPE_AT_END_OF_INPUT",
    message="Escape character `\\` at the end of input escapes nothing.",
    hint="Remove the trailing `\\` or write `\\\\` for a literal backslash.",
    severity="error",
    category="parser",
)

PARSER_UNKNOWN_CHARACTER_ESCAPED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNKNOWN_CHARACTER_ESCAPED",
    message="Only control characters can be escaped.",
    hint="Escape one of `\\`, `|`, `[` or `]`, or drop the `\\`.",
    severity="error",
    category="parser",
)

PARSER_UNCLOSED_BRACKET: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNCLOSED_BRACKET",
    message="Opening bracket is never closed.",
    hint="Add a matching `]` or escape the bracket as `\\[`.",
    severity="error",
    category="parser",
)

PARSER_UNEXPECTED_CLOSING_BRACKET: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_CLOSING_BRACKET",
    message="Closing bracket has no matching opening bracket.",
    hint="Remove the `]` or escape it as `\\]`.",
    severity="error",
    category="parser",
)

PARSER_NESTING_TOO_DEEP: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_NESTING_TOO_DEEP",
    message="Brackets are nested too deeply.",
    hint="Flatten the input or raise `ParserOptions.max_nesting_depth`.",
    severity="error",
    category="parser",
)

"""Diagnostics."""

from bracketmark.diagnostics.codes import (
    PARSER_ESCAPE_AT_END_OF_INPUT,
    PARSER_NESTING_TOO_DEEP,
    PARSER_UNCLOSED_BRACKET,
    PARSER_UNEXPECTED_CLOSING_BRACKET,
    PARSER_UNKNOWN_CHARACTER_ESCAPED,
    DiagnosticSpec,
)
from bracketmark.diagnostics.diagnostic import Diagnostic, Severity
from bracketmark.diagnostics.report import has_errors, render_diagnostics

__all__ = [
    "PARSER_ESCAPE_AT_END_OF_INPUT",
    "PARSER_NESTING_TOO_DEEP",
    "PARSER_UNCLOSED_BRACKET",
    "PARSER_UNEXPECTED_CLOSING_BRACKET",
    "PARSER_UNKNOWN_CHARACTER_ESCAPED",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "has_errors",
    "render_diagnostics",
]

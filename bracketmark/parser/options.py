"""Parser configuration options."""

from dataclasses import dataclass
from typing import Final

DEFAULT_MAX_NESTING_DEPTH: Final[int] = 64
"""Maximum bracket nesting. Each level uses about ten interpreter frames."""

MAX_SUPPORTED_NESTING_DEPTH: Final[int] = 80
"""Largest accepted limit. Deeper parses would approach Python's default recursion limit of 1000."""


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Limits applied while parsing."""

    max_nesting_depth: int = DEFAULT_MAX_NESTING_DEPTH

    def __post_init__(self):
        if self.max_nesting_depth < 1:
            raise ValueError("max_nesting_depth must be at least 1")
        if self.max_nesting_depth > MAX_SUPPORTED_NESTING_DEPTH:
            raise ValueError(f"max_nesting_depth must be at most {MAX_SUPPORTED_NESTING_DEPTH}")

    @staticmethod
    def resolve(options: "ParserOptions | None") -> "ParserOptions":
        return options if options is not None else ParserOptions()

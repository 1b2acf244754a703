"""Node tree produced by the bracket parser."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Text:
    """Maximal run of text characters with escapes already resolved.

    `ended_explicitly` records whether the run was closed by an unescaped `|`.
    """

    content: str
    ended_explicitly: bool = False


@dataclass(frozen=True, slots=True)
class Sequence:
    """Ordered nodes, either a `[...]` group or the top level of a document."""

    contents: tuple[Node, ...] = ()

    @property
    def is_empty(self) -> bool:
        return len(self.contents) == 0

    def __len__(self) -> int:
        return len(self.contents)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.contents)

    def __getitem__(self, index: int) -> Node:
        return self.contents[index]

    def depth(self) -> int:
        """Bracket nesting depth below this sequence (0 if it holds no sequences)."""
        deepest = 0
        stack: list[tuple[Sequence, int]] = [(self, 0)]
        while stack:
            sequence, level = stack.pop()
            deepest = max(deepest, level)
            for child in sequence.contents:
                if isinstance(child, Sequence):
                    stack.append((child, level + 1))
        return deepest


Node = Text | Sequence

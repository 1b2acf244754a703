"""Source text coordinates."""

from bracketmark.text.position import START, Position

__all__ = [
    "START",
    "Position",
]

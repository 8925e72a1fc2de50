"""Offset and line spans used to describe selections."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(slots=True, frozen=True)
class TextRange:
    """A selection or caret expressed as absolute document offsets.

    Reversed offsets are swapped and negative ones clamp to 0, so ``start``
    never exceeds ``end``.
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        start = max(0, int(self.start))
        end = max(0, int(self.end))
        if end < start:
            start, end = end, start
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "end", end)

    @property
    def length(self) -> int:
        return self.end - self.start

    @property
    def is_caret(self) -> bool:
        return self.start == self.end

    def to_tuple(self) -> tuple[int, int]:
        return (self.start, self.end)

    def shift(self, delta: int) -> TextRange:
        """Return the range moved by ``delta`` characters."""

        return TextRange(self.start + delta, self.end + delta)

    @classmethod
    def from_value(cls, value: Any) -> TextRange:
        """Accept a range, a bare caret offset or a ``(start, end)`` pair."""

        if isinstance(value, TextRange):
            return value
        if isinstance(value, int):
            return cls(value, value)
        if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
            if len(value) != 2:
                raise ValueError("TextRange pairs must have exactly two entries")
            return cls(value[0], value[1])
        raise TypeError(f"Cannot build a TextRange from {type(value).__name__}")


@dataclass(slots=True, frozen=True)
class LineRange:
    """Inclusive span of 1-based line numbers."""

    start_line: int
    end_line: int

    def __post_init__(self) -> None:
        start = max(1, int(self.start_line))
        end = max(1, int(self.end_line))
        if end < start:
            start, end = end, start
        object.__setattr__(self, "start_line", start)
        object.__setattr__(self, "end_line", end)

    @property
    def line_count(self) -> int:
        return (self.end_line - self.start_line) + 1

    def numbers(self) -> range:
        return range(self.start_line, self.end_line + 1)

    def touches(self, other: LineRange) -> bool:
        """Return ``True`` when the spans share a line or sit on adjacent lines."""

        return other.start_line <= self.end_line + 1 and self.start_line <= other.end_line + 1

    def merge(self, other: LineRange) -> LineRange:
        return LineRange(min(self.start_line, other.start_line), max(self.end_line, other.end_line))

    def to_tuple(self) -> tuple[int, int]:
        return (self.start_line, self.end_line)


__all__ = ["TextRange", "LineRange"]

"""Document abstractions consumed by the command layer."""

from __future__ import annotations

import hashlib
import logging
import uuid
from bisect import bisect_right
from dataclasses import dataclass
from typing import Any, Iterable, Protocol, Sequence

from ..core.ranges import TextRange
from .patches import EditDescriptor, apply_edit_batch, map_range, normalize_batch

LOGGER = logging.getLogger(__name__)


def _hash_text(text: str) -> str:
    return hashlib.sha1(text.encode("utf-8")).hexdigest()


@dataclass(slots=True, frozen=True)
class Line:
    """A single document line; ``end`` stops before the line break."""

    number: int
    start: int
    end: int
    text: str

    @property
    def length(self) -> int:
        return self.end - self.start


class EditableDocument(Protocol):
    """Host document surface required by the resolver and the dispatcher."""

    @property
    def line_count(self) -> int:
        ...

    @property
    def ranges(self) -> tuple[TextRange, ...]:
        ...

    def line(self, number: int) -> Line:
        ...

    def line_at(self, offset: int) -> Line:
        ...

    def slice(self, start: int, end: int) -> str:
        ...

    def apply_changes(
        self,
        batch: Sequence[EditDescriptor],
        *,
        selection: Sequence[TextRange] | None = None,
    ) -> None:
        """Apply an unordered batch in one step or raise ``EditBatchError`` untouched."""
        ...


def coerce_ranges(ranges: Iterable[Any] | None) -> tuple[TextRange, ...]:
    if ranges is None:
        return ()
    return tuple(TextRange.from_value(item) for item in ranges)


class TextDocument:
    """In-memory document with an ordered set of selection ranges."""

    def __init__(self, text: str = "", ranges: Iterable[Any] | None = None) -> None:
        self.document_id = uuid.uuid4().hex
        self.version_id = 1
        self._text = ""
        self._line_starts: list[int] = [0]
        self._set_text(text)
        self._ranges = coerce_ranges(ranges)

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------
    @property
    def text(self) -> str:
        return self._text

    @property
    def content_hash(self) -> str:
        return _hash_text(self._text)

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    @property
    def ranges(self) -> tuple[TextRange, ...]:
        return self._ranges

    def set_ranges(self, ranges: Iterable[Any]) -> None:
        self._ranges = coerce_ranges(ranges)

    def line(self, number: int) -> Line:
        """Return line ``number`` (1-based)."""

        if number < 1 or number > self.line_count:
            raise IndexError(f"Line {number} is outside 1..{self.line_count}")
        start = self._line_starts[number - 1]
        if number < self.line_count:
            end = self._line_starts[number] - 1
        else:
            end = len(self._text)
        return Line(number=number, start=start, end=end, text=self._text[start:end])

    def line_at(self, offset: int) -> Line:
        """Return the line containing ``offset``."""

        if offset < 0 or offset > len(self._text):
            raise IndexError(f"Offset {offset} is outside 0..{len(self._text)}")
        return self.line(bisect_right(self._line_starts, offset))

    def slice(self, start: int, end: int) -> str:
        if start < 0 or end > len(self._text) or end < start:
            raise IndexError(f"Span ({start}, {end}) is outside 0..{len(self._text)}")
        return self._text[start:end]

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def apply_changes(
        self,
        batch: Sequence[EditDescriptor],
        *,
        selection: Sequence[TextRange] | None = None,
    ) -> None:
        """Apply ``batch`` (original coordinates) as one atomic update."""

        normalized = normalize_batch(batch, len(self._text))
        updated = apply_edit_batch(self._text, normalized)
        if selection is None:
            ranges = tuple(map_range(item, normalized) for item in self._ranges)
        else:
            ranges = coerce_ranges(selection)
        self._set_text(updated)
        self._ranges = ranges
        self.version_id += 1
        LOGGER.debug(
            "Document %s applied %d edit(s); version=%d", self.document_id, len(normalized), self.version_id
        )

    def _set_text(self, text: str) -> None:
        starts = [0]
        cursor = text.find("\n")
        while cursor != -1:
            starts.append(cursor + 1)
            cursor = text.find("\n", cursor + 1)
        self._text = text
        self._line_starts = starts

    def __repr__(self) -> str:
        return f"TextDocument(text={self._text!r}, ranges={[item.to_tuple() for item in self._ranges]!r})"


__all__ = ["EditableDocument", "Line", "TextDocument", "coerce_ranges"]

"""Adapter exposing a PySide6 ``QTextDocument`` as an editable document.

Offsets are Qt cursor positions, which equal Python string indices for text
inside the Basic Multilingual Plane.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Sequence

from PySide6.QtGui import QTextCursor, QTextDocument

from ..core.ranges import TextRange
from .document_model import Line, coerce_ranges
from .patches import EditDescriptor, map_range, normalize_batch

LOGGER = logging.getLogger(__name__)

_PARAGRAPH_SEPARATOR = "\u2029"


class QtTextDocumentHost:
    """Wrap a ``QTextDocument`` together with its selection ranges."""

    def __init__(self, document: QTextDocument | None = None, ranges: Iterable[Any] | None = None) -> None:
        self._document = document if document is not None else QTextDocument()
        self._ranges = coerce_ranges(ranges)

    @classmethod
    def from_text(cls, text: str, ranges: Iterable[Any] | None = None) -> "QtTextDocumentHost":
        document = QTextDocument()
        document.setPlainText(text)
        return cls(document, ranges)

    @property
    def qdocument(self) -> QTextDocument:
        return self._document

    @property
    def text(self) -> str:
        # toPlainText() rewrites non-breaking spaces; keep them and map only block breaks
        return self._document.toRawText().replace(_PARAGRAPH_SEPARATOR, "\n")

    @property
    def line_count(self) -> int:
        return self._document.blockCount()

    @property
    def ranges(self) -> tuple[TextRange, ...]:
        return self._ranges

    def set_ranges(self, ranges: Iterable[Any]) -> None:
        self._ranges = coerce_ranges(ranges)

    def line(self, number: int) -> Line:
        if number < 1 or number > self.line_count:
            raise IndexError(f"Line {number} is outside 1..{self.line_count}")
        return self._line_from_block(self._document.findBlockByNumber(number - 1))

    def line_at(self, offset: int) -> Line:
        length = self._length()
        if offset < 0 or offset > length:
            raise IndexError(f"Offset {offset} is outside 0..{length}")
        return self._line_from_block(self._document.findBlock(offset))

    def slice(self, start: int, end: int) -> str:
        length = self._length()
        if start < 0 or end > length or end < start:
            raise IndexError(f"Span ({start}, {end}) is outside 0..{length}")
        return self.text[start:end]

    def apply_changes(
        self,
        batch: Sequence[EditDescriptor],
        *,
        selection: Sequence[TextRange] | None = None,
    ) -> None:
        """Apply ``batch`` inside one edit block so Qt records a single undo step."""

        normalized = normalize_batch(batch, self._length())
        cursor = QTextCursor(self._document)
        cursor.beginEditBlock()
        try:
            for entry in reversed(normalized):
                cursor.setPosition(entry.start)
                cursor.setPosition(entry.end, QTextCursor.MoveMode.KeepAnchor)
                cursor.insertText(entry.insert)
        finally:
            cursor.endEditBlock()
        if selection is None:
            self._ranges = tuple(map_range(item, normalized) for item in self._ranges)
        else:
            self._ranges = coerce_ranges(selection)
        LOGGER.debug("QTextDocument applied %d edit(s)", len(normalized))

    def _length(self) -> int:
        # characterCount() includes the final paragraph separator
        return self._document.characterCount() - 1

    @staticmethod
    def _line_from_block(block: Any) -> Line:
        text = block.text()
        start = block.position()
        return Line(number=block.blockNumber() + 1, start=start, end=start + len(text), text=text)


__all__ = ["QtTextDocumentHost"]

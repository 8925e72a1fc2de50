"""Resolve selection ranges to the document lines they span."""

from __future__ import annotations

from typing import Iterable

from ..core.ranges import LineRange, TextRange
from .document_model import EditableDocument


def resolve_lines(document: EditableDocument, text_range: TextRange) -> LineRange:
    """Return the numbers of the lines holding ``text_range.start`` and ``text_range.end``."""

    first = document.line_at(text_range.start).number
    last = document.line_at(text_range.end).number
    return LineRange(first, last)


def resolve_line_blocks(document: EditableDocument, ranges: Iterable[TextRange]) -> list[LineRange]:
    """Resolve ``ranges`` and merge spans that share or border each other.

    A non-empty range ending exactly at a line start does not claim that line.
    The result is ordered by line number.
    """

    spans = sorted((_block_lines(document, item) for item in ranges), key=lambda span: span.start_line)
    blocks: list[LineRange] = []
    for span in spans:
        if blocks and blocks[-1].touches(span):
            blocks[-1] = blocks[-1].merge(span)
        else:
            blocks.append(span)
    return blocks


def _block_lines(document: EditableDocument, text_range: TextRange) -> LineRange:
    span = resolve_lines(document, text_range)
    if span.end_line > span.start_line and document.line(span.end_line).start == text_range.end:
        return LineRange(span.start_line, span.end_line - 1)
    return span


def line_block_text(document: EditableDocument, span: LineRange) -> tuple[int, int, str]:
    """Return ``(start, end, text)`` covering every line of ``span``."""

    start = document.line(span.start_line).start
    end = document.line(span.end_line).end
    return start, end, document.slice(start, end)


__all__ = ["line_block_text", "resolve_line_blocks", "resolve_lines"]

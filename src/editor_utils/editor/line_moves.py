"""Default line-move primitive: swap selected line blocks with a neighbour."""

from __future__ import annotations

import logging

from ..core.ranges import LineRange, TextRange
from .document_model import EditableDocument
from .patches import EditDescriptor
from .selection_gateway import line_block_text, resolve_line_blocks, resolve_lines
from .transaction import dispatch

LOGGER = logging.getLogger(__name__)


def move_line_up(document: EditableDocument) -> bool:
    """Move every selected line block one line up."""

    return _move_lines(document, -1)


def move_line_down(document: EditableDocument) -> bool:
    """Move every selected line block one line down."""

    return _move_lines(document, 1)


def _move_lines(document: EditableDocument, step: int) -> bool:
    ranges = document.ranges
    if not ranges:
        return False
    descriptors: list[EditDescriptor] = []
    shifts: list[tuple[LineRange, int]] = []
    for block in resolve_line_blocks(document, ranges):
        start, end, text = line_block_text(document, block)
        if step < 0:
            if block.start_line == 1:
                continue
            neighbour = document.line(block.start_line - 1)
            descriptors.append(EditDescriptor(neighbour.start, end, f"{text}\n{neighbour.text}"))
            shifts.append((block, -(neighbour.length + 1)))
        else:
            if block.end_line == document.line_count:
                continue
            neighbour = document.line(block.end_line + 1)
            descriptors.append(EditDescriptor(start, neighbour.end, f"{neighbour.text}\n{text}"))
            shifts.append((block, neighbour.length + 1))
    if not descriptors:
        LOGGER.debug("Line move skipped: every block is at the document edge")
        return False
    selection = [_shift_range(document, item, shifts) for item in ranges]
    return dispatch(document, descriptors, selection=selection)


def _shift_range(document: EditableDocument, text_range: TextRange, shifts: list[tuple[LineRange, int]]) -> TextRange:
    first_line = resolve_lines(document, text_range).start_line
    for block, delta in shifts:
        if block.start_line <= first_line <= block.end_line:
            return text_range.shift(delta)
    return text_range


__all__ = ["move_line_down", "move_line_up"]

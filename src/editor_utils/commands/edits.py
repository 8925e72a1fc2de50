"""Compute edit descriptors for the line and case commands.

Every function reads the document's current ranges and returns one
:class:`EditDescriptor` per range, in range order, expressed in the
document's current coordinates. Nothing here mutates the document.
"""

from __future__ import annotations

from ..editor.document_model import EditableDocument
from ..editor.patches import EditDescriptor
from ..editor.selection_gateway import line_block_text, resolve_lines
from .errors import CommandNotImplementedError
from .kinds import CaseStyle, Direction, SortOrder
from .transforms import CASE_TRANSFORMS, Transform, sort_lines


def compute_sort_edits(document: EditableDocument, order: SortOrder) -> list[EditDescriptor]:
    edits: list[EditDescriptor] = []
    for text_range in document.ranges:
        span = resolve_lines(document, text_range)
        lines = [document.line(number).text for number in span.numbers()]
        start = document.line(span.start_line).start
        end = document.line(span.end_line).end
        edits.append(EditDescriptor(start, end, "\n".join(sort_lines(lines, order))))
    return edits


def compute_case_edits(document: EditableDocument, style: CaseStyle) -> list[EditDescriptor]:
    transform = case_transform(style)
    edits: list[EditDescriptor] = []
    for text_range in document.ranges:
        selected = document.slice(text_range.start, text_range.end)
        edits.append(EditDescriptor(text_range.start, text_range.end, transform(selected)))
    return edits


def compute_duplicate_edits(document: EditableDocument, direction: Direction) -> list[EditDescriptor]:
    """Insert a copy of each range's lines above (``down``) or below (``up``) them.

    With ``down`` the copy lands before the original, so a caret on the
    original follows it one block down; with ``up`` the caret stays put.
    """

    direction = Direction(direction)
    edits: list[EditDescriptor] = []
    for text_range in document.ranges:
        start, end, text = line_block_text(document, resolve_lines(document, text_range))
        if direction is Direction.DOWN:
            edits.append(EditDescriptor(start, start, f"{text}\n", assoc=1))
        else:
            edits.append(EditDescriptor(end, end, f"\n{text}", assoc=-1))
    return edits


def case_transform(style: CaseStyle) -> Transform:
    try:
        return CASE_TRANSFORMS[CaseStyle(style)]
    except (KeyError, ValueError):
        raise CommandNotImplementedError(style) from None


__all__ = [
    "case_transform",
    "compute_case_edits",
    "compute_duplicate_edits",
    "compute_sort_edits",
]

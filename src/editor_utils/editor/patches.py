"""Edit descriptors and helpers for applying them as one coordinated batch."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from ..core.ranges import TextRange


class EditBatchError(RuntimeError):
    """Raised when a batch of edit descriptors cannot be applied as a unit."""

    def __init__(
        self,
        message: str,
        *,
        reason: str = "invalid_batch",
        span: tuple[int, int] | None = None,
        conflict: tuple[int, int] | None = None,
    ) -> None:
        super().__init__(message)
        self.reason = reason
        self.span = span
        self.conflict = conflict

    def details(self) -> dict[str, object]:
        return {
            "reason": self.reason,
            "span": self.span,
            "conflict": self.conflict,
        }


@dataclass(slots=True, frozen=True)
class EditDescriptor:
    """Replace the original offsets ``[start, end)`` with ``insert``.

    ``assoc`` only matters for pure insertions: a caret sitting exactly at the
    insertion point stays before the inserted text when ``assoc`` is negative
    and moves past it when positive.
    """

    start: int
    end: int
    insert: str = ""
    assoc: int = -1

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid edit span ({self.start}, {self.end})")

    @property
    def span(self) -> tuple[int, int]:
        return (self.start, self.end)

    @property
    def is_insertion(self) -> bool:
        return self.start == self.end

    @property
    def delta(self) -> int:
        """Change in document length caused by this edit."""

        return len(self.insert) - (self.end - self.start)


def normalize_batch(descriptors: Iterable[EditDescriptor], length: int) -> tuple[EditDescriptor, ...]:
    """Order ``descriptors`` by position and reject spans the document cannot take.

    Insertions sharing an offset keep their submission order.
    """

    normalized = tuple(sorted(descriptors, key=lambda item: (item.start, item.end)))
    for entry in normalized:
        if entry.end > length:
            raise EditBatchError(
                "Edit span exceeds document length",
                reason="range_overflow",
                span=entry.span,
            )
    _ensure_non_overlapping(normalized)
    return normalized


def apply_edit_batch(text: str, batch: Sequence[EditDescriptor]) -> str:
    """Return ``text`` with every edit of a normalized ``batch`` applied."""

    updated = text
    for entry in reversed(batch):
        updated = updated[: entry.start] + entry.insert + updated[entry.end :]
    return updated


def map_position(position: int, batch: Sequence[EditDescriptor]) -> int:
    """Translate an original offset into the coordinates produced by ``batch``."""

    delta = 0
    for entry in batch:
        if entry.start > position:
            break
        if entry.is_insertion and entry.start == position:
            if entry.assoc > 0:
                delta += len(entry.insert)
            continue
        if entry.end <= position:
            delta += entry.delta
            continue
        # position falls inside a replaced span
        offset = min(position - entry.start, len(entry.insert))
        return entry.start + delta + offset
    return position + delta


def map_range(text_range: TextRange, batch: Sequence[EditDescriptor]) -> TextRange:
    return TextRange(map_position(text_range.start, batch), map_position(text_range.end, batch))


def _ensure_non_overlapping(batch: Sequence[EditDescriptor]) -> None:
    previous: EditDescriptor | None = None
    for entry in batch:
        if previous is not None and entry.start < previous.end:
            raise EditBatchError(
                "Edit spans may not overlap",
                reason="range_overlap",
                span=entry.span,
                conflict=previous.span,
            )
        if previous is None or entry.end >= previous.end:
            previous = entry


__all__ = [
    "EditBatchError",
    "EditDescriptor",
    "apply_edit_batch",
    "map_position",
    "map_range",
    "normalize_batch",
]

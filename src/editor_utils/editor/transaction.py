"""Submit computed edits to a document as a single atomic batch."""

from __future__ import annotations

import logging
from typing import Sequence

from ..core.ranges import TextRange
from .document_model import EditableDocument
from .patches import EditBatchError, EditDescriptor

LOGGER = logging.getLogger(__name__)


def dispatch(
    document: EditableDocument,
    descriptors: Sequence[EditDescriptor],
    *,
    selection: Sequence[TextRange] | None = None,
) -> bool:
    """Apply ``descriptors`` to ``document`` all at once.

    Descriptors use the coordinates of the document as it was before the
    call. Returns ``False`` without touching the document when there is
    nothing to apply. The host validates the batch as a whole, so an
    overlapping or out-of-range span raises :class:`EditBatchError` before
    any change is made.
    """

    if not descriptors:
        LOGGER.debug("Dispatch skipped: no edits")
        return False
    try:
        document.apply_changes(descriptors, selection=selection)
    except EditBatchError as exc:
        LOGGER.warning("Rejected edit batch (%s): %s", exc.reason, exc.details())
        raise
    LOGGER.debug("Dispatched %d edit(s)", len(descriptors))
    return True


__all__ = ["dispatch"]

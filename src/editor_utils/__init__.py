"""Multi-range structural text edits: sort, move, duplicate and re-case lines."""

from .commands import (
    CaseStyle,
    CaseTransform,
    Command,
    CommandNotImplementedError,
    CommandRegistry,
    Direction,
    DuplicateLine,
    MoveLine,
    SortLines,
    SortOrder,
    run_command,
)
from .core.ranges import LineRange, TextRange
from .editor.document_model import Line, TextDocument
from .editor.patches import EditBatchError, EditDescriptor
from .editor.transaction import dispatch

__all__ = [
    "CaseStyle",
    "CaseTransform",
    "Command",
    "CommandNotImplementedError",
    "CommandRegistry",
    "Direction",
    "DuplicateLine",
    "EditBatchError",
    "EditDescriptor",
    "Line",
    "LineRange",
    "MoveLine",
    "SortLines",
    "SortOrder",
    "TextDocument",
    "TextRange",
    "dispatch",
    "run_command",
]

__version__ = "0.1.0"

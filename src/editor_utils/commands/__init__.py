"""Structural text-edit commands: move, sort, case transform and duplicate lines."""

from .errors import CommandNotImplementedError
from .kinds import (
    CaseStyle,
    CaseTransform,
    CommandKind,
    Direction,
    DuplicateLine,
    MoveLine,
    SortLines,
    SortOrder,
)
from .registry import Command, CommandRegistry, default_commands, run_command

__all__ = [
    "CaseStyle",
    "CaseTransform",
    "Command",
    "CommandKind",
    "CommandNotImplementedError",
    "CommandRegistry",
    "Direction",
    "DuplicateLine",
    "MoveLine",
    "SortLines",
    "SortOrder",
    "default_commands",
    "run_command",
]

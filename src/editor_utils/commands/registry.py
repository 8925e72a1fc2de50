"""Named commands and the table that binds them to a host."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator

from ..editor import line_moves
from ..editor.document_model import EditableDocument
from ..editor.transaction import dispatch
from ..services.telemetry import emit as telemetry_emit
from .edits import compute_case_edits, compute_duplicate_edits, compute_sort_edits
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

LOGGER = logging.getLogger(__name__)

DEFAULT_PREFIX = "editor-utils"

LineMover = Callable[[EditableDocument, Direction], bool]


def default_line_mover(document: EditableDocument, direction: Direction) -> bool:
    if Direction(direction) is Direction.UP:
        return line_moves.move_line_up(document)
    return line_moves.move_line_down(document)


def run_command(kind: CommandKind, document: EditableDocument, *, line_mover: LineMover | None = None) -> bool:
    """Compute the edits for ``kind`` and dispatch them to ``document``.

    Returns ``True`` when the document was changed.
    """

    if isinstance(kind, MoveLine):
        mover = line_mover or default_line_mover
        return bool(mover(document, kind.direction))
    if isinstance(kind, SortLines):
        edits = compute_sort_edits(document, kind.order)
    elif isinstance(kind, CaseTransform):
        edits = compute_case_edits(document, kind.style)
    elif isinstance(kind, DuplicateLine):
        edits = compute_duplicate_edits(document, kind.direction)
    else:
        raise CommandNotImplementedError(kind)
    return dispatch(document, edits)


@dataclass(slots=True, frozen=True)
class Command:
    """A stateless named command."""

    name: str
    kind: CommandKind

    def run(self, document: EditableDocument, *, line_mover: LineMover | None = None) -> bool:
        return run_command(self.kind, document, line_mover=line_mover)


def default_commands() -> tuple[Command, ...]:
    """Return the built-in command set."""

    commands: list[Command] = [
        Command("move-line-up", MoveLine(Direction.UP)),
        Command("move-line-down", MoveLine(Direction.DOWN)),
        Command("sort-line-ascending", SortLines(SortOrder.ASCENDING)),
        Command("sort-line-descending", SortLines(SortOrder.DESCENDING)),
    ]
    commands.extend(Command(f"transform-to-{style.value}", CaseTransform(style)) for style in CaseStyle)
    commands.append(Command("copy-line-up", DuplicateLine(Direction.UP)))
    commands.append(Command("copy-line-down", DuplicateLine(Direction.DOWN)))
    return tuple(commands)


class CommandRegistry:
    """Commands keyed by ``"<prefix>:<name>"``."""

    def __init__(
        self,
        commands: Iterable[Command] | None = None,
        *,
        prefix: str = DEFAULT_PREFIX,
        line_mover: LineMover | None = None,
        telemetry_enabled: bool = True,
    ) -> None:
        self._prefix = prefix
        self._line_mover = line_mover
        self._telemetry_enabled = telemetry_enabled
        self._commands: dict[str, Command] = {}
        for command in default_commands() if commands is None else commands:
            self.register(command)

    @property
    def prefix(self) -> str:
        return self._prefix

    def qualify(self, name: str) -> str:
        if ":" in name:
            return name
        return f"{self._prefix}:{name}"

    def register(self, command: Command) -> str:
        """Add ``command`` and return its qualified name."""

        qualified = self.qualify(command.name)
        if qualified in self._commands:
            raise ValueError(f"Command '{qualified}' is already registered")
        self._commands[qualified] = command
        LOGGER.debug("Registered command %s", qualified)
        return qualified

    def get(self, name: str) -> Command:
        qualified = self.qualify(name)
        try:
            return self._commands[qualified]
        except KeyError:
            raise KeyError(f"Unknown command '{qualified}'") from None

    def names(self) -> list[str]:
        return list(self._commands)

    def invoke(self, name: str, document: EditableDocument | None) -> bool:
        """Run command ``name`` against the active ``document``."""

        command = self.get(name)
        if document is None:
            LOGGER.error("No active editor found. Please focus on an editor window and try again.")
            return False
        changed = command.run(document, line_mover=self._line_mover)
        LOGGER.debug("Command %s finished (changed=%s)", self.qualify(name), changed)
        if self._telemetry_enabled:
            telemetry_emit("command.run", {"command": self.qualify(name), "changed": changed})
        return changed

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.qualify(name) in self._commands

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands.values())

    def __len__(self) -> int:
        return len(self._commands)


__all__ = [
    "Command",
    "CommandRegistry",
    "DEFAULT_PREFIX",
    "LineMover",
    "default_commands",
    "default_line_mover",
    "run_command",
]

"""Closed set of command kinds understood by :func:`run_command`."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"


class SortOrder(str, Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


class CaseStyle(str, Enum):
    """Case conversions available to :class:`CaseTransform`."""

    UPPERCASE = "uppercase"
    LOWERCASE = "lowercase"
    TITLE = "title-case"
    CAMEL = "camel-case"
    PASCAL = "pascal-case"
    KEBAB = "kebab-case"
    SNAKE = "snake-case"


@dataclass(slots=True, frozen=True)
class MoveLine:
    """Move the selected line blocks one line up or down."""

    direction: Direction


@dataclass(slots=True, frozen=True)
class SortLines:
    """Sort the lines touched by each range."""

    order: SortOrder


@dataclass(slots=True, frozen=True)
class CaseTransform:
    """Rewrite the text of each range in another case style."""

    style: CaseStyle


@dataclass(slots=True, frozen=True)
class DuplicateLine:
    """Insert a copy of the lines touched by each range next to them."""

    direction: Direction


CommandKind = Union[MoveLine, SortLines, CaseTransform, DuplicateLine]

__all__ = [
    "CaseStyle",
    "CaseTransform",
    "CommandKind",
    "Direction",
    "DuplicateLine",
    "MoveLine",
    "SortLines",
    "SortOrder",
]

"""Errors raised by the command layer."""

from __future__ import annotations


class CommandNotImplementedError(NotImplementedError):
    """A command kind or case style has no edit computation behind it."""

    def __init__(self, kind: object) -> None:
        super().__init__(f"No edit computation registered for {kind!r}")
        self.kind = kind


__all__ = ["CommandNotImplementedError"]

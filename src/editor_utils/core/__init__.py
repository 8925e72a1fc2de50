"""Core value types shared by the editor and command layers."""

from .ranges import LineRange, TextRange

__all__ = ["LineRange", "TextRange"]

"""Pure text transforms used by the sort and case commands.

Word boundaries follow ASCII regex semantics; the case mapping itself uses
Python's ``str.upper``/``str.lower``.
"""

from __future__ import annotations

import re
from typing import Callable, Mapping, Sequence

from .kinds import CaseStyle, SortOrder

Transform = Callable[[str], str]

_WORD_RE = re.compile(r"\w\S*", re.ASCII)
_SEPARATED_CHAR_RE = re.compile(r"[-_\s]+(.)?", re.ASCII)
_CASE_BOUNDARY_RE = re.compile(r"([a-z])([A-Z])")
_KEBAB_SEPARATORS_RE = re.compile(r"[_\s]+", re.ASCII)
_SNAKE_SEPARATORS_RE = re.compile(r"[-\s]+", re.ASCII)


def to_uppercase(text: str) -> str:
    return text.upper()


def to_lowercase(text: str) -> str:
    return text.lower()


def to_title_case(text: str) -> str:
    """Capitalize every word and lower-case the rest of it."""

    return _WORD_RE.sub(lambda match: match.group(0)[:1].upper() + match.group(0)[1:].lower(), text)


def to_camel_case(text: str) -> str:
    """``"hello world"`` -> ``"helloWorld"``."""

    joined = _join_separated(text)
    return joined[:1].lower() + joined[1:]


def to_pascal_case(text: str) -> str:
    """``"hello world"`` -> ``"HelloWorld"``."""

    joined = _join_separated(text)
    return joined[:1].upper() + joined[1:]


def to_kebab_case(text: str) -> str:
    """``"HelloWorld"`` -> ``"hello-world"``; hyphens already present are kept."""

    split = _CASE_BOUNDARY_RE.sub(r"\1-\2", text)
    return _KEBAB_SEPARATORS_RE.sub("-", split).lower()


def to_snake_case(text: str) -> str:
    """``"HelloWorld"`` -> ``"hello_world"``; underscores already present are kept."""

    split = _CASE_BOUNDARY_RE.sub(r"\1_\2", text)
    return _SNAKE_SEPARATORS_RE.sub("_", split).lower()


def _join_separated(text: str) -> str:
    return _SEPARATED_CHAR_RE.sub(lambda match: (match.group(1) or "").upper(), text)


CASE_TRANSFORMS: Mapping[CaseStyle, Transform] = {
    CaseStyle.UPPERCASE: to_uppercase,
    CaseStyle.LOWERCASE: to_lowercase,
    CaseStyle.TITLE: to_title_case,
    CaseStyle.CAMEL: to_camel_case,
    CaseStyle.PASCAL: to_pascal_case,
    CaseStyle.KEBAB: to_kebab_case,
    CaseStyle.SNAKE: to_snake_case,
}


def sort_lines(lines: Sequence[str], order: SortOrder) -> list[str]:
    """Sort ``lines`` by code point; equal lines keep their relative order."""

    return sorted(lines, reverse=SortOrder(order) is SortOrder.DESCENDING)


__all__ = [
    "CASE_TRANSFORMS",
    "Transform",
    "sort_lines",
    "to_camel_case",
    "to_kebab_case",
    "to_lowercase",
    "to_pascal_case",
    "to_snake_case",
    "to_title_case",
    "to_uppercase",
]

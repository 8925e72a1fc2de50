"""Tests for the pure case and sort transforms."""

from __future__ import annotations

import pytest

from editor_utils.commands.kinds import SortOrder
from editor_utils.commands.transforms import (
    sort_lines,
    to_camel_case,
    to_kebab_case,
    to_lowercase,
    to_pascal_case,
    to_snake_case,
    to_title_case,
    to_uppercase,
)

_SAMPLES = ["hello world", "MiXeD Case_text", "Ünïcode wörds", "", "snake_case-and kebab"]


@pytest.mark.parametrize("text", _SAMPLES)
def test_lowercase_after_uppercase_matches_lowercase(text: str) -> None:
    assert to_lowercase(to_uppercase(text)) == to_lowercase(text)


@pytest.mark.parametrize("text", _SAMPLES)
def test_uppercase_after_lowercase_matches_uppercase(text: str) -> None:
    assert to_uppercase(to_lowercase(text)) == to_uppercase(text)


def test_title_case_capitalizes_each_word() -> None:
    assert to_title_case("hello WORLD foo-bar") == "Hello World Foo-bar"


def test_camel_case() -> None:
    assert to_camel_case("hello world") == "helloWorld"
    assert to_camel_case("Hello_big-world") == "helloBigWorld"
    assert to_camel_case("trailing_") == "trailing"


def test_pascal_case() -> None:
    assert to_pascal_case("hello world") == "HelloWorld"
    assert to_pascal_case("some_var_name") == "SomeVarName"


def test_kebab_case() -> None:
    assert to_kebab_case("HelloWorld") == "hello-world"
    assert to_kebab_case("some_var  name") == "some-var-name"
    assert to_kebab_case("a--b") == "a--b"


def test_snake_case() -> None:
    assert to_snake_case("HelloWorld") == "hello_world"
    assert to_snake_case("kebab-case value") == "kebab_case_value"


def test_kebab_then_camel_does_not_recover_capitalization() -> None:
    assert to_camel_case(to_kebab_case("XMLHttpRequest")) == "xmlhttpRequest"


def test_sort_lines_uses_code_point_order() -> None:
    assert sort_lines(["b", "a", "B"], SortOrder.ASCENDING) == ["B", "a", "b"]
    assert sort_lines(["b", "a", "B"], SortOrder.DESCENDING) == ["b", "a", "B"]


def test_sort_lines_is_idempotent() -> None:
    lines = ["pear", "apple", "fig", "apple"]

    for order in SortOrder:
        once = sort_lines(lines, order)
        assert sort_lines(once, order) == once


def test_descending_is_reverse_of_ascending_for_distinct_lines() -> None:
    lines = ["banana", "apple", "cherry", "date"]

    assert sort_lines(lines, SortOrder.DESCENDING) == list(reversed(sort_lines(lines, SortOrder.ASCENDING)))

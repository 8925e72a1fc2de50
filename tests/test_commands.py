"""Tests for command dispatch and the command registry."""

from __future__ import annotations

import logging

import pytest

from editor_utils.commands.errors import CommandNotImplementedError
from editor_utils.commands.kinds import (
    CaseStyle,
    CaseTransform,
    Direction,
    DuplicateLine,
    MoveLine,
    SortLines,
    SortOrder,
)
from editor_utils.commands.registry import Command, CommandRegistry, default_commands, run_command
from editor_utils.core.ranges import TextRange
from editor_utils.editor.document_model import TextDocument
from editor_utils.editor.patches import EditBatchError
from editor_utils.services import telemetry

_EXPECTED_NAMES = [
    "move-line-up",
    "move-line-down",
    "sort-line-ascending",
    "sort-line-descending",
    "transform-to-uppercase",
    "transform-to-lowercase",
    "transform-to-title-case",
    "transform-to-camel-case",
    "transform-to-pascal-case",
    "transform-to-kebab-case",
    "transform-to-snake-case",
    "copy-line-up",
    "copy-line-down",
]


def test_sort_whole_document_ascending() -> None:
    doc = TextDocument("banana\napple\ncherry", ranges=[(0, 19)])

    assert run_command(SortLines(SortOrder.ASCENDING), doc) is True
    assert doc.text == "apple\nbanana\ncherry"


def test_sorting_twice_is_idempotent() -> None:
    doc = TextDocument("pear\nfig\napple", ranges=[(0, 14)])

    run_command(SortLines(SortOrder.DESCENDING), doc)
    once = doc.text
    run_command(SortLines(SortOrder.DESCENDING), doc)

    assert doc.text == once == "pear\nfig\napple"


def test_pascal_then_kebab_on_selection() -> None:
    doc = TextDocument("hello world", ranges=[(0, 11)])

    run_command(CaseTransform(CaseStyle.PASCAL), doc)
    assert doc.text == "HelloWorld"
    assert doc.ranges == (TextRange(0, 10),)

    run_command(CaseTransform(CaseStyle.KEBAB), doc)
    assert doc.text == "hello-world"


def test_two_words_on_one_line_are_uppercased_together() -> None:
    doc = TextDocument("foo bar baz", ranges=[(0, 3), (8, 11)])

    assert run_command(CaseTransform(CaseStyle.UPPERCASE), doc) is True
    assert doc.text == "FOO bar BAZ"
    assert doc.ranges == (TextRange(0, 3), TextRange(8, 11))


def test_case_transform_is_idempotent() -> None:
    doc = TextDocument("Some Words", ranges=[(0, 10)])

    run_command(CaseTransform(CaseStyle.SNAKE), doc)
    once = doc.text
    run_command(CaseTransform(CaseStyle.SNAKE), doc)

    assert doc.text == once == "some_words"


def test_duplicate_down_places_copy_and_caret_follows_original() -> None:
    doc = TextDocument("x", ranges=[(0, 0)])

    assert run_command(DuplicateLine(Direction.DOWN), doc) is True
    assert doc.text == "x\nx"
    assert doc.ranges == (TextRange(2, 2),)


def test_duplicate_up_keeps_caret_on_original() -> None:
    doc = TextDocument("x", ranges=[(0, 0)])

    assert run_command(DuplicateLine(Direction.UP), doc) is True
    assert doc.text == "x\nx"
    assert doc.ranges == (TextRange(0, 0),)


def test_duplicate_is_not_idempotent() -> None:
    doc = TextDocument("x", ranges=[(0, 0)])

    run_command(DuplicateLine(Direction.DOWN), doc)
    run_command(DuplicateLine(Direction.DOWN), doc)

    assert doc.text == "x\nx\nx"


def test_duplicate_down_then_up_leaves_original_in_the_middle() -> None:
    doc = TextDocument("a\nx\nb", ranges=[(2, 2)])

    run_command(DuplicateLine(Direction.DOWN), doc)
    run_command(DuplicateLine(Direction.UP), doc)

    assert doc.text == "a\nx\nx\nx\nb"
    assert doc.line_at(doc.ranges[0].start).number == 3


def test_move_line_uses_the_injected_primitive() -> None:
    calls: list[Direction] = []

    def mover(document, direction):
        calls.append(direction)
        return True

    doc = TextDocument("a\nb", ranges=[(2, 2)])

    assert run_command(MoveLine(Direction.UP), doc, line_mover=mover) is True
    assert calls == [Direction.UP]
    assert doc.text == "a\nb"


def test_move_line_defaults_to_builtin_primitive() -> None:
    doc = TextDocument("a\nb", ranges=[(2, 2)])

    assert run_command(MoveLine(Direction.UP), doc) is True
    assert doc.text == "b\na"


@pytest.mark.parametrize("command", default_commands(), ids=lambda command: command.name)
def test_every_command_is_a_no_op_without_ranges(command: Command) -> None:
    doc = TextDocument("b\na\nc")
    before = doc.content_hash

    assert command.run(doc) is False
    assert doc.content_hash == before


def test_unknown_kind_fails_loudly() -> None:
    with pytest.raises(CommandNotImplementedError):
        run_command(object(), TextDocument("a", ranges=[(0, 0)]))  # type: ignore[arg-type]


def test_overlapping_line_ranges_are_rejected() -> None:
    doc = TextDocument("b\na", ranges=[(0, 0), (1, 1)])

    with pytest.raises(EditBatchError):
        run_command(SortLines(SortOrder.ASCENDING), doc)
    assert doc.text == "b\na"


def test_default_commands_cover_every_transform() -> None:
    assert [command.name for command in default_commands()] == _EXPECTED_NAMES


def test_registry_qualifies_names_with_prefix() -> None:
    registry = CommandRegistry()

    assert len(registry) == 13
    assert registry.names()[0] == "editor-utils:move-line-up"
    assert "sort-line-ascending" in registry
    assert "editor-utils:copy-line-down" in registry
    assert registry.get("copy-line-down") is registry.get("editor-utils:copy-line-down")


def test_registry_invoke_runs_command() -> None:
    registry = CommandRegistry()
    doc = TextDocument("b\na", ranges=[(0, 3)])

    assert registry.invoke("editor-utils:sort-line-ascending", doc) is True
    assert doc.text == "a\nb"


def test_registry_rejects_unknown_and_duplicate_names() -> None:
    registry = CommandRegistry()

    with pytest.raises(KeyError):
        registry.invoke("shuffle-lines", TextDocument("a"))
    with pytest.raises(ValueError):
        registry.register(Command("copy-line-up", DuplicateLine(Direction.UP)))


def test_registry_without_active_document_logs_and_returns_false(caplog: pytest.LogCaptureFixture) -> None:
    registry = CommandRegistry()

    with caplog.at_level(logging.ERROR, logger="editor_utils.commands.registry"):
        assert registry.invoke("copy-line-up", None) is False

    assert "No active editor found" in caplog.text


def test_registry_emits_telemetry_after_each_run() -> None:
    events: list[dict] = []
    telemetry.register_event_listener("command.run", events.append)
    try:
        CommandRegistry().invoke("transform-to-uppercase", TextDocument("ab", ranges=[(0, 2)]))
        CommandRegistry(telemetry_enabled=False).invoke("transform-to-uppercase", TextDocument("ab", ranges=[(0, 2)]))
    finally:
        telemetry.unregister_event_listener("command.run", events.append)

    assert events == [{"event": "command.run", "command": "editor-utils:transform-to-uppercase", "changed": True}]


def test_registry_passes_line_mover_through() -> None:
    seen: list[Direction] = []
    registry = CommandRegistry(line_mover=lambda document, direction: seen.append(direction) or False)

    assert registry.invoke("move-line-down", TextDocument("a", ranges=[(0, 0)])) is False
    assert seen == [Direction.DOWN]

from __future__ import annotations

import pytest

from core.lines import cursor_at, iter_lines, line_at


def test_iter_lines_handles_mixed_terminators() -> None:
    lines = list(iter_lines("a\r\nbb\rccc\nd"))
    assert [cursor.line for cursor in lines] == ["a", "bb", "ccc", "d"]
    assert [cursor.line_start for cursor in lines] == [0, 3, 6, 10]
    assert [cursor.row for cursor in lines] == [0, 1, 2, 3]


def test_trailing_newline_yields_empty_last_line() -> None:
    assert [cursor.line for cursor in iter_lines("x\n")] == ["x", ""]


def test_line_at_returns_line_and_column() -> None:
    buffer = "int x;\n#include <foo.h>\n"
    cursor = line_at(buffer, 12)
    assert cursor.line == "#include <foo.h>"
    assert cursor.line_start == 7
    assert cursor.column == 5
    assert cursor.row == 1


def test_offset_on_terminator_belongs_to_previous_line() -> None:
    cursor = line_at("ab\r\ncd", 3)
    assert cursor.line == "ab"
    assert cursor.column == 2


def test_line_at_clamps_offset() -> None:
    assert line_at("ab\ncd", 99).line == "cd"
    assert line_at("ab\ncd", -1).column == 0


def test_cursor_at_clamps_column() -> None:
    cursor = cursor_at("one\ntwo", 1, 40)
    assert cursor.line == "two"
    assert cursor.column == 3


def test_cursor_at_rejects_missing_row() -> None:
    with pytest.raises(ValueError):
        cursor_at("one\ntwo", 5, 0)
    with pytest.raises(ValueError):
        cursor_at("one", -1, 0)

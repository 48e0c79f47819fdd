"""Helpers for cutting single lines out of a text buffer.

Directive matching is line-scoped: the matcher never sees more than one
line, which keeps each query bounded and stops patterns from reaching into
neighbouring lines.
"""

from __future__ import annotations

from dataclasses import replace
import re
from typing import Iterator

from core.models import LineCursor

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def iter_lines(buffer: str) -> Iterator[LineCursor]:
    """Yield every line of ``buffer`` without its terminator."""

    row = 0
    line_start = 0
    for line_break in _LINE_BREAK.finditer(buffer):
        yield LineCursor(buffer[line_start : line_break.start()], line_start, 0, row)
        line_start = line_break.end()
        row += 1
    yield LineCursor(buffer[line_start:], line_start, 0, row)


def line_at(buffer: str, offset: int) -> LineCursor:
    """Return the line containing ``offset`` with the cursor column set.

    An offset that sits on a line terminator belongs to the line it ends.
    """

    offset = min(max(offset, 0), len(buffer))
    current = None
    for cursor in iter_lines(buffer):
        if offset < cursor.line_start:
            break
        current = cursor
    column = min(offset - current.line_start, len(current.line))
    return replace(current, column=column)


def cursor_at(buffer: str, row: int, column: int) -> LineCursor:
    """Return the 0-based ``row`` of ``buffer`` with ``column`` clamped to it."""

    if row < 0:
        raise ValueError(f"Row must not be negative: {row}")
    for cursor in iter_lines(buffer):
        if cursor.row == row:
            return replace(cursor, column=min(max(column, 0), len(cursor.line)))
    raise ValueError(f"Row {row} is past the end of the buffer")

"""Core domain models.

These dataclasses are shared across the core and adapters to avoid tight
coupling to any host-specific types.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Tuple


@dataclass(frozen=True)
class MatchResult:
    """A recognized resource name and its span in the queried text.

    ``start`` and ``end`` are 0-based offsets with ``end`` exclusive, so
    ``line[start:end] == text`` always holds for the line that was queried.
    """

    text: str
    start: int
    end: int
    rule: str

    @property
    def span(self) -> Tuple[int, int]:
        return self.start, self.end

    def shift(self, offset: int) -> "MatchResult":
        """Return the same match moved by ``offset`` characters."""

        return replace(self, start=self.start + offset, end=self.end + offset)


@dataclass(frozen=True)
class LineCursor:
    """One line cut out of a buffer, with the cursor column inside it."""

    line: str
    line_start: int
    column: int
    row: int

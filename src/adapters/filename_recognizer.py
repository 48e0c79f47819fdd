"""Default filename-at-point recognizer.

Stands in for the host editor's own lookup: it only knows about the run of
filename characters under the cursor and nothing about directives.
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

from core.models import MatchResult

_FILENAME_RUN = re.compile(r"""[^\s"'<>|;`]+""")
_TRAILING_PUNCTUATION = ".,:;"
_BRACKETS = (("(", ")"), ("[", "]"))


class FilenameRecognizer:
    """Recognize the filename-looking token at a position.

    ``last_match`` is the host's last matched region. It is updated on every
    call, including misses, so it always describes the most recent lookup.
    """

    RULE = "filename"

    def __init__(self) -> None:
        self.last_match: Optional[MatchResult] = None

    def recognize(self, line: str, position: int) -> Optional[MatchResult]:
        position = min(max(position, 0), len(line))
        # A cursor just past the name (end of line, or on a separator) still
        # refers to it.
        span = _run_at(line, position) or _run_at(line, position - 1)
        result = None
        if span is not None:
            start, end = _trim(line, *span)
            if end > start:
                result = MatchResult(text=line[start:end], start=start, end=end, rule=self.RULE)
        self.last_match = result
        return result


def _run_at(line: str, index: int) -> Optional[Tuple[int, int]]:
    if index < 0 or index >= len(line):
        return None
    for run in _FILENAME_RUN.finditer(line):
        if run.start() <= index < run.end():
            return run.span()
    return None


def _trim(line: str, start: int, end: int) -> Tuple[int, int]:
    """Drop sentence punctuation and enclosing brackets from the edges."""

    end = _strip_trailing(line, start, end)
    for opener, closer in _BRACKETS:
        if line[start:end].startswith(opener):
            start += 1
        token = line[start:end]
        if token.endswith(closer) and token.count(closer) > token.count(opener):
            end -= 1
    return start, _strip_trailing(line, start, end)


def _strip_trailing(line: str, start: int, end: int) -> int:
    while end > start and line[end - 1] in _TRAILING_PUNCTUATION:
        end -= 1
    return end

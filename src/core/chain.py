"""Recognizer chain sitting in front of the host's filename recognizer.

This module is host-agnostic. It only relies on ports, so the same chain can
wrap any editor's find-file-at-point lookup.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from core.directives import DirectiveRule, match_directive
from core.lines import line_at
from core.models import MatchResult
from core.ports import HostRecognizerPort, RecognizerPort

LOGGER = logging.getLogger(__name__)


class DirectiveRecognizer:
    """Recognizer port backed by the include-directive rules."""

    def __init__(self, rules: Optional[Sequence[DirectiveRule]] = None) -> None:
        self._rules = None if rules is None else list(rules)

    def recognize(self, line: str, position: int) -> Optional[MatchResult]:
        return match_directive(line, position, self._rules)


class RecognizerChain:
    """Runs installed recognizers ahead of the host default."""

    def __init__(self, default: HostRecognizerPort) -> None:
        self._default = default
        self._installed: List[RecognizerPort] = []

    @property
    def default(self) -> HostRecognizerPort:
        return self._default

    @property
    def installed(self) -> tuple[RecognizerPort, ...]:
        return tuple(self._installed)

    def install(self, recognizer: RecognizerPort) -> None:
        """Register ``recognizer`` ahead of the default; repeats are ignored."""

        if any(existing is recognizer for existing in self._installed):
            return
        self._installed.append(recognizer)
        LOGGER.debug("Installed %s", type(recognizer).__name__)

    def uninstall(self, recognizer: RecognizerPort) -> bool:
        """Remove ``recognizer``; safe to call when it is not installed."""

        for index, existing in enumerate(self._installed):
            if existing is recognizer:
                del self._installed[index]
                LOGGER.debug("Uninstalled %s", type(recognizer).__name__)
                return True
        return False

    def recognize(self, line: str, position: int) -> Optional[MatchResult]:
        """Return the first installed recognizer's hit, else defer to the host.

        A hit from an installed recognizer also becomes the host's last
        matched region so highlighting follows the reported span. On a miss
        nothing is touched before the host default runs.
        """

        for recognizer in self._installed:
            result = recognizer.recognize(line, position)
            if result is not None:
                self._default.last_match = result
                return result
        return self._default.recognize(line, position)

    def recognize_at(self, buffer: str, offset: int) -> Optional[MatchResult]:
        """Recognize on the line holding ``offset``; the span is buffer-relative."""

        cursor = line_at(buffer, offset)
        result = self.recognize(cursor.line, cursor.column)
        if result is None:
            return None
        shifted = result.shift(cursor.line_start)
        # Keep the host's last region in the same coordinates we hand back.
        if self._default.last_match is result:
            self._default.last_match = shifted
        return shifted


def install_directive_matcher(
    chain: RecognizerChain,
    rules: Optional[Sequence[DirectiveRule]] = None,
) -> DirectiveRecognizer:
    """Put a directive recognizer in front of ``chain``'s default.

    An already installed directive recognizer is replaced, so there is never
    more than one in the chain.
    """

    uninstall_directive_matcher(chain)
    recognizer = DirectiveRecognizer(rules)
    chain.install(recognizer)
    return recognizer


def uninstall_directive_matcher(chain: RecognizerChain) -> int:
    """Remove every directive recognizer from ``chain``; returns how many."""

    removed = 0
    for recognizer in chain.installed:
        if isinstance(recognizer, DirectiveRecognizer) and chain.uninstall(recognizer):
            removed += 1
    return removed

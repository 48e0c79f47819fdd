"""Ports (interfaces) used by the recognizer chain.

Ports define the minimal contracts for host recognizers and variable
expansion so that the core can sit in front of different editors.
"""

from __future__ import annotations

from typing import Optional, Protocol

from core.models import MatchResult


class RecognizerPort(Protocol):
    """Anything that can spot a resource name on one line of text."""

    def recognize(self, line: str, position: int) -> Optional[MatchResult]:
        ...


class HostRecognizerPort(RecognizerPort, Protocol):
    """The host's own recognizer, which remembers its last matched region."""

    last_match: Optional[MatchResult]


class VariableExpanderPort(Protocol):
    """Expands build-variable references inside a matched name."""

    def expand(self, text: str) -> str:
        ...

"""State container for the viewer's last lookup."""

from __future__ import annotations

from dataclasses import dataclass

from core.models import MatchResult


@dataclass
class LookupState:
    result: MatchResult | None = None
    row: int | None = None
    located: str | None = None
    directives_enabled: bool = True

"""Shared constants for the Textual UI."""

from __future__ import annotations

INCLUDE_GREEN = "#7FD962"
MISS_RED = "#E5534B"

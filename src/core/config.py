"""Core configuration dataclasses.

We keep config parsing outside the core, but these dataclasses define the
shape the core expects so adapters and app layers can build safely.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple


@dataclass(frozen=True)
class LocatorConfig:
    """Search settings consumed by the file locator and variable expander."""

    search_paths: Tuple[str, ...] = ()
    suffixes: Tuple[str, ...] = ()
    variables: Dict[str, str] = field(default_factory=dict)

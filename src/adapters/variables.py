"""Build-variable expansion adapter.

Implements the core VariableExpanderPort for make-style ``$(VAR)`` and
shell-style ``${VAR}`` references inside matched include names.
"""

from __future__ import annotations

import logging
import os
import re
from typing import Mapping, Optional

LOGGER = logging.getLogger(__name__)

_REFERENCE = re.compile(
    r"\$\$"
    r"|\$\((?P<paren>[A-Za-z_][A-Za-z0-9_]*)\)"
    r"|\$\{(?P<brace>[A-Za-z_][A-Za-z0-9_]*)\}"
)

# Values may reference other variables; a self-referencing value stops here.
MAX_PASSES = 10


class BuildVariableExpander:
    """Expand variables from a fixed mapping, then from the environment."""

    def __init__(self, variables: Optional[Mapping[str, str]] = None, use_environ: bool = True) -> None:
        self._variables = dict(variables or {})
        self._use_environ = use_environ

    def lookup(self, name: str) -> Optional[str]:
        if name in self._variables:
            return self._variables[name]
        if self._use_environ:
            return os.environ.get(name)
        return None

    def expand(self, text: str) -> str:
        """Return ``text`` with every known reference replaced.

        Unknown references are left as written and ``$$`` becomes a single
        dollar sign once expansion is done.
        """

        for _ in range(MAX_PASSES):
            expanded = _REFERENCE.sub(self._substitute, text)
            if expanded == text:
                break
            text = expanded
        else:
            LOGGER.warning("Variable expansion did not settle for %s", text)
        return _REFERENCE.sub(_unescape, text)

    def _substitute(self, reference: re.Match) -> str:
        name = reference.group("paren") or reference.group("brace")
        if name is None:
            return reference.group(0)
        value = self.lookup(name)
        if value is None:
            return reference.group(0)
        return value


def _unescape(reference: re.Match) -> str:
    if reference.group(0) == "$$":
        return "$"
    return reference.group(0)

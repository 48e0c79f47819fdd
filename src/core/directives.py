"""Include-directive recognition (core domain)."""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Iterable, List, Optional, Sequence, Tuple

from core.models import MatchResult

_TOKEN = re.compile(r"\S+")


@dataclass(frozen=True)
class DirectiveRule:
    """Compiled recognition rule.

    The resource name is captured by the pattern's last matching named group.
    ``multi_token`` rules may name several space-separated resources, and the
    one nearest the query position is reported.
    """

    name: str
    pattern: re.Pattern
    multi_token: bool = False


# Priority order matters: the first rule that matches a line wins.
DIRECTIVE_RULES: Tuple[DirectiveRule, ...] = (
    # @include "foo.awk"; not anchored so a leading comment still matches.
    DirectiveRule("at-include", re.compile(r'@?\s*include\s+"(?P<name>[^\s"]+)')),
    # include "foo.rc"
    DirectiveRule("quoted-include", re.compile(r'include\s+"(?P<name>[^\s"]+)')),
    # include foo.make bar.make; only at line start, "include" is too common in prose.
    DirectiveRule("bare-include", re.compile(r'^include\s+(?P<name>[^\s"]\S*)'), multi_token=True),
    # #include <foo.h> or #include "foo.h"
    DirectiveRule(
        "c-include",
        re.compile(r'\s*#\s*include\s+(?:"(?P<name>[^"\r]+)|<(?P<angled>[^>\r]+))'),
    ),
)

RULE_NAMES: Tuple[str, ...] = tuple(rule.name for rule in DIRECTIVE_RULES)


def build_rules(forms_config: Iterable[dict]) -> List[DirectiveRule]:
    """Return the enabled rules, always in built-in priority order.

    Config entries only switch forms on or off; they cannot reorder them, so
    the precedence between overlapping forms stays stable.
    """

    known = set(RULE_NAMES)
    disabled: set[str] = set()
    for form in forms_config:
        name = form.get("name")
        if name not in known:
            raise ValueError(f"Unknown directive form: {name}")
        if not form.get("enabled", True):
            disabled.add(name)
    return [rule for rule in DIRECTIVE_RULES if rule.name not in disabled]


def match_directive(
    line: str,
    position: int = 0,
    rules: Optional[Sequence[DirectiveRule]] = None,
) -> Optional[MatchResult]:
    """Recognize an include directive anywhere on ``line``.

    Returns ``None`` when no rule applies. ``position`` only matters for
    multi-token lines and is clamped to the line. A carriage return is just
    another separator, but a newline raises ``ValueError``: callers must cut
    out a single line first (see ``core.lines.line_at``).
    """

    if "\n" in line:
        raise ValueError("match_directive expects a single line without newlines")

    position = min(max(position, 0), len(line))
    for rule in DIRECTIVE_RULES if rules is None else rules:
        found = rule.pattern.search(line)
        if found is None:
            continue
        start, end = found.span(found.lastgroup)
        if rule.multi_token:
            start, end = _token_near(line, start, position)
        return MatchResult(text=line[start:end], start=start, end=end, rule=rule.name)
    return None


def _token_near(line: str, first: int, position: int) -> Tuple[int, int]:
    """Pick the token under ``position``, else the next one, else the last."""

    spans = [token.span() for token in _TOKEN.finditer(line, first)]
    for start, end in spans:
        if start <= position <= end:
            return start, end
    for start, end in spans:
        if start > position:
            return start, end
    return spans[-1]

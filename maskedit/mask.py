"""
Mask: an immutable, ordered sequence of position rules.

Built once from a pattern string such as 'HH:HH:HH:HH:HH:HH'. All queries are
bounds-checked so callers never need to validate a position first.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .position_rules import DEFAULT_FILLER, FREE_RULE, PositionRule, rule_for_pattern_char


DEFAULT_MASK = "HH:HH:HH:HH:HH:HH"


def normalize_filler(filler: Optional[str]) -> str:
    """Return a single filler character; empty or missing falls back to a space."""
    if not filler:
        return DEFAULT_FILLER
    return str(filler)[0]


@dataclass(frozen=True)
class Mask:
    pattern: str
    rules: Tuple[PositionRule, ...]
    first_editable: Optional[int]
    last_editable: Optional[int]

    @property
    def length(self) -> int:
        return len(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def has_editable(self) -> bool:
        return self.first_editable is not None

    def rule_at(self, pos: int) -> PositionRule:
        if 0 <= pos < len(self.rules):
            return self.rules[pos]
        return FREE_RULE

    def is_editable(self, pos: int) -> bool:
        return self.rule_at(pos).editable

    def accepts(self, ch: str, pos: int) -> bool:
        return self.rule_at(pos).accepts(ch)

    def filler_at(self, pos: int) -> str:
        return self.rule_at(pos).filler

    def empty_text(self) -> str:
        return "".join(rule.filler for rule in self.rules)

    def compact(self, text: str) -> str:
        """Drop every non-editable position from `text`."""
        return "".join(ch for i, ch in enumerate(text) if self.is_editable(i))


def build_mask(pattern: Optional[str], filler: Optional[str] = DEFAULT_FILLER) -> Mask:
    """Build a Mask from `pattern`.

    Equal pattern characters share one rule instance. An empty pattern yields
    an empty mask with no editable positions.
    """
    pattern = pattern or ""
    filler = normalize_filler(filler)
    cache: Dict[str, PositionRule] = {}
    rules = []
    first: Optional[int] = None
    last: Optional[int] = None
    for i, pattern_char in enumerate(pattern):
        rule = cache.get(pattern_char)
        if rule is None:
            rule = rule_for_pattern_char(pattern_char, filler)
            cache[pattern_char] = rule
        rules.append(rule)
        if rule.editable:
            if first is None:
                first = i
            last = i
    return Mask(pattern, tuple(rules), first, last)


__all__ = ["Mask", "build_mask", "normalize_filler", "DEFAULT_MASK"]

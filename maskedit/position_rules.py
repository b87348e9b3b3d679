from __future__ import annotations

"""
Per-slot rules for masked input.

A rule answers three questions about one mask position: can the user put
the selection there, which characters are accepted, and what is shown while
the slot is empty. The set of kinds is closed:

- 'free'      placeholder; accepts nothing, never selectable
- 'delimiter' fixed literal such as ':'; matches only itself
- 'hex'       editable hex digit (0-9, A-F, a-f)
"""

from dataclasses import dataclass


DEFAULT_FILLER = " "
HEX_DIGITS = frozenset("0123456789ABCDEFabcdef")

KIND_FREE = "free"
KIND_DELIMITER = "delimiter"
KIND_HEX = "hex"


@dataclass(frozen=True)
class PositionRule:
    kind: str  # 'free' | 'delimiter' | 'hex'
    filler: str = DEFAULT_FILLER

    @property
    def editable(self) -> bool:
        return self.kind == KIND_HEX

    def accepts(self, ch: str) -> bool:
        if not ch or len(ch) != 1:
            return False
        if self.kind == KIND_HEX:
            return ch in HEX_DIGITS
        if self.kind == KIND_DELIMITER:
            return ch == self.filler
        return False


def free_rule() -> PositionRule:
    return PositionRule(KIND_FREE, DEFAULT_FILLER)


def delimiter_rule(literal: str) -> PositionRule:
    return PositionRule(KIND_DELIMITER, literal)


def hex_rule(filler: str = DEFAULT_FILLER) -> PositionRule:
    return PositionRule(KIND_HEX, filler)


def rule_for_pattern_char(pattern_char: str, filler: str = DEFAULT_FILLER) -> PositionRule:
    """Map one pattern character to its rule; unknown characters are literals."""
    if pattern_char == "H":
        return hex_rule(filler)
    return delimiter_rule(pattern_char)


FREE_RULE = free_rule()


__all__ = [
    "PositionRule",
    "DEFAULT_FILLER",
    "HEX_DIGITS",
    "KIND_FREE",
    "KIND_DELIMITER",
    "KIND_HEX",
    "FREE_RULE",
    "free_rule",
    "delimiter_rule",
    "hex_rule",
    "rule_for_pattern_char",
]

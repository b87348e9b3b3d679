from __future__ import annotations

"""
Edit transformer: decides what a proposed text change does to a masked buffer.

An edit proposal is `(source, dest_start, dest_end)` against the current
buffer, where `dest_start..dest_end` is the half-open range being replaced
and `source` is the proposed replacement text. The buffer never grows or
shrinks, so the result is either a rejection or a replacement of exactly the
length the buffer needs to stay as long as the mask.

Precedence:
- pure insertion into a non-empty buffer is rejected
- one slot replaced by zero or one characters: delete (write the filler) or
  type a single character (accepted only if the slot's rule allows it)
- anything else is a multi-character replace: delimiters are re-synthesized
  at their positions, invalid characters are dropped, and the tail is padded
  with fillers
"""

from dataclasses import dataclass
from typing import List, Optional

from .debug_log import _dbg
from .mask import Mask


FORWARD = 'forward'
BACKWARD = 'backward'


@dataclass(frozen=True)
class EditResult:
    accepted: bool
    replacement: str
    dest_start: int
    dest_end: int
    direction: Optional[str] = None  # 'forward' | 'backward' | None (stay)
    # Absolute position the cursor advances from after a forward edit;
    # None means no user character landed and the cursor stays put.
    anchor: Optional[int] = None

    @property
    def rejected(self) -> bool:
        return not self.accepted

    @property
    def is_deletion(self) -> bool:
        return self.accepted and self.direction == BACKWARD


def _reject(replacement: str, dest_start: int, dest_end: int) -> EditResult:
    return EditResult(False, replacement, dest_start, dest_end)


@dataclass(frozen=True)
class EditTransformer:
    mask: Mask

    def transform(self, source: Optional[str], dest_start: int, dest_end: int, buffer: Optional[str]) -> EditResult:
        """Return the accepted replacement for `buffer[dest_start:dest_end]` or a rejection."""
        source = source or ''
        buffer = buffer or ''
        dest_start = int(dest_start)
        dest_end = int(dest_end)
        _dbg(f"[transform] source={source!r} dest=({dest_start},{dest_end}) buffer={buffer!r}")

        if dest_start < 0 or dest_end < dest_start or dest_end > len(buffer) or len(buffer) > self.mask.length:
            _dbg("[transform] rejected: range outside buffer")
            return _reject('', dest_start, max(dest_start, dest_end))

        span = dest_end - dest_start
        if span == 0 and buffer:
            _dbg("[transform] rejected: insertion")
            return _reject('', dest_start, dest_end)

        if span == 1 and len(source) <= 1:
            return self._replace_one(source, dest_start, buffer)
        return self._replace_many(source, dest_start, dest_end, buffer)

    def _replace_one(self, source: str, pos: int, buffer: str) -> EditResult:
        mask = self.mask
        if not source:
            if mask.is_editable(pos):
                return EditResult(True, mask.filler_at(pos), pos, pos + 1, BACKWARD)
            # Deleting a delimiter rewrites the same literal
            return EditResult(True, mask.filler_at(pos), pos, pos + 1, None)
        if not mask.accepts(source, pos):
            _dbg(f"[transform] rejected: {source!r} not valid at {pos}")
            return _reject(buffer[pos], pos, pos + 1)
        return EditResult(True, source, pos, pos + 1, FORWARD, anchor=pos)

    def _replace_many(self, source: str, dest_start: int, dest_end: int, buffer: str) -> EditResult:
        mask = self.mask
        # A buffer shorter than the mask (e.g. cleared by the host) is regrown here
        required = dest_end - dest_start + (mask.length - len(buffer))
        working: List[str] = list(source)
        anchor: Optional[int] = None
        i = 0
        while i < len(working) and i < required:
            pos = dest_start + i
            if not mask.is_editable(pos):
                working.insert(i, mask.filler_at(pos))
                i += 1
            elif not mask.accepts(working[i], pos):
                del working[i]
            else:
                anchor = pos
                i += 1
        while len(working) < required:
            working.append(mask.filler_at(dest_start + len(working)))
        replacement = ''.join(working[:required])
        _dbg(f"[transform] replace dest=({dest_start},{dest_end}) -> {replacement!r} anchor={anchor}")
        return EditResult(True, replacement, dest_start, dest_end, FORWARD, anchor=anchor)


__all__ = ['EditResult', 'EditTransformer', 'FORWARD', 'BACKWARD']

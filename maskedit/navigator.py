from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .mask import Mask


@dataclass(frozen=True)
class CursorNavigator:
    """Moves a one-slot selection between editable mask positions.

    Movement clamps at the editable bounds and never wraps. On a mask without
    editable positions every method returns None.
    """

    mask: Mask

    def first(self) -> Optional[int]:
        return self.mask.first_editable

    def last(self) -> Optional[int]:
        return self.mask.last_editable

    def next(self, pos: int) -> Optional[int]:
        mask = self.mask
        for i in range(max(int(pos) + 1, 0), mask.length):
            if mask.is_editable(i):
                return i
        return mask.last_editable

    def previous(self, pos: int) -> Optional[int]:
        mask = self.mask
        for i in range(min(int(pos) - 1, mask.length - 1), -1, -1):
            if mask.is_editable(i):
                return i
        return mask.first_editable

    def clamp_to_nearest_editable(self, pos: int) -> Optional[int]:
        pos = int(pos)
        # Snap forward, as a tap between two octets lands on the next one
        if self.mask.is_editable(pos):
            return pos
        return self.next(pos)


__all__ = ["CursorNavigator"]

from __future__ import annotations

"""
Buffer controller for a masked input field.

Owns the fixed-length buffer and the one-slot selection cursor. Every change
goes through here: edit proposals are transformed against the mask, committed,
and the cursor is moved in the direction the edit implies.

The host renders `get_display_text()` with `selection()` highlighted and
submits `get_compact_value()`.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from .config import MaskEditConfig
from .debug_log import _dbg, set_debug_enabled
from .edit_transformer import BACKWARD, FORWARD, EditResult, EditTransformer
from .error_codes import MaskEditError
from .mask import DEFAULT_MASK, Mask, build_mask, normalize_filler
from .navigator import CursorNavigator
from .position_rules import DEFAULT_FILLER


@dataclass(frozen=True)
class MaskedInputSnapshot:
    text: str
    cursor: Optional[int]
    focused: bool


Listener = Callable[[MaskedInputSnapshot], None]


class BufferController:
    def __init__(self, pattern: str = DEFAULT_MASK, filler: Optional[str] = DEFAULT_FILLER, hint: str = ""):
        self.hint = hint or ""
        self._filler = normalize_filler(filler)
        self._focused = False
        self._hint_shown = False
        self._committing = False
        self._listeners: List[Listener] = []
        self.mask: Mask = build_mask(pattern, self._filler)
        self.navigator = CursorNavigator(self.mask)
        self.transformer = EditTransformer(self.mask)
        self._buffer = self.mask.empty_text()
        self._cursor: Optional[int] = self.navigator.first()

    @classmethod
    def from_config(cls, cfg: MaskEditConfig) -> "BufferController":
        if cfg.debug_log:
            set_debug_enabled(True)
        return cls(cfg.mask, cfg.filler, hint=cfg.hint)

    # ---- State accessors ----
    @property
    def cursor(self) -> Optional[int]:
        return self._cursor

    @property
    def filler(self) -> str:
        return self._filler

    @property
    def focused(self) -> bool:
        return self._focused

    def selection(self) -> Optional[Tuple[int, int]]:
        """Return the highlighted range; the selection is always one slot wide."""
        if self._cursor is None:
            return None
        return self._cursor, self._cursor + 1

    def get_display_text(self) -> str:
        if self._hint_shown:
            # Left empty on focus loss: let the host show its hint instead
            return ""
        return self._buffer

    def get_compact_value(self) -> str:
        return self.mask.compact(self._buffer)

    def is_complete(self) -> bool:
        mask = self.mask
        return all(
            ch != mask.filler_at(i)
            for i, ch in enumerate(self._buffer)
            if mask.is_editable(i)
        )

    def snapshot(self) -> MaskedInputSnapshot:
        return MaskedInputSnapshot(self.get_display_text(), self._cursor, self._focused)

    # ---- Configuration ----
    def set_mask(self, pattern: str) -> None:
        """Replace the mask; buffer and cursor are reset."""
        self._guard('BufferController.set_mask')
        self.mask = build_mask(pattern, self._filler)
        self.navigator = CursorNavigator(self.mask)
        self.transformer = EditTransformer(self.mask)
        _dbg(f"[mask] pattern={self.mask.pattern!r} length={self.mask.length} "
             f"editable=({self.mask.first_editable},{self.mask.last_editable})")
        self._reset()

    def set_filler(self, filler: Optional[str]) -> None:
        self._guard('BufferController.set_filler')
        self._filler = normalize_filler(filler)
        self.set_mask(self.mask.pattern)

    # ---- Listeners ----
    def add_listener(self, fn: Listener) -> None:
        self._listeners.append(fn)

    def remove_listener(self, fn: Listener) -> None:
        if fn in self._listeners:
            self._listeners.remove(fn)

    # ---- Editing ----
    def propose_edit(self, source: Optional[str], dest_start: int, dest_end: int) -> EditResult:
        """Transform and commit one edit proposal; rejected edits change nothing."""
        self._guard('BufferController.propose_edit')
        result = self.transformer.transform(source, dest_start, dest_end, self._buffer)
        if result.rejected:
            return result
        cursor = self._cursor
        if cursor is not None:
            if result.direction == BACKWARD:
                cursor = self.navigator.previous(cursor)
            elif result.direction == FORWARD and result.anchor is not None:
                cursor = self.navigator.next(result.anchor)
        self._commit(result, cursor)
        return result

    def set_text(self, value: Optional[str]) -> EditResult:
        """Fill the whole field programmatically; the cursor does not move."""
        self._guard('BufferController.set_text')
        result = self.transformer.transform(value, 0, len(self._buffer), self._buffer)
        if result.accepted:
            self._commit(result, self._cursor)
        return result

    def clear(self) -> None:
        self._guard('BufferController.clear')
        self._reset()

    # ---- Navigation ----
    def select_at(self, raw_position: int) -> Optional[int]:
        """Place the selection at `raw_position`, snapping forward to an editable slot."""
        _dbg(f"[select_at] raw={raw_position}")
        self._cursor = self.navigator.clamp_to_nearest_editable(raw_position)
        return self._cursor

    def move_selection_up(self) -> Optional[int]:
        if self._cursor is not None:
            self._cursor = self.navigator.previous(self._cursor)
        return self._cursor

    def move_selection_down(self) -> Optional[int]:
        if self._cursor is not None:
            self._cursor = self.navigator.next(self._cursor)
        return self._cursor

    def move_selection_first(self) -> Optional[int]:
        self._cursor = self.navigator.first()
        return self._cursor

    def move_selection_last(self) -> Optional[int]:
        self._cursor = self.navigator.last()
        return self._cursor

    # ---- Focus ----
    def focus_in(self) -> None:
        self._focused = True
        self._hint_shown = False
        if self._cursor is not None:
            self._cursor = self.navigator.clamp_to_nearest_editable(self._cursor)
        _dbg(f"[focus] in cursor={self._cursor}")

    def focus_out(self) -> None:
        self._focused = False
        self._hint_shown = bool(self.hint) and self._buffer == self.mask.empty_text()
        _dbg(f"[focus] out hint_shown={self._hint_shown}")

    # ---- Internals ----
    def _guard(self, stage: str) -> None:
        if self._committing:
            raise MaskEditError('M001', stage, 'called from a change listener')

    def _reset(self) -> None:
        self._hint_shown = False
        self._buffer = self.mask.empty_text()
        self._cursor = self.navigator.first()
        self._notify()

    def _commit(self, result: EditResult, cursor: Optional[int]) -> None:
        buf = self._buffer
        self._buffer = buf[: result.dest_start] + result.replacement + buf[result.dest_end :]
        self._cursor = cursor
        self._hint_shown = False
        _dbg(f"[commit] buffer={self._buffer!r} cursor={self._cursor}")
        self._notify()

    def _notify(self) -> None:
        if not self._listeners:
            return
        snap = self.snapshot()
        self._committing = True
        try:
            for fn in list(self._listeners):
                fn(snap)
        finally:
            self._committing = False


__all__ = ['BufferController', 'MaskedInputSnapshot', 'Listener']

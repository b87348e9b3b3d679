from __future__ import annotations

"""
Key routing helpers shared by hosts of a masked input field.

Translate what a UI sees (key names, typed text, clipboard pastes, taps)
into edit proposals against a BufferController, so every host feeds the
core the same way. The selection is one slot wide, so typing and deleting
always target `(cursor, cursor + 1)`.
"""

from typing import Optional, Tuple

from .buffer_controller import BufferController
from .debug_log import _log_action
from .edit_transformer import EditResult
from .mask import Mask


def paste_span(mask: Mask, start: int, data: str) -> Tuple[int, int]:
    """Return the destination range a paste of `data` at `start` should replace.

    A slot is covered only when the next pasted character is accepted there.
    Delimiter slots are stepped over, and characters no slot would keep (such
    as a foreign '-' separator) are skipped, so 'AA:BB', 'AABB' and 'AA-BB'
    all cover the same five positions and nothing past them is cleared.
    """
    end = max(0, int(start))
    consumed = 0
    while end < mask.length and consumed < len(data):
        if mask.accepts(data[consumed], end):
            consumed += 1
            end += 1
        elif not mask.is_editable(end):
            end += 1
        else:
            consumed += 1
    return max(0, int(start)), end


def type_text(ctrl: BufferController, data: str) -> Optional[EditResult]:
    if not data:
        return None
    if len(data) > 1:
        return paste(ctrl, data)
    cursor = ctrl.cursor
    if cursor is None:
        return None
    return ctrl.propose_edit(data, cursor, cursor + 1)


def paste(ctrl: BufferController, data: str) -> Optional[EditResult]:
    normalized = (data or '').replace('\r', '').replace('\n', '')
    cursor = ctrl.cursor
    if not normalized or cursor is None:
        return None
    a, b = paste_span(ctrl.mask, cursor, normalized)
    _log_action(f"paste {normalized!r} over ({a},{b})")
    return ctrl.propose_edit(normalized, a, b)


def backspace(ctrl: BufferController) -> Optional[EditResult]:
    cursor = ctrl.cursor
    if cursor is None:
        return None
    return ctrl.propose_edit('', cursor, cursor + 1)


def tap(ctrl: BufferController, offset: int) -> Optional[int]:
    _log_action(f"tap offset={offset}")
    return ctrl.select_at(offset)


def handle_key(ctrl: BufferController, key: str) -> bool:
    """Route one key; return False for keys this field does not handle.

    Named keys: left/up, right/down, home, end, backspace/delete, clear.
    Any other single character is typed into the current slot.
    """
    name = (key or '').lower() if len(key or '') > 1 else (key or '')
    _log_action(f"key={name!r} cursor={ctrl.cursor}")
    if name in ('left', 'up'):
        ctrl.move_selection_up()
    elif name in ('right', 'down'):
        ctrl.move_selection_down()
    elif name == 'home':
        ctrl.move_selection_first()
    elif name == 'end':
        ctrl.move_selection_last()
    elif name in ('backspace', 'delete'):
        backspace(ctrl)
    elif name == 'clear':
        ctrl.clear()
    elif len(name) == 1 and name.isprintable():
        type_text(ctrl, name)
    else:
        return False
    return True


__all__ = [
    'paste_span',
    'type_text',
    'paste',
    'backspace',
    'tap',
    'handle_key',
]

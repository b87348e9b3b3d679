from __future__ import annotations

"""
Coded errors for host misuse of the masked input core.

User keystrokes never raise; an invalid edit is simply rejected. These codes
cover contract violations by the embedding UI.

Format: "Error [<CODE>]: <title>. Stage: <stage>. Details: <detail>"

Usage:
- raise MaskEditError('M001', 'BufferController.propose_edit', 'listener re-entered')
"""

from dataclasses import dataclass
from typing import Optional


ERROR_TITLES: dict[str, str] = {
    'M001': 'Reentrant edit while a change is being committed',
}


def format_error(code: str, stage: str, detail: Optional[str] = None) -> str:
    title = ERROR_TITLES.get(code, 'Unknown error')
    stage = (stage or '').strip() or '-'
    detail = (detail or '').strip()
    base = f"Error [{code}]: {title}. Stage: {stage}."
    if detail:
        return f"{base} Details: {detail}"
    return base


@dataclass
class MaskEditError(Exception):
    code: str
    stage: str
    detail: Optional[str] = None

    def __str__(self) -> str:
        return format_error(self.code, self.stage, self.detail)


__all__ = ['ERROR_TITLES', 'format_error', 'MaskEditError']

from __future__ import annotations

"""
Debug tracing for the masked input core.

Verbose instrumentation is off unless MASKEDIT_DEBUG_LOG=1 (or true/yes/on)
is set, or a host calls `set_debug_enabled(True)`. Warnings go to the
regular 'maskedit' logger and are always emitted.
"""

import logging
import os
from typing import Optional


def env_flag(value: Optional[str]) -> bool:
    return str(value if value is not None else '0').strip().lower() in ('1', 'true', 'yes', 'on')


DEBUG_LOG_ENABLED = env_flag(os.environ.get('MASKEDIT_DEBUG_LOG'))
LOGGER = logging.getLogger('maskedit')
DEBUG_LOGGER = logging.getLogger('maskedit.debug')


def set_debug_enabled(enabled: bool) -> None:
    global DEBUG_LOG_ENABLED
    DEBUG_LOG_ENABLED = bool(enabled)


def _dbg(msg: str) -> None:
    if DEBUG_LOG_ENABLED:
        DEBUG_LOGGER.debug(msg)


def _log_action(msg: str) -> None:
    """Higher-level action tracing (keys, taps, focus)."""
    _dbg(f"[action] {msg}")


__all__ = [
    'DEBUG_LOG_ENABLED',
    'LOGGER',
    'DEBUG_LOGGER',
    'env_flag',
    'set_debug_enabled',
    '_dbg',
    '_log_action',
]

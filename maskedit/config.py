from __future__ import annotations

"""Environment-driven defaults for a masked input field."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .debug_log import LOGGER, env_flag
from .mask import DEFAULT_MASK
from .position_rules import DEFAULT_FILLER


@dataclass(frozen=True)
class MaskEditConfig:
    mask: str = DEFAULT_MASK
    filler: str = DEFAULT_FILLER
    hint: str = ""
    debug_log: bool = False


def load_config(environ: Optional[Mapping[str, str]] = None) -> MaskEditConfig:
    """Read MASKEDIT_* variables; bad values fall back to defaults with a warning."""
    env = os.environ if environ is None else environ

    mask = env.get('MASKEDIT_MASK')
    if mask is None:
        mask = DEFAULT_MASK
    elif not mask.strip():
        LOGGER.warning("MASKEDIT_MASK is blank; using %s", DEFAULT_MASK)
        mask = DEFAULT_MASK

    filler = env.get('MASKEDIT_FILLER')
    if not filler:
        filler = DEFAULT_FILLER
    elif len(filler) > 1:
        LOGGER.warning("MASKEDIT_FILLER=%r has more than one character; using %r", filler, filler[0])
        filler = filler[0]

    hint = env.get('MASKEDIT_HINT') or ""
    return MaskEditConfig(
        mask=mask,
        filler=filler,
        hint=hint,
        debug_log=env_flag(env.get('MASKEDIT_DEBUG_LOG')),
    )


__all__ = ['MaskEditConfig', 'load_config']

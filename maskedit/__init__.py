
"""Masked fixed-length input core.

Rules, mask, cursor navigation and the edit transformer live here, together
with the controller that owns the buffer and the helpers a host UI uses to
feed it keys, pastes and taps.
"""

__all__ = [
    "position_rules",
    "mask",
    "navigator",
    "edit_transformer",
    "buffer_controller",
    "key_input",
    "config",
    "error_codes",
    "debug_log",
]

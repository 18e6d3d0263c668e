"""
Shared utilities module.
"""

from quickfile.utils.logging import (
    configure_logging,
    configure_from_settings,
    get_logger,
    set_session_context,
    clear_session_context,
    generate_session_id,
    timed_operation,
)

__all__ = [
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "set_session_context",
    "clear_session_context",
    "generate_session_id",
    "timed_operation",
]

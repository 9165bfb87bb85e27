"""``--traceback`` state kept in ``lib_cli_exit_tools.config``.

The flag is process-global, so :func:`main` snapshots it before a run and
puts it back afterwards.
"""

from __future__ import annotations

import lib_cli_exit_tools

TracebackState = tuple[bool, bool]
"""``(traceback, traceback_force_color)`` as read from lib_cli_exit_tools."""


def apply_traceback_preferences(enabled: bool) -> None:
    """Turn full, coloured tracebacks on or off.

    Example:
        >>> apply_traceback_preferences(True)
        >>> lib_cli_exit_tools.config.traceback
        True
        >>> apply_traceback_preferences(False)
    """
    lib_cli_exit_tools.config.traceback = enabled
    lib_cli_exit_tools.config.traceback_force_color = enabled


def snapshot_traceback_state() -> TracebackState:
    config = lib_cli_exit_tools.config
    return bool(config.traceback), bool(config.traceback_force_color)


def restore_traceback_state(state: TracebackState) -> None:
    lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color = state


__all__ = [
    "TracebackState",
    "apply_traceback_preferences",
    "restore_traceback_state",
    "snapshot_traceback_state",
]

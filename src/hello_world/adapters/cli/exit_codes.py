"""Exit statuses returned by :func:`hello_world.adapters.cli.main.main`."""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Statuses the CLI produces itself.

    Other failures carry whatever ``lib_cli_exit_tools.get_system_exit_code``
    maps them to (130 for Ctrl+C, for example).

    Example:
        >>> int(ExitCode.USAGE_ERROR)
        2
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    USAGE_ERROR = 2


__all__ = ["ExitCode"]

"""Run the CLI and turn its outcome into a process exit status.

Both ``hello-world`` and ``python -m hello_world`` end up in :func:`main`.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from hello_world import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .exit_codes import ExitCode
from .root import cli
from .tracebacks import restore_traceback_state, snapshot_traceback_state

if TYPE_CHECKING:
    from hello_world.composition import AppServices


def _report_unexpected(exc: BaseException) -> int:
    verbose = bool(lib_cli_exit_tools.config.traceback)
    lib_cli_exit_tools.print_exception_message(
        trace_back=verbose,
        length_limit=TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT,
    )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _shutdown_logging() -> None:
    # A worker thread calling main() must not stop the process-wide runtime.
    if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run ``hello-world`` with ``argv`` and return its exit status.

    Click's own errors print their message and keep their exit code (2 for
    usage errors). Anything else is summarised by lib_cli_exit_tools, or
    printed in full under ``--traceback``.

    Args:
        argv: Arguments without the program name; ``sys.argv[1:]`` when ``None``.
        restore_traceback: Put the traceback flags back as they were afterwards.
        services_factory: Builds the adapters, normally ``build_production``.

    Raises:
        ValueError: ``services_factory`` was not given.

    Example:
        >>> from hello_world.composition import build_production
        >>> main([], services_factory=build_production)  # doctest: +SKIP
        Hello World!
        0
    """
    if services_factory is None:
        raise ValueError("main() needs services_factory, e.g. hello_world.composition.build_production")

    args = list(sys.argv[1:] if argv is None else argv)
    saved_state = snapshot_traceback_state()
    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, obj=services_factory, standalone_mode=False)
        return int(ExitCode.SUCCESS)
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:  # noqa: BLE001
        return _report_unexpected(exc)
    finally:
        if restore_traceback:
            restore_traceback_state(saved_state)
        _shutdown_logging()


__all__ = ["main"]

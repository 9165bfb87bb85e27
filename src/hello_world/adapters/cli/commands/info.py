"""``hello`` and ``info`` commands."""

from __future__ import annotations

import logging
from contextlib import AbstractContextManager, nullcontext

import lib_log_rich.runtime
import rich_click as click

from hello_world import __init__conf__
from hello_world.domain.behaviors import build_greeting

from ..constants import CLICK_CONTEXT_SETTINGS

logger = logging.getLogger(__name__)


def _job(name: str) -> AbstractContextManager[object]:
    # The runtime stays down when every logging configuration was rejected.
    if not lib_log_rich.runtime.is_initialised():
        return nullcontext()
    return lib_log_rich.runtime.bind(job_id=f"cli-{name}", extra={"command": name})


@click.command("hello", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_hello() -> None:
    """Print the greeting."""
    with _job("hello"):
        logger.info("Emitting greeting")
        click.echo(build_greeting())


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Show name, version, homepage and author."""
    with _job("info"):
        __init__conf__.print_info()


__all__ = ["cli_hello", "cli_info"]

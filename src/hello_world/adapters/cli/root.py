"""The ``hello-world`` command group.

Invoked bare it prints the greeting. Before any command runs the group
loads configuration and starts logging; a configuration or logging setup
that cannot be used is reported on stderr and replaced by the bundled
defaults, so the greeting is still printed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config, ConfigError

from hello_world import __init__conf__
from hello_world.adapters.config.overrides import apply_overrides

from .commands import cli_hello, cli_info
from .constants import CLICK_CONTEXT_SETTINGS
from .tracebacks import apply_traceback_preferences

if TYPE_CHECKING:
    from hello_world.composition import AppServices


def _warn(message: str) -> None:
    click.echo(f"Warning: {message}", err=True)


def _load_config(services: AppServices, profile: str | None, set_overrides: tuple[str, ...]) -> Config:
    try:
        config = services.load_config(profile=profile)
    except (ConfigError, ValueError) as exc:
        _warn(f"configuration not loaded ({exc}); using bundled defaults")
        config = services.load_bundled_defaults()
    try:
        return apply_overrides(config, set_overrides)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc


def _start_logging(services: AppServices, config: Config) -> None:
    """Start logging from ``config``, retrying once with the bundled defaults."""
    try:
        services.init_logging(config)
        return
    except (TypeError, ValueError) as exc:
        _warn(f"logging settings rejected ({exc}); using bundled defaults")
    defaults = services.load_bundled_defaults()
    try:
        services.init_logging(defaults)
    except (TypeError, ValueError) as exc:
        _warn(f"logging disabled ({exc})")


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option("--traceback/--no-traceback", default=False, help="Print the full Python traceback on errors.")
@click.option("--profile", default=None, help="Read configuration from profile/<NAME>/ in every layer.")
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    metavar="SECTION.KEY=VALUE",
    help="Override one configuration value; repeatable.",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Prepare configuration and logging, then greet if no command was given.

    ``ctx.obj`` must be a factory returning :class:`AppServices`.

    Example:
        >>> from click.testing import CliRunner
        >>> from hello_world.composition import build_production
        >>> CliRunner().invoke(cli, [], obj=build_production).stdout
        'Hello World!\\n'
    """
    if not callable(ctx.obj):
        raise RuntimeError("cli needs a services factory in ctx.obj; run it through main()")
    services: AppServices = ctx.obj()

    apply_traceback_preferences(traceback)
    config = _load_config(services, profile, set_overrides)
    _start_logging(services, config)

    if ctx.invoked_subcommand is None:
        ctx.invoke(cli_hello)


cli.add_command(cli_hello)
cli.add_command(cli_info)


__all__ = ["cli"]

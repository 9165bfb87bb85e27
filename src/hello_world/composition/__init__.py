"""Composition root: the one place that picks concrete adapters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.loader import load_bundled_defaults, load_config
from ..adapters.logging.setup import init_logging

if TYPE_CHECKING:
    from ..application.ports import InitLogging, LoadBundledDefaults, LoadConfig

    _load_config_port: LoadConfig = load_config
    _load_bundled_defaults_port: LoadBundledDefaults = load_bundled_defaults
    _init_logging_port: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Adapters handed to the CLI through ``ctx.obj``.

    Tests build their own instance with stand-ins for any of the three.
    """

    load_config: LoadConfig
    load_bundled_defaults: LoadBundledDefaults
    init_logging: InitLogging


def build_production() -> AppServices:
    """Services backed by the filesystem and the lib_log_rich runtime."""
    return AppServices(
        load_config=load_config,
        load_bundled_defaults=load_bundled_defaults,
        init_logging=init_logging,
    )


__all__ = ["AppServices", "build_production", "load_config"]

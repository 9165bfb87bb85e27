"""Callable Protocols naming what the CLI needs from its adapters.

Adapters are plain functions; they satisfy these ports structurally, and
the composition root checks that under ``TYPE_CHECKING``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from lib_layered_config import Config


class LoadConfig(Protocol):
    """Merge every configuration layer for an optional profile."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class LoadBundledDefaults(Protocol):
    """Read only the defaults shipped inside the package."""

    def __call__(self) -> Config: ...


class InitLogging(Protocol):
    """Start the logging runtime from a loaded configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = ["InitLogging", "LoadBundledDefaults", "LoadConfig"]

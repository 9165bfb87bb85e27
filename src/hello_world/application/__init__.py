"""Application layer: ports the CLI depends on."""

from __future__ import annotations

from .ports import InitLogging, LoadBundledDefaults, LoadConfig

__all__ = ["InitLogging", "LoadBundledDefaults", "LoadConfig"]

"""Adapters: configuration, logging and the command line.

Contents:
    * :mod:`.config` - lib_layered_config loading and ``--set`` overrides
    * :mod:`.logging` - lib_log_rich runtime setup
    * :mod:`.cli` - rich-click interface
"""

from __future__ import annotations

__all__: list[str] = []

"""Configuration adapter on top of lib_layered_config.

Contents:
    * :mod:`.loader` - layered load and the bundled-defaults fallback
    * :mod:`.overrides` - ``--set`` parsing and merge
"""

from __future__ import annotations

from .loader import default_config_path, load_bundled_defaults, load_config
from .overrides import apply_overrides

__all__ = ["apply_overrides", "default_config_path", "load_bundled_defaults", "load_config"]

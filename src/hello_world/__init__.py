"""hello-world: prints ``Hello World!``.

The package root exposes the greeter, the configuration loader and the
metadata printer.
"""

from __future__ import annotations

from .__init__conf__ import print_info
from .composition import load_config
from .domain.behaviors import CANONICAL_GREETING, build_greeting

__all__ = ["CANONICAL_GREETING", "build_greeting", "load_config", "print_info"]

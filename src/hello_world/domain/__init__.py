"""Domain layer: the greeter, free of I/O and framework imports."""

from __future__ import annotations

from .behaviors import CANONICAL_GREETING, build_greeting

__all__ = ["CANONICAL_GREETING", "build_greeting"]

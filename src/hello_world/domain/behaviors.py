"""The greeter: a pure function returning the fixed greeting."""

from __future__ import annotations

from typing import Final

CANONICAL_GREETING: Final[str] = "Hello World!"


def build_greeting() -> str:
    r"""Return the canonical greeting string.

    The text is a constant. There are no inputs, no state and no failure
    path, so repeated calls always yield the identical literal.

    Returns:
        ``"Hello World!"`` with no surrounding whitespace.

    Example:
        >>> build_greeting()
        'Hello World!'
        >>> build_greeting() == build_greeting()
        True
    """
    return CANONICAL_GREETING


__all__ = [
    "CANONICAL_GREETING",
    "build_greeting",
]

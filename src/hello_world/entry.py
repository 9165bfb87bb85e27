"""Target of the ``hello-world`` console script and of ``python -m``."""

from __future__ import annotations

from .adapters.cli.main import main as run_cli
from .composition import build_production


def main() -> int:
    """Run the CLI on ``sys.argv`` with production services.

    Returns:
        Exit status; ``0`` for a plain run.
    """
    return run_cli(services_factory=build_production)


__all__ = ["main"]

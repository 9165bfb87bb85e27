"""rich-click command line interface.

Contents:
    * :func:`.main.main` - exit-status wrapper used by every entry point
    * :data:`.root.cli` - the ``hello-world`` group
    * :mod:`.commands` - ``hello`` and ``info``
"""

from __future__ import annotations

from .commands import cli_hello, cli_info
from .exit_codes import ExitCode
from .main import main
from .root import cli

__all__ = ["ExitCode", "cli", "cli_hello", "cli_info", "main"]

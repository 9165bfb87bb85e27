"""Subcommands registered on the root group."""

from __future__ import annotations

from .info import cli_hello, cli_info

__all__ = ["cli_hello", "cli_info"]

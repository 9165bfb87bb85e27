"""Fixtures shared by the CLI, entry-point and configuration tests."""

from __future__ import annotations

import os
import re
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from dotenv import load_dotenv
from lib_layered_config import Config

if TYPE_CHECKING:
    from hello_world.composition import AppServices

_PROJECT_ENV = Path(__file__).parent.parent / ".env"
if _PROJECT_ENV.exists():
    load_dotenv(_PROJECT_ENV)

ANSI_ESCAPE = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")

ServicesFactory = Callable[[], "AppServices"]


@pytest.fixture
def cli_runner() -> CliRunner:
    """CliRunner with stdout and stderr kept apart (``result.stdout`` / ``result.stderr``)."""
    return CliRunner()


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    return lambda text: ANSI_ESCAPE.sub("", text)


@pytest.fixture
def production_factory() -> ServicesFactory:
    from hello_world.composition import build_production

    return build_production


@pytest.fixture
def services_with() -> Callable[..., ServicesFactory]:
    """Build a services factory where selected adapters are replaced.

    Example:
        factory = services_with(load_config=lambda **_: Config({}, {}))
    """
    from hello_world.composition import AppServices, build_production

    def _factory(**replacements: Any) -> ServicesFactory:
        production = build_production()
        services = AppServices(
            load_config=replacements.get("load_config", production.load_config),
            load_bundled_defaults=replacements.get("load_bundled_defaults", production.load_bundled_defaults),
            init_logging=replacements.get("init_logging", production.init_logging),
        )
        return lambda: services

    return _factory


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Start from tracebacks off and put lib_cli_exit_tools back afterwards."""
    saved = (lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color)
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    try:
        yield
    finally:
        lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color = saved


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Make ``load_config`` read the layers again, before and after the test."""
    from hello_world.adapters.config.loader import load_config

    load_config.cache_clear()
    yield
    load_config.cache_clear()


@pytest.fixture
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Run with an empty home and working directory and no hello-world or LOG_ variables.

    Returns the temporary home; its ``.config/hello-world`` is the user layer on Linux.
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    monkeypatch.chdir(tmp_path)
    for key in list(os.environ):
        if key.startswith(("HELLO_WORLD___", "LOG_")):
            monkeypatch.delenv(key, raising=False)
    return home


@pytest.fixture
def quiet_config() -> Config:
    """In-memory configuration that keeps the console at WARNING."""
    return Config({"lib_log_rich": {"console_level": "WARNING"}}, {})

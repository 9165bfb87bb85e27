"""Start lib_log_rich from the ``[lib_log_rich]`` configuration section.

Every entry point calls :func:`init_logging` through the root command, so
the runtime is configured in one place. Records from stdlib ``logging``
are bridged into it.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from hello_world import __init__conf__


class LoggingConfigModel(BaseModel):
    """The ``[lib_log_rich]`` section as read from configuration.

    Keys other than ``service`` and ``environment`` are passed through to
    ``RuntimeConfig`` untouched.

    Example:
        >>> LoggingConfigModel.model_validate({"console_level": "INFO"}).model_extra
        {'console_level': 'INFO'}
    """

    model_config = ConfigDict(extra="allow")

    service: str | None = None
    environment: str = "prod"


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    section: Mapping[str, Any] = config.get("lib_log_rich", default=None) or {}
    settings = LoggingConfigModel.model_validate(dict(section))
    return lib_log_rich.runtime.RuntimeConfig(
        service=settings.service or __init__conf__.name,
        environment=settings.environment,
        **(settings.model_extra or {}),
    )


def init_logging(config: Config) -> None:
    """Initialise the lib_log_rich runtime once per process.

    Args:
        config: Merged configuration; only ``[lib_log_rich]`` is read.

    Raises:
        ValueError: The settings were rejected. The runtime stays
            uninitialised, so a second attempt can follow.
        TypeError: ``[lib_log_rich]`` is not a table.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    runtime_config = _build_runtime_config(config)
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(runtime_config)
    lib_log_rich.runtime.attach_std_logging()


__all__ = ["LoggingConfigModel", "init_logging"]

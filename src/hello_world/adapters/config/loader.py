"""Layered configuration for hello-world.

Layers merge lowest to highest: bundled defaults, app, host, user, ``.env``
and ``HELLO_WORLD___SECTION__KEY`` environment variables. On Linux the user
layer is ``~/.config/hello-world/config.toml``.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

import rtoml
from lib_layered_config import DEFAULT_MAX_PROFILE_LENGTH, Config, read_config, validate_profile_name

from hello_world import __init__conf__

_DEFAULTS_FILENAME = "defaultconfig.toml"


def default_config_path() -> Path:
    """Location of the defaults bundled with the package.

    Example:
        >>> default_config_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).with_name(_DEFAULTS_FILENAME)


@lru_cache(maxsize=4)
def load_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Merge every configuration layer, once per ``(profile, start_dir)``.

    Args:
        profile: Adds ``profile/<name>/`` to each layer path when given.
        start_dir: Where ``.env`` discovery starts; the working directory by default.

    Raises:
        ValueError: ``profile`` is not a safe directory name.
        lib_layered_config.ConfigError: A layer exists but cannot be read.

    Example:
        >>> load_config().get("missing", default="fallback")
        'fallback'
    """
    if profile is not None:
        validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH)
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=default_config_path(),
        start_dir=start_dir,
    )


def load_bundled_defaults() -> Config:
    """Configuration built from ``defaultconfig.toml`` alone.

    Used when the merged layers cannot be loaded or are rejected.

    Example:
        >>> load_bundled_defaults().get("lib_log_rich", default={})["console_level"]
        'WARNING'
    """
    return Config(rtoml.load(default_config_path()), {})


__all__ = ["default_config_path", "load_bundled_defaults", "load_config"]

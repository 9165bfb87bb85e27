"""Mapping ``[lib_log_rich]`` onto lib_log_rich's RuntimeConfig."""

from __future__ import annotations

import pytest
from lib_layered_config import Config

from hello_world import __init__conf__
from hello_world.adapters.config.loader import load_bundled_defaults
from hello_world.adapters.logging.setup import LoggingConfigModel, _build_runtime_config


@pytest.mark.os_agnostic
def test_model_keeps_unknown_keys_as_extras() -> None:
    parsed = LoggingConfigModel.model_validate({"environment": "dev", "console_level": "DEBUG"})

    assert parsed.environment == "dev"
    assert parsed.model_extra == {"console_level": "DEBUG"}


@pytest.mark.os_agnostic
def test_model_defaults_to_prod_without_service() -> None:
    parsed = LoggingConfigModel.model_validate({})

    assert (parsed.service, parsed.environment) == (None, "prod")


@pytest.mark.os_agnostic
def test_service_name_defaults_to_package_name() -> None:
    runtime_config = _build_runtime_config(Config({}, {}))

    assert runtime_config.service == __init__conf__.name
    assert runtime_config.environment == "prod"


@pytest.mark.os_agnostic
def test_configured_service_and_environment_are_used() -> None:
    config = Config({"lib_log_rich": {"service": "greeter", "environment": "test"}}, {})

    runtime_config = _build_runtime_config(config)

    assert (runtime_config.service, runtime_config.environment) == ("greeter", "test")


@pytest.mark.os_agnostic
def test_bundled_defaults_build_a_warning_level_console() -> None:
    runtime_config = _build_runtime_config(load_bundled_defaults())

    assert runtime_config.console_level == "WARNING"


@pytest.mark.os_agnostic
def test_mistyped_runtime_option_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        _build_runtime_config(Config({"lib_log_rich": {"ring_buffer_size": "lots"}}, {}))

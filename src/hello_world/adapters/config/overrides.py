"""``--set SECTION.KEY=VALUE`` handling.

Values are read as JSON where possible, so ``--set a.b=3`` yields an int and
``--set a.b=DEBUG`` stays a string.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import orjson
from lib_layered_config import Config


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One ``--set`` argument split into section, nested keys and value."""

    section: str
    key_path: tuple[str, ...]
    value: Any


def coerce_value(raw: str) -> Any:
    """Decode ``raw`` as JSON and keep the text when it is not JSON.

    Examples:
        >>> coerce_value("false"), coerce_value("7"), coerce_value("INFO")
        (False, 7, 'INFO')
        >>> coerce_value('{"a": [1]}')
        {'a': [1]}
    """
    if not raw:
        return raw
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError:
        return raw


def parse_override(raw: str) -> ConfigOverride:
    """Parse one ``--set`` argument.

    Only the first ``=`` separates the path from the value, so values may
    contain ``=`` themselves.

    Raises:
        ValueError: When ``=`` or the ``SECTION.KEY`` dot is missing, or a
            path segment is empty.

    Examples:
        >>> parse_override("lib_log_rich.console_level=DEBUG")
        ConfigOverride(section='lib_log_rich', key_path=('console_level',), value='DEBUG')
        >>> parse_override("greeting") # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: Invalid override 'greeting': expected SECTION.KEY=VALUE
    """
    path, sep, value = raw.partition("=")
    section, dot, keys = path.partition(".")
    if not sep or not dot:
        raise ValueError(f"Invalid override {raw!r}: expected SECTION.KEY=VALUE")
    key_path = tuple(keys.split("."))
    if not section or not all(key_path):
        raise ValueError(f"Invalid override {raw!r}: empty segment in {path!r}")
    return ConfigOverride(section=section, key_path=key_path, value=coerce_value(value))


def _as_tree(overrides: list[ConfigOverride]) -> dict[str, Any]:
    tree: dict[str, Any] = {}
    for override in overrides:
        node = tree.setdefault(override.section, {})
        for key in override.key_path[:-1]:
            child = node.setdefault(key, {})
            if not isinstance(child, dict):
                raise ValueError(f"--set {override.section}.{key} is already a value, not a table")
            node = child
        node[override.key_path[-1]] = override.value
    return tree


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return ``config`` with every ``--set`` argument merged on top.

    Examples:
        >>> base = Config({"greeting": {"x": 1, "y": 1}}, {})
        >>> merged = apply_overrides(base, ("greeting.x=2",))
        >>> merged["greeting"]["x"], merged["greeting"]["y"]
        (2, 1)
        >>> apply_overrides(base, ()) is base
        True
    """
    if not raw_overrides:
        return config
    return config.with_overrides(_as_tree([parse_override(raw) for raw in raw_overrides]))


__all__ = ["ConfigOverride", "apply_overrides", "coerce_value", "parse_override"]

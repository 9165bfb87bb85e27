"""Static package metadata surfaced to CLI commands and documentation.

Values mirror ``pyproject.toml`` so the CLI can report them without reading
installed distribution metadata at runtime.

Contents:
    * Project identity: :data:`name`, :data:`title`, :data:`version`.
    * Contact details: :data:`homepage`, :data:`author`, :data:`author_email`.
    * :data:`shell_command` - console script name.
    * ``LAYEREDCONF_*`` identifiers used by lib_layered_config path resolution.
    * :func:`print_info` - render the metadata block for ``hello-world info``.
"""

from __future__ import annotations

from typing import Final

#: Distribution name (matches ``[project].name``).
name: Final[str] = "hello-world"
#: One-line summary used as the CLI help title.
title: Final[str] = "Hello World greeter with layered configuration and rich logging"
#: Release version (matches ``[project].version``).
version: Final[str] = "1.0.0"
homepage: Final[str] = "https://github.com/hello-world-app/hello-world"
author: Final[str] = "Hello World Maintainers"
author_email: Final[str] = "maintainers@hello-world.invalid"
#: Console script registered in ``[project.scripts]``.
shell_command: Final[str] = "hello-world"

#: Vendor directory segment for macOS/Windows configuration paths.
LAYEREDCONF_VENDOR: Final[str] = "hello-world-app"
#: Application directory segment for macOS/Windows configuration paths.
LAYEREDCONF_APP: Final[str] = "Hello World"
#: Slug for Linux XDG paths and environment variable prefixes.
LAYEREDCONF_SLUG: Final[str] = "hello-world"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for hello-world:
        ...
    """
    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    )
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]

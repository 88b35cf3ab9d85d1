# Flagkit CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Renders usage text for the flags declared on a `FlagRegistry`.

The text has the shape:

    Usage: prog [-c] (--name)

    Flags:
      -c
            count
            Default: 1
      --name (required)
            input file

Optional flags are shown as `[flag]` and get a `Default:` line; required
flags are shown as `(flag)` with a ` (required)` marker. The built-in help
flags are parseable but left out of the text.
"""
from __future__ import annotations

from typing import IO

from rich.console import Console

from flagkit.console import console as default_console
from flagkit.flag_value import FlagType, FlagValue
from flagkit.registry import FlagRegistry

DETAIL_INDENT = " " * 8


def format_default(default: FlagValue) -> str:
    """Format a default value for the `Default:` line."""
    value = default.value
    if default.type == FlagType.BOOL:
        return "true" if value else "false"
    if default.type == FlagType.STRING:
        return f'"{value}"'
    if default.type == FlagType.FLOAT:
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)


def get_usage(registry: FlagRegistry) -> str:
    """
    Render the usage text for `registry`.

    Returns:
        str: Summary line followed by one detail block per user flag.
    """
    flags = registry.user_flags()

    summary = [f"Usage: {registry.program_name}"]
    for flag in flags:
        if flag.is_required():
            summary.append(f"({flag.display_name})")
        else:
            summary.append(f"[{flag.display_name}]")

    lines = [" ".join(summary), "", "Flags:"]
    for flag in flags:
        required_marker = " (required)" if flag.is_required() else ""
        lines.append(f"  {flag.display_name}{required_marker}")
        lines.append(f"{DETAIL_INDENT}{flag.help}")
        if not flag.is_required():
            lines.append(f"{DETAIL_INDENT}Default: {format_default(flag.default)}")
    return "\n".join(lines) + "\n"


def print_usage(
    registry: FlagRegistry, file: IO[str] | None = None, console: Console | None = None
) -> None:
    """
    Write the usage text for `registry`.

    Args:
        registry (FlagRegistry): Flags to describe.
        file (IO[str] | None): Destination. Defaults to stdout.
        console (Console | None): Console to print through instead of `file`.
    """
    if console is None:
        console = default_console if file is None else Console(file=file, highlight=False)
    console.file.write(get_usage(registry))
    console.file.flush()

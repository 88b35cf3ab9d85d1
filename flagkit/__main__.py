"""
Flagkit CLI Flags

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import sys
from typing import Iterable

from rich.markup import escape

from flagkit.console import console, error_console
from flagkit.exceptions import FlagError
from flagkit.parser import ArgumentParser
from flagkit.registry import FlagRegistry
from flagkit.signals import HelpSignal
from flagkit.usage import print_usage
from flagkit.utils import setup_logging


def build_flags(program: str | None = None) -> FlagRegistry:
    flags = FlagRegistry(program=program)
    flags.int_flag("c", 1, help="count")
    return flags


def run(args: Iterable[str] | None = None, program: str | None = None) -> int:
    """Parse `args` (or `sys.argv`) and report the result. Returns the exit code."""
    flags = build_flags(program)
    try:
        ArgumentParser(flags, debug=True).parse(args)
    except HelpSignal:
        print_usage(flags)
        return 0
    except FlagError as error:
        error_console.print(f"[bold red]error:[/] {escape(str(error))}", soft_wrap=True)
        print_usage(flags, console=error_console)
        return 1

    print_usage(flags)
    console.print(f"c = {flags.get(int, 'c')}")
    return 0


def main() -> int:
    setup_logging(console_log_level=logging.WARNING, json_log_to_file=True)
    return run()


if __name__ == "__main__":
    sys.exit(main())

import logging
import sys

from flagkit import ArgumentParser, FlagError, FlagRegistry, HelpSignal, print_usage
from flagkit.console import console, error_console
from flagkit.logger import logger
from flagkit.utils import setup_logging

setup_logging(console_log_level=logging.INFO, log_filename=None)

flags = FlagRegistry()
flags.int_flag("c", 1, help="Number of times to greet")
flags.string_flag("name", help="Who to greet")
flags.bool_flag("v", help="Verbose output")

# Entry point
if __name__ == "__main__":
    try:
        ArgumentParser(flags, debug=True).parse()
    except HelpSignal:
        print_usage(flags)
        sys.exit(0)
    except FlagError as error:
        error_console.print(f"error: {error}", markup=False)
        print_usage(flags, console=error_console)
        sys.exit(1)

    if flags.get(bool, "v"):
        logger.info(
            "c=%s (set: %s)",
            flags.get(int, "c"),
            [flag.name for flag in flags if flag.was_set],
        )
    for _ in range(flags.get(int, "c")):
        console.print(f"Hello, {flags.get(str, 'name')}!", markup=False)

# Flagkit CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ArgumentParser`, which reads a command line into the
flags declared on a `FlagRegistry`.

Supported token forms:
- `-c 5` / `--count 5`: value taken from the next token
- `-c=5` / `--count=5`: inline value
- `-v` / `--verbose`: boolean switch, sets True
- `-v=false`: explicit boolean

Parsing is a single pass. Each token must name a declared flag; the first bad
token stops parsing with a `FlagParseError`. Once every token is consumed the
parser raises `HelpSignal` if `-h` or `--help` was given, otherwise it checks
that every required flag was set.

Public Interface:
- `ArgumentParser(registry, debug=False)`
- `parse(args=None)`: Parse tokens, raising on errors and on help requests.
- `try_parse(args=None)`: Same, but return a `ParseOutcome` instead of raising.
- `parse(registry, args=None, debug=False)`: Module-level shortcut.

Example Usage:
    flags = FlagRegistry()
    flags.int_flag("c", 1, help="count")

    outcome = ArgumentParser(flags).try_parse(["-c", "5"])
    if outcome.help_requested:
        print_usage(flags)
"""
from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator

from flagkit.coercion import coerce_value
from flagkit.exceptions import (
    FlagError,
    InvalidValueError,
    MissingRequiredFlagError,
    MissingValueError,
    UnknownFlagError,
)
from flagkit.flag import Flag
from flagkit.flag_value import FlagType
from flagkit.logger import logger
from flagkit.registry import FlagRegistry
from flagkit.signals import HelpSignal


class ParseStatus(Enum):
    """Terminal state of a parse."""

    SUCCESS = "success"
    HELP_REQUESTED = "help_requested"
    ERROR = "error"


@dataclass(frozen=True)
class ParseOutcome:
    """Result of `ArgumentParser.try_parse`."""

    status: ParseStatus
    error: FlagError | None = None

    @property
    def ok(self) -> bool:
        return self.status == ParseStatus.SUCCESS

    @property
    def help_requested(self) -> bool:
        return self.status == ParseStatus.HELP_REQUESTED


class ArgumentParser:
    """
    Parses command-line tokens into a `FlagRegistry`.

    The registry is updated in place: each recognised flag gets its new value
    and its `was_set` bit. There is no support for positional arguments,
    subcommands, or bundled short flags (`-abc`).
    """

    def __init__(self, registry: FlagRegistry, debug: bool = False) -> None:
        self.registry: FlagRegistry = registry
        self.debug: bool = debug

    def _log(self, message: str, *args) -> None:
        if self.debug:
            logger.debug(message, *args)

    def _token_source(self, args: Iterable[str] | None) -> Iterator[str]:
        if args is not None:
            return iter(args)
        tokens = iter(sys.argv)
        command = next(tokens, None)
        if command:
            self.registry.program = os.path.basename(command)
        return tokens

    def parse(self, args: Iterable[str] | None = None) -> None:
        """
        Parse command-line tokens into the registry.

        Args:
            args (Iterable[str] | None): Tokens without the program name. When
                None, `sys.argv` is used and its first entry is recorded as the
                program name.

        Raises:
            UnknownFlagError: A token is not a declared flag.
            MissingValueError: A value flag is the last token.
            InvalidValueError: A value cannot be coerced to the flag's type.
            MissingRequiredFlagError: Required flags were not supplied.
            HelpSignal: `-h` or `--help` was given.
        """
        self.registry.ensure_help_flags()
        tokens = self._token_source(args)
        self._log("parse:: process: %s", self.registry.program_name)

        for token in tokens:
            self._handle_token(token, tokens)

        if self.registry.help_requested:
            self._log("Help requested")
            raise HelpSignal()

        missing = self.registry.missing_required()
        if missing:
            self._log("Missing required flag: %s", missing[0].name)
            raise MissingRequiredFlagError(missing)

    def try_parse(self, args: Iterable[str] | None = None) -> ParseOutcome:
        """
        Parse command-line tokens and report the outcome as a value.

        Returns:
            ParseOutcome: SUCCESS, HELP_REQUESTED, or ERROR with the exception.
        """
        try:
            self.parse(args)
        except HelpSignal:
            return ParseOutcome(ParseStatus.HELP_REQUESTED)
        except FlagError as error:
            return ParseOutcome(ParseStatus.ERROR, error)
        return ParseOutcome(ParseStatus.SUCCESS)

    def _split_token(self, token: str) -> tuple[str, str | None]:
        """Split `--name=value` into (`name`, `value`)."""
        if not token.startswith("-"):
            self._log("Unexpected argument: %s", token)
            raise UnknownFlagError(token)

        prefix_length = 2 if token.startswith("--") else 1
        remainder = token[prefix_length:]
        if not remainder:
            self._log("Unknown flag: %s", token)
            raise UnknownFlagError(token, flag_name="")

        name, separator, inline_value = remainder.partition("=")
        return name, inline_value if separator else None

    def _handle_token(self, token: str, tokens: Iterator[str]) -> None:
        name, inline_value = self._split_token(token)

        flag = self.registry.lookup(name)
        if flag is None:
            self._log("Unknown flag: %s", name)
            raise UnknownFlagError(token, flag_name=name)

        flag.assign(self._read_value(flag, inline_value, tokens))
        self._log("Set %s = %r", flag.display_name, flag.value.value)

    def _read_value(
        self, flag: Flag, inline_value: str | None, tokens: Iterator[str]
    ) -> bool | int | float | str:
        if flag.type == FlagType.BOOL and inline_value is None:
            return True

        raw = inline_value if inline_value is not None else next(tokens, None)
        if raw is None:
            self._log("Missing value for flag: %s", flag.name)
            raise MissingValueError(flag.name, flag.type.value)

        try:
            return coerce_value(raw, flag.type)
        except ValueError as error:
            self._log("Invalid value for flag %s: %r", flag.name, raw)
            raise InvalidValueError(flag.name, raw, str(error)) from error


def parse(
    registry: FlagRegistry, args: Iterable[str] | None = None, debug: bool = False
) -> None:
    """Parse `args` into `registry`. See `ArgumentParser.parse`."""
    ArgumentParser(registry, debug=debug).parse(args)

# Flagkit CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `FlagRegistry`, the set of flags a program declares
before parsing its command line.

The registry owns every `Flag`: its default, its current value and its
was-set bit. `ArgumentParser` mutates flags in place while scanning tokens and
the host program reads the results back through the typed accessors.

Public Interface:
- `flag(...)`: Declare a flag from a `FlagValue` default.
- `int_flag(...)`, `float_flag(...)`, `string_flag(...)`, `bool_flag(...)`:
  Typed declaration helpers. A `None` default makes the flag required.
- `lookup(name)`: Return the `Flag` for a name, or None.
- `get(expected_type, name)`: Return the current payload if the flag exists
  and has the expected type, else None.
- `was_set(name)`: True if the user supplied the flag.
- `ensure_help_flags()`: Inject the built-in `-h` / `--help` flags once.

Example Usage:
    flags = FlagRegistry()
    flags.int_flag("c", 1, help="count")
    flags.string_flag("name", help="input file")

    ArgumentParser(flags).parse(["--name=input.txt"])

    flags.get(int, "c")       # 1
    flags.get(str, "name")    # 'input.txt'
    flags.was_set("c")        # False

Note:
`get()` returns None both for unknown names and for type mismatches. The two
cases cannot be told apart by the caller.
"""
from __future__ import annotations

from typing import Any, Iterator

from flagkit.exceptions import (
    DuplicateFlagDefinitionError,
    EmptyFlagNameError,
    ReservedFlagNameError,
)
from flagkit.flag import Flag
from flagkit.flag_value import FlagType, FlagValue
from flagkit.logger import logger

HELP_FLAG_NAMES: tuple[str, ...] = ("h", "help")
HELP_FLAG_TEXT = "Print this help message and exit"
DEFAULT_PROGRAM_NAME = "command"


class FlagRegistry:
    """
    Ordered collection of declared command-line flags.

    Flags keep their declaration order for usage rendering; lookups go through
    a name index.
    """

    def __init__(self, program: str | None = None) -> None:
        self.program: str | None = program
        self._flags: list[Flag] = []
        self._index: dict[str, Flag] = {}
        self._help_flags_added: bool = False

    @property
    def program_name(self) -> str:
        return self.program or DEFAULT_PROGRAM_NAME

    @property
    def flags(self) -> tuple[Flag, ...]:
        return tuple(self._flags)

    def _append(self, flag: Flag) -> None:
        self._flags.append(flag)
        self._index[flag.name] = flag

    def flag(self, name: str, default: FlagValue, help: str = "") -> Flag:
        """
        Declare a new flag.

        Args:
            name (str): Flag name without leading dashes.
            default (FlagValue): Default value. An absent payload on an INT,
                FLOAT or STRING value makes the flag required.
            help (str): Help text for usage rendering.

        Returns:
            Flag: The declared flag.

        Raises:
            EmptyFlagNameError: If `name` is empty.
            ReservedFlagNameError: If `name` is `h` or `help`.
            DuplicateFlagDefinitionError: If `name` is already declared.
        """
        if not isinstance(default, FlagValue):
            raise TypeError(
                f"default must be a FlagValue, got {type(default).__name__}"
            )
        if not name:
            raise EmptyFlagNameError()
        if name in HELP_FLAG_NAMES:
            raise ReservedFlagNameError(name)
        if name in self._index:
            raise DuplicateFlagDefinitionError(name)

        flag = Flag(name=name, value=default, default=default, help=help)
        self._append(flag)
        return flag

    def int_flag(self, name: str, default: int | None = None, help: str = "") -> Flag:
        return self.flag(name, FlagValue.of_int(default), help)

    def float_flag(
        self, name: str, default: float | None = None, help: str = ""
    ) -> Flag:
        return self.flag(name, FlagValue.of_float(default), help)

    def string_flag(self, name: str, default: str | None = None, help: str = "") -> Flag:
        return self.flag(name, FlagValue.of_string(default), help)

    def bool_flag(self, name: str, default: bool = False, help: str = "") -> Flag:
        return self.flag(name, FlagValue.of_bool(default), help)

    def ensure_help_flags(self) -> None:
        """Add the built-in `h` and `help` flags. Safe to call repeatedly."""
        if self._help_flags_added:
            return
        for name in HELP_FLAG_NAMES:
            self._append(
                Flag(
                    name=name,
                    value=FlagValue.of_bool(False),
                    default=FlagValue.of_bool(False),
                    help=HELP_FLAG_TEXT,
                )
            )
        self._help_flags_added = True
        logger.debug("Added built-in help flags: %s", ", ".join(HELP_FLAG_NAMES))

    def lookup(self, name: str) -> Flag | None:
        return self._index.get(name)

    def is_required(self, name: str) -> bool:
        flag = self.lookup(name)
        return flag.is_required() if flag else False

    def get(self, expected_type: FlagType | str | type, name: str) -> Any:
        """
        Return the current value of a flag.

        Args:
            expected_type (FlagType | str | type): The type the caller expects,
                as a `FlagType`, a type name (`"int"`, `"string"`, ...) or one
                of `int`, `float`, `str`, `bool`.
            name (str): Flag name.

        Returns:
            Any: The payload, or None if the flag does not exist, has another
            type, or is a required flag that was never set.

        Raises:
            TypeError: If `expected_type` is not a supported flag type.
        """
        flag_type = self._resolve_type(expected_type)
        flag = self.lookup(name)
        if flag is None or flag.type != flag_type:
            return None
        return flag.value.value

    @staticmethod
    def _resolve_type(expected_type: FlagType | str | type) -> FlagType:
        if isinstance(expected_type, FlagType):
            return expected_type
        if isinstance(expected_type, str):
            try:
                return FlagType(expected_type)
            except ValueError as error:
                raise TypeError(str(error)) from error
        flag_type = FlagType.from_python(expected_type)
        if flag_type is None:
            raise TypeError(
                f"Unsupported flag type {expected_type!r}. Use int, float, str, or bool."
            )
        return flag_type

    def was_set(self, name: str) -> bool:
        flag = self.lookup(name)
        return flag.was_set if flag else False

    @property
    def help_requested(self) -> bool:
        return any(self.was_set(name) for name in HELP_FLAG_NAMES)

    def missing_required(self) -> list[Flag]:
        """Return required flags that were not set, in declaration order."""
        return [flag for flag in self._flags if flag.is_required() and not flag.was_set]

    def user_flags(self) -> list[Flag]:
        """Return declared flags without the built-in help flags."""
        return [flag for flag in self._flags if flag.name not in HELP_FLAG_NAMES]

    def to_definition_list(self) -> list[dict[str, Any]]:
        """
        Convert flag metadata into a serializable list of dicts.

        Returns:
            List of definitions for introspection or documentation.
        """
        return [
            {
                "name": flag.name,
                "type": flag.type.value,
                "default": flag.default.value,
                "required": flag.is_required(),
                "help": flag.help,
            }
            for flag in self._flags
        ]

    def __iter__(self) -> Iterator[Flag]:
        return iter(self._flags)

    def __len__(self) -> int:
        return len(self._flags)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __str__(self) -> str:
        """Return a human-readable summary of the registry state."""
        required = sum(flag.is_required() for flag in self._flags)
        was_set = sum(flag.was_set for flag in self._flags)
        return f"FlagRegistry(flags={len(self._flags)}, required={required}, set={was_set})"

    def __repr__(self) -> str:
        return str(self)

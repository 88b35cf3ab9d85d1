# Flagkit CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Flag` dataclass used by `FlagRegistry` to represent one declared
command-line flag.

Each `Flag` holds its name, the default it was declared with, its current
value, its help text, and whether the user explicitly set it during parsing.

Flags should be created through `FlagRegistry.flag()` or one of the typed
helpers (`int_flag`, `float_flag`, `string_flag`, `bool_flag`) so that name
validation and uniqueness are enforced.

Key Attributes:
- `name`: Flag name without leading dashes (e.g. `c`, `name`)
- `value`: Current `FlagValue`, starts equal to `default`
- `default`: `FlagValue` fixed at declaration; an absent payload means required
- `help`: Help text for usage rendering
- `was_set`: True once parsing assigned a value to this flag
"""
from dataclasses import dataclass
from typing import Any

from flagkit.flag_value import FlagType, FlagValue


@dataclass
class Flag:
    """
    Represents a declared command-line flag.

    Attributes:
        name (str): Flag name without leading dashes.
        value (FlagValue): Current value.
        default (FlagValue): Value the flag was declared with.
        help (str): Help text for the flag.
        was_set (bool): True if the user supplied this flag on the command line.
    """

    name: str
    value: FlagValue
    default: FlagValue
    help: str = ""
    was_set: bool = False

    @property
    def type(self) -> FlagType:
        return self.default.type

    @property
    def display_name(self) -> str:
        """Return the flag as typed on the command line (`-c` or `--name`)."""
        prefix = "-" if len(self.name) == 1 else "--"
        return f"{prefix}{self.name}"

    def is_required(self) -> bool:
        """Return True if the flag was declared without a default payload."""
        if self.type == FlagType.BOOL:
            return False
        return self.default.is_absent

    def assign(self, value: FlagValue | Any) -> None:
        """
        Replace the current value and mark the flag as set.

        Args:
            value (FlagValue | Any): A `FlagValue` of this flag's type, or a raw
                payload that is wrapped in one.

        Raises:
            TypeError: If the value's type differs from the flag's type.
        """
        if not isinstance(value, FlagValue):
            value = self.default.with_value(value)
        elif value.type != self.type:
            raise TypeError(
                f"Flag '{self.name}' holds {self.type} values, cannot assign {value.type}"
            )
        self.value = value
        self.was_set = True

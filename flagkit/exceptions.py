# Flagkit CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Flagkit.

Errors fall into two groups. Definition errors are raised while flags are
declared on a `FlagRegistry` and point at a bug in the host program. Parse
errors are raised by `ArgumentParser` and point at bad user input.

Exception Hierarchy:
- FlagError
    ├── FlagDefinitionError
    │     ├── EmptyFlagNameError
    │     └── DuplicateFlagDefinitionError
    │           └── ReservedFlagNameError
    └── FlagParseError
          ├── UnknownFlagError
          ├── MissingValueError
          ├── InvalidValueError
          └── MissingRequiredFlagError

Help requests are not errors; see `flagkit.signals.HelpSignal`.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from flagkit.flag import Flag


class FlagError(Exception):
    """Base exception for Flagkit."""

    def __init__(self, message: str, flag_name: str | None = None):
        super().__init__(message)
        self.flag_name = flag_name


class FlagDefinitionError(FlagError):
    """Raised when a flag cannot be declared."""


class EmptyFlagNameError(FlagDefinitionError):
    """Raised when a flag is declared with an empty name."""

    def __init__(self):
        super().__init__("Flag name must not be empty", flag_name="")


class DuplicateFlagDefinitionError(FlagDefinitionError):
    """Raised when a flag name is already declared."""

    def __init__(self, flag_name: str, message: str | None = None):
        super().__init__(
            message or f"Flag '{flag_name}' is already defined", flag_name=flag_name
        )


class ReservedFlagNameError(DuplicateFlagDefinitionError):
    """Raised when a flag name collides with the built-in help flags."""

    def __init__(self, flag_name: str):
        super().__init__(
            flag_name,
            f"Flag '{flag_name}' is reserved for the built-in help flag",
        )


class FlagParseError(FlagError):
    """Raised when the command line cannot be parsed."""


class UnknownFlagError(FlagParseError):
    """Raised for tokens that do not name a declared flag."""

    def __init__(self, token: str, flag_name: str | None = None):
        if token.startswith("-"):
            message = f"Unknown flag '{token}'. Use --help to see available flags."
        else:
            message = f"Unexpected argument '{token}'. Flags must start with '-'."
        super().__init__(message, flag_name=flag_name)
        self.token = token


class MissingValueError(FlagParseError):
    """Raised when a value-bearing flag is the last token."""

    def __init__(self, flag_name: str, type_name: str):
        super().__init__(
            f"Flag '{flag_name}' expects a value of type {type_name}", flag_name=flag_name
        )


class InvalidValueError(FlagParseError):
    """Raised when a value cannot be coerced to the flag's type."""

    def __init__(self, flag_name: str, value: str, reason: str):
        super().__init__(
            f"Invalid value {value!r} for flag '{flag_name}': {reason}",
            flag_name=flag_name,
        )
        self.value = value


class MissingRequiredFlagError(FlagParseError):
    """Raised after parsing when required flags were not supplied."""

    def __init__(self, missing: list[Flag]):
        names = ", ".join(flag.display_name for flag in missing)
        plural = "s" if len(missing) > 1 else ""
        super().__init__(
            f"Missing required flag{plural}: {names}",
            flag_name=missing[0].name if missing else None,
        )
        self.missing = missing

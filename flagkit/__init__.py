"""
Flagkit CLI Flags

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .exceptions import (
    DuplicateFlagDefinitionError,
    EmptyFlagNameError,
    FlagDefinitionError,
    FlagError,
    FlagParseError,
    InvalidValueError,
    MissingRequiredFlagError,
    MissingValueError,
    ReservedFlagNameError,
    UnknownFlagError,
)
from .flag import Flag
from .flag_value import FlagType, FlagValue
from .logger import logger
from .parser import ArgumentParser, ParseOutcome, ParseStatus, parse
from .registry import FlagRegistry
from .signals import HelpSignal
from .usage import get_usage, print_usage

__all__ = [
    "ArgumentParser",
    "DuplicateFlagDefinitionError",
    "EmptyFlagNameError",
    "Flag",
    "FlagDefinitionError",
    "FlagError",
    "FlagParseError",
    "FlagRegistry",
    "FlagType",
    "FlagValue",
    "HelpSignal",
    "InvalidValueError",
    "MissingRequiredFlagError",
    "MissingValueError",
    "ParseOutcome",
    "ParseStatus",
    "ReservedFlagNameError",
    "UnknownFlagError",
    "get_usage",
    "logger",
    "parse",
    "print_usage",
]

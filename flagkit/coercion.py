# Flagkit CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Contains value coercion utilities for Flagkit argument parsing.

This module converts the raw string given for a flag on the command line into
a payload of the flag's `FlagType`. Every function raises `ValueError` with a
short reason on bad input; the parser turns that into an `InvalidValueError`
naming the flag.

Functions:
- coerce_bool: Accept exactly "true" or "false".
- coerce_int: Parse a base-10 signed 64-bit integer.
- coerce_float: Parse a 64-bit float.
- coerce_value: Dispatch on `FlagType`.
"""
import re
from typing import Any

from flagkit.flag_value import INT64_MAX, INT64_MIN, FlagType

_INT_PATTERN = re.compile(r"[+-]?[0-9]+(?:_+[0-9]+)*")
_FLOAT_EXTRA_CHARS = frozenset(" \t\n\r\f\v")


def coerce_bool(value: str) -> bool:
    """
    Convert "true" or "false" to a boolean.

    Matching is case-sensitive; nothing else is accepted.
    """
    if value == "true":
        return True
    if value == "false":
        return False
    raise ValueError("expected 'true' or 'false'")


def coerce_int(value: str) -> int:
    """
    Convert a string to a signed 64-bit integer.

    Accepts an optional sign followed by ASCII digits. Underscores are allowed
    between digits (`1_000`, `1__0`).

    Raises:
        ValueError: If the string is malformed or out of range.
    """
    if not _INT_PATTERN.fullmatch(value):
        raise ValueError("expected a base-10 integer")
    number = int(value.replace("_", ""), 10)
    if not INT64_MIN <= number <= INT64_MAX:
        raise ValueError("integer does not fit in 64 bits")
    return number


def coerce_float(value: str) -> float:
    """
    Convert a string to a float.

    Accepts anything `float()` accepts except surrounding whitespace and
    non-ASCII characters, including `inf` and `nan`.

    Raises:
        ValueError: If the string is not a number.
    """
    if not value.isascii():
        raise ValueError("expected a number")
    if not value or value[0] in _FLOAT_EXTRA_CHARS or value[-1] in _FLOAT_EXTRA_CHARS:
        raise ValueError("expected a number")
    try:
        number = float(value)
    except ValueError:
        raise ValueError("expected a number") from None
    return number


def coerce_value(value: str, flag_type: FlagType) -> Any:
    """
    Convert a command-line string to a payload of `flag_type`.

    Args:
        value (str): The raw string.
        flag_type (FlagType): The flag's type.

    Returns:
        Any: The coerced payload.

    Raises:
        ValueError: If conversion fails.
    """
    if flag_type == FlagType.BOOL:
        return coerce_bool(value)
    if flag_type == FlagType.INT:
        return coerce_int(value)
    if flag_type == FlagType.FLOAT:
        return coerce_float(value)
    return value

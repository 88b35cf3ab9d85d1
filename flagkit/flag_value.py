# Flagkit CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `FlagType` and `FlagValue`, the typed value model behind every flag.

A `FlagValue` is a tagged value: a `FlagType` plus a payload of the matching
Python type. The payload may be `None` ("absent") for integer, float and
string flags, which marks a flag declared with it as required. Boolean flags
always carry a concrete `True`/`False`.

Exports:
    - FlagType: Enum of supported flag types.
    - FlagValue: Immutable tagged payload.

Example:
    FlagType("integer")       → FlagType.INT (via alias)
    FlagValue.of_int(5)       → FlagValue(type=FlagType.INT, value=5)
    FlagValue.of_string()     → absent string payload (required flag)
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class FlagType(Enum):
    """
    The four primitive flag types.

    Members:
        INT: Signed 64-bit integer.
        FLOAT: 64-bit IEEE float.
        STRING: Text.
        BOOL: Boolean switch.

    Aliases:
        - "integer" → "int"
        - "double" → "float"
        - "str", "text" → "string"
        - "boolean" → "bool"
    """

    INT = "int"
    FLOAT = "float"
    STRING = "string"
    BOOL = "bool"

    @classmethod
    def choices(cls) -> list[FlagType]:
        """Return a list of all flag types."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "integer": "int",
            "double": "float",
            "str": "string",
            "text": "string",
            "boolean": "bool",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> FlagType:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls.choices())
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @classmethod
    def from_python(cls, python_type: Any) -> FlagType | None:
        """Map `int`, `float`, `str` or `bool` to the matching member."""
        return _PYTHON_TYPES.get(python_type)

    @property
    def python_type(self) -> type:
        return _TYPE_PAYLOADS[self]

    def __str__(self) -> str:
        """Return the string representation of the flag type."""
        return self.value


_PYTHON_TYPES: dict[Any, FlagType] = {
    int: FlagType.INT,
    float: FlagType.FLOAT,
    str: FlagType.STRING,
    bool: FlagType.BOOL,
}
_TYPE_PAYLOADS: dict[FlagType, type] = {
    member: python_type for python_type, member in _PYTHON_TYPES.items()
}


@dataclass(frozen=True)
class FlagValue:
    """
    A flag type together with its payload.

    Attributes:
        type (FlagType): The active variant. Never changes for a declared flag.
        value (int | float | str | bool | None): The payload. `None` means the
            payload is absent, which is only allowed for INT, FLOAT and STRING.
    """

    type: FlagType
    value: int | float | str | bool | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.type, FlagType):
            object.__setattr__(self, "type", FlagType(self.type))
        object.__setattr__(self, "value", self._check_payload(self.value))

    def _check_payload(self, value: Any) -> Any:
        if value is None:
            if self.type == FlagType.BOOL:
                raise TypeError("Boolean flag values cannot be absent")
            return None
        if self.type == FlagType.BOOL:
            if not isinstance(value, bool):
                raise TypeError(f"Expected a bool payload, got {type(value).__name__}")
            return value
        if self.type == FlagType.INT:
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"Expected an int payload, got {type(value).__name__}")
            if not INT64_MIN <= value <= INT64_MAX:
                raise ValueError(f"Integer payload {value} does not fit in 64 bits")
            return value
        if self.type == FlagType.FLOAT:
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(f"Expected a float payload, got {type(value).__name__}")
            return float(value)
        if not isinstance(value, str):
            raise TypeError(f"Expected a str payload, got {type(value).__name__}")
        return value

    @classmethod
    def of_int(cls, value: int | None = None) -> FlagValue:
        return cls(FlagType.INT, value)

    @classmethod
    def of_float(cls, value: float | None = None) -> FlagValue:
        return cls(FlagType.FLOAT, value)

    @classmethod
    def of_string(cls, value: str | None = None) -> FlagValue:
        return cls(FlagType.STRING, value)

    @classmethod
    def of_bool(cls, value: bool = False) -> FlagValue:
        return cls(FlagType.BOOL, value)

    @property
    def is_absent(self) -> bool:
        return self.value is None

    def with_value(self, value: Any) -> FlagValue:
        """Return a new value of the same type carrying `value`."""
        return FlagValue(self.type, value)

import pytest

from flagkit.exceptions import (
    DuplicateFlagDefinitionError,
    EmptyFlagNameError,
    ReservedFlagNameError,
)
from flagkit.flag import Flag
from flagkit.flag_value import FlagType, FlagValue
from flagkit.registry import FlagRegistry


@pytest.mark.parametrize("name", ["c", "name", "dry-run", "x_1", "H", "Help"])
def test_declare_then_lookup(name):
    flags = FlagRegistry()
    flag = flags.flag(name, FlagValue.of_int(42), "Test flag")
    assert flags.lookup(name) is flag
    assert name in flags
    assert len(flags) == 1
    assert flag.value == flag.default == FlagValue.of_int(42)
    assert flag.was_set is False


def test_duplicate_flag_detection():
    flags = FlagRegistry()
    flags.int_flag("test", 42, help="Test flag")
    with pytest.raises(DuplicateFlagDefinitionError) as excinfo:
        flags.int_flag("test", 10, help="Duplicate")
    assert excinfo.value.flag_name == "test"
    assert len(flags) == 1
    assert flags.get(int, "test") == 42


def test_duplicate_across_types():
    flags = FlagRegistry()
    flags.bool_flag("verbose")
    with pytest.raises(DuplicateFlagDefinitionError):
        flags.string_flag("verbose", "loud")


def test_empty_flag_name():
    flags = FlagRegistry()
    with pytest.raises(EmptyFlagNameError):
        flags.int_flag("", 42, help="Empty name")
    assert len(flags) == 0


@pytest.mark.parametrize("name", ["h", "help"])
def test_reserved_help_flag_names(name):
    flags = FlagRegistry()
    with pytest.raises(DuplicateFlagDefinitionError) as excinfo:
        flags.bool_flag(name, help="Custom help")
    assert isinstance(excinfo.value, ReservedFlagNameError)
    assert name not in flags


def test_default_must_be_flag_value():
    flags = FlagRegistry()
    with pytest.raises(TypeError):
        flags.flag("c", 5)


def test_required_flag_detection():
    required = Flag("required", FlagValue.of_string(), FlagValue.of_string())
    optional = Flag("optional", FlagValue.of_string("x"), FlagValue.of_string("x"))
    boolean = Flag("bool_optional", FlagValue.of_bool(), FlagValue.of_bool())
    assert required.is_required()
    assert not optional.is_required()
    assert not boolean.is_required()


def test_typed_helpers_required_when_default_missing():
    flags = FlagRegistry()
    flags.int_flag("count")
    flags.float_flag("rate")
    flags.string_flag("name")
    flags.bool_flag("verbose")
    flags.int_flag("limit", 0)

    assert flags.is_required("count")
    assert flags.is_required("rate")
    assert flags.is_required("name")
    assert not flags.is_required("verbose")
    assert not flags.is_required("limit")
    assert not flags.is_required("unknown")
    assert [flag.name for flag in flags.missing_required()] == ["count", "rate", "name"]


def test_ensure_help_flags_is_idempotent():
    flags = FlagRegistry()
    flags.int_flag("c", 1)
    flags.ensure_help_flags()
    flags.ensure_help_flags()
    assert [flag.name for flag in flags] == ["c", "h", "help"]
    assert flags.lookup("h").type is FlagType.BOOL
    assert flags.get(bool, "help") is False
    assert [flag.name for flag in flags.user_flags()] == ["c"]


def test_declaration_order_preserved():
    flags = FlagRegistry()
    for name in ["zeta", "a", "mid"]:
        flags.bool_flag(name)
    assert [flag.name for flag in flags.flags] == ["zeta", "a", "mid"]


def test_display_name():
    flags = FlagRegistry()
    assert flags.int_flag("c", 1).display_name == "-c"
    assert flags.int_flag("count", 1).display_name == "--count"


def test_program_name_default():
    assert FlagRegistry().program_name == "command"
    assert FlagRegistry(program="tool").program_name == "tool"


def test_str():
    flags = FlagRegistry()
    assert str(flags) == "FlagRegistry(flags=0, required=0, set=0)"
    flags.int_flag("c", 1)
    flags.string_flag("name")
    assert repr(flags) == "FlagRegistry(flags=2, required=1, set=0)"


def test_to_definition_list():
    flags = FlagRegistry()
    flags.int_flag("c", 1, help="count")
    flags.string_flag("name", help="input")
    assert flags.to_definition_list() == [
        {"name": "c", "type": "int", "default": 1, "required": False, "help": "count"},
        {
            "name": "name",
            "type": "string",
            "default": None,
            "required": True,
            "help": "input",
        },
    ]

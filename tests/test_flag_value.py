import pytest

from flagkit.flag_value import FlagType, FlagValue


@pytest.mark.parametrize(
    "alias, expected",
    [
        ("int", FlagType.INT),
        ("integer", FlagType.INT),
        ("FLOAT", FlagType.FLOAT),
        ("double", FlagType.FLOAT),
        ("str", FlagType.STRING),
        ("text", FlagType.STRING),
        (" string ", FlagType.STRING),
        ("boolean", FlagType.BOOL),
    ],
)
def test_flag_type_aliases(alias, expected):
    assert FlagType(alias) is expected


def test_flag_type_choices():
    assert FlagType.choices() == [
        FlagType.INT,
        FlagType.FLOAT,
        FlagType.STRING,
        FlagType.BOOL,
    ]


def test_flag_type_invalid():
    with pytest.raises(ValueError, match="Must be one of: int, float, string, bool"):
        FlagType("complex")
    with pytest.raises(ValueError):
        FlagType(3)


def test_flag_type_from_python():
    assert FlagType.from_python(int) is FlagType.INT
    assert FlagType.from_python(float) is FlagType.FLOAT
    assert FlagType.from_python(str) is FlagType.STRING
    assert FlagType.from_python(bool) is FlagType.BOOL
    assert FlagType.from_python(list) is None
    assert FlagType.BOOL.python_type is bool
    assert str(FlagType.STRING) == "string"


def test_absent_payloads():
    assert FlagValue.of_int().is_absent
    assert FlagValue.of_float().is_absent
    assert FlagValue.of_string().is_absent
    assert not FlagValue.of_bool().is_absent
    with pytest.raises(TypeError):
        FlagValue(FlagType.BOOL, None)


def test_payload_validation():
    assert FlagValue.of_float(2).value == 2.0
    assert isinstance(FlagValue.of_float(2).value, float)
    assert FlagValue("int", 7).type is FlagType.INT

    with pytest.raises(TypeError):
        FlagValue.of_int(True)
    with pytest.raises(TypeError):
        FlagValue.of_int("5")
    with pytest.raises(TypeError):
        FlagValue.of_float(False)
    with pytest.raises(TypeError):
        FlagValue.of_string(5)
    with pytest.raises(TypeError):
        FlagValue.of_bool(1)
    with pytest.raises(ValueError):
        FlagValue.of_int(2**63)


def test_with_value_keeps_type():
    value = FlagValue.of_int(1)
    assert value.with_value(2) == FlagValue.of_int(2)
    with pytest.raises(TypeError):
        value.with_value("two")


def test_flag_value_is_frozen():
    value = FlagValue.of_string("a")
    with pytest.raises(AttributeError):
        value.value = "b"

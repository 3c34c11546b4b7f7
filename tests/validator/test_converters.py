"""Tests for paramguard.validator.converters module."""

from decimal import Decimal

import pytest

from paramguard.rules import ParamType
from paramguard.validator import (
    InvalidParamType,
    InvalidParamValue,
    TypeConverter,
    type_handlers,
)
from paramguard.validator.converters import stringify


class TestTypeHandlers:
    def test_every_type_has_a_handler(self):
        assert set(type_handlers()) == set(ParamType)

    def test_table_is_cached(self):
        assert type_handlers() is type_handlers()

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            type_handlers()[ParamType.STRING] = None  # type: ignore[index]


class TestVerifyFormat:
    """Test format checks on the string form of values."""

    @pytest.mark.parametrize("value", ["42", "-7", 42, 0])
    def test_integer_accepts(self, value):
        TypeConverter.verify_format("n", value, ParamType.INTEGER)

    @pytest.mark.parametrize("value", ["4.2", "abc", "", "+5", "1e3", 4.0])
    def test_integer_rejects(self, value):
        with pytest.raises(InvalidParamType, match="expected integer"):
            TypeConverter.verify_format("n", value, ParamType.INTEGER)

    @pytest.mark.parametrize("value", ["1.5", "-0.25", ".5", "3", 2.5, 1e-05, 1e20, -3.5e-12])
    def test_float_accepts(self, value):
        TypeConverter.verify_format("x", value, ParamType.FLOAT)
        TypeConverter.verify_format("x", value, ParamType.DECIMAL)

    @pytest.mark.parametrize("value", ["1.", "abc", "1.2.3"])
    def test_float_rejects(self, value):
        with pytest.raises(InvalidParamType):
            TypeConverter.verify_format("x", value, ParamType.FLOAT)

    @pytest.mark.parametrize("value", ["2023-01-01", "2023-01-01T12:00:00", "2023-01-01 12:00"])
    def test_datetime_accepts(self, value):
        TypeConverter.verify_format("d", value, ParamType.DATETIME)

    @pytest.mark.parametrize("value", ["yesterday", "2023-01-01Z"])
    def test_datetime_rejects(self, value):
        with pytest.raises(InvalidParamType):
            TypeConverter.verify_format("d", value, ParamType.DATETIME)

    @pytest.mark.parametrize("value", ["1", "true", "TRUE", "T", "Y", "0", "false", "F", "N", True, False])
    def test_boolean_accepts(self, value):
        TypeConverter.verify_format("b", value, ParamType.BOOLEAN)

    @pytest.mark.parametrize("value", ["yes", "True", "nope"])
    def test_boolean_rejects(self, value):
        with pytest.raises(InvalidParamType):
            TypeConverter.verify_format("b", value, ParamType.BOOLEAN)

    @pytest.mark.parametrize(
        "param_type", [ParamType.STRING, ParamType.ARRAY, ParamType.BINARY, ParamType.FILE]
    )
    def test_types_without_format_always_pass(self, param_type):
        TypeConverter.verify_format("v", object(), param_type)

    def test_error_names_param_value_and_type(self):
        with pytest.raises(InvalidParamType) as exc_info:
            TypeConverter.verify_format("age", "old", ParamType.INTEGER)
        assert str(exc_info.value) == (
            "Value for parameter 'age' (old) is of the wrong type (expected integer)"
        )
        assert exc_info.value.param == "age"
        assert exc_info.value.value == "old"


class TestCoerce:
    """Test type coercion."""

    @pytest.mark.parametrize(
        "value,expected",
        [("42", 42), ("-3", -3), (7, 7), (3.9, 3), ("12abc", 12), ("abc", 0), (Decimal("2.5"), 2)],
    )
    def test_integer(self, value, expected):
        assert TypeConverter.coerce(ParamType.INTEGER, value) == expected

    @pytest.mark.parametrize(
        "value,expected", [("1.5", 1.5), ("3", 3.0), (".5", 0.5), (2, 2.0), ("x", 0.0)]
    )
    def test_float_and_decimal(self, value, expected):
        assert TypeConverter.coerce(ParamType.FLOAT, value) == expected
        assert TypeConverter.coerce(ParamType.DECIMAL, value) == expected

    def test_float_result_type(self):
        assert isinstance(TypeConverter.coerce(ParamType.DECIMAL, "3"), float)

    def test_string(self):
        assert TypeConverter.coerce(ParamType.STRING, 5) == "5"
        assert TypeConverter.coerce(ParamType.STRING, True) == "true"

    @pytest.mark.parametrize("value", ["1", "true", "TRUE", "T", "Y", 1, True])
    def test_boolean_true(self, value):
        assert TypeConverter.coerce(ParamType.BOOLEAN, value) is True

    @pytest.mark.parametrize("value", ["0", "false", "FALSE", "F", "N", 0, False])
    def test_boolean_false(self, value):
        assert TypeConverter.coerce(ParamType.BOOLEAN, value) is False

    def test_boolean_invalid(self):
        with pytest.raises(InvalidParamValue, match="Could not typecast boolean"):
            TypeConverter.coerce(ParamType.BOOLEAN, "nope")

    def test_array(self):
        assert TypeConverter.coerce(ParamType.ARRAY, "a,b,c") == ["a", "b", "c"]
        assert TypeConverter.coerce(ParamType.ARRAY, ["a", "b"]) == ["a", "b"]

    def test_passthrough_types(self):
        payload = b"\x00\x01"
        assert TypeConverter.coerce(ParamType.BINARY, payload) is payload
        assert TypeConverter.coerce(ParamType.FILE, payload) is payload
        assert TypeConverter.coerce(ParamType.DATETIME, "2023-01-01") == "2023-01-01"

    def test_no_type(self):
        value = object()
        assert TypeConverter.coerce(None, value) is value

    @pytest.mark.parametrize(
        "param_type,value",
        [
            (ParamType.INTEGER, "21"),
            (ParamType.FLOAT, "2.5"),
            (ParamType.BOOLEAN, "T"),
            (ParamType.STRING, 12),
            (ParamType.ARRAY, "a,b"),
        ],
    )
    def test_coercion_is_stable(self, param_type, value):
        once = TypeConverter.coerce(param_type, value)
        assert TypeConverter.coerce(param_type, once) == once


class TestStringify:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (None, ""),
            (True, "true"),
            (False, "false"),
            (7, "7"),
            (2.5, "2.5"),
            (1e-05, "0.00001"),
            (1e20, "100000000000000000000"),
            ("abc", "abc"),
        ],
    )
    def test_string_form(self, value, expected):
        assert stringify(value) == expected

    def test_non_finite_floats_unchanged(self):
        assert stringify(float("inf")) == "inf"

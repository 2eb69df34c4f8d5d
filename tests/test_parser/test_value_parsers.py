from datetime import datetime
from decimal import Decimal

import pytest

from argus.exceptions import MalformedNumber, SchemaError
from argus.parser.value_parsers import (
    ValueParserRegistry,
    ValueType,
    float_formatter,
    parse_char,
    parse_datetime,
    parse_double,
    parse_float,
    parse_int,
    parse_long,
    parse_longdouble,
    parse_size,
    parse_str,
    parse_uint,
    parse_ulonglong,
    value_types,
)


def test_parse_str_consumes_everything():
    assert parse_str("hello world") == ("hello world", None)
    assert parse_str("") == ("", None)


def test_parse_char():
    assert parse_char("x") == ("x", None)
    assert parse_char("xyz") == ("x", 1)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("42", (42, None)),
        ("-7", (-7, None)),
        ("+3", (3, None)),
        (" 12", (12, None)),
        ("4v", (4, 1)),
        ("10abc", (10, 2)),
    ],
)
def test_parse_int_prefix(text, expected):
    assert parse_int(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "-", "v4"])
def test_parse_int_no_digits(text):
    with pytest.raises(MalformedNumber) as excinfo:
        parse_int(text)
    assert excinfo.value.reason == "no digits"
    assert excinfo.value.type_name == "int"


def test_malformed_number_is_a_value_error():
    with pytest.raises(ValueError, match="failed to parse 'abc' as int"):
        parse_int("abc")


@pytest.mark.parametrize(
    "parser,text",
    [
        (parse_int, "2147483648"),
        (parse_int, "-2147483649"),
        (parse_uint, "4294967296"),
        (parse_uint, "-1"),
        (parse_long, "9223372036854775808"),
        (parse_ulonglong, "18446744073709551616"),
        (parse_size, "-5"),
    ],
)
def test_integer_range_errors(parser, text):
    with pytest.raises(MalformedNumber) as excinfo:
        parser(text)
    assert excinfo.value.reason == "out of range"


def test_integer_bounds_are_inclusive():
    assert parse_int("2147483647") == (2147483647, None)
    assert parse_int("-2147483648") == (-2147483648, None)
    assert parse_uint("4294967295") == (4294967295, None)
    assert parse_ulonglong("18446744073709551615") == (18446744073709551615, None)


def test_parse_double():
    assert parse_double("1.5") == (1.5, None)
    assert parse_double(".25") == (0.25, None)
    assert parse_double("1e3") == (1000.0, None)
    assert parse_double("2.5x") == (2.5, 3)


def test_parse_double_infinity_literal():
    value, consumed = parse_double("-inf")
    assert value == float("-inf")
    assert consumed is None


def test_parse_double_overflow():
    with pytest.raises(MalformedNumber, match="out of range"):
        parse_double("1e999")


def test_parse_float_single_precision():
    value, consumed = parse_float("0.1")
    assert consumed is None
    assert value != 0.1
    assert value == pytest.approx(0.1)


def test_parse_float_overflow():
    with pytest.raises(MalformedNumber, match="out of range"):
        parse_float("1e39")


def test_parse_float_no_digits():
    with pytest.raises(MalformedNumber, match="no digits"):
        parse_float("fast")


def test_parse_longdouble_is_decimal():
    assert parse_longdouble("0.1") == (Decimal("0.1"), None)


def test_parse_datetime():
    assert parse_datetime("2024-01-02") == (datetime(2024, 1, 2), None)
    with pytest.raises(ValueError):
        parse_datetime("not a date")


@pytest.mark.parametrize(
    "precision,value,expected",
    [
        (6, 1.0, "1"),
        (6, 0.5, "0.5"),
        (6, 3.14159265, "3.14159"),
        (2, 3.14159265, "3.1"),
        (3, 1234567.0, "1.23e+06"),
    ],
)
def test_float_formatter(precision, value, expected):
    assert float_formatter(precision)(value) == expected


def test_registry_builtin_names_and_aliases():
    assert value_types.get("string").parser is parse_str
    assert value_types.get("str") is value_types.get("string")
    assert value_types.get("ll").name == "longlong"
    assert value_types.get("ull").name == "ulonglong"
    assert value_types.get("unsigned").name == "uint"
    assert value_types.get(" UINT ").name == "uint"
    assert "datetime" in value_types
    assert "complex" not in value_types


def test_registry_unknown_type():
    with pytest.raises(SchemaError, match="Unknown value type 'complex'"):
        value_types.get("complex")


def test_registry_resolve():
    uint = value_types.get("uint")
    assert value_types.resolve(uint) is uint
    assert value_types.resolve("uint") is uint
    with pytest.raises(SchemaError):
        value_types.resolve(42)


def test_registry_register_and_copy():
    registry = value_types.copy()
    hex_type = ValueType("hex", lambda text: (int(text, 16), None), zero=0, aliases=("x",))
    registry.register(hex_type)

    assert registry.get("x") is hex_type
    assert "hex" not in value_types
    assert len(registry) == len(value_types) + 1


def test_registry_rejects_duplicates():
    registry = ValueParserRegistry([ValueType("hex", parse_int)])
    with pytest.raises(SchemaError, match="already registered"):
        registry.register(ValueType("hex", parse_int))
    with pytest.raises(SchemaError, match="already registered"):
        registry.register(ValueType("other", parse_int, aliases=("hex",)))

    replacement = ValueType("hex", parse_uint)
    registry.register(replacement, replace=True)
    assert registry.get("hex") is replacement


def test_registry_rejects_non_callable_parser():
    with pytest.raises(SchemaError, match="not callable"):
        ValueParserRegistry([ValueType("broken", "nope")])


@pytest.mark.parametrize(
    "text,expected",
    [
        ("0x1p3", (8.0, None)),
        ("0X1.8P1", (3.0, None)),
        ("-0x.8", (-0.5, None)),
        ("0x10", (16.0, None)),
        ("0x1p3v", (8.0, 5)),
        ("0xg", (0.0, 1)),
    ],
)
def test_parse_double_hex_literals(text, expected):
    assert parse_double(text) == expected


def test_parse_double_hex_overflow():
    with pytest.raises(MalformedNumber, match="out of range"):
        parse_double("0x1p2000")


def test_parse_float_and_longdouble_hex_literals():
    assert parse_float("0x1p-2") == (0.25, None)
    assert parse_longdouble("0x1.8p1") == (Decimal(3), None)
